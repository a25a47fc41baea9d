import uuid
from datetime import datetime, timedelta, timezone

import jwt

from codeed.features.auth.schemas.auth import TokenPair
from codeed.platform.config import Settings
from codeed.platform.exceptions import InvalidSignatureError, TokenExpiredError, TokenInvalidError


def create_token(
    secret: str,
    user_id: str,
    expires_delta: timedelta,
    issuer: str,
    algorithm: str = "HS256",
) -> str:
    """Create a signed JWT carrying iss, sub, exp, iat and a unique jti."""
    now = datetime.now(timezone.utc)
    payload = {
        "iss": issuer,
        "sub": str(user_id),
        "exp": now + expires_delta,
        "iat": now,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, issuer: str, algorithm: str = "HS256") -> dict:
    """Verify signature, expiry and issuer and return the claims."""
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            issuer=issuer,
            options={"require": ["exp", "iat", "sub", "jti"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidSignatureError:
        raise InvalidSignatureError()
    except jwt.PyJWTError:
        raise TokenInvalidError()


def create_token_pair(user_id: str, settings: Settings) -> TokenPair:
    access_token = create_token(
        settings.ACCESS_TOKEN_SECRET,
        user_id,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        settings.JWT_ISSUER,
        settings.JWT_ALGORITHM,
    )
    refresh_token = create_token(
        settings.REFRESH_TOKEN_SECRET,
        user_id,
        timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
        settings.JWT_ISSUER,
        settings.JWT_ALGORITHM,
    )
    return TokenPair(access_token=access_token, refresh_token=refresh_token)


def decode_access_token(token: str, settings: Settings) -> dict:
    return decode_token(token, settings.ACCESS_TOKEN_SECRET, settings.JWT_ISSUER, settings.JWT_ALGORITHM)


def decode_refresh_token(token: str, settings: Settings) -> dict:
    return decode_token(token, settings.REFRESH_TOKEN_SECRET, settings.JWT_ISSUER, settings.JWT_ALGORITHM)

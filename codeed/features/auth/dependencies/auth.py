from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.features.auth.repositories.auth_attempt import AuthAttemptRepository
from codeed.features.auth.services.auth_service import AuthService
from codeed.features.auth.utils.security import decode_access_token
from codeed.features.users.dependencies.user import get_user_service
from codeed.features.users.models.user import User
from codeed.features.users.services.user_service import UserService
from codeed.platform.config import Settings, get_app_settings
from codeed.platform.db.session import get_db
from codeed.platform.exceptions import AppError, TokenInvalidError
from codeed.platform.logger import get_logger

logger = get_logger(__name__)

security = HTTPBearer(auto_error=False)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(AuthAttemptRepository(db), user_service, settings)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
) -> User:
    """
    Dependency to get the current authenticated user from a Bearer access token.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(credentials.credentials, settings)
        return await user_service.get_user_by_id(payload["sub"])
    except TokenInvalidError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AppError as e:
        logger.warning(f"Token subject rejected: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

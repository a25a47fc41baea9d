from datetime import timedelta

from codeed.features.auth.models.auth_attempt import AuthAttempt, AuthType
from codeed.features.auth.repositories.auth_attempt import AuthAttemptRepository
from codeed.features.auth.schemas.auth import (
    TelegramCodeCheckRequest,
    TelegramCodeRequest,
    TelegramCodeResponse,
    TokenPair,
)
from codeed.features.auth.utils.codes import random_digits
from codeed.features.auth.utils.security import create_token_pair, decode_refresh_token
from codeed.features.users.services.user_service import UserService
from codeed.platform.config import Settings
from codeed.platform.exceptions import (
    AlreadyExistsError,
    IdentifierMismatchError,
    InvalidCodeError,
    InvalidIdFormatError,
    NotFoundError,
    TokenInvalidError,
)
from codeed.platform.logger import get_logger

logger = get_logger(__name__)


class AuthService:
    """Telegram code login: issue a one-time code, check it, hand out tokens."""

    def __init__(
        self,
        repository: AuthAttemptRepository,
        user_service: UserService,
        settings: Settings,
    ):
        self.repository = repository
        self.user_service = user_service
        self.settings = settings

    @property
    def attempt_ttl(self) -> timedelta:
        return timedelta(seconds=self.settings.AUTH_ATTEMPT_TTL_SECONDS)

    async def request_telegram_code(self, request: TelegramCodeRequest) -> TelegramCodeResponse:
        """
        Start a new auth attempt for the Telegram username.

        Raises AlreadyExistsError while a previous attempt is still valid.
        The check and the insert are two statements, so two concurrent
        requests can both get through.
        """
        existing = await self.repository.get_active_by_identifier(
            request.telegram_username, self.attempt_ttl, AuthType.telegram
        )
        if existing is not None:
            logger.info(f"Telegram code request for user with an active attempt: {request.telegram_username}")
            raise AlreadyExistsError("Auth attempt already exists")

        attempt = AuthAttempt(
            identifier_used=request.telegram_username,
            type=AuthType.telegram,
            code=random_digits(self.settings.AUTH_CODE_LENGTH),
            success=False,
            attempt_left=self.settings.AUTH_MAX_ATTEMPTS,
            ttl=self.attempt_ttl,
        )
        attempt = await self.repository.create(attempt)

        return TelegramCodeResponse(
            id=attempt.id,
            telegram_username=attempt.identifier_used,
            wait_until=attempt.wait_until,
        )

    async def check_telegram_code(self, request: TelegramCodeCheckRequest) -> TokenPair:
        """
        Validate the submitted code and issue a token pair on success.
        """
        attempt = await self.repository.get_by_id(request.id)

        if attempt.identifier_used != request.telegram_username:
            logger.warning(f"Invalid identifier for auth attempt {attempt.id}: {request.telegram_username}")
            raise IdentifierMismatchError()

        await self._perform_code_check(attempt, request.code)

        user = await self.user_service.get_user_by_telegram_username(request.telegram_username)
        token_pair = create_token_pair(user.id, self.settings)

        logger.info(f"Successfully checked code for auth attempt: {request.telegram_username}")
        return token_pair

    async def _perform_code_check(self, attempt: AuthAttempt, code: str) -> None:
        # at most one write or delete per call
        if attempt.attempt_left <= 0:
            logger.warning(f"No attempts left for auth attempt: {attempt.id}")
            raise InvalidCodeError()

        if attempt.success:
            logger.warning(f"Code already used for auth attempt: {attempt.id}")
            raise InvalidCodeError()

        if attempt.code == code:
            await self.repository.update(attempt.id, success=True)
            return

        logger.warning(f"Invalid code for auth attempt: {attempt.id}")
        attempts_left = attempt.attempt_left - 1

        if attempts_left == 0:
            logger.warning(f"No attempts left, deleting auth attempt: {attempt.id}")
            await self.repository.delete(attempt.id)
        else:
            logger.info(f"Decrementing attempt: {attempt.attempt_left} -> {attempts_left}")
            await self.repository.update(attempt.id, attempt_left=attempts_left)

        raise InvalidCodeError()

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        claims = decode_refresh_token(refresh_token, self.settings)
        try:
            user = await self.user_service.get_user_by_id(claims["sub"])
        except (NotFoundError, InvalidIdFormatError):
            logger.warning(f"Refresh token subject is not an active user: {claims['sub']}")
            raise TokenInvalidError("User no longer exists")
        logger.info(f"Refreshed token pair for user: {user.id}")
        return create_token_pair(user.id, self.settings)

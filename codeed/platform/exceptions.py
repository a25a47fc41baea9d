from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from codeed.platform.logger import get_logger
from codeed.platform.response import api_response

logger = get_logger(__name__)


class AppError(Exception):
    """Base error for every failure a service or repository signals to its caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class AlreadyExistsError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class InvalidIdFormatError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid id format"


class IdentifierMismatchError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Identifier does not match the auth attempt"


class InvalidCodeError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid code"


class FileTooLargeError(AppError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_message = "File too large"


class TokenInvalidError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token is invalid"


class TokenExpiredError(TokenInvalidError):
    default_message = "Token is expired"


class InvalidSignatureError(TokenInvalidError):
    default_message = "Token signature is invalid"


def add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return api_response(message=exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return api_response(
            message="Validation failed",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            data={"errors": exc.errors()},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

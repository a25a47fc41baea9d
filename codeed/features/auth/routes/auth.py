from typing import Optional

from fastapi import APIRouter, Cookie, Depends, status

from codeed.features.auth.dependencies.auth import get_auth_service
from codeed.features.auth.schemas.auth import (
    RefreshTokenRequest,
    TelegramCodeCheckRequest,
    TelegramCodeRequest,
)
from codeed.features.auth.services.auth_service import AuthService
from codeed.platform.exceptions import TokenInvalidError
from codeed.platform.response import api_response

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/telegram/code",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    summary="Request a Telegram login code",
)
async def request_telegram_code(
    request: TelegramCodeRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Start a login attempt. The code is delivered out of band; the response
    only tells the client which attempt to check and until when it is valid.
    """
    attempt = await auth_service.request_telegram_code(request)
    return api_response(
        data=attempt.model_dump(mode="json"),
        message="Code sent",
        status_code=status.HTTP_201_CREATED,
    )


@router.post(
    "/telegram/code/check",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Check a Telegram login code",
)
async def check_telegram_code(
    request: TelegramCodeCheckRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    tokens = await auth_service.check_telegram_code(request)
    return api_response(data=tokens.model_dump(), message="Login successful")


@router.post(
    "/refresh",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Refresh the token pair",
)
async def refresh_tokens(
    request: Optional[RefreshTokenRequest] = None,
    refresh_cookie: Optional[str] = Cookie(None, alias="X-Refresh-Token"),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange a refresh token, sent in the body or in the X-Refresh-Token
    cookie, for a new access/refresh pair.
    """
    refresh_token = (request.refresh_token if request else None) or refresh_cookie
    if not refresh_token:
        raise TokenInvalidError("Refresh token is missing")

    tokens = await auth_service.refresh_tokens(refresh_token)
    return api_response(data=tokens.model_dump(), message="Token refreshed successfully")

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TelegramCodeRequest(BaseModel):
    telegram_username: str = Field(..., min_length=1, max_length=255)

    class Config:
        json_schema_extra = {"example": {"telegram_username": "john_doe"}}


class TelegramCodeResponse(BaseModel):
    """Returned after a code was issued. The code itself is never part of it."""

    id: str
    telegram_username: str
    wait_until: datetime


class TelegramCodeCheckRequest(BaseModel):
    id: str = Field(..., min_length=1)
    telegram_username: str = Field(..., min_length=1, max_length=255)
    code: str = Field(..., min_length=1, max_length=16)

    class Config:
        json_schema_extra = {
            "example": {
                "id": "01890a5d-ac96-774b-bcce-b302099a8057",
                "telegram_username": "john_doe",
                "code": "042917",
            }
        }


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str


class RefreshTokenRequest(BaseModel):
    refresh_token: Optional[str] = None

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from codeed.features.users.models.user import UserRole
from codeed.platform.schemas import ReadSchema, UpdateSchema


class UserCreate(BaseModel):
    telegram_username: str = Field(..., min_length=1, max_length=64)
    username: str = Field(..., min_length=1, max_length=100)
    first_name: str = ""
    last_name: str = ""
    role: UserRole = UserRole.student


class UserUpdate(UpdateSchema):
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserFilter(BaseModel):
    username: Optional[str] = None
    telegram_username: Optional[str] = None
    role: Optional[UserRole] = None


class UserResponse(ReadSchema):
    id: str
    telegram_username: str
    username: str
    first_name: str
    last_name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from codeed.features.accounts.models.account import AccountRole, AccountStatus
from codeed.platform.schemas import ReadSchema, UpdateSchema


class AccountCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)
    role: AccountRole = AccountRole.student
    status: AccountStatus = AccountStatus.active
    photo: Optional[str] = None


class AccountUpdate(UpdateSchema):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"photo"})

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    role: Optional[AccountRole] = None
    status: Optional[AccountStatus] = None
    photo: Optional[str] = None


class AccountFilter(BaseModel):
    name: Optional[str] = None
    role: Optional[AccountRole] = None
    status: Optional[AccountStatus] = None


class AccountResponse(ReadSchema):
    id: str
    first_name: str
    last_name: str
    role: AccountRole
    status: AccountStatus
    photo: Optional[str] = None
    created_at: datetime
    updated_at: datetime

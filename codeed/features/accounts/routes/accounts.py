from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from codeed.features.accounts.dependencies.account import get_account_service
from codeed.features.accounts.models.account import AccountRole, AccountStatus
from codeed.features.accounts.schemas.account import (
    AccountCreate,
    AccountFilter,
    AccountResponse,
    AccountUpdate,
)
from codeed.features.accounts.services.account_service import AccountService
from codeed.platform.response import api_response

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_account(
    request: AccountCreate,
    account_service: AccountService = Depends(get_account_service),
):
    account = await account_service.create_account(request)
    return api_response(
        data=AccountResponse.model_validate(account),
        message="Account created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("", response_model=dict)
async def find_accounts(
    name: Optional[str] = Query(None, description="Partial match on first or last name"),
    role: Optional[AccountRole] = Query(None),
    status_: Optional[AccountStatus] = Query(None, alias="status"),
    account_service: AccountService = Depends(get_account_service),
):
    filters = AccountFilter(name=name, role=role, status=status_)
    accounts = await account_service.find_accounts(filters)
    return api_response(
        data=[AccountResponse.model_validate(account) for account in accounts],
        message="Accounts retrieved successfully",
    )


@router.get("/{account_id}", response_model=dict)
async def get_account(
    account_id: str,
    account_service: AccountService = Depends(get_account_service),
):
    account = await account_service.get_account_by_id(account_id)
    return api_response(data=AccountResponse.model_validate(account), message="Account retrieved successfully")


@router.patch("/{account_id}", response_model=dict)
async def update_account(
    account_id: str,
    request: AccountUpdate,
    account_service: AccountService = Depends(get_account_service),
):
    account = await account_service.update_account(account_id, request)
    return api_response(data=AccountResponse.model_validate(account), message="Account updated successfully")


@router.delete("/{account_id}", response_model=dict)
async def delete_account(
    account_id: str,
    account_service: AccountService = Depends(get_account_service),
):
    await account_service.delete_account(account_id)
    return api_response(message="Account deleted successfully")

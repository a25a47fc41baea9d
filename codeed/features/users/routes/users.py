from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from codeed.features.auth.dependencies.auth import get_current_user
from codeed.features.users.dependencies.user import get_user_service
from codeed.features.users.models.user import User, UserRole
from codeed.features.users.schemas.user import UserCreate, UserFilter, UserResponse, UserUpdate
from codeed.features.users.services.user_service import UserService
from codeed.platform.response import api_response

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.create_user(request)
    return api_response(
        data=UserResponse.model_validate(user),
        message="User created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("", response_model=dict)
async def find_users(
    username: Optional[str] = Query(None, description="Partial, case-insensitive"),
    telegram_username: Optional[str] = Query(None),
    role: Optional[UserRole] = Query(None),
    user_service: UserService = Depends(get_user_service),
):
    filters = UserFilter(username=username, telegram_username=telegram_username, role=role)
    users = await user_service.find_users(filters)
    return api_response(
        data=[UserResponse.model_validate(user) for user in users],
        message="Users retrieved successfully",
    )


@router.get("/me", response_model=dict)
async def get_me(current_user: User = Depends(get_current_user)):
    return api_response(
        data=UserResponse.model_validate(current_user),
        message="User profile retrieved successfully",
    )


@router.get("/{user_id}", response_model=dict)
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.get_user_by_id(user_id)
    return api_response(data=UserResponse.model_validate(user), message="User retrieved successfully")


@router.patch("/{user_id}", response_model=dict)
async def update_user(
    user_id: str,
    request: UserUpdate,
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.update_user(user_id, request)
    return api_response(data=UserResponse.model_validate(user), message="User updated successfully")


@router.delete("/{user_id}", response_model=dict)
async def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
):
    await user_service.delete_user(user_id)
    return api_response(message="User deleted successfully")

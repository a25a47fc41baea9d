from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.features.users.repositories.user import UserRepository
from codeed.features.users.services.user_service import UserService
from codeed.platform.db.session import get_db


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.features.accounts.repositories.account import AccountRepository
from codeed.features.accounts.services.account_service import AccountService
from codeed.platform.db.session import get_db


def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    return AccountService(AccountRepository(db))

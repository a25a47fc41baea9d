from codeed.features.accounts.models.account import Account
from codeed.features.accounts.repositories.account import AccountRepository
from codeed.features.accounts.schemas.account import AccountCreate, AccountFilter, AccountUpdate
from codeed.platform.logger import get_logger

logger = get_logger(__name__)


class AccountService:
    def __init__(self, repository: AccountRepository):
        self.repository = repository

    async def create_account(self, data: AccountCreate) -> Account:
        logger.info(f"Creating account: role={data.role.value}")
        return await self.repository.create(data)

    async def get_account_by_id(self, account_id: str) -> Account:
        return await self.repository.get_by_id(account_id)

    async def update_account(self, account_id: str, data: AccountUpdate) -> Account:
        logger.info(f"Updating account: id={account_id}")
        await self.repository.update_by_id(account_id, data.changes())
        return await self.repository.get_by_id(account_id)

    async def delete_account(self, account_id: str) -> None:
        logger.info(f"Deleting account: id={account_id}")
        await self.repository.delete_by_id(account_id)

    async def find_accounts(self, filters: AccountFilter) -> list[Account]:
        return await self.repository.find(filters)

from typing import Any

from sqlalchemy import or_

from codeed.features.accounts.models.account import Account
from codeed.features.accounts.schemas.account import AccountCreate, AccountFilter
from codeed.platform.db.repository import SoftDeleteRepository
from codeed.platform.utils.ids import parse_id


class AccountRepository(SoftDeleteRepository[Account]):
    model = Account
    entity = "account"

    async def create(self, data: AccountCreate) -> Account:
        values = data.model_dump()
        if data.photo:
            values["photo"] = parse_id(data.photo, "file")
        return await self.insert(Account(**values))

    async def update_by_id(self, record_id: str, changes: dict[str, Any]):
        if changes.get("photo"):
            changes = {**changes, "photo": parse_id(changes["photo"], "file")}
        return await super().update_by_id(record_id, changes)

    async def find(self, filters: AccountFilter) -> list[Account]:
        criteria = []
        if filters.name:
            criteria.append(
                or_(
                    Account.first_name.icontains(filters.name, autoescape=True),
                    Account.last_name.icontains(filters.name, autoescape=True),
                )
            )
        if filters.role is not None:
            criteria.append(Account.role == filters.role)
        if filters.status is not None:
            criteria.append(Account.status == filters.status)
        return await self.find_where(*criteria, order_by=(Account.created_at,))

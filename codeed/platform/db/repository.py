from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.platform.exceptions import NotFoundError
from codeed.platform.logger import get_logger
from codeed.platform.utils.ids import parse_id
from codeed.platform.utils.time import utcnow

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")


class SoftDeleteRepository(Generic[ModelT]):
    """
    Shared persistence for soft-deletable records. Every read goes through
    ``active()`` so soft-deleted rows never leave the repository.

    Subclasses set ``model`` and ``entity`` and add their own create/find.
    """

    model: type
    entity: str = "record"

    def __init__(self, db: AsyncSession):
        self.db = db

    def active(self) -> Select:
        return select(self.model).where(self.model.is_active())

    async def insert(self, record: ModelT) -> ModelT:
        self.db.add(record)
        try:
            await self.db.commit()
        except Exception as exc:
            logger.error(f"Failed to insert {self.entity}: {exc}")
            await self.db.rollback()
            raise
        logger.info(f"Created {self.entity}: id={record.id}")
        return record

    async def get_by_id(self, record_id: str) -> ModelT:
        object_id = parse_id(record_id, self.entity)
        result = await self.db.execute(self.active().where(self.model.id == object_id))
        record = result.scalars().first()
        if record is None:
            logger.info(f"{self.entity} not found: id={record_id}")
            raise NotFoundError(f"{self.entity.capitalize()} not found")
        return record

    async def update_by_id(self, record_id: str, changes: dict[str, Any]) -> Optional[ModelT]:
        """
        Apply only the fields present in ``changes``. An empty mapping is a
        successful no-op and returns None.
        """
        parse_id(record_id, self.entity)
        if not changes:
            logger.info(f"No fields to update for {self.entity} id={record_id}")
            return None

        record = await self.get_by_id(record_id)
        for field, value in changes.items():
            setattr(record, field, value)
        record.updated_at = utcnow()
        try:
            await self.db.commit()
        except Exception as exc:
            logger.error(f"Failed to update {self.entity} id={record_id}: {exc}")
            await self.db.rollback()
            raise

        logger.info(f"Updated {self.entity}: id={record_id} fields={sorted(changes)}")
        return record

    async def delete_by_id(self, record_id: str) -> None:
        object_id = parse_id(record_id, self.entity)
        now = utcnow()
        stmt = (
            update(self.model)
            .where(self.model.id == object_id, self.model.is_active())
            .values(deleted_at=now, updated_at=now)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            logger.info(f"{self.entity} not found for deletion: id={record_id}")
            raise NotFoundError(f"{self.entity.capitalize()} not found")

        await self.db.commit()
        logger.info(f"Soft-deleted {self.entity}: id={record_id}")

    async def find_where(self, *criteria, order_by: Sequence = ()) -> list[ModelT]:
        query = self.active().where(*criteria)
        if order_by:
            query = query.order_by(*order_by)
        result = await self.db.execute(query)
        records = list(result.scalars().all())
        logger.info(f"Found {len(records)} {self.entity}(s)")
        return records

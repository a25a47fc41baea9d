from datetime import timedelta
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.features.auth.models.auth_attempt import AuthAttempt, AuthType
from codeed.platform.exceptions import NotFoundError
from codeed.platform.logger import get_logger
from codeed.platform.utils.ids import parse_id
from codeed.platform.utils.time import utcnow

logger = get_logger(__name__)


class AuthAttemptRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, attempt: AuthAttempt) -> AuthAttempt:
        self.db.add(attempt)
        try:
            await self.db.commit()
        except Exception as exc:
            logger.error(f"Failed to create auth attempt for '{attempt.identifier_used}': {exc}")
            await self.db.rollback()
            raise
        logger.info(f"Created auth attempt: id={attempt.id} identifier={attempt.identifier_used}")
        return attempt

    async def get_by_id(self, attempt_id: str) -> AuthAttempt:
        object_id = parse_id(attempt_id, "auth attempt")
        result = await self.db.execute(select(AuthAttempt).where(AuthAttempt.id == object_id))
        attempt = result.scalars().first()
        if attempt is None:
            logger.info(f"Auth attempt not found: id={attempt_id}")
            raise NotFoundError("Auth attempt not found")
        return attempt

    async def get_active_by_identifier(
        self,
        identifier: str,
        ttl: timedelta,
        auth_type: AuthType = AuthType.telegram,
    ) -> Optional[AuthAttempt]:
        """
        Most recent attempt for the identifier that still has tries left and
        was created within ``ttl``, or None.
        """
        query = (
            select(AuthAttempt)
            .where(
                AuthAttempt.identifier_used == identifier,
                AuthAttempt.type == auth_type,
                AuthAttempt.attempt_left > 0,
                AuthAttempt.created_at >= utcnow() - ttl,
            )
            .order_by(AuthAttempt.created_at.desc())
            .limit(1)
        )
        result = await self.db.execute(query)
        attempt = result.scalars().first()
        if attempt is None:
            logger.info(f"No valid auth attempt found for identifier: {identifier}")
        else:
            logger.info(f"Found valid auth attempt for identifier: {identifier} (id={attempt.id})")
        return attempt

    async def update(
        self,
        attempt_id: str,
        *,
        success: Optional[bool] = None,
        attempt_left: Optional[int] = None,
    ) -> None:
        object_id = parse_id(attempt_id, "auth attempt")
        changes = {}
        if success is not None:
            changes["success"] = success
        if attempt_left is not None:
            changes["attempt_left"] = attempt_left
        if not changes:
            logger.info(f"No fields to update for auth attempt id={attempt_id}")
            return

        stmt = (
            update(AuthAttempt)
            .where(AuthAttempt.id == object_id)
            .values(**changes, updated_at=utcnow())
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            logger.info(f"Auth attempt not found for update: id={attempt_id}")
            raise NotFoundError("Auth attempt not found")

        await self.db.commit()
        logger.info(f"Updated auth attempt: id={attempt_id} fields={changes}")

    async def delete(self, attempt_id: str) -> None:
        object_id = parse_id(attempt_id, "auth attempt")
        result = await self.db.execute(
            delete(AuthAttempt)
            .where(AuthAttempt.id == object_id)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            logger.info(f"Auth attempt not found for deletion: id={attempt_id}")
            raise NotFoundError("Auth attempt not found")

        await self.db.commit()
        logger.info(f"Deleted auth attempt: id={attempt_id}")

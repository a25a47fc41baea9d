from dataclasses import dataclass
from datetime import datetime
from typing import Union

import sqlalchemy
from sqlalchemy import Column, String
from sqlalchemy.orm import declarative_base

from codeed.platform.utils.ids import new_id
from codeed.platform.utils.time import utcnow

Base = declarative_base()


class BaseModel(Base):
    __abstract__ = True
    id = Column(String(36), primary_key=True, default=new_id, index=True)
    created_at = Column(sqlalchemy.DateTime, default=utcnow, nullable=False)
    updated_at = Column(sqlalchemy.DateTime, default=utcnow, onupdate=utcnow, nullable=False)


@dataclass(frozen=True)
class Active:
    pass


@dataclass(frozen=True)
class Deleted:
    at: datetime


Lifecycle = Union[Active, Deleted]


class SoftDeleteMixin:
    """
    Soft delete is stored as a nullable ``deleted_at`` column and surfaced to
    the domain as ``Active()`` or ``Deleted(at=...)``.
    """

    deleted_at = Column(sqlalchemy.DateTime, nullable=True, index=True)

    @property
    def lifecycle(self) -> Lifecycle:
        if self.deleted_at is None:
            return Active()
        return Deleted(at=self.deleted_at)

    @lifecycle.setter
    def lifecycle(self, value: Lifecycle) -> None:
        self.deleted_at = value.at if isinstance(value, Deleted) else None

    @classmethod
    def is_active(cls):
        return cls.deleted_at.is_(None)

# Note: Models import this Base. Import the models in codeed/platform/db/models.py
# (used by create_all and alembic/env.py), not here, to avoid circular imports.

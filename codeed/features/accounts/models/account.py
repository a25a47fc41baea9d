import enum

from sqlalchemy import Column, Enum, String

from codeed.platform.db.base import BaseModel, SoftDeleteMixin


class AccountRole(str, enum.Enum):
    student = "student"
    teacher = "teacher"
    admin = "admin"


class AccountStatus(str, enum.Enum):
    active = "active"
    blocked = "blocked"


class Account(SoftDeleteMixin, BaseModel):
    __tablename__ = "accounts"

    first_name = Column(String(100), nullable=False, index=True)
    last_name = Column(String(100), nullable=False, default="", index=True)
    role = Column(Enum(AccountRole), default=AccountRole.student, nullable=False)
    status = Column(Enum(AccountStatus), default=AccountStatus.active, nullable=False)
    photo = Column(String(36), nullable=True)  # stored file id

    def __repr__(self):
        return f"<Account(id={self.id}, role={self.role}, status={self.status})>"

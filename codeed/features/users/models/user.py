import enum

from sqlalchemy import Column, Enum, String

from codeed.platform.db.base import BaseModel, SoftDeleteMixin


class UserRole(str, enum.Enum):
    admin = "admin"
    student = "student"


class User(SoftDeleteMixin, BaseModel):
    __tablename__ = "users"

    telegram_username = Column(String(64), nullable=False, index=True)
    username = Column(String(100), nullable=False, index=True)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    role = Column(Enum(UserRole), default=UserRole.student, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, telegram_username={self.telegram_username}, role={self.role})>"

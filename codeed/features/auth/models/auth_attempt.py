import enum

from sqlalchemy import Boolean, Column, Enum, Integer, Interval, String

from codeed.platform.db.base import BaseModel


class AuthType(str, enum.Enum):
    telegram = "telegram"
    email = "email"


class AuthAttempt(BaseModel):
    """
    One code-based login request.

    ``attempt_left`` only ever goes down; when a wrong code would take it to
    zero the row is deleted instead. ``success`` is terminal. The TTL is
    checked at lookup time, nothing expires rows in the background.
    """

    __tablename__ = "auth_attempts"

    identifier_used = Column(String(255), nullable=False, index=True)
    type = Column(Enum(AuthType), nullable=False, default=AuthType.telegram)
    code = Column(String(16), nullable=False)
    success = Column(Boolean, nullable=False, default=False)
    attempt_left = Column(Integer, nullable=False)
    ttl = Column(Interval, nullable=False)

    @property
    def wait_until(self):
        return self.created_at + self.ttl

    def __repr__(self):
        return (
            f"<AuthAttempt(id={self.id}, identifier_used={self.identifier_used}, "
            f"attempt_left={self.attempt_left}, success={self.success})>"
        )

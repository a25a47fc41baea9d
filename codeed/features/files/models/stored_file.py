from sqlalchemy import BigInteger, Column, String

from codeed.platform.db.base import BaseModel, SoftDeleteMixin


class StoredFile(SoftDeleteMixin, BaseModel):
    """Metadata of an uploaded file. The bytes live under UPLOAD_DIR/<storage_key>."""

    __tablename__ = "files"

    filename = Column(String(255), nullable=False, index=True)
    content_type = Column(String(255), nullable=False, default="application/octet-stream")
    size = Column(BigInteger, nullable=False, default=0)
    storage_key = Column(String(255), nullable=False, unique=True)

    def __repr__(self):
        return f"<StoredFile(id={self.id}, filename={self.filename}, size={self.size})>"

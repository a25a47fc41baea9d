from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from codeed.platform.schemas import ReadSchema


class UploadedFile(BaseModel):
    filename: str
    file_id: str


class StoredFileFilter(BaseModel):
    filename: Optional[str] = None


class StoredFileResponse(ReadSchema):
    id: str
    filename: str
    content_type: str
    size: int
    created_at: datetime
    updated_at: datetime

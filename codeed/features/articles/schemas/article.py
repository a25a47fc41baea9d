from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from codeed.platform.schemas import ReadSchema, TagList, UpdateSchema


class ArticleCreate(BaseModel):
    course_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    content_md: str = ""
    content_txt: str = ""
    order: int = 0
    tags: TagList = []


class ArticleUpdate(UpdateSchema):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content_md: Optional[str] = None
    content_txt: Optional[str] = None
    order: Optional[int] = None
    tags: Optional[TagList] = None
    is_draft: Optional[bool] = None


class ArticleFilter(BaseModel):
    course_id: Optional[str] = None
    title: Optional[str] = None
    tags: list[str] = []
    is_draft: Optional[bool] = None
    version: Optional[int] = None


class ArticleResponse(ReadSchema):
    id: str
    course_id: str
    title: str
    content_md: str
    content_txt: str
    order: int
    version: int
    tags: TagList
    is_draft: bool
    created_at: datetime
    updated_at: datetime

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from codeed.platform.schemas import ReadSchema, TagList, UpdateSchema


class CourseCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    author_id: str = Field(..., min_length=1)
    tags: TagList = []
    is_published: bool = False


class CourseUpdate(UpdateSchema):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    tags: Optional[TagList] = None
    is_published: Optional[bool] = None


class CourseFilter(BaseModel):
    title: Optional[str] = None
    tags: list[str] = []
    is_published: Optional[bool] = None
    author_id: Optional[str] = None


class CourseResponse(ReadSchema):
    id: str
    title: str
    description: str
    author_id: str
    tags: TagList
    is_published: bool
    created_at: datetime
    updated_at: datetime

from sqlalchemy import Boolean, Column, ForeignKey, String, Text
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import relationship

from codeed.platform.db.base import Base, BaseModel, SoftDeleteMixin


class CourseTag(Base):
    __tablename__ = "course_tags"

    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True)
    name = Column(String(64), primary_key=True, index=True)


class Course(SoftDeleteMixin, BaseModel):
    __tablename__ = "courses"

    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    author_id = Column(String(36), nullable=False, index=True)
    is_published = Column(Boolean, nullable=False, default=False)

    tag_links = relationship(
        "CourseTag",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=CourseTag.name,
    )
    tags = association_proxy("tag_links", "name", creator=lambda name: CourseTag(name=name))

    def __repr__(self):
        return f"<Course(id={self.id}, title={self.title})>"

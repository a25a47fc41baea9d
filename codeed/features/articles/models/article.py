from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import relationship

from codeed.platform.db.base import Base, BaseModel, SoftDeleteMixin


class ArticleTag(Base):
    __tablename__ = "article_tags"

    article_id = Column(String(36), ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True)
    name = Column(String(64), primary_key=True, index=True)


class Article(SoftDeleteMixin, BaseModel):
    """
    One version of an article. Versions of the same article share
    ``course_id`` and ``title``; each is a separate row with its own id.
    """

    __tablename__ = "articles"

    course_id = Column(String(36), nullable=False, index=True)
    title = Column(String(255), nullable=False, index=True)
    content_md = Column(Text, nullable=False, default="")
    content_txt = Column(Text, nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)
    version = Column(Integer, nullable=False, default=1)
    is_draft = Column(Boolean, nullable=False, default=True)

    tag_links = relationship(
        "ArticleTag",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=ArticleTag.name,
    )
    tags = association_proxy("tag_links", "name", creator=lambda name: ArticleTag(name=name))

    def __repr__(self):
        return f"<Article(id={self.id}, title={self.title}, version={self.version})>"

from sqlalchemy import func, select

from codeed.features.articles.models.article import Article, ArticleTag
from codeed.features.articles.schemas.article import ArticleCreate, ArticleFilter
from codeed.platform.db.repository import SoftDeleteRepository
from codeed.platform.logger import get_logger
from codeed.platform.utils.ids import parse_id

logger = get_logger(__name__)


class ArticleRepository(SoftDeleteRepository[Article]):
    model = Article
    entity = "article"

    async def create(self, data: ArticleCreate) -> Article:
        values = data.model_dump()
        values["course_id"] = parse_id(data.course_id, "course")
        return await self.insert(Article(**values, version=1, is_draft=True))

    async def find(self, filters: ArticleFilter) -> list[Article]:
        criteria = []
        if filters.course_id:
            criteria.append(Article.course_id == parse_id(filters.course_id, "course"))
        if filters.title:
            criteria.append(Article.title.icontains(filters.title, autoescape=True))
        if filters.tags:
            criteria.append(Article.tag_links.any(ArticleTag.name.in_(filters.tags)))
        if filters.is_draft is not None:
            criteria.append(Article.is_draft == filters.is_draft)
        if filters.version is not None:
            criteria.append(Article.version == filters.version)
        return await self.find_where(*criteria, order_by=(Article.order, Article.created_at))

    async def find_all_versions(self, course_id: str, title: str) -> list[Article]:
        return await self.find_where(
            Article.course_id == parse_id(course_id, "course"),
            Article.title == title,
            order_by=(Article.version,),
        )

    async def latest_version(self, course_id: str, title: str) -> int:
        result = await self.db.execute(
            select(func.max(Article.version)).where(
                Article.is_active(),
                Article.course_id == course_id,
                Article.title == title,
            )
        )
        return result.scalar() or 0

    async def clone_with_incremented_version(self, article_id: str) -> Article:
        """
        Insert a copy of the article as a new draft whose version is one above
        the highest active version sharing its course and title. The source
        row is left as is.
        """
        original = await self.get_by_id(article_id)
        latest = await self.latest_version(original.course_id, original.title)
        version = max(original.version, latest) + 1

        clone = Article(
            course_id=original.course_id,
            title=original.title,
            content_md=original.content_md,
            content_txt=original.content_txt,
            order=original.order,
            version=version,
            is_draft=True,
            tags=list(original.tags),
        )
        logger.info(f"Cloning article {original.id} as version {version}")
        return await self.insert(clone)

from codeed.features.articles.models.article import Article
from codeed.features.articles.repositories.article import ArticleRepository
from codeed.features.articles.schemas.article import ArticleCreate, ArticleFilter, ArticleUpdate
from codeed.platform.logger import get_logger

logger = get_logger(__name__)


class ArticleService:
    def __init__(self, repository: ArticleRepository):
        self.repository = repository

    async def create_article(self, data: ArticleCreate) -> Article:
        logger.info(f"Creating article: course_id={data.course_id} title={data.title}")
        return await self.repository.create(data)

    async def get_article_by_id(self, article_id: str) -> Article:
        return await self.repository.get_by_id(article_id)

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        logger.info(f"Updating article in place: id={article_id}")
        await self.repository.update_by_id(article_id, data.changes())
        return await self.repository.get_by_id(article_id)

    async def update_with_versioning(self, article_id: str, data: ArticleUpdate) -> Article:
        """Clone the article into a new version and apply the changes to the clone."""
        clone = await self.repository.clone_with_incremented_version(article_id)
        await self.repository.update_by_id(clone.id, data.changes())
        logger.info(f"Article {article_id} updated as new version {clone.version} (id={clone.id})")
        return await self.repository.get_by_id(clone.id)

    async def delete_article(self, article_id: str) -> None:
        logger.info(f"Deleting article: id={article_id}")
        await self.repository.delete_by_id(article_id)

    async def find_articles(self, filters: ArticleFilter) -> list[Article]:
        return await self.repository.find(filters)

    async def find_all_versions(self, course_id: str, title: str) -> list[Article]:
        return await self.repository.find_all_versions(course_id, title)

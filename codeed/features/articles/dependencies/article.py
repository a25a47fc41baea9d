from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.features.articles.repositories.article import ArticleRepository
from codeed.features.articles.services.article_service import ArticleService
from codeed.platform.db.session import get_db


def get_article_service(db: AsyncSession = Depends(get_db)) -> ArticleService:
    return ArticleService(ArticleRepository(db))

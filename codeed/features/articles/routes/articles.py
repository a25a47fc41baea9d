from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from codeed.features.articles.dependencies.article import get_article_service
from codeed.features.articles.schemas.article import (
    ArticleCreate,
    ArticleFilter,
    ArticleResponse,
    ArticleUpdate,
)
from codeed.features.articles.services.article_service import ArticleService
from codeed.platform.response import api_response

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_article(
    request: ArticleCreate,
    article_service: ArticleService = Depends(get_article_service),
):
    article = await article_service.create_article(request)
    return api_response(
        data=ArticleResponse.model_validate(article),
        message="Article created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("", response_model=dict)
async def find_articles(
    course_id: Optional[str] = Query(None),
    title: Optional[str] = Query(None, description="Partial, case-insensitive"),
    tags: list[str] = Query([], description="Matches articles having any of the tags"),
    is_draft: Optional[bool] = Query(None),
    version: Optional[int] = Query(None, ge=1),
    article_service: ArticleService = Depends(get_article_service),
):
    filters = ArticleFilter(
        course_id=course_id, title=title, tags=tags, is_draft=is_draft, version=version
    )
    articles = await article_service.find_articles(filters)
    return api_response(
        data=[ArticleResponse.model_validate(article) for article in articles],
        message="Articles retrieved successfully",
    )


@router.get("/versions", response_model=dict)
async def find_all_versions(
    course_id: str = Query(...),
    title: str = Query(..., min_length=1),
    article_service: ArticleService = Depends(get_article_service),
):
    articles = await article_service.find_all_versions(course_id, title)
    return api_response(
        data=[ArticleResponse.model_validate(article) for article in articles],
        message="Article versions retrieved successfully",
    )


@router.get("/{article_id}", response_model=dict)
async def get_article(
    article_id: str,
    article_service: ArticleService = Depends(get_article_service),
):
    article = await article_service.get_article_by_id(article_id)
    return api_response(data=ArticleResponse.model_validate(article), message="Article retrieved successfully")


@router.patch("/{article_id}", response_model=dict)
async def update_article(
    article_id: str,
    request: ArticleUpdate,
    article_service: ArticleService = Depends(get_article_service),
):
    article = await article_service.update_article(article_id, request)
    return api_response(data=ArticleResponse.model_validate(article), message="Article updated successfully")


@router.post("/{article_id}/versions", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_article_version(
    article_id: str,
    request: ArticleUpdate,
    article_service: ArticleService = Depends(get_article_service),
):
    """
    Save the changes as a new draft version instead of editing the article in place.
    """
    article = await article_service.update_with_versioning(article_id, request)
    return api_response(
        data=ArticleResponse.model_validate(article),
        message="Article version created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.delete("/{article_id}", response_model=dict)
async def delete_article(
    article_id: str,
    article_service: ArticleService = Depends(get_article_service),
):
    await article_service.delete_article(article_id)
    return api_response(message="Article deleted successfully")

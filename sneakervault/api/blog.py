"""Blog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from sneakervault.exceptions import NotFoundError
from sneakervault.schemas.blog import Article, ArticleList
from sneakervault.services.blog import BlogService, get_blog_service

router = APIRouter(prefix="/api/blog", tags=["blog"])


@router.get("/articles", response_model=ArticleList)
async def list_articles(
    service: Annotated[BlogService, Depends(get_blog_service)],
):
    """List all blog articles."""
    return await service.list_articles()


@router.get("/featured", response_model=Article | None)
async def featured_article(
    service: Annotated[BlogService, Depends(get_blog_service)],
):
    """Get the most recently published article."""
    return await service.featured_article()


@router.get("/articles/{slug}", response_model=Article)
async def get_article(
    slug: str,
    service: Annotated[BlogService, Depends(get_blog_service)],
):
    """Get one article with its content."""
    article = await service.get_article(slug)
    if article is None:
        raise NotFoundError("Article not found")
    return article

"""Blog reader backed by the Strapi articles API."""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from functools import lru_cache
from typing import Generic, TypeVar

import httpx

from sneakervault.config import get_settings
from sneakervault.schemas.blog import Article, ArticleList

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class _Entry(Generic[T]):
    value: T
    fetched_at: float


class ArticleCache(Generic[T]):
    """Keyed in-memory cache with a fixed time-to-live.

    ``clock`` returns seconds and only needs to be monotonic.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: dict[str, _Entry[T]] = {}

    def get(self, key: str) -> T | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() - entry.fetched_at >= self.ttl_seconds:
            del self._entries[key]
            return None
        return entry.value

    def put(self, key: str, value: T) -> None:
        self._entries[key] = _Entry(value, self.clock())

    def clear(self) -> None:
        self._entries.clear()

    async def get_or_fetch(self, key: str, fetch: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value, or fetch, store and return a fresh one.

        Failed fetches are not cached.
        """
        cached = self.get(key)
        if cached is not None:
            return cached
        value = await fetch()
        self.put(key, value)
        return value


class BlogService:
    """Service for reading blog articles."""

    ARTICLES_KEY = "articles"

    def __init__(
        self,
        cache: ArticleCache[ArticleList],
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = get_settings()
        self.api_url = self.settings.blog_api_url
        self.cache = cache
        self.transport = transport
        self.timeout = 10.0

    async def _fetch(self, params: dict[str, str] | None = None) -> ArticleList:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(
                self.api_url,
                params=params,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            return ArticleList.model_validate(response.json())

    async def list_articles(self) -> ArticleList:
        """All articles. An unreachable blog yields an empty list, which is not cached."""
        try:
            return await self.cache.get_or_fetch(self.ARTICLES_KEY, self._fetch)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching articles: {e}")
            return ArticleList()

    async def get_article(self, slug: str) -> Article | None:
        """Find an article by slug, with its rich-text body when available."""
        articles = await self.list_articles()
        article = next((a for a in articles.data if a.slug == slug), None)
        if article is None:
            return None

        try:
            detail = await self._fetch({"filters[slug][$eq]": slug, "populate": "*"})
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Could not fetch article content for '{slug}': {e}")
            return article

        if detail.data and detail.data[0].content:
            return article.model_copy(update={"content": detail.data[0].content})
        return article

    async def featured_article(self) -> Article | None:
        """The most recently published article."""
        articles = await self.list_articles()
        if not articles.data:
            return None
        return max(articles.data, key=_published_key)


def _published_key(article: Article) -> datetime:
    if not article.published_at:
        return datetime.min
    try:
        # Strapi uses a trailing "Z"
        published = datetime.fromisoformat(article.published_at.replace("Z", "+00:00"))
    except ValueError:
        return datetime.min
    if published.tzinfo is not None:
        published = published.astimezone(UTC).replace(tzinfo=None)
    return published


@lru_cache
def get_article_cache() -> ArticleCache[ArticleList]:
    """Process-wide article cache."""
    return ArticleCache(ttl_seconds=get_settings().blog_cache_seconds)


def get_blog_service() -> BlogService:
    """Get a blog service sharing the process-wide cache."""
    return BlogService(get_article_cache())

"""Tests for the blog service and its article cache."""

import httpx
import pytest

from sneakervault.main import app
from sneakervault.schemas.blog import ArticleList
from sneakervault.services.blog import ArticleCache, BlogService, get_blog_service

ARTICLES = {
    "data": [
        {
            "id": 1,
            "documentId": "doc1",
            "title": "Cleaning suede",
            "description": "How to",
            "slug": "cleaning-suede",
            "publishedAt": "2025-03-01T10:00:00.000Z",
        },
        {
            "id": 2,
            "documentId": "doc2",
            "title": "Spring releases",
            "slug": "spring-releases",
            "publishedAt": "2025-04-01T10:00:00.000Z",
        },
        {"id": 3, "title": "Draft", "slug": "draft", "publishedAt": None},
    ],
    "meta": {"pagination": {"page": 1, "pageSize": 25, "pageCount": 1, "total": 3}},
}


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class CountingHandler:
    """MockTransport handler that records calls and can be switched to fail."""

    def __init__(self, detail: dict | None = None):
        self.calls: list[httpx.Request] = []
        self.detail = detail
        self.fail = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.fail:
            return httpx.Response(500)
        if "filters[slug][$eq]" in request.url.params:
            if self.detail is None:
                return httpx.Response(500)
            return httpx.Response(200, json=self.detail)
        return httpx.Response(200, json=ARTICLES)


def make_service(handler, clock=None) -> BlogService:
    cache = ArticleCache(ttl_seconds=300, clock=clock or FakeClock())
    return BlogService(cache, transport=httpx.MockTransport(handler))


class TestArticleCache:
    """Tests for ArticleCache."""

    def test_entry_expires_after_ttl(self):
        clock = FakeClock()
        cache = ArticleCache(ttl_seconds=300, clock=clock)
        cache.put("articles", "value")

        clock.now += 299
        assert cache.get("articles") == "value"
        clock.now += 1
        assert cache.get("articles") is None

    def test_clear(self):
        cache = ArticleCache(ttl_seconds=300, clock=FakeClock())
        cache.put("articles", "value")
        cache.clear()
        assert cache.get("articles") is None

    @pytest.mark.asyncio
    async def test_get_or_fetch_caches(self):
        cache = ArticleCache(ttl_seconds=300, clock=FakeClock())
        calls = []

        async def fetch():
            calls.append(1)
            return "fresh"

        assert await cache.get_or_fetch("k", fetch) == "fresh"
        assert await cache.get_or_fetch("k", fetch) == "fresh"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_failed_fetch_is_not_cached(self):
        cache = ArticleCache(ttl_seconds=300, clock=FakeClock())

        async def broken():
            raise ValueError("bad payload")

        with pytest.raises(ValueError):
            await cache.get_or_fetch("k", broken)
        assert cache.get("k") is None


class TestBlogService:
    """Tests for BlogService against a mocked Strapi API."""

    @pytest.mark.asyncio
    async def test_list_articles_is_cached(self):
        handler = CountingHandler()
        clock = FakeClock()
        service = make_service(handler, clock)

        articles = await service.list_articles()
        assert [a.slug for a in articles.data] == ["cleaning-suede", "spring-releases", "draft"]
        assert articles.meta.pagination.total == 3

        await service.list_articles()
        assert len(handler.calls) == 1

        clock.now += 300
        await service.list_articles()
        assert len(handler.calls) == 2

    @pytest.mark.asyncio
    async def test_unreachable_blog_returns_empty_list(self):
        handler = CountingHandler()
        handler.fail = True
        service = make_service(handler)

        assert (await service.list_articles()).data == []
        # The failure is not cached: the next call tries again and succeeds
        handler.fail = False
        assert len((await service.list_articles()).data) == 3

    @pytest.mark.asyncio
    async def test_featured_article_is_most_recent(self):
        service = make_service(CountingHandler())
        featured = await service.featured_article()
        assert featured.slug == "spring-releases"

    @pytest.mark.asyncio
    async def test_featured_article_when_blog_is_down(self):
        handler = CountingHandler()
        handler.fail = True
        assert await make_service(handler).featured_article() is None

    @pytest.mark.asyncio
    async def test_get_article_with_content(self):
        detail = {"data": [{**ARTICLES["data"][0], "content": "## Step one"}]}
        handler = CountingHandler(detail=detail)
        article = await make_service(handler).get_article("cleaning-suede")

        assert article.title == "Cleaning suede"
        assert article.content == "## Step one"
        detail_request = handler.calls[-1]
        assert detail_request.url.params["filters[slug][$eq]"] == "cleaning-suede"
        assert detail_request.url.params["populate"] == "*"

    @pytest.mark.asyncio
    async def test_get_article_falls_back_to_summary(self):
        """If the detail request fails the listed article is still returned."""
        article = await make_service(CountingHandler()).get_article("cleaning-suede")
        assert article.slug == "cleaning-suede"
        assert article.content is None

    @pytest.mark.asyncio
    async def test_get_unknown_article(self):
        assert await make_service(CountingHandler()).get_article("nope") is None


class TestBlogEndpoints:
    """Tests for /api/blog with the blog service overridden."""

    @pytest.fixture(autouse=True)
    def blog(self, client):
        service = make_service(CountingHandler())
        app.dependency_overrides[get_blog_service] = lambda: service
        return service

    def test_list(self, client):
        response = client.get("/api/blog/articles")
        assert response.status_code == 200
        assert len(response.json()["data"]) == 3

    def test_featured(self, client):
        assert client.get("/api/blog/featured").json()["slug"] == "spring-releases"

    def test_article(self, client):
        assert client.get("/api/blog/articles/draft").json()["title"] == "Draft"

    def test_missing_article(self, client):
        response = client.get("/api/blog/articles/nope")
        assert response.status_code == 404


def test_article_list_defaults():
    empty = ArticleList()
    assert empty.data == []
    assert empty.meta.pagination.page == 1

"""Sneaker catalog proxy with preference-based result filtering."""

import logging
from typing import Any

import httpx

from sneakervault.config import get_settings
from sneakervault.exceptions import NotFoundError, UpstreamServiceError
from sneakervault.models.enums import GenderFilter
from sneakervault.schemas.sneaker import Sneaker, SneakerSearchResponse

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 12
MAX_LIMIT = 50

# Plain substring checks against the lowercased product title
KIDS_KEYWORDS = (
    "(gs)",
    "(ps)",
    "(td)",
    "(tdv)",
    "(inf)",
    "grade school",
    "preschool",
    "pre-school",
    "toddler",
    "infant",
    "kids",
    "youth",
    "baby",
)
WOMEN_KEYWORDS = ("(w)", "women", "wmns", "womens")
MEN_KEYWORDS = ("(m)", "men's", "mens")


def is_kids_model(title: str) -> bool:
    """Check if a product title looks like a kids' size run."""
    lowered = title.lower()
    return any(keyword in lowered for keyword in KIDS_KEYWORDS)


def target_gender(title: str) -> GenderFilter:
    """Guess who a product is made for. Unmarked titles count as unisex."""
    lowered = title.lower()
    # "women" contains "men", so women's markers have to be checked first
    if any(keyword in lowered for keyword in WOMEN_KEYWORDS):
        return GenderFilter.WOMEN
    if any(keyword in lowered for keyword in MEN_KEYWORDS):
        return GenderFilter.MEN
    return GenderFilter.BOTH


def filter_sneakers(
    sneakers: list[Sneaker],
    show_kids_shoes: bool = False,
    gender_filter: GenderFilter = GenderFilter.BOTH,
) -> list[Sneaker]:
    """Drop results the user said they don't want to see."""
    kept = []
    for sneaker in sneakers:
        if not show_kids_shoes and is_kids_model(sneaker.title):
            continue
        if gender_filter.excludes(target_gender(sneaker.title)):
            continue
        kept.append(sneaker)
    return kept


class SneakerCatalogService:
    """Service for the external sneaker catalog API."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = get_settings()
        self.base_url = self.settings.sneakers_api_base_url.rstrip("/")
        self.timeout = self.settings.sneakers_api_timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        if not self.settings.sneakers_api_key:
            raise UpstreamServiceError("Sneaker API key is not configured")
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Authorization": self.settings.sneakers_api_key},
            transport=self.transport,
        )

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        async with self._client() as client:
            try:
                response = await client.get(path, params=params)
            except httpx.HTTPError as e:
                logger.error(f"HTTP error calling sneaker API: {e}")
                raise UpstreamServiceError("Failed to fetch data from sneaker API") from e

        if response.status_code == 404:
            raise NotFoundError("Sneaker not found")
        if response.is_error:
            logger.error(f"Sneaker API error: {response.status_code}, {response.text[:200]}")
            raise UpstreamServiceError(
                f"Sneaker API responded with status {response.status_code}",
                status_code=response.status_code,
            )
        return response.json()

    async def search(
        self,
        query: str,
        limit: int = DEFAULT_LIMIT,
        show_kids_shoes: bool = False,
        gender_filter: GenderFilter = GenderFilter.BOTH,
    ) -> SneakerSearchResponse:
        """Search the catalog and filter by the user's display preferences."""
        query = query.strip()
        if not query:
            return SneakerSearchResponse()

        limit = max(1, min(limit, MAX_LIMIT))
        data = await self._get(
            "/api/v3/stockx/products",
            params={"category": "sneakers", "query": query, "limit": limit},
        )
        result = SneakerSearchResponse.model_validate(data)
        filtered = filter_sneakers(result.data, show_kids_shoes, gender_filter)
        logger.debug(f"Search '{query}': {len(result.data)} results, {len(filtered)} kept")
        return result.model_copy(update={"data": filtered})

    async def get_product(self, product_id: str) -> dict[str, Any]:
        """Fetch one product, passed through as the catalog returns it."""
        return await self._get(f"/api/v3/stockx/products/{product_id}")


def get_sneaker_service() -> SneakerCatalogService:
    """Get a sneaker catalog service instance."""
    return SneakerCatalogService()

"""Sneaker catalog API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from sneakervault.api.dependencies import get_current_user
from sneakervault.exceptions import NotFoundError
from sneakervault.models.enums import GenderFilter
from sneakervault.models.user import User
from sneakervault.schemas.sneaker import SizeConversionResponse, SneakerSearchResponse
from sneakervault.services.catalog import get_size_conversion
from sneakervault.services.sneakers import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    SneakerCatalogService,
    get_sneaker_service,
)

router = APIRouter(prefix="/api", tags=["sneakers"])


async def search_for_user(
    service: SneakerCatalogService, user: User, query: str, limit: int
) -> SneakerSearchResponse:
    """Run a catalog search filtered by the user's display preferences."""
    return await service.search(
        query,
        limit=limit,
        show_kids_shoes=user.show_kids_shoes,
        gender_filter=GenderFilter(user.gender_filter),
    )


@router.get("/sneakers", response_model=SneakerSearchResponse)
async def search_sneakers(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SneakerCatalogService, Depends(get_sneaker_service)],
    query: str = Query(default="", max_length=200),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
):
    """Search the sneaker catalog."""
    return await search_for_user(service, current_user, query, limit)


@router.get("/sneakers/{product_id}")
async def get_sneaker(
    product_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SneakerCatalogService, Depends(get_sneaker_service)],
) -> dict[str, Any]:
    """Get a single product from the catalog."""
    return await service.get_product(product_id)


@router.get("/sizes/{us_size}", response_model=SizeConversionResponse)
def convert_size(us_size: str):
    """Convert a US size to UK and EU."""
    conversion = get_size_conversion(us_size)
    if conversion is None:
        raise NotFoundError(f"Unknown US size '{us_size}'")
    return SizeConversionResponse(us=conversion.us, uk=conversion.uk, eu=conversion.eu)

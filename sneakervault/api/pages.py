"""Page routes.

Rendering lives in the frontend; these return the data each page needs and
enforce page access through ``guard_page``.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from sneakervault.api.dependencies import get_collection_service
from sneakervault.api.guard import guard_page
from sneakervault.api.profile import ProfileData, build_profile_data
from sneakervault.api.sneakers import search_for_user
from sneakervault.models.user import User
from sneakervault.schemas.auth import UserProfile
from sneakervault.schemas.collection import CollectionItemResponse, CollectionStatistics
from sneakervault.schemas.sneaker import SneakerSearchResponse
from sneakervault.schemas.wishlist import WishlistItemResponse
from sneakervault.services.collection import CollectionService
from sneakervault.services.sneakers import DEFAULT_LIMIT, SneakerCatalogService, get_sneaker_service

router = APIRouter(tags=["pages"])

PageUser = Annotated[User | None, Depends(guard_page)]
SignedInUser = Annotated[User, Depends(guard_page)]


@router.get("/login")
def login_page(user: PageUser) -> dict[str, Any]:
    return {"page": "login"}


@router.get("/signup")
def signup_page(user: PageUser) -> dict[str, Any]:
    return {"page": "signup"}


@router.get("/profile", response_model=ProfileData)
def profile_page(
    user: SignedInUser,
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    return build_profile_data(service, user)


@router.get("/profile/collection", response_model=list[CollectionItemResponse])
def collection_page(
    user: SignedInUser,
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    return service.list_items(user.id)


@router.get("/profile/wishlist", response_model=list[WishlistItemResponse])
def wishlist_page(
    user: SignedInUser,
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    return service.list_wishlist(user.id)


@router.get("/profile/statistics", response_model=CollectionStatistics)
def statistics_page(
    user: SignedInUser,
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    return service.statistics(user.id)


@router.get("/profile/settings", response_model=UserProfile)
def settings_page(user: SignedInUser):
    return user


@router.get("/search", response_model=SneakerSearchResponse)
async def search_page(
    user: SignedInUser,
    service: Annotated[SneakerCatalogService, Depends(get_sneaker_service)],
    query: str = Query(default="", max_length=200),
):
    return await search_for_user(service, user, query, DEFAULT_LIMIT)

"""Profile data API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sneakervault.api.dependencies import get_collection_service, get_current_user
from sneakervault.models.user import User
from sneakervault.schemas.auth import UserProfile
from sneakervault.schemas.collection import CollectionItemResponse
from sneakervault.schemas.wishlist import WishlistItemResponse
from sneakervault.services.collection import CollectionService, total_value

router = APIRouter(prefix="/api", tags=["profile"])


class ProfileData(BaseModel):
    """Everything the profile page shows in one payload."""

    user: UserProfile
    collection: list[CollectionItemResponse]
    wishlist: list[WishlistItemResponse]
    total_value: float


def build_profile_data(service: CollectionService, user: User) -> ProfileData:
    collection = service.list_items(user.id)
    return ProfileData(
        user=UserProfile.model_validate(user),
        collection=[CollectionItemResponse.model_validate(item) for item in collection],
        wishlist=[
            WishlistItemResponse.model_validate(item) for item in service.list_wishlist(user.id)
        ],
        total_value=total_value(collection),
    )


@router.get("/profile-data", response_model=ProfileData)
def get_profile_data(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Get the user, their collection and wishlist, and the collection value."""
    return build_profile_data(service, current_user)

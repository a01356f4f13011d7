"""Pydantic schemas for API requests and responses."""

from sneakervault.schemas.auth import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    SignupRequest,
    UserProfile,
    UserUpdateRequest,
)
from sneakervault.schemas.collection import (
    CollectionItemCreate,
    CollectionItemResponse,
    CollectionItemUpdate,
)
from sneakervault.schemas.wishlist import WishlistItemCreate, WishlistItemResponse

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "UserUpdateRequest",
    "PublicUser",
    "UserProfile",
    "AuthResponse",
    "CollectionItemCreate",
    "CollectionItemUpdate",
    "CollectionItemResponse",
    "WishlistItemCreate",
    "WishlistItemResponse",
]

"""SQLAlchemy models."""

from sneakervault.models.collection import CollectionItem
from sneakervault.models.session import AuthSession
from sneakervault.models.user import User
from sneakervault.models.wishlist import WishlistItem

__all__ = [
    "User",
    "AuthSession",
    "CollectionItem",
    "WishlistItem",
]

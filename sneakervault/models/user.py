"""User model."""

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from sneakervault.database import Base
from sneakervault.models.enums import GenderFilter
from sneakervault.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=True, index=True)
    password_hash = Column(String(255), nullable=False)

    # Display preferences used by the sneaker search filter
    show_kids_shoes = Column(Boolean, nullable=False, default=False)
    gender_filter = Column(String(10), nullable=False, default=GenderFilter.BOTH.value)

    # Relationships
    sessions = relationship(
        "AuthSession",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    collection_items = relationship(
        "CollectionItem", back_populates="user", cascade="all, delete-orphan"
    )
    wishlist_items = relationship(
        "WishlistItem", back_populates="user", cascade="all, delete-orphan"
    )

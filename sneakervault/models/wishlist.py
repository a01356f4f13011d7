"""Wishlist item model."""

from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from sneakervault.database import Base
from sneakervault.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class WishlistItem(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A sneaker/size the user wants to buy."""

    __tablename__ = "wishlist_items"
    __table_args__ = (
        UniqueConstraint("user_id", "sneaker_id", "size", name="uq_wishlist_user_sneaker_size"),
    )

    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sneaker_id = Column(String(100), nullable=False)
    sneaker_name = Column(String(255), nullable=False)
    brand = Column(String(100), nullable=False)
    image_url = Column(String(1024), nullable=True)
    size = Column(String(10), nullable=False)

    # Relationships
    user = relationship("User", back_populates="wishlist_items")

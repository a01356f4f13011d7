"""Collection item model."""

from sqlalchemy import JSON, Column, Date, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from sneakervault.database import Base
from sneakervault.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class CollectionItem(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A pair of sneakers the user owns."""

    __tablename__ = "collection_items"

    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sneaker_id = Column(String(100), nullable=False)  # catalog product id
    sku = Column(String(100), nullable=False)
    brand = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    colorway = Column(String(255), nullable=False, default="")
    image = Column(String(1024), nullable=True)
    size_us = Column(String(10), nullable=False)
    size_eu = Column(String(10), nullable=True)
    size_uk = Column(String(10), nullable=True)
    condition = Column(String(10), nullable=False)  # "DS" | "VNDS" | "1".."10"
    purchase_date = Column(Date, nullable=True)
    retail_price = Column(Float, nullable=True)
    purchase_price = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    labels = Column(JSON, nullable=False, default=list)

    # Relationships
    user = relationship("User", back_populates="collection_items")

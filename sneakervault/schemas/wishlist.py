"""Wishlist schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WishlistItemCreate(BaseModel):
    """Add a sneaker/size to the wishlist."""

    sneaker_id: str = Field(..., min_length=1, max_length=100)
    sneaker_name: str = Field(..., min_length=1, max_length=255)
    brand: str = Field(..., min_length=1, max_length=100)
    image_url: str | None = Field(None, max_length=1024)
    size: str = Field(..., min_length=1, max_length=10)


class WishlistItemResponse(BaseModel):
    """Wishlist item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    sneaker_id: str
    sneaker_name: str
    brand: str
    image_url: str | None
    size: str
    created_at: datetime

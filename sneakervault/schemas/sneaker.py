"""Sneaker catalog schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Sneaker(BaseModel):
    """One product from the sneaker catalog API."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    title: str
    sku: str | None = None
    image: str | None = None
    brand: str | None = None
    colorway: str | None = None
    retail_price: float | None = Field(None, alias="retailPrice")
    release_date: str | None = Field(None, alias="releaseDate")


class SneakerSearchResponse(BaseModel):
    """A page of catalog search results."""

    total: int = 0
    page: int = 1
    pages: int = 0
    data: list[Sneaker] = Field(default_factory=list)


class SizeConversionResponse(BaseModel):
    us: str
    uk: str
    eu: str

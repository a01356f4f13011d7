"""Collection schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sneakervault.services.catalog import CONDITIONS, valid_label_values


class CollectionItemBase(BaseModel):
    """Fields shared by create and update payloads."""

    sneaker_id: str = Field(..., min_length=1, max_length=100)
    sku: str = Field(..., min_length=1, max_length=100)
    brand: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    colorway: str = Field("", max_length=255)
    image: str | None = Field(None, max_length=1024)
    size_us: str = Field(..., min_length=1, max_length=10)
    size_eu: str | None = Field(None, max_length=10)
    size_uk: str | None = Field(None, max_length=10)
    condition: str
    purchase_date: date | None = None
    retail_price: float | None = Field(None, ge=0)
    purchase_price: float | None = Field(None, ge=0)
    notes: str | None = None

    @field_validator("condition")
    @classmethod
    def condition_is_known(cls, value: str) -> str:
        if value not in CONDITIONS:
            raise ValueError(f"Unknown condition '{value}'")
        return value


class CollectionItemCreate(CollectionItemBase):
    """Add a pair to the collection."""


class CollectionItemUpdate(CollectionItemBase):
    """Replace a collection item's details, labels included."""

    labels: list[str] = Field(default_factory=list)

    @field_validator("labels")
    @classmethod
    def labels_are_known(cls, value: list[str]) -> list[str]:
        unknown = sorted(set(value) - valid_label_values())
        if unknown:
            raise ValueError(f"Unknown labels: {', '.join(unknown)}")
        # Keep order, drop repeats
        return list(dict.fromkeys(value))


class CollectionItemResponse(BaseModel):
    """Collection item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    sneaker_id: str
    sku: str
    brand: str
    title: str
    colorway: str
    image: str | None
    size_us: str
    size_eu: str | None
    size_uk: str | None
    condition: str
    purchase_date: date | None
    retail_price: float | None
    purchase_price: float | None
    notes: str | None
    labels: list[str]
    created_at: datetime
    updated_at: datetime


class CollectionStatistics(BaseModel):
    """Aggregates shown on the statistics page."""

    total_items: int
    total_value: float
    total_retail_value: float
    brands: dict[str, int]
    conditions: dict[str, int]
    labels: dict[str, int]

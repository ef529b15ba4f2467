"""Restaurant detail schema."""

from typing import Any

from pydantic import Field, field_validator

from core.schemas.base_schema_model import BaseSchemaModel


class RestaurantDetail(BaseSchemaModel):
    """Restaurant with its derived popularity and price tiers.

    Built from a Restaurant annotated by RestaurantService.
    """

    id: int = Field(..., description="Restaurant ID")
    name: str = Field(..., description="Restaurant name")
    categories: list[str] = Field(
        default_factory=list, description="Category tags"
    )
    latitude: float | None = Field(None, description="Latitude")
    longitude: float | None = Field(None, description="Longitude")
    district: str = Field("", description="District reference")
    address: str = Field("", description="Street address")
    stars: float | None = Field(None, description="Average review score")
    review_count: int = Field(0, description="Platform-reported review count")
    price_range: int | None = Field(None, description="Price level, 1-4")
    platform: str = Field("", description="Source platform")
    popularity_tier: str | None = Field(None, description="Popularity tier")
    price_tier: str | None = Field(None, description="Price tier")

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, value: Any) -> Any:
        """Accept the comma-separated column value as well as a list."""
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return value

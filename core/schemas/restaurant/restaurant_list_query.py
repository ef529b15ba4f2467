"""Restaurant list query parameters schema."""

from pydantic import ConfigDict, Field

from core.enums import PopularityTier, PriceTier
from core.schemas.base_schema_model import BaseSchemaModel


class RestaurantListQuery(BaseSchemaModel):
    """Query parameters for GET /restaurants."""

    model_config = ConfigDict(str_strip_whitespace=True)

    district: str | None = Field(None, description="Exact district match")
    category: str | None = Field(None, description="Category tag contained")
    platform: str | None = Field(None, description="Source platform")
    min_stars: float | None = Field(
        None, description="Minimum stored stars", ge=0.0, le=5.0
    )
    popularity_tier: PopularityTier | None = Field(
        None, description="Popularity tier"
    )
    price_tier: PriceTier | None = Field(None, description="Price tier")
    search: str | None = Field(
        None, description="Case-insensitive name substring", min_length=1
    )

"""District summary schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DistrictSummary(BaseSchemaModel):
    """Restaurant figures aggregated per district."""

    district: str = Field(..., description="District reference")
    restaurant_count: int = Field(..., description="Restaurants in district", ge=0)
    average_stars: float | None = Field(
        None, description="Average of restaurants.stars"
    )
    total_review_count: int = Field(
        ..., description="Sum of platform-reported review counts", ge=0
    )

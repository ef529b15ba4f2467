"""Restaurant summary schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class RestaurantSummary(BaseSchemaModel):
    """Minimal restaurant listing entry."""

    id: int = Field(..., description="Restaurant ID")
    name: str = Field(..., description="Restaurant name")
    district: str = Field("", description="District reference")
    stars: float | None = Field(None, description="Stored average score")
    review_count: int = Field(0, description="Platform-reported review count")

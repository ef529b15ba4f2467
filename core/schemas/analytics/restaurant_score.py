"""Restaurant score schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class RestaurantScore(BaseSchemaModel):
    """Stored and computed rating figures for one restaurant."""

    restaurant_id: int = Field(..., description="Restaurant ID")
    name: str = Field(..., description="Restaurant name")
    district: str = Field("", description="District reference")
    stored_stars: float | None = Field(None, description="restaurants.stars")
    average_score: float | None = Field(
        None, description="AVG(reviews.score) over linked reviews"
    )
    review_total: int = Field(..., description="Number of linked reviews", ge=0)
    total_likes: int = Field(..., description="Sum of likes on linked reviews", ge=0)

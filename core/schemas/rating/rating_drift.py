"""Rating drift schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class RatingDrift(BaseSchemaModel):
    """A restaurant whose stored stars disagree with its review scores."""

    restaurant_id: int = Field(..., description="Restaurant ID")
    name: str = Field(..., description="Restaurant name")
    stored_stars: float | None = Field(
        None, description="Value currently stored in restaurants.stars"
    )
    computed_stars: float | None = Field(
        None, description="Average score of the restaurant's reviews"
    )
    review_total: int = Field(..., description="Number of linked reviews", ge=0)

"""Reviewer summary schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ReviewerSummary(BaseSchemaModel):
    """Review figures aggregated per author."""

    author_id: str = Field(..., description="Author identifier")
    review_count: int = Field(..., description="Reviews written", ge=0)
    average_score: float | None = Field(None, description="Average score given")
    total_likes: int = Field(..., description="Likes received", ge=0)
    restaurant_count: int = Field(
        ..., description="Distinct restaurants reviewed", ge=0
    )

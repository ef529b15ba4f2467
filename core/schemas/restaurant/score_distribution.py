"""Score distribution schemas."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ScoreBucket(BaseSchemaModel):
    """Number of reviews with one score value."""

    score: int = Field(..., description="Review score", ge=1, le=5)
    count: int = Field(..., description="Number of reviews", ge=0)


class ScoreDistribution(BaseSchemaModel):
    """Review counts per score for a single restaurant."""

    restaurant_id: int = Field(..., description="Restaurant ID")
    name: str = Field(..., description="Restaurant name")
    total: int = Field(..., description="Total linked reviews", ge=0)
    buckets: list[ScoreBucket] = Field(
        ..., description="One bucket per score, lowest first"
    )

"""Score length summary schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ScoreLengthSummary(BaseSchemaModel):
    """Review body length figures for one score value."""

    score: int = Field(..., description="Review score", ge=1, le=5)
    review_count: int = Field(..., description="Reviews with this score", ge=0)
    average_length: float | None = Field(
        None, description="Average body length in characters"
    )
    max_length: int | None = Field(None, description="Longest body length")

"""Review list query parameters schema."""

from pydantic import ConfigDict, Field, model_validator

from core.constants import MAX_REVIEW_SCORE, MIN_REVIEW_SCORE
from core.schemas.base_schema_model import BaseSchemaModel


class ReviewListQuery(BaseSchemaModel):
    """Query parameters for GET /reviews and GET /restaurants/<id>/reviews."""

    model_config = ConfigDict(str_strip_whitespace=True)

    restaurant_id: int | None = Field(None, description="Reviewed restaurant ID")
    author_id: str | None = Field(None, description="Author identifier")
    platform: str | None = Field(None, description="Source platform")
    min_score: int | None = Field(
        None, description="Minimum score", ge=MIN_REVIEW_SCORE, le=MAX_REVIEW_SCORE
    )
    max_score: int | None = Field(
        None, description="Maximum score", ge=MIN_REVIEW_SCORE, le=MAX_REVIEW_SCORE
    )

    @model_validator(mode="after")
    def check_score_range(self) -> "ReviewListQuery":
        """Reject an empty score range."""
        if (
            self.min_score is not None
            and self.max_score is not None
            and self.min_score > self.max_score
        ):
            raise ValueError("min_score must not exceed max_score")
        return self

"""Platform summary schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class PlatformSummary(BaseSchemaModel):
    """Review figures aggregated per source platform."""

    platform: str = Field(..., description="Source platform")
    review_count: int = Field(..., description="Reviews from platform", ge=0)
    average_score: float | None = Field(None, description="Average review score")
    total_likes: int = Field(..., description="Sum of likes", ge=0)

"""Rating drift response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.rating.rating_drift import RatingDrift


class RatingDriftResponse(BaseSchemaModel):
    """Response model for GET /ratings/drift."""

    tolerance: float = Field(..., description="Absolute tolerance used", ge=0.0)
    drift_count: int = Field(..., description="Number of drifting restaurants")
    restaurants: list[RatingDrift] = Field(
        ..., description="Restaurants whose stars drifted"
    )

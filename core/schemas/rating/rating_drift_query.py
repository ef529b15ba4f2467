"""Rating drift query parameters schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class RatingDriftQuery(BaseSchemaModel):
    """Query parameters for GET /ratings/drift."""

    tolerance: float | None = Field(
        None, description="Allowed absolute difference", ge=0.0
    )

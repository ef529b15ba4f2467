"""Rating sync response schema."""

from pydantic import Field

from core.enums import RatingSyncMode
from core.schemas.base_schema_model import BaseSchemaModel


class RatingSyncResponse(BaseSchemaModel):
    """Response model for POST /ratings/sync."""

    updated_count: int = Field(..., description="Restaurant rows updated", ge=0)
    sync_mode: RatingSyncMode = Field(..., description="Configured sync mode")

"""Rating sync request schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class RatingSyncRequest(BaseSchemaModel):
    """Request body for POST /ratings/sync.

    Without restaurant IDs every restaurant is refreshed.
    """

    restaurant_ids: list[int] | None = Field(
        None, description="Restaurants to refresh", min_length=1
    )

"""Ranking query parameters schema."""

from pydantic import Field

from core.constants import DEFAULT_RANKING_LIMIT, MAX_RANKING_LIMIT
from core.schemas.base_schema_model import BaseSchemaModel


class RankingQuery(BaseSchemaModel):
    """Query parameters shared by analytics endpoints.

    Endpoints that do not rank ignore ``limit``; each endpoint applies its
    own default when ``min_reviews`` is omitted.
    """

    limit: int = Field(
        DEFAULT_RANKING_LIMIT,
        description="Maximum number of rows",
        ge=1,
        le=MAX_RANKING_LIMIT,
    )
    min_reviews: int | None = Field(
        None, description="Minimum number of linked reviews", ge=0
    )

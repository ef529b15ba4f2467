"""Tier breakdown schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class TierBreakdown(BaseSchemaModel):
    """Restaurant counts per popularity tier and per price tier."""

    popularity: dict[str, int] = Field(
        ..., description="Restaurant count per popularity tier"
    )
    price: dict[str, int] = Field(..., description="Restaurant count per price tier")

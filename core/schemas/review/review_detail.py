"""Review detail schema."""

import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ReviewDetail(BaseSchemaModel):
    """Review joined with the restaurant it belongs to."""

    id: int = Field(..., description="Review ID")
    title: str = Field("", description="Review title")
    body: str = Field("", description="Review body")
    score: int = Field(..., description="Review score", ge=1, le=5)
    likes: int = Field(0, description="Like count", ge=0)
    author_id: str = Field(..., description="Author identifier")
    date: datetime.date | None = Field(None, description="Review date")
    platform: str = Field("", description="Source platform")
    restaurant_id: int = Field(..., description="Reviewed restaurant ID")
    restaurant_name: str = Field(..., description="Reviewed restaurant name")
    district: str = Field("", description="Reviewed restaurant district")
    review_length: int | None = Field(None, description="Body length in characters")

"""Liveness response schema."""

from typing import Literal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """Liveness payload; the process answering is the whole check."""

    status: Literal["alive"] = Field("alive", description="Always 'alive'")

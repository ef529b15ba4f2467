"""Dependency health schema."""

from pydantic import Field

from core.enums.health_status import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Result of one readiness check (database connection or rating trigger)."""

    healthy: bool = Field(..., description="Whether the check passed")
    status: HealthStatus = Field(..., description="Outcome of the check")
    message: str = Field(..., description="Human-readable outcome")
    vendor: str | None = Field(
        None, description="Database vendor the check ran against"
    )
    response_time_ms: float | None = Field(
        None, description="Time taken by the check in milliseconds"
    )

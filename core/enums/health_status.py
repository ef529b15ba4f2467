"""Readiness check outcomes."""

from enum import Enum


class HealthStatus(str, Enum):
    """Outcome of a readiness check.

    DEGRADED means the dependency answers but is incomplete, e.g. the
    rating trigger is missing in trigger mode.
    """

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
    ERROR = "error"

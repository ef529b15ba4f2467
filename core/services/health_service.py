"""Health check service for the liveness and readiness probes."""

import time

from django.conf import settings
from django.db import connection
from django.db.utils import DatabaseError, OperationalError

import structlog

from core.db import rating_trigger_installed
from core.enums import HealthStatus, RatingSyncMode
from core.exceptions import UnsupportedDatabaseError
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


class HealthService:
    """Service for the health probes.

    The database check is cached for ``cache_ttl_seconds`` so frequent
    readiness probes do not hit the database each time. The rating trigger
    check runs only when ratings are maintained by the trigger.
    """

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        self.cache_ttl_seconds = cache_ttl_seconds
        self._db_health_cache: DependencyHealth | None = None
        self._db_health_cache_time: float = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always alive)."""
        return LivenessResponse()

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and rating trigger checks.

        A failing dependency marks the service degraded but keeps it ready,
        since listing endpoints still work without the trigger.

        Returns:
            ReadinessResponse with overall status and dependency health
        """
        dependencies = {"database": self.check_database_health()}
        if settings.RATING_SYNC_MODE == RatingSyncMode.TRIGGER.value:
            dependencies["rating_trigger"] = self.check_rating_trigger_health()

        degraded = not all(dependency.healthy for dependency in dependencies.values())
        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity, cached for cache_ttl_seconds.

        Uses ensure_connection() so no query is executed.
        """
        now = time.time()
        if (
            self._db_health_cache is not None
            and (now - self._db_health_cache_time) < self.cache_ttl_seconds
        ):
            return self._db_health_cache

        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
        except OperationalError as e:
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                vendor=connection.vendor,
                response_time_ms=_elapsed_ms(start_time),
            )
            logger.warning("database_health_check_failed", error=str(e))
        else:
            health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                vendor=connection.vendor,
                response_time_ms=_elapsed_ms(start_time),
            )
            if self._db_health_cache is not None and not self._db_health_cache.healthy:
                logger.info("database_connection_recovered")

        self._db_health_cache = health
        self._db_health_cache_time = now
        return health

    def check_rating_trigger_health(self) -> DependencyHealth:
        """Check that the rating trigger is installed. Not cached."""
        start_time = time.perf_counter()
        try:
            installed = rating_trigger_installed(connection)
        except (DatabaseError, UnsupportedDatabaseError) as e:
            logger.warning("rating_trigger_check_failed", error=str(e))
            return DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Rating trigger check failed: {e!s}",
                vendor=connection.vendor,
                response_time_ms=_elapsed_ms(start_time),
            )

        return DependencyHealth(
            healthy=installed,
            status=HealthStatus.HEALTHY if installed else HealthStatus.DEGRADED,
            message=(
                "Rating trigger installed"
                if installed
                else "Rating trigger missing; run install_db_objects --trigger"
            ),
            vendor=connection.vendor,
            response_time_ms=_elapsed_ms(start_time),
        )


# Global health service instance
health_service = HealthService()

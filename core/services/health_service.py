"""Liveness and readiness checks for the admin service.

Only the database backs this service, so readiness is a single cached
connection check.
"""

import logging
import time

from django.db import connection
from django.db.utils import OperationalError

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)


class HealthService:
    """Answer the health probes, reusing a recent database check."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: How long a database check result is reused
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._db_health_cache: DependencyHealth | None = None
        self._db_health_cache_time: float = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        return LivenessResponse()

    def get_readiness_status(self) -> ReadinessResponse:
        """Report ready, flagged as degraded while the database is unreachable."""
        database = self.check_database_health()

        return ReadinessResponse(
            ready=True,
            status="ready" if database.healthy else "degraded",
            degraded=not database.healthy,
            dependencies={"database": database},
        )

    def check_database_health(self) -> DependencyHealth:
        """Open (or validate) the database connection and time it.

        Probes hit this every few seconds, so a result younger than
        ``cache_ttl_seconds`` is returned as is.
        """
        now = time.monotonic()
        cache_age = now - self._db_health_cache_time
        if self._db_health_cache is not None and cache_age < self.cache_ttl_seconds:
            return self._db_health_cache

        started = time.perf_counter()
        try:
            connection.ensure_connection()
        except OperationalError as e:
            logger.warning("Database health check failed: %s", e)
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=_elapsed_ms(started),
            )
        else:
            health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                response_time_ms=_elapsed_ms(started),
            )

        self._db_health_cache = health
        self._db_health_cache_time = now
        return health


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


# Global health service instance
health_service = HealthService()

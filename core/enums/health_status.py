"""Health status of a checked dependency."""

from enum import Enum


class HealthStatus(str, Enum):
    """Result of a dependency health check."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"

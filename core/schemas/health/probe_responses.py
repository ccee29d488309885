"""Schemas returned by the liveness and readiness probes."""

from pydantic import Field

from core.enums import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Result of checking one backing dependency."""

    healthy: bool = Field(..., description="True when the check succeeded")
    status: HealthStatus = Field(..., description="Outcome of the check")
    message: str = Field(..., description="Check outcome for operators")
    response_time_ms: float | None = Field(
        None, description="Time the check took, in milliseconds"
    )


class LivenessResponse(BaseSchemaModel):
    """Process is up; nothing external is checked."""

    status: str = Field("alive", description="Always 'alive'")


class ReadinessResponse(BaseSchemaModel):
    """Whether the service can take traffic, with per-dependency detail.

    The service stays ready while the database is down and reports itself
    as degraded instead.
    """

    ready: bool = Field(..., description="Whether requests should be routed here")
    status: str = Field(..., description="'ready' or 'degraded'")
    degraded: bool = Field(..., description="True when a dependency is unhealthy")
    dependencies: dict[str, DependencyHealth] = Field(
        default_factory=dict, description="Check result keyed by dependency name"
    )

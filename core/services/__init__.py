"""Services for the core app."""

from core.services.health_service import HealthService, health_service

# Note: the message and user services import models and are not exported here
# to avoid touching the app registry during Django app initialization.
# Import them directly from their modules.

__all__ = [
    "HealthService",
    "health_service",
]

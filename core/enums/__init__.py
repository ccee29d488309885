"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.message_type import MessageType

__all__ = ["HealthStatus", "MessageType"]

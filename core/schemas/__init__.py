"""Schemas for the core app."""

from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.message import (
    MessageCreatedResponse,
    MessageCreateRequest,
    MessageDeleteRequest,
    MessageQuery,
    MessageReadRequest,
    MessageReadResponse,
    MessageRequest,
    MessageResponse,
    UnreadMessageCountResponse,
)
from core.schemas.page import PageDataResponse, PageQuery

__all__ = [
    "DependencyHealth",
    "LivenessResponse",
    "MessageCreateRequest",
    "MessageCreatedResponse",
    "MessageDeleteRequest",
    "MessageQuery",
    "MessageReadRequest",
    "MessageReadResponse",
    "MessageRequest",
    "MessageResponse",
    "PageDataResponse",
    "PageQuery",
    "ReadinessResponse",
    "UnreadMessageCountResponse",
]

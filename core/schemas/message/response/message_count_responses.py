"""Count responses for message endpoints."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UnreadMessageCountResponse(BaseSchemaModel):
    """Number of unread messages for the current user."""

    total: int = Field(..., ge=0, description="Unread message count")


class MessageReadResponse(BaseSchemaModel):
    """Number of messages marked as read."""

    updated: int = Field(..., ge=0, description="Messages marked as read")

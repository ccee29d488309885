"""Request schema for creating a message."""

from pydantic import Field

from core.enums import MessageType
from core.schemas.base_schema_model import BaseSchemaModel


class MessageRequest(BaseSchemaModel):
    """Message fields copied onto a new Message record."""

    title: str = Field(..., min_length=1, max_length=50, description="Message title")
    content: str | None = Field(None, max_length=255, description="Message body")
    type: MessageType = Field(MessageType.SYSTEM, description="Message type")

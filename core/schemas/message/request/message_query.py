"""Filter criteria for message list queries."""

from pydantic import Field

from core.enums import MessageType
from core.schemas.base_schema_model import BaseSchemaModel


class MessageQuery(BaseSchemaModel):
    """Optional filters applied to the message/recipient join."""

    user_id: int | None = Field(None, description="Recipient user ID")
    is_read: bool | None = Field(None, description="Per-recipient read state")
    title: str | None = Field(None, description="Title contains (case-insensitive)")
    type: MessageType | None = Field(None, description="Message type")

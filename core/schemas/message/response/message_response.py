"""Schema for a message as seen by one recipient."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MessageResponse(BaseSchemaModel):
    """Message detail joined with the recipient's read state.

    ``create_user_string`` is filled by the service layer with the creator's
    nickname and stays None when the lookup fails.
    """

    id: int = Field(..., description="Message ID")
    title: str = Field(..., description="Message title")
    content: str | None = Field(None, description="Message body")
    type: int = Field(..., description="Message type")
    is_read: bool | None = Field(None, description="Whether the recipient read it")
    read_time: datetime | None = Field(None, description="When the recipient read it")
    create_user: int | None = Field(None, description="Creator user ID")
    create_user_string: str | None = Field(None, description="Creator nickname")
    create_time: datetime = Field(..., description="When the message was created")

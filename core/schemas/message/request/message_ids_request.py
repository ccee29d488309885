"""Request schemas carrying message IDs."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MessageDeleteRequest(BaseSchemaModel):
    """Request schema for bulk message deletion."""

    ids: list[int] = Field(
        ..., min_length=1, description="IDs of the messages to delete"
    )


class MessageReadRequest(BaseSchemaModel):
    """Request schema for marking messages as read.

    An empty list marks all of the user's unread messages as read.
    """

    ids: list[int] = Field(
        default_factory=list, description="IDs of the messages to mark as read"
    )

"""Request schema for the create message endpoint."""

from pydantic import Field

from core.schemas.message.request.message_request import MessageRequest


class MessageCreateRequest(MessageRequest):
    """Message fields plus the users receiving the message.

    An empty recipient list is rejected by the message service, not here.
    """

    recipient_ids: list[int] = Field(
        default_factory=list, description="IDs of the users receiving the message"
    )

"""Message schemas."""

from core.schemas.message.request.message_create_request import (
    MessageCreateRequest,
)
from core.schemas.message.request.message_ids_request import (
    MessageDeleteRequest,
    MessageReadRequest,
)
from core.schemas.message.request.message_query import MessageQuery
from core.schemas.message.request.message_request import MessageRequest
from core.schemas.message.response.message_count_responses import (
    MessageReadResponse,
    UnreadMessageCountResponse,
)
from core.schemas.message.response.message_created_response import (
    MessageCreatedResponse,
)
from core.schemas.message.response.message_response import MessageResponse

__all__ = [
    "MessageCreateRequest",
    "MessageCreatedResponse",
    "MessageDeleteRequest",
    "MessageQuery",
    "MessageReadRequest",
    "MessageReadResponse",
    "MessageRequest",
    "MessageResponse",
    "UnreadMessageCountResponse",
]

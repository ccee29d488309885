"""Service for notification message management.

This module provides the MessageService class which handles paged queries
over the message/recipient join, message creation with fan-out to the
recipients, and deletion with cleanup of the recipient associations.
"""

from collections.abc import Sequence

from django.db import transaction
from django.db.models import QuerySet

import structlog

from core.models import Message, MessageUser
from core.schemas.message import MessageQuery, MessageRequest, MessageResponse
from core.schemas.page import PageDataResponse, PageQuery
from core.services.message_user_service import (
    MessageUserService,
    message_user_service,
)
from core.services.user_service import UserService, user_service
from core.utils.exceptions import ex_to_none
from core.validation import check_utils

logger = structlog.get_logger(__name__)


class MessageService:
    """Service for creating, listing and deleting messages.

    Collaborators are passed in at construction so tests and callers can
    swap the recipient store or the nickname lookup.
    """

    def __init__(
        self,
        message_user_service: MessageUserService,
        user_service: UserService,
    ) -> None:
        """Initialize the message service.

        Args:
            message_user_service: Store for recipient associations.
            user_service: Lookup for creator nicknames.
        """
        self._message_user_service = message_user_service
        self._user_service = user_service

    def page(
        self, query: MessageQuery, page_query: PageQuery
    ) -> PageDataResponse[MessageResponse]:
        """Get one page of messages joined with their recipients' read state.

        Args:
            query: Optional filters (recipient, read state, title, type).
            page_query: Page number and size.

        Returns:
            PageDataResponse with the page's records and the total count.
        """
        logger.info(
            "page_messages",
            user_id=query.user_id,
            is_read=query.is_read,
            page=page_query.page,
            size=page_query.size,
        )

        queryset = self._build_queryset(query)
        total = queryset.count()

        # Apply pagination via slicing
        rows = list(queryset[page_query.offset : page_query.offset + page_query.size])
        records = [self._fill(self._to_response(row)) for row in rows]

        return PageDataResponse[MessageResponse](rows=records, total=total)

    def get(self, message_id: int, user_id: int | None = None) -> MessageResponse:
        """Get a single message.

        Args:
            message_id: ID of the message.
            user_id: Recipient whose read state is included, if given. The
                message must have been sent to this user.

        Returns:
            The message detail.

        Raises:
            ServiceError: If the message does not exist, or was not sent to
                the given user.
        """
        message = Message.objects.filter(id=message_id).first()
        check_utils.throw_if_not_exists(message, Message.__name__, "ID", message_id)

        response = MessageResponse.model_validate(message)
        if user_id is not None:
            recipient = MessageUser.objects.filter(
                message_id=message_id, user_id=user_id
            ).first()
            check_utils.throw_if_not_exists(
                recipient, Message.__name__, "ID", message_id
            )
            response.is_read = recipient.is_read
            response.read_time = recipient.read_time
        return self._fill(response)

    def add(
        self,
        request: MessageRequest,
        recipient_ids: Sequence[int] | None,
        create_user: int | None = None,
    ) -> int:
        """Create a message and fan it out to its recipients.

        The message insert and the recipient inserts share one transaction,
        so a failed fan-out never leaves a message without recipients.

        Args:
            request: Message fields.
            recipient_ids: IDs of the receiving users, at least one.
            create_user: ID of the creating user, if any.

        Returns:
            ID of the created message.

        Raises:
            ServiceError: If recipient_ids is empty.
        """
        check_utils.throw_if(
            lambda: not recipient_ids, "Message recipients cannot be empty"
        )

        with transaction.atomic():
            message = Message.objects.create(
                **request.model_dump(include=set(MessageRequest.model_fields)),
                create_user=create_user,
            )
            self._message_user_service.add(message.id, recipient_ids)

        logger.info(
            "message_created",
            message_id=message.id,
            recipient_count=len(recipient_ids),
        )
        return message.id

    def delete(self, ids: Sequence[int]) -> None:
        """Delete messages and all of their recipient associations.

        Both deletes run in one transaction; if either fails, nothing is
        deleted.

        Args:
            ids: IDs of the messages to delete.
        """
        ids = list(ids)
        with transaction.atomic():
            deleted, _ = Message.objects.filter(id__in=ids).delete()
            associations = self._message_user_service.delete_by_message_ids(ids)

        logger.info(
            "messages_deleted",
            requested_count=len(ids),
            deleted_count=deleted,
            recipient_count=associations,
        )

    def _build_queryset(self, query: MessageQuery) -> QuerySet[MessageUser]:
        """Build the filtered message/recipient join, newest first."""
        queryset = MessageUser.objects.select_related("message")
        if query.user_id is not None:
            queryset = queryset.filter(user_id=query.user_id)
        if query.is_read is not None:
            queryset = queryset.filter(is_read=query.is_read)
        if query.title:
            queryset = queryset.filter(message__title__icontains=query.title)
        if query.type is not None:
            queryset = queryset.filter(message__type=query.type)
        return queryset.order_by("-message__create_time", "-message_id", "user_id")

    def _to_response(self, row: MessageUser) -> MessageResponse:
        """Shape a join row into the response schema."""
        message = row.message
        return MessageResponse(
            id=message.id,
            title=message.title,
            content=message.content,
            type=message.type,
            is_read=row.is_read,
            read_time=row.read_time,
            create_user=message.create_user,
            create_time=message.create_time,
        )

    def _fill(self, response: MessageResponse) -> MessageResponse:
        """Fill the creator nickname, leaving it empty if the lookup fails."""
        create_user = response.create_user
        if create_user is None:
            return response
        response.create_user_string = ex_to_none(
            lambda: self._user_service.get_nickname_by_id(create_user)
        )
        return response


# Singleton instance for use throughout the application
message_service = MessageService(
    message_user_service=message_user_service,
    user_service=user_service,
)

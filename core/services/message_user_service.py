"""Service for message recipient associations.

Each message is fanned out to its recipients as MessageUser rows, which
carry the per-recipient read state.
"""

from collections.abc import Iterable

from django.utils import timezone

import structlog

from core.models import MessageUser

logger = structlog.get_logger(__name__)


class MessageUserService:
    """Create, read-mark and delete message recipient associations."""

    def add(self, message_id: int, user_ids: Iterable[int]) -> list[MessageUser]:
        """Create one unread association per distinct recipient.

        Args:
            message_id: ID of the already inserted message.
            user_ids: IDs of the receiving users; duplicates are collapsed.

        Returns:
            The created associations.
        """
        distinct_ids = list(dict.fromkeys(user_ids))
        created = MessageUser.objects.bulk_create(
            [
                MessageUser(message_id=message_id, user_id=user_id)
                for user_id in distinct_ids
            ]
        )
        logger.info(
            "message_recipients_added",
            message_id=message_id,
            recipient_count=len(created),
        )
        return created

    def delete_by_message_ids(self, message_ids: Iterable[int]) -> int:
        """Delete all associations referencing the given messages.

        Returns:
            Number of associations deleted.
        """
        deleted, _ = MessageUser.objects.filter(
            message_id__in=list(message_ids)
        ).delete()
        return deleted

    def read_message(
        self, user_id: int, message_ids: Iterable[int] | None = None
    ) -> int:
        """Mark a user's unread messages as read.

        Args:
            user_id: ID of the recipient.
            message_ids: Messages to mark; None or empty marks all unread ones.

        Returns:
            Number of associations updated.
        """
        queryset = MessageUser.objects.filter(user_id=user_id, is_read=False)
        ids = list(message_ids or [])
        if ids:
            queryset = queryset.filter(message_id__in=ids)

        updated = queryset.update(is_read=True, read_time=timezone.now())

        logger.info(
            "messages_marked_as_read",
            user_id=user_id,
            requested_count=len(ids),
            updated_count=updated,
        )
        return updated

    def count_unread_by_user_id(self, user_id: int) -> int:
        """Count unread messages of a user."""
        return MessageUser.objects.filter(user_id=user_id, is_read=False).count()


# Singleton instance for use throughout the application
message_user_service = MessageUserService()

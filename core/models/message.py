"""Message model for notifications sent to users.

A message is written once and fanned out to its recipients through
MessageUser rows, which carry the per-recipient read state.
"""

from typing import ClassVar

from django.db import models

from core.enums import MessageType


class Message(models.Model):
    """Notification message stored in the sys_message table.

    Attributes:
        id: Auto-generated identifier.
        title: Short message title.
        content: Message body.
        type: Message type (see MessageType).
        create_user: ID of the user who created the message, if any.
        create_time: When the message was created.
    """

    id = models.BigAutoField(primary_key=True)
    title = models.CharField(max_length=50, help_text="Message title")
    content = models.CharField(
        max_length=255, null=True, blank=True, help_text="Message body"
    )
    type = models.PositiveSmallIntegerField(
        choices=[(item.value, item.label) for item in MessageType],
        default=MessageType.SYSTEM.value,
        help_text="Message type",
    )
    create_user = models.BigIntegerField(
        null=True, blank=True, help_text="ID of the user who created the message"
    )
    create_time = models.DateTimeField(
        auto_now_add=True, help_text="When the message was created"
    )

    class Meta:
        """Django model metadata."""

        db_table = "sys_message"
        managed = False
        ordering: ClassVar[list[str]] = ["-create_time", "-id"]

    def __str__(self) -> str:
        """Return string representation of message."""
        return self.title

    def __repr__(self) -> str:
        """Return detailed representation of message."""
        return f"<Message(id={self.id}, type={self.type}, title='{self.title}')>"

"""Message recipient association model."""

from typing import ClassVar

from django.db import models


class MessageUser(models.Model):
    """Association between a message and one of its recipients.

    Deleting a message does not cascade at the database level; the message
    service removes associations explicitly in the same transaction.

    Attributes:
        message: The message sent to the user.
        user_id: ID of the receiving user.
        is_read: Whether the recipient has read the message.
        read_time: When the recipient read the message.
    """

    message = models.ForeignKey(
        "core.Message",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="recipients",
        db_column="message_id",
        help_text="Message sent to the user",
    )
    user_id = models.BigIntegerField(help_text="ID of the receiving user")
    is_read = models.BooleanField(
        default=False, help_text="Whether the recipient has read the message"
    )
    read_time = models.DateTimeField(
        null=True, blank=True, help_text="When the recipient read the message"
    )

    class Meta:
        """Django model metadata."""

        db_table = "sys_message_user"
        managed = False
        unique_together: ClassVar[list[list[str]]] = [["message", "user_id"]]
        indexes: ClassVar[list] = [
            models.Index(fields=["user_id", "is_read"]),
        ]

    def __str__(self) -> str:
        """Return string representation of the association."""
        return f"message {self.message_id} for user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of the association."""
        return (
            f"<MessageUser(message={self.message_id}, "
            f"user={self.user_id}, "
            f"is_read={self.is_read})>"
        )

"""Message type enumeration."""

from enum import Enum


class MessageType(int, Enum):
    """Message types matching the sys_message.type column."""

    SYSTEM = 1
    SECURITY = 2

    @property
    def label(self) -> str:
        """Return the display label of the message type."""
        return self.name.capitalize()

"""Database models for core application."""

from core.models.message import Message
from core.models.message_user import MessageUser
from core.models.user import User

__all__ = ["Message", "MessageUser", "User"]

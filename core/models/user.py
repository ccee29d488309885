"""User model."""

from typing import ClassVar

from django.db import models


class User(models.Model):
    """User model matching the sys_user table.

    This model is unmanaged as the database schema is owned by the database
    scripts. It provides read access to user data, mainly nickname lookups
    for message creators.
    """

    id = models.BigAutoField(primary_key=True)
    username = models.CharField(max_length=64, unique=True)
    nickname = models.CharField(max_length=30, default="", blank=True)
    email = models.EmailField(max_length=255, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    create_time = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "sys_user"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-create_time"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.nickname} ({self.username})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(id={self.id}, username='{self.username}')>"

"""Test data builders for users, messages and access tokens."""

from datetime import UTC, datetime, timedelta

from django.conf import settings

import jwt
from faker import Faker

from core.enums import MessageType
from core.models import Message, MessageUser, User

fake = Faker()


def create_user(**overrides) -> User:
    """Create a user with random identity fields."""
    fields = {
        "username": fake.unique.user_name(),
        "nickname": fake.first_name(),
        "email": fake.email(),
    }
    fields.update(overrides)
    return User.objects.create(**fields)


def create_message(recipient_ids=(), **overrides) -> Message:
    """Create a message and an unread association per recipient."""
    fields = {
        "title": fake.sentence(nb_words=4)[:50],
        "content": fake.text(max_nb_chars=200),
        "type": MessageType.SYSTEM,
    }
    fields.update(overrides)
    message = Message.objects.create(**fields)
    MessageUser.objects.bulk_create(
        [MessageUser(message=message, user_id=user_id) for user_id in recipient_ids]
    )
    return message


def make_token(user_id: int, expires_in: timedelta = timedelta(hours=1)) -> str:
    """Create an access token for the given user signed with JWT_SECRET."""
    now = datetime.now(UTC)
    return jwt.encode(
        {
            "sub": str(user_id),
            "username": f"user{user_id}",
            "iat": now,
            "exp": now + expires_in,
        },
        settings.JWT_SECRET,
        algorithm="HS256",
    )

"""Tests for MessageUserService."""

import pytest

from core.models import MessageUser
from core.services.message_user_service import message_user_service
from tests.factories import create_message


@pytest.mark.django_db
class TestMessageUserService:
    """Test suite for MessageUserService."""

    def test_add_creates_unread_associations(self):
        """Test one unread association per distinct user."""
        message = create_message()

        created = message_user_service.add(message.id, [3, 1, 3])

        assert [row.user_id for row in created] == [3, 1]
        assert MessageUser.objects.filter(message=message, is_read=False).count() == 2

    def test_delete_by_message_ids(self):
        """Test associations of the given messages are removed."""
        first = create_message(recipient_ids=[1, 2])
        second = create_message(recipient_ids=[1])

        deleted = message_user_service.delete_by_message_ids([first.id])

        assert deleted == 2
        assert list(MessageUser.objects.values_list("message_id", flat=True)) == [
            second.id
        ]

    def test_read_selected_messages(self):
        """Test only the listed messages of the user are marked as read."""
        first = create_message(recipient_ids=[1, 2])
        second = create_message(recipient_ids=[1])

        updated = message_user_service.read_message(1, [first.id])

        assert updated == 1
        row = MessageUser.objects.get(message=first, user_id=1)
        assert row.is_read is True
        assert row.read_time is not None
        assert not MessageUser.objects.get(message=second, user_id=1).is_read
        assert not MessageUser.objects.get(message=first, user_id=2).is_read

    @pytest.mark.parametrize("message_ids", [None, []])
    def test_read_all_messages(self, message_ids):
        """Test that no IDs marks all of the user's messages as read."""
        create_message(recipient_ids=[1])
        create_message(recipient_ids=[1, 2])

        updated = message_user_service.read_message(1, message_ids)

        assert updated == 2
        assert message_user_service.count_unread_by_user_id(1) == 0
        assert message_user_service.count_unread_by_user_id(2) == 1

    def test_read_keeps_first_read_time(self):
        """Test already read messages are not updated again."""
        message = create_message(recipient_ids=[1])
        message_user_service.read_message(1)
        first_read = MessageUser.objects.get(message=message).read_time

        updated = message_user_service.read_message(1, [message.id])

        assert updated == 0
        assert MessageUser.objects.get(message=message).read_time == first_read

    def test_count_unread(self):
        """Test counting unread messages."""
        create_message(recipient_ids=[7])
        create_message(recipient_ids=[7, 8])

        assert message_user_service.count_unread_by_user_id(7) == 2
        assert message_user_service.count_unread_by_user_id(99) == 0

"""Service for user lookups shared by other services."""

import structlog

from core.models import User
from core.validation import check_utils

logger = structlog.get_logger(__name__)


class UserService:
    """Read-side user operations."""

    def get_nickname_by_id(self, user_id: int) -> str:
        """Get the nickname of a user.

        Args:
            user_id: ID of the user.

        Returns:
            The user's nickname.

        Raises:
            ServiceError: If no user with the given ID exists.
        """
        user = User.objects.filter(id=user_id).only("id", "nickname").first()
        check_utils.throw_if_not_exists(user, User.__name__, "ID", user_id)
        return user.nickname


# Singleton instance for use throughout the application
user_service = UserService()

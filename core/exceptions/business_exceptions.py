"""Business rule exceptions raised by the service layer."""


class BaseError(Exception):
    """Base exception carrying a user-facing message and HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        """Initialize the error.

        Args:
            message: Fully formatted, user-facing message
        """
        self.message = message
        super().__init__(message)


class ServiceError(BaseError):
    """A business rule was violated while serving a request (500).

    Raised by the check utilities. The kind of violation (not found, already
    exists, invalid input) lives only in the message text.
    """

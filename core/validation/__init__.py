"""Precondition checks that turn business rule violations into errors.

``validator`` holds the generic guards parameterized by exception type;
``check_utils`` binds them to ServiceError with ``{}`` message templates.
"""

from core.validation import check_utils, validator

__all__ = ["check_utils", "validator"]

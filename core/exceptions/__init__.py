"""Exception handling utilities for the admin service."""

from core.exceptions.business_exceptions import BaseError, ServiceError
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "BaseError",
    "ServiceError",
    "custom_exception_handler",
]

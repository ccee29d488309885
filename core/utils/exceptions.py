"""Helpers for turning failing lookups into absent values."""

from collections.abc import Callable
from typing import TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def ex_to_none(
    supplier: Callable[[], T],
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> T | None:
    """Call supplier and return its result, or None if it raises.

    Only the exception types given in ``exceptions`` are converted; anything
    else propagates. Use it around a single call whose failure must not abort
    the surrounding operation.

    Args:
        supplier: Zero-argument callable producing the value.
        exceptions: Exception types mapped to None.

    Returns:
        The supplier's result, or None on a handled failure.
    """
    try:
        return supplier()
    except exceptions as e:
        logger.debug(
            "Lookup failed, using empty value",
            error=str(e),
            error_type=type(e).__name__,
        )
        return None

"""Generic guard functions parameterized by the exception type to raise.

Every guard raises ``exception_type(message)`` when its condition holds and
returns None otherwise. Guards keep no state and never log.
"""

from collections.abc import Callable, Sized
from typing import Any

from core.exceptions.business_exceptions import BaseError

ExceptionType = type[BaseError]


def is_empty(obj: Any) -> bool:
    """Return True for None and for zero-length strings or collections."""
    if obj is None:
        return True
    if isinstance(obj, Sized):
        return len(obj) == 0
    return False


def is_blank(text: str | None) -> bool:
    """Return True for None, empty or whitespace-only text."""
    return text is None or not text.strip()


def equals_ignore_case(str1: str | None, str2: str | None) -> bool:
    """Compare two strings character by character, ignoring case.

    Strings of different lengths are never equal, so expansions such as
    "ß" to "SS" do not count. Two Nones are equal.
    """
    if str1 is None or str2 is None:
        return str1 is None and str2 is None
    if len(str1) != len(str2):
        return False
    return all(
        c1 == c2 or c1.upper() == c2.upper() or c1.lower() == c2.lower()
        for c1, c2 in zip(str1, str2, strict=True)
    )


def throw_if(condition: bool, message: str, exception_type: ExceptionType) -> None:
    """Raise when condition is true."""
    if condition:
        raise exception_type(message)


def throw_if_lazy(
    supplier: Callable[[], bool], message: str, exception_type: ExceptionType
) -> None:
    """Raise when supplier() returns true; supplier is called exactly once."""
    if supplier():
        raise exception_type(message)


def throw_if_null(obj: Any, message: str, exception_type: ExceptionType) -> None:
    """Raise when obj is None."""
    throw_if(obj is None, message, exception_type)


def throw_if_not_null(obj: Any, message: str, exception_type: ExceptionType) -> None:
    """Raise when obj is not None."""
    throw_if(obj is not None, message, exception_type)


def throw_if_empty(obj: Any, message: str, exception_type: ExceptionType) -> None:
    """Raise when obj is None or has zero length."""
    throw_if(is_empty(obj), message, exception_type)


def throw_if_not_empty(obj: Any, message: str, exception_type: ExceptionType) -> None:
    """Raise when obj has at least one element or character."""
    throw_if(not is_empty(obj), message, exception_type)


def throw_if_blank(
    text: str | None, message: str, exception_type: ExceptionType
) -> None:
    """Raise when text is None, empty or whitespace only."""
    throw_if(is_blank(text), message, exception_type)


def throw_if_not_blank(
    text: str | None, message: str, exception_type: ExceptionType
) -> None:
    """Raise when text contains a non-whitespace character."""
    throw_if(not is_blank(text), message, exception_type)


def throw_if_equal(
    obj1: Any, obj2: Any, message: str, exception_type: ExceptionType
) -> None:
    """Raise when the two objects are equal."""
    throw_if(obj1 == obj2, message, exception_type)


def throw_if_not_equal(
    obj1: Any, obj2: Any, message: str, exception_type: ExceptionType
) -> None:
    """Raise when the two objects differ."""
    throw_if(obj1 != obj2, message, exception_type)


def throw_if_equal_ignore_case(
    str1: str | None, str2: str | None, message: str, exception_type: ExceptionType
) -> None:
    """Raise when the two strings are equal ignoring case."""
    throw_if(equals_ignore_case(str1, str2), message, exception_type)


def throw_if_not_equal_ignore_case(
    str1: str | None, str2: str | None, message: str, exception_type: ExceptionType
) -> None:
    """Raise when the two strings differ ignoring case."""
    throw_if(not equals_ignore_case(str1, str2), message, exception_type)

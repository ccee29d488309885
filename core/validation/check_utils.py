"""Business parameter checks that raise ServiceError.

Each guard takes a message template whose ``{}`` placeholders are filled
positionally from ``*params`` (a None template renders as "null") and
delegates to the matching guard in ``core.validation.validator``.

Example:
    >>> throw_if_blank(username, "{} must not be blank", "username")
"""

from collections.abc import Callable
from typing import Any

from core.exceptions.business_exceptions import ServiceError
from core.utils.strings import format_template, strip_suffix
from core.validation import validator

EXCEPTION_TYPE = ServiceError

# Trailing markers removed from entity names in exists / not-exists messages
ENTITY_NAME_SUFFIXES = ("DO", "Record")

EXISTS_TEMPLATE = "{} with value [{}] of {} already exists"
NOT_EXISTS_TEMPLATE = "{} with value [{}] of {} does not exist"


def throw_if_exists(
    obj: Any, entity_name: str, field_name: str, field_value: Any
) -> None:
    """Raise if the looked-up record exists.

    Args:
        obj: Result of the lookup (None when no record was found)
        entity_name: Entity name, e.g. "UserDO"
        field_name: Name of the field that was searched on
        field_value: Value that was searched for
    """
    message = format_template(
        EXISTS_TEMPLATE,
        field_name,
        field_value,
        strip_suffix(entity_name, ENTITY_NAME_SUFFIXES),
    )
    validator.throw_if_not_null(obj, message, EXCEPTION_TYPE)


def throw_if_not_exists(
    obj: Any, entity_name: str, field_name: str, field_value: Any
) -> None:
    """Raise if the looked-up record does not exist.

    Args:
        obj: Result of the lookup (None when no record was found)
        entity_name: Entity name, e.g. "MessageDO"
        field_name: Name of the field that was searched on
        field_value: Value that was searched for
    """
    message = format_template(
        NOT_EXISTS_TEMPLATE,
        field_name,
        field_value,
        strip_suffix(entity_name, ENTITY_NAME_SUFFIXES),
    )
    validator.throw_if_null(obj, message, EXCEPTION_TYPE)


def throw_if_null(obj: Any, template: str | None, *params: Any) -> None:
    """Raise if obj is None."""
    validator.throw_if_null(obj, format_template(template, *params), EXCEPTION_TYPE)


def throw_if_not_null(obj: Any, template: str | None, *params: Any) -> None:
    """Raise if obj is not None."""
    validator.throw_if_not_null(
        obj, format_template(template, *params), EXCEPTION_TYPE
    )


def throw_if_empty(obj: Any, template: str | None, *params: Any) -> None:
    """Raise if obj is None or an empty string, collection or mapping."""
    validator.throw_if_empty(obj, format_template(template, *params), EXCEPTION_TYPE)


def throw_if_not_empty(obj: Any, template: str | None, *params: Any) -> None:
    """Raise if obj has at least one element or character."""
    validator.throw_if_not_empty(
        obj, format_template(template, *params), EXCEPTION_TYPE
    )


def throw_if_blank(text: str | None, template: str | None, *params: Any) -> None:
    """Raise if text is None, empty or whitespace only."""
    validator.throw_if_blank(text, format_template(template, *params), EXCEPTION_TYPE)


def throw_if_not_blank(text: str | None, template: str | None, *params: Any) -> None:
    """Raise if text contains a non-whitespace character."""
    validator.throw_if_not_blank(
        text, format_template(template, *params), EXCEPTION_TYPE
    )


def throw_if_equal(obj1: Any, obj2: Any, template: str | None, *params: Any) -> None:
    """Raise if the two objects are equal."""
    validator.throw_if_equal(
        obj1, obj2, format_template(template, *params), EXCEPTION_TYPE
    )


def throw_if_not_equal(
    obj1: Any, obj2: Any, template: str | None, *params: Any
) -> None:
    """Raise if the two objects differ."""
    validator.throw_if_not_equal(
        obj1, obj2, format_template(template, *params), EXCEPTION_TYPE
    )


def throw_if_equal_ignore_case(
    str1: str | None, str2: str | None, template: str | None, *params: Any
) -> None:
    """Raise if the two strings are equal ignoring case."""
    validator.throw_if_equal_ignore_case(
        str1, str2, format_template(template, *params), EXCEPTION_TYPE
    )


def throw_if_not_equal_ignore_case(
    str1: str | None, str2: str | None, template: str | None, *params: Any
) -> None:
    """Raise if the two strings differ ignoring case."""
    validator.throw_if_not_equal_ignore_case(
        str1, str2, format_template(template, *params), EXCEPTION_TYPE
    )


def throw_if(
    condition: bool | Callable[[], bool], template: str | None, *params: Any
) -> None:
    """Raise if condition holds.

    A callable condition is only evaluated here, once, so expensive checks
    are skipped when an earlier guard already failed.
    """
    if callable(condition):
        throw_if_lazy(condition, template, *params)
        return
    validator.throw_if(condition, format_template(template, *params), EXCEPTION_TYPE)


def throw_if_lazy(
    supplier: Callable[[], bool], template: str | None, *params: Any
) -> None:
    """Raise if supplier() returns a truthy value."""
    validator.throw_if_lazy(
        supplier, format_template(template, *params), EXCEPTION_TYPE
    )

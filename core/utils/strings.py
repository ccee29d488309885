"""String helpers shared by the validation and service layers."""

from typing import Any

PLACEHOLDER = "{}"
NULL_TEXT = "null"


def to_text(value: Any) -> str:
    """Return the display form of a value, rendering None as "null"."""
    if value is None:
        return NULL_TEXT
    return str(value)


def format_template(template: str | None, *args: Any) -> str:
    """Substitute positional ``{}`` placeholders in a message template.

    Placeholders are replaced left to right by the next argument. Extra
    arguments are ignored and placeholders without a matching argument are
    left as-is. Substituted text is never rescanned for placeholders.

    Args:
        template: Message template, may be None.
        *args: Values substituted in order.

    Returns:
        The formatted message, or "null" when the template is None.

    Examples:
        >>> format_template("{} with value [{}]", "username", "admin")
        'username with value [admin]'
        >>> format_template("{} and {}", "one")
        'one and {}'
    """
    if template is None:
        return NULL_TEXT
    if not args or PLACEHOLDER not in template:
        return template

    segments = template.split(PLACEHOLDER)
    parts = [segments[0]]
    for index, segment in enumerate(segments[1:]):
        if index < len(args):
            parts.append(to_text(args[index]))
        else:
            parts.append(PLACEHOLDER)
        parts.append(segment)
    return "".join(parts)


def strip_suffix(text: str | None, suffixes: tuple[str, ...]) -> str:
    """Remove the first matching suffix from text.

    The text is returned unchanged when it only consists of the suffix.
    """
    if text is None:
        return NULL_TEXT
    for suffix in suffixes:
        if text.endswith(suffix) and len(text) > len(suffix):
            return text[: -len(suffix)]
    return text

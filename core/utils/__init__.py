"""Utility helpers for the core app."""

from core.utils.exceptions import ex_to_none
from core.utils.strings import format_template, strip_suffix, to_text

__all__ = ["ex_to_none", "format_template", "strip_suffix", "to_text"]

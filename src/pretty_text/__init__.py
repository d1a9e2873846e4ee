"""Display names and text helpers for the skills plugin."""

from pretty_text.exceptions import InvalidCategoryKeyError, PrettyTextError
from pretty_text.formatting import FormatCache, capitalize, format_cached, prettify
from pretty_text.registry import DisplayNameRegistry, get_registry
from pretty_text.utils.strings import (
    build_string_after_nth_element,
    format_percent,
    is_double,
    is_int,
    ticks_to_seconds,
)

__all__ = [
    "DisplayNameRegistry",
    "FormatCache",
    "InvalidCategoryKeyError",
    "PrettyTextError",
    "build_string_after_nth_element",
    "capitalize",
    "format_cached",
    "format_percent",
    "get_registry",
    "is_double",
    "is_int",
    "prettify",
    "ticks_to_seconds",
]

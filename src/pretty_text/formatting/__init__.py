"""Display-name formatting: capitalization rules and per-category caches."""

from pretty_text.formatting.cache import FormatCache, format_cached, textual_form
from pretty_text.formatting.prettify import capitalize, prettify

__all__ = ["FormatCache", "capitalize", "format_cached", "prettify", "textual_form"]

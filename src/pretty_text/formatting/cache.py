"""Memoized display names, one cache per category domain.

A ``FormatCache`` maps category keys (usually enum members) to their pretty
string. Entries are filled lazily, never evicted and never overwritten, so a
key always resolves to the same string for the lifetime of the process.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable, Iterable
from enum import Enum
from typing import Generic, TypeVar

from pretty_text.exceptions import InvalidCategoryKeyError
from pretty_text.formatting.prettify import prettify

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def textual_form(key: object) -> str:
    """Canonical text of a category key: the member name for enums."""
    if isinstance(key, Enum):
        return key.name
    return str(key)


class FormatCache(Generic[K]):
    """Get-or-compute cache of pretty strings keyed by category value.

    Reads go straight to the backing dict. Misses compute outside the lock
    and insert with ``setdefault`` under it, so concurrent first writers for
    the same key may both compute but all of them return the stored value.
    """

    def __init__(
        self,
        name: str,
        formatter: Callable[[str], str] = prettify,
    ) -> None:
        self.name = name
        self._formatter = formatter
        self._entries: dict[K, str] = {}
        self._lock = threading.Lock()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FormatCache(name={self.name!r}, size={len(self._entries)})"

    def peek(self, key: K) -> str | None:
        """Return the cached value without filling the cache."""
        return self._entries.get(key)

    def get(self, key: K | None) -> str:
        if key is None:
            raise InvalidCategoryKeyError(self.name)

        cached = self._entries.get(key)
        if cached is not None:
            return cached

        value = self._formatter(textual_form(key))
        with self._lock:
            stored = self._entries.setdefault(key, value)
        if stored is value:
            logger.debug("Cached %s display name %r -> %r", self.name, key, value)
        return stored

    def warm(self, keys: Iterable[K]) -> int:
        """Pre-fill the cache, returning how many entries were added."""
        before = len(self._entries)
        for key in keys:
            self.get(key)
        added = len(self._entries) - before
        logger.debug("Warmed %s cache with %d entries", self.name, added)
        return added


def format_cached(key: K | None, cache: FormatCache[K]) -> str:
    """Return the display name for ``key``, computing it at most once per cache."""
    return cache.get(key)

"""
Parse cache - string-keyed memo for name parsing.

Parsing the same names over and over is the common case (chord tones,
scale degrees, ranges), so parse results are kept per exact input string.
The cache is an explicit object: whoever owns it decides its lifetime.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from typing import Generic, TypeVar

from chuk_tonal.constants import ErrorMessages

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class ParseCache(Generic[T]):
    """
    Thread-safe insert-if-absent cache keyed by exact string.

    With max_size=None the cache never evicts: entries live as long as the
    cache does. With a max_size the least recently used entry is evicted.
    Failed parses (None) are cached like any other result.

    Two threads racing on the same key may both compute it; the first
    insert wins and both get the same value back.
    """

    def __init__(self, max_size: int | None = None) -> None:
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries, or None for unbounded
        """
        if max_size is not None and (isinstance(max_size, bool) or max_size < 1):
            raise ValueError(ErrorMessages.INVALID_CACHE_SIZE.format(size=max_size))
        self.max_size = max_size
        self._entries: OrderedDict[str, T | None] = OrderedDict()
        self._lock = threading.Lock()

    def get_or_compute(self, key: str, compute: Callable[[str], T | None]) -> T | None:
        """
        Get the cached result for a key, computing and storing it if absent.

        The computation runs outside the lock.
        """
        with self._lock:
            value = self._entries.get(key, _MISSING)
            if value is not _MISSING:
                if self.max_size is not None:
                    self._entries.move_to_end(key)
                return value  # type: ignore[return-value]

        result = compute(key)

        with self._lock:
            existing = self._entries.get(key, _MISSING)
            if existing is not _MISSING:
                return existing  # type: ignore[return-value]
            self._entries[key] = result
            if self.max_size is not None and len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted {evicted!r} from parse cache")
        return result

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

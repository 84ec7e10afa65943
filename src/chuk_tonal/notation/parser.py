"""
Name parser - strings to encoded pitches.

Wraps the note and interval grammars with one ParseCache each. Parse
failures are results (None), never exceptions.
"""

from __future__ import annotations

import logging

from chuk_tonal.config import get_config
from chuk_tonal.core.pitch import Pitch
from chuk_tonal.notation.cache import ParseCache
from chuk_tonal.notation.grammar import parse_interval_name, parse_note_name

logger = logging.getLogger(__name__)


def _encode_note(name: str) -> Pitch | None:
    parsed = parse_note_name(name)
    return parsed.encode() if parsed else None


def _encode_interval(name: str) -> Pitch | None:
    parsed = parse_interval_name(name)
    return parsed.encode() if parsed else None


class NameParser:
    """
    Parses note and interval names into encoded pitches.

    Each parser owns its caches, so their lifetime is the parser's
    lifetime. Pass cache_size to bound them (least recently used entries
    are evicted), or leave it None to keep every result.
    """

    def __init__(self, cache_size: int | None = None) -> None:
        """
        Initialize the parser.

        Args:
            cache_size: Max entries per cache, None for unbounded
        """
        self.notes: ParseCache[Pitch] = ParseCache(cache_size)
        self.intervals: ParseCache[Pitch] = ParseCache(cache_size)

    def note(self, name: object) -> Pitch | None:
        """Parse a note name ('C', 'Db3') into a pitch class or note pitch."""
        if not isinstance(name, str):
            return None
        return self.notes.get_or_compute(name, _encode_note)

    def interval(self, name: object) -> Pitch | None:
        """Parse an interval name ('M3', '-P8') into an interval pitch."""
        if not isinstance(name, str):
            return None
        return self.intervals.get_or_compute(name, _encode_interval)

    def pitch(self, name: object) -> Pitch | None:
        """Parse a note name, or failing that an interval name."""
        result = self.note(name)
        return result if result is not None else self.interval(name)

    def is_note_name(self, name: object) -> bool:
        return self.note(name) is not None

    def is_interval_name(self, name: object) -> bool:
        return self.interval(name) is not None

    def clear(self) -> None:
        """Drop every cached result."""
        self.notes.clear()
        self.intervals.clear()


_parser: NameParser | None = None


def get_parser() -> NameParser:
    """
    Get the default parser used by the module-level functions.

    Built on first use from the active config's cache_size.
    """
    global _parser
    if _parser is None:
        cache_size = get_config().cache_size
        logger.debug(f"Creating default name parser (cache_size={cache_size})")
        _parser = NameParser(cache_size)
    return _parser


def set_parser(parser: NameParser) -> None:
    """Inject the parser used by the module-level functions."""
    global _parser
    _parser = parser


def reset_parser() -> None:
    """Drop the default parser; the next get_parser() builds a fresh one."""
    global _parser
    _parser = None


def parse_note(name: object) -> Pitch | None:
    """Parse a note name with the default parser."""
    return get_parser().note(name)


def parse_interval(name: object) -> Pitch | None:
    """Parse an interval name with the default parser."""
    return get_parser().interval(name)


def parse_pitch(name: object) -> Pitch | None:
    """Parse a note or interval name with the default parser."""
    return get_parser().pitch(name)


def is_note_str(name: object) -> bool:
    return get_parser().is_note_name(name)


def is_interval_str(name: object) -> bool:
    return get_parser().is_interval_name(name)

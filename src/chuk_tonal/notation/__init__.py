"""
Name parsing - strings in, encoded pitches out.

- grammar: Lark grammars for note names and interval shorthand
- cache: ParseCache, the explicit string-keyed memo
- parser: NameParser and the default-parser functions
"""

from chuk_tonal.notation.cache import ParseCache
from chuk_tonal.notation.grammar import parse_interval_name, parse_note_name
from chuk_tonal.notation.parser import (
    NameParser,
    get_parser,
    is_interval_str,
    is_note_str,
    parse_interval,
    parse_note,
    parse_pitch,
    reset_parser,
    set_parser,
)

__all__ = [
    "ParseCache",
    "NameParser",
    "parse_note_name",
    "parse_interval_name",
    "get_parser",
    "set_parser",
    "reset_parser",
    "parse_note",
    "parse_interval",
    "parse_pitch",
    "is_note_str",
    "is_interval_str",
]

"""Grammars for note names and interval shorthand using Lark."""

from __future__ import annotations

import logging

from lark import Lark, Transformer
from lark.exceptions import LarkError

from chuk_tonal.constants import LETTERS
from chuk_tonal.core.quality import interval_type, quality_to_alt
from chuk_tonal.models.names import ParsedInterval, ParsedNote

logger = logging.getLogger(__name__)

# Scientific note notation: letter, accidentals, optional octave.
# '#' raises a semitone, 'b' lowers one and 'x' is a double sharp.
NOTE_GRAMMAR = r"""
start: LETTER ACCIDENTALS? OCTAVE?

LETTER: /[a-gA-G]/
ACCIDENTALS: /#+|b+|x+/
OCTAVE: /-?\d+/
"""

# Interval shorthand: optional sign, then quality and number in either order
# ("M3", "-P8", "3M", "-8P").
INTERVAL_GRAMMAR = r"""
start: SIGN? (QUALITY NUMBER | NUMBER QUALITY)

SIGN: /[-+]/
QUALITY: /A+|d+|P|M|m/
NUMBER: /\d+/
"""


def _accidentals_to_alt(acc: str) -> int:
    if not acc:
        return 0
    if acc[0] == "b":
        return -len(acc)
    if acc[0] == "x":
        return 2 * len(acc)
    return len(acc)


class NoteTransformer(Transformer):
    """Transform a parsed note name into a ParsedNote."""

    def start(self, items):
        parts = {token.type: str(token) for token in items if token is not None}
        octave = parts.get("OCTAVE")
        return ParsedNote(
            step=LETTERS.index(parts["LETTER"].upper()),
            alt=_accidentals_to_alt(parts.get("ACCIDENTALS", "")),
            oct=int(octave) if octave is not None else None,
        )


class IntervalTransformer(Transformer):
    """Transform a parsed interval name into a ParsedInterval (or None)."""

    def start(self, items):
        parts = {token.type: str(token) for token in items if token is not None}
        num = int(parts["NUMBER"])
        if num < 1:
            return None

        step = (num - 1) % 7
        quality = parts["QUALITY"]
        alt = quality_to_alt(interval_type(num), quality)
        if alt is None:
            # e.g. "P3" or "M5": the quality is not on this number's axis
            return None

        return ParsedInterval(
            num=num,
            simple=step + 1,
            quality=quality,
            alt=alt,
            oct=(num - 1) // 7,
            dir=-1 if parts.get("SIGN") == "-" else 1,
        )


_note_parser = Lark(NOTE_GRAMMAR)
_interval_parser = Lark(INTERVAL_GRAMMAR)


def parse_note_name(name: object) -> ParsedNote | None:
    """Parse a note name like 'C', 'db3' or 'Gx4'.

    Args:
        name: The note name. Surrounding whitespace is ignored

    Returns:
        The parsed parts, or None if the name is not a note
    """
    if not isinstance(name, str):
        return None
    try:
        tree = _note_parser.parse(name.strip())
    except LarkError:
        logger.debug(f"Not a note name: {name!r}")
        return None
    return NoteTransformer().transform(tree)


def parse_interval_name(name: object) -> ParsedInterval | None:
    """Parse an interval name like 'M3', '-P8' or '9m'.

    Args:
        name: The interval name. Surrounding whitespace is ignored

    Returns:
        The parsed parts, or None if the name is not an interval
    """
    if not isinstance(name, str):
        return None
    try:
        tree = _interval_parser.parse(name.strip())
    except LarkError:
        logger.debug(f"Not an interval name: {name!r}")
        return None
    return IntervalTransformer().transform(tree)

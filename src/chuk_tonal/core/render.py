"""
Name rendering - pitches back to strings.

Notes render in scientific notation ("C", "Db3", "G##4").
Intervals render in shorthand: sign, quality, number ("P8", "M3", "-M2").
"""

from __future__ import annotations

from chuk_tonal.constants import LETTERS
from chuk_tonal.core.pitch import (
    DecodedPitch,
    IntervalPitch,
    NotePitch,
    PitchClass,
    decode,
)
from chuk_tonal.core.quality import alt_to_quality, interval_type


def to_letter(step: int) -> str:
    """Letter name of a step (0 = C)."""
    return LETTERS[step % 7]


def to_accidentals(alt: int) -> str:
    """Accidentals string of an alteration: -2 = 'bb', 1 = '#'."""
    return ("b" if alt < 0 else "#") * abs(alt)


def str_note(pitch: object) -> str | None:
    """
    Get the scientific notation of a pitch class or note pitch.

    Intervals (and anything that is not a pitch) return None.
    """
    if not isinstance(pitch, (PitchClass, NotePitch)):
        return None
    p = decode(pitch)
    octave = "" if p.oct is None else str(p.oct)
    return to_letter(p.step) + to_accidentals(p.alt) + octave


def interval_number(p: DecodedPitch) -> int:
    """Interval number (1 = unison) of a decoded interval."""
    if p.dir == 1:
        return p.step + 1 + 7 * p.oct
    return (8 - p.step) - 7 * (p.oct + 1)


def interval_alt(p: DecodedPitch) -> int:
    """Quality alteration of a decoded interval, relative to its own direction."""
    if p.dir == 1:
        return p.alt
    if interval_type(p.step + 1) == "P":
        return -p.alt
    # descending imperfect intervals invert around the minor quality
    return -(p.alt + 1)


def str_ivl(pitch: object) -> str | None:
    """
    Get the shorthand notation of an interval.

    Returns None for anything that is not an interval, or for an interval
    whose direction contradicts its size.
    """
    if not isinstance(pitch, IntervalPitch):
        return None
    p = decode(pitch)
    num = interval_number(p)
    if num < 1:
        return None
    sign = "-" if p.dir < 0 else ""
    return sign + alt_to_quality(num, interval_alt(p)) + str(num)


def str_pitch(pitch: object) -> str | None:
    """Render any pitch: intervals as shorthand, notes in scientific notation."""
    if isinstance(pitch, IntervalPitch):
        return str_ivl(pitch)
    return str_note(pitch)

"""
Pitch properties and single-pitch transforms.

    note("db3")      = "Db3"
    pc("Db3")        = "Db"
    chroma("Db3")    = 1
    simplify("M9")   = "M2"
    semitones("P5")  = 7
"""

from __future__ import annotations

from chuk_tonal.algebra.conversions import interval_fn, note_fn, pitch_fn
from chuk_tonal.core.pitch import (
    FIFTH_OCTS,
    IntervalPitch,
    NotePitch,
    Pitch,
    PitchClass,
    decode,
    decode_alt,
    decode_step,
    fifths_octaves,
    height,
)
from chuk_tonal.core.quality import alt_to_quality
from chuk_tonal.core.render import interval_alt, interval_number, to_accidentals, to_letter


@note_fn
def note(p: Pitch) -> Pitch:
    """Canonical note name: note("c") = "C", note("gx4") = "G##4"."""
    return p


@note_fn
def pc(p: Pitch) -> Pitch:
    """Pitch class of a note: pc("Db3") = "Db"."""
    return PitchClass(p.fifths)


@pitch_fn
def chroma(p: Pitch) -> int:
    """Semitones above C within one octave (0-11)."""
    return 7 * p.fifths - 12 * fifths_octaves(p.fifths)


@note_fn
def letter(p: Pitch) -> str:
    return to_letter(decode(p).step)


@note_fn
def accidentals(p: Pitch) -> str:
    return to_accidentals(decode(p).alt)


@pitch_fn
def octave(p: Pitch) -> int | None:
    """
    Scientific octave of a note, octaves spanned by an interval, None for
    pitch classes.

    Intervals read like their names: octave("-M9") = 1.
    """
    if isinstance(p, IntervalPitch):
        return (interval_number(decode(p)) - 1) // 7
    return decode(p).oct


@pitch_fn
def semitones(p: Pitch) -> int | None:
    """
    Height in semitones.

    For intervals this is the signed size (semitones("-M2") = -2).
    Pitch classes have no height.
    """
    if isinstance(p, (NotePitch, IntervalPitch)):
        return height(p)
    return None


@interval_fn
def simplify(i: IntervalPitch) -> IntervalPitch:
    """
    Reduce a compound interval to a simple one, keeping quality and direction.

    Examples:
        simplify("M9") = "M2"
        simplify("-P15") = "-P1"
    """
    d = i.direction
    step = decode_step(d * i.fifths)
    alt = decode_alt(d * i.fifths)
    return IntervalPitch(i.fifths, -d * (FIFTH_OCTS[step] + 4 * alt), d)


@interval_fn
def simplify_asc(i: IntervalPitch) -> IntervalPitch:
    """
    Simplify, then express a descending result as the ascending interval
    an octave up: simplify_asc("-M2") = "m7".
    """
    s = simplify(i)
    if s.direction == 1:
        return s
    return IntervalPitch(s.fifths, s.octave + 1, 1)


@interval_fn
def number(i: IntervalPitch) -> int:
    """Interval number: number("-M9") = 9."""
    return interval_number(decode(i))


@interval_fn
def simple_number(i: IntervalPitch) -> int:
    """Interval number reduced to a simple interval (1-7)."""
    return (interval_number(decode(i)) - 1) % 7 + 1


@interval_fn
def quality(i: IntervalPitch) -> str:
    """Quality token: quality("-m3") = "m"."""
    p = decode(i)
    return alt_to_quality(interval_number(p), interval_alt(p))

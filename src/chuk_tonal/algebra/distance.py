"""
Pitch distances - transposition and intervals between pitches.

Both operations work directly on the encoded form: transposing adds
fifths and octaves, the distance subtracts them.

    transpose("C4", "P5")  = "G4"
    distance("C2", "C3")   = "P8"
    distance("G", "B")     = "M3"
    distance("M2", "P5")   = "P4"
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from chuk_tonal.algebra.conversions import as_pitch, to_interval_str, to_pitch_str
from chuk_tonal.core.pitch import (
    IntervalPitch,
    NotePitch,
    Pitch,
    PitchClass,
    fifths_octaves,
    interval_pitch,
    is_pitch,
)


def _shift(interval: IntervalPitch, p: Pitch) -> Pitch:
    """Shift p by interval. The result has the same variant as p."""
    f = interval.fifths + p.fifths
    if isinstance(p, PitchClass):
        return PitchClass(f)
    o = interval.octave + p.octave
    if isinstance(p, NotePitch):
        return NotePitch(f, o)
    return interval_pitch(f, o)


def transpose(a: Any, b: Any) -> Any:
    """
    Transpose a pitch by an interval, or add two intervals.

    Either argument may be the interval; if both are intervals they are
    added. Names in give names out; pitches in give a pitch out.

    Returns:
        The transposed pitch, or None if neither argument is an interval
        or either cannot be parsed
    """
    pa = as_pitch(a)
    pb = as_pitch(b)
    result = None
    if pa is not None and pb is not None:
        if isinstance(pa, IntervalPitch):
            result = _shift(pa, pb)
        elif isinstance(pb, IntervalPitch):
            result = _shift(pb, pa)

    if is_pitch(a) and is_pitch(b):
        return result
    return to_pitch_str(result)


tr = transpose


def transpose_by(a: Any) -> Callable[[Any], Any]:
    """
    Partially apply transpose.

    Example:
        [transpose_by("M3")(n) for n in ["C", "D"]] = ["E", "F#"]
    """
    return lambda b: transpose(a, b)


def _subtract(a: Pitch, b: Pitch) -> IntervalPitch | None:
    if type(a) is not type(b):
        return None
    df = b.fifths - a.fifths
    if isinstance(a, PitchClass):
        # pitch class distances are always ascending and within an octave
        return IntervalPitch(df, -fifths_octaves(df), 1)
    return interval_pitch(df, b.octave - a.octave)  # type: ignore[union-attr]


def distance(a: Any, b: Any) -> Any:
    """
    Find the interval between two pitches of the same kind.

    Distances between pitch classes are always ascending. Distances between
    intervals subtract one from the other.

    Returns:
        The interval, or None if the pitches are of different kinds or
        cannot be parsed
    """
    pa = as_pitch(a)
    pb = as_pitch(b)
    if pa is None or pb is None:
        return None
    result = _subtract(pa, pb)
    if is_pitch(a) and is_pitch(b):
        return result
    return to_interval_str(result)


interval = distance


def distance_from(a: Any) -> Callable[[Any], Any]:
    """
    Partially apply distance.

    Example:
        [distance_from("C")(n) for n in ["E", "G"]] = ["M3", "P5"]
    """
    return lambda b: distance(a, b)


def fifths_from(tonic: Any, n: int) -> Any:
    """
    Transpose a tonic a number of perfect fifths.

    Examples:
        fifths_from("C", 2) = "D"
        fifths_from("C", -1) = "F"
    """
    return transpose(tonic, interval_pitch(n, 0))

"""
List utilities - ranges, sorting and harmonizers.

Lists can be Python sequences or strings separated by spaces, commas or
bars ("C D E", "C, D, E", "C | D | E"). Entries that cannot be parsed or
transformed are dropped rather than failing the whole list.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from functools import cmp_to_key
from typing import Any

from chuk_tonal.algebra.conversions import as_pitch, to_pitch_str
from chuk_tonal.algebra.distance import transpose_by
from chuk_tonal.algebra.midi import from_midi, midi
from chuk_tonal.core.pitch import Pitch, has_octave, is_pitch

_SEPARATOR = re.compile(r"\s*\|\s*|\s*,\s*|\s+")

Comparator = Callable[[Pitch, Pitch], int]


def as_list(src: Any) -> list[Any]:
    """
    Get a list from a list, a separated string or a single value.

    Examples:
        as_list("C D  E") = ["C", "D", "E"]
        as_list("C, D|E") = ["C", "D", "E"]
        as_list(None) = []
    """
    if isinstance(src, (list, tuple)):
        return list(src)
    if isinstance(src, str):
        stripped = src.strip()
        return _SEPARATOR.split(stripped) if stripped else []
    if src is None:
        return []
    return [src]


def map_list(fn: Callable[[Any], Any], src: Any) -> list[Any]:
    return [fn(x) for x in as_list(src)]


def filter_list(fn: Callable[[Any], Any], src: Any) -> list[Any]:
    return [x for x in as_list(src) if fn(x)]


def map_with(fn: Callable[[Any], Any]) -> Callable[[Any], list[Any]]:
    """Partially apply map_list."""
    return lambda src: map_list(fn, src)


def filter_with(fn: Callable[[Any], Any]) -> Callable[[Any], list[Any]]:
    """Partially apply filter_list."""
    return lambda src: filter_list(fn, src)


def _list_to_str(value: Any) -> Any:
    if is_pitch(value):
        return to_pitch_str(value)
    if isinstance(value, list):
        return [to_pitch_str(v) for v in value]
    return value


def list_fn(fn: Callable[[list[Pitch | None]], Any]) -> Callable[[Any], Any]:
    """
    Decorate a function on pitch lists to work on name lists.

    Every entry is parsed (unparseable entries become None) and pitch
    results are rendered back to names.
    """

    def wrapper(src: Any) -> Any:
        return _list_to_str(fn([as_pitch(x) for x in as_list(src)]))

    return wrapper


# Harmonizers


def harmonizer(src: Any) -> Callable[[Any], list[Any]]:
    """
    Create a harmonizer: a function that transposes a list by a pitch.

    Example:
        harmonizer("P1 M3 P5")("C4") = ["C4", "E4", "G4"]
    """

    def harmonize_with(pitch: Any = None) -> list[Any]:
        shift = transpose_by(pitch or "P1")
        return list_fn(lambda items: [r for r in map(shift, items) if r is not None])(src)

    return harmonize_with


def harmonize(src: Any, pitch: Any = None) -> list[Any]:
    """
    Transpose every entry of a list by a pitch (default unison).

    Examples:
        harmonize("P1 M3 P5", "C") = ["C", "E", "G"]
        harmonize("C E G", "M2") = ["D", "F#", "A"]
    """
    return harmonizer(src)(pitch)


# Ranges


def _as_midi(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return midi(value)


def midi_range(a: Any, b: Any) -> list[int]:
    """
    Create an inclusive range of MIDI numbers between two notes or numbers.

    Examples:
        midi_range("C4", "E4") = [60, 61, 62, 63, 64]
        midi_range(62, 60) = [62, 61, 60]
    """
    ma = _as_midi(a)
    mb = _as_midi(b)
    if ma is None or mb is None:
        return []
    if ma < mb:
        return list(range(ma, mb + 1))
    return list(range(ma, mb - 1, -1))


def note_range(fn: Callable[[int], Any], a: Any, b: Any) -> list[Any]:
    """Map fn over a MIDI range, dropping entries it cannot render."""
    return [x for x in map(fn, midi_range(a, b)) if x is not None]


def chromatic(a: Any, b: Any) -> list[str]:
    """
    Create a range of chromatic notes (spelled with flats).

    Example:
        chromatic("C2", "E2") = ["C2", "Db2", "D2", "Eb2", "E2"]
    """
    return note_range(from_midi, a, b)


# Sorting


def sort_height(p: Pitch | None) -> float:
    """
    Height used for sorting.

    Pitch classes sit in a band below every note, ordered by chroma.
    """
    if p is None:
        return -math.inf
    f = p.fifths * 7
    o = p.octave if has_octave(p) else -(f // 12) - 10  # type: ignore[union-attr]
    return f + o * 12


def sort_pitches(comparator: bool | Comparator | None, src: Any) -> list[Any]:
    """
    Sort a list of pitches by height. Unparseable entries are dropped.

    Args:
        comparator: True or None for ascending, False for descending, or a
            compare function on two pitches
        src: The list to sort

    Example:
        sort_pitches(True, "D4 C4 G3") = ["G3", "C4", "D4"]
    """

    def sort(items: list[Pitch | None]) -> list[Pitch]:
        pitches = [p for p in items if p is not None]
        if comparator is True or comparator is None:
            return sorted(pitches, key=sort_height)
        if comparator is False:
            return sorted(pitches, key=sort_height, reverse=True)
        return sorted(pitches, key=cmp_to_key(comparator))

    return list_fn(sort)(src)


def sort_with(comparator: bool | Comparator | None) -> Callable[[Any], list[Any]]:
    """Partially apply sort_pitches."""
    return lambda src: sort_pitches(comparator, src)

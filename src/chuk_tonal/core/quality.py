"""
Interval quality convention.

Perfectable intervals (unison, fourth, fifth, octave) move along the
d - P - A axis. The others (second, third, sixth, seventh) move along
d - m - M - A. Alterations are counted from P or M:

    type P:  ... dd=-2  d=-1  P=0  A=1  AA=2 ...
    type M:  ... dd=-3  d=-2  m=-1  M=0  A=1 ...
"""

from __future__ import annotations

import re

from chuk_tonal.constants import INTERVAL_TYPES, IntervalType

_AUGMENTED = re.compile(r"^A+$")
_DIMINISHED = re.compile(r"^d+$")


def interval_type(num: int) -> IntervalType:
    """Quality axis ('P' or 'M') of an interval number (sign ignored)."""
    return "P" if INTERVAL_TYPES[(abs(num) - 1) % 7] == "P" else "M"


def alt_to_quality(num: int, alt: int) -> str:
    """
    Quality token for an interval number and alteration.

    Examples:
        alt_to_quality(3, 0) = "M"
        alt_to_quality(3, -1) = "m"
        alt_to_quality(5, -1) = "d"
        alt_to_quality(4, 2) = "AA"
    """
    kind = interval_type(num)
    if alt == 0:
        return kind
    if alt == -1 and kind == "M":
        return "m"
    if alt > 0:
        return "A" * alt
    return "d" * abs(alt if kind == "P" else alt + 1)


def quality_to_alt(kind: IntervalType, quality: str) -> int | None:
    """
    Alteration of a quality token on the given axis.

    Returns None when the quality does not exist on that axis ("P" for a
    third, "m" for a fifth).
    """
    if quality == "M" and kind == "M":
        return 0
    if quality == "P" and kind == "P":
        return 0
    if quality == "m" and kind == "M":
        return -1
    if _AUGMENTED.match(quality):
        return len(quality)
    if _DIMINISHED.match(quality):
        return -len(quality) if kind == "P" else -len(quality) - 1
    return None

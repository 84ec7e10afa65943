"""
Constants and enums for the pitch system.

No magic numbers - the codec tables live here so every layer shares them.
"""

from enum import IntEnum
from typing import Literal


class Direction(IntEnum):
    """Interval direction. Never zero."""

    DESCENDING = -1
    ASCENDING = 1


# Letter step (C=0 .. B=6) to circle-of-fifths offset from C
# equivalent to: { C: 0, D: 2, E: 4, F: -1, G: 1, A: 3, B: 5 }
FIFTHS: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

# Unaltered fifths remainder ((fifths + 1) mod 7) back to letter step: 'FCGDAEB'
STEPS: tuple[int, ...] = (3, 0, 4, 1, 5, 2, 6)

LETTERS = "CDEFGAB"

# Flat spelling of the 12 chromatic pitch classes (used by from_midi)
PCS: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Quality axis of a simple interval number (unison..seventh)
IntervalType = Literal["P", "M"]
INTERVAL_TYPES = "PMMPPMM"

# General MIDI range
MIDI_MIN = 0
MIDI_MAX = 127

# A4 in General MIDI numbering
MIDI_A4 = 69

DEFAULT_REFERENCE_HZ = 440.0

# Default velocity for note_on messages
DEFAULT_VELOCITY = 64


class ErrorMessages:
    """Standardized error messages."""

    INVALID_DIRECTION = "Direction must be -1 or 1, got {direction}."
    INVALID_CACHE_SIZE = "Cache size must be a positive integer or None, got {size}."
    CONFIG_NOT_FOUND = "Config file not found: {path}"
    CONFIG_NOT_MAPPING = "Config file {path} must contain a mapping, got {kind}."

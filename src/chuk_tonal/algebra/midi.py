"""
MIDI and frequency conversion.

MIDI note numbers follow General MIDI (C4 = 60, A4 = 69). Frequencies use
twelve-tone equal temperament against a tuning reference for A4.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from mido import Message

from chuk_tonal.algebra.conversions import as_note
from chuk_tonal.config import get_config
from chuk_tonal.constants import DEFAULT_VELOCITY, MIDI_A4, MIDI_MAX, MIDI_MIN, PCS
from chuk_tonal.core.pitch import NotePitch, height

_INTEGER = re.compile(r"^\s*\d+\s*$")


def is_midi(value: object) -> bool:
    """Test if a value is a valid MIDI note number (0-127, whole number or digit string)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return MIDI_MIN <= value <= MIDI_MAX
    if isinstance(value, float):
        return value.is_integer() and MIDI_MIN <= value <= MIDI_MAX
    if isinstance(value, str) and _INTEGER.match(value):
        return MIDI_MIN <= int(value) <= MIDI_MAX
    return False


def midi(value: Any) -> int | None:
    """
    Get the MIDI number of a note.

    Notes with octave convert through their height; a valid MIDI number
    passes through unchanged.

    Examples:
        midi("C4") = 60
        midi(60) = 60
        midi("C") = None
    """
    p = as_note(value)
    if isinstance(p, NotePitch):
        return height(p) + 12
    if is_midi(value):
        return int(value)
    return None


def from_midi(m: int) -> str | None:
    """
    Get the note name of a MIDI number. Altered notes are spelled with flats.

    Example:
        from_midi(61) = "Db4"
    """
    if isinstance(m, bool) or not isinstance(m, int):
        return None
    return PCS[m % 12] + str(m // 12 - 1)


def well_tempered(reference_hz: float) -> Callable[[Any], float | None]:
    """
    Get a frequency calculator for equal temperament tuned to A4 = reference_hz.

    The calculator returns None only when the pitch has no MIDI number;
    MIDI 0 is a real note and gets a frequency.
    """

    def frequency(pitch: Any) -> float | None:
        m = midi(pitch)
        if m is None:
            return None
        return 2 ** ((m - MIDI_A4) / 12) * reference_hz

    return frequency


def freq(pitch: Any) -> float | None:
    """
    Get the frequency of a pitch using the configured tuning reference.

    Example:
        freq("A4") = 440.0
        freq("C4") = 261.6255653005986
    """
    return well_tempered(get_config().reference_hz)(pitch)


def note_message(
    pitch: Any,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
) -> Message | None:
    """
    Build a note_on message for a pitch.

    Args:
        pitch: Note name, note pitch or MIDI number
        velocity: 0-127
        channel: 0-15

    Returns:
        A mido Message, or None if the pitch has no MIDI number in 0-127
    """
    m = midi(pitch)
    if m is None or not MIDI_MIN <= m <= MIDI_MAX:
        return None
    return Message("note_on", note=m, velocity=velocity, channel=channel)

"""
Core pitch primitives - the codec layer.

These are the mathematical invariants that everything else composes on:
- PitchClass, NotePitch, IntervalPitch: the encoded pitch variants
- encode / decode: musical properties <-> line-of-fifths encoding
- Quality convention: P/M axis, alteration <-> quality token
- Rendering: encoded pitches back to note and interval names
"""

from chuk_tonal.core.pitch import (
    FIFTH_OCTS,
    PITCH_TYPES,
    DecodedPitch,
    IntervalPitch,
    NotePitch,
    Pitch,
    PitchClass,
    decode,
    decode_alt,
    decode_step,
    direction_of,
    encode,
    fifths_octaves,
    has_octave,
    height,
    interval_pitch,
    is_interval_pitch,
    is_note_pitch,
    is_pitch,
    is_pitch_class,
    is_pitch_not_interval,
)
from chuk_tonal.core.quality import alt_to_quality, interval_type, quality_to_alt
from chuk_tonal.core.render import (
    interval_alt,
    interval_number,
    str_ivl,
    str_note,
    str_pitch,
    to_accidentals,
    to_letter,
)

__all__ = [
    # Pitch
    "Pitch",
    "PitchClass",
    "NotePitch",
    "IntervalPitch",
    "DecodedPitch",
    "PITCH_TYPES",
    "FIFTH_OCTS",
    "encode",
    "decode",
    "decode_step",
    "decode_alt",
    "direction_of",
    "fifths_octaves",
    "height",
    "interval_pitch",
    "is_pitch",
    "is_pitch_class",
    "has_octave",
    "is_note_pitch",
    "is_interval_pitch",
    "is_pitch_not_interval",
    # Quality
    "interval_type",
    "alt_to_quality",
    "quality_to_alt",
    # Rendering
    "to_letter",
    "to_accidentals",
    "interval_number",
    "interval_alt",
    "str_note",
    "str_ivl",
    "str_pitch",
]

"""
Pitch algebra - operations over encoded pitches.

Every operation accepts names or encoded pitches:
- conversions: name <-> pitch decorators
- properties: note, pc, chroma, octave, simplify, semitones...
- distance: transpose and distance
- midi: MIDI numbers and frequencies
"""

from chuk_tonal.algebra.conversions import (
    as_interval,
    as_note,
    as_pitch,
    interval_fn,
    note_fn,
    pitch_fn,
    pitch_op,
    to_interval_str,
    to_note_str,
    to_pitch_str,
)
from chuk_tonal.algebra.distance import (
    distance,
    distance_from,
    fifths_from,
    interval,
    tr,
    transpose,
    transpose_by,
)
from chuk_tonal.algebra.midi import (
    freq,
    from_midi,
    is_midi,
    midi,
    note_message,
    well_tempered,
)
from chuk_tonal.algebra.properties import (
    accidentals,
    chroma,
    letter,
    note,
    number,
    octave,
    pc,
    quality,
    semitones,
    simple_number,
    simplify,
    simplify_asc,
)

__all__ = [
    # Conversions
    "as_note",
    "as_interval",
    "as_pitch",
    "to_note_str",
    "to_interval_str",
    "to_pitch_str",
    "pitch_op",
    "note_fn",
    "interval_fn",
    "pitch_fn",
    # Properties
    "note",
    "pc",
    "chroma",
    "letter",
    "accidentals",
    "octave",
    "semitones",
    "simplify",
    "simplify_asc",
    "number",
    "simple_number",
    "quality",
    # Distance
    "transpose",
    "tr",
    "transpose_by",
    "distance",
    "interval",
    "distance_from",
    "fifths_from",
    # MIDI
    "is_midi",
    "midi",
    "from_midi",
    "well_tempered",
    "freq",
    "note_message",
]

"""
chuk-tonal - functional music theory over line-of-fifths pitches.

Pitches (pitch classes, notes and intervals) are encoded as a position on
the circle of fifths plus an octave. Names go in, names come out:

    >>> from chuk_tonal import transpose, distance, midi, simplify
    >>> transpose("C4", "P5")
    'G4'
    >>> distance("G", "B")
    'M3'
    >>> midi("C4")
    60
    >>> simplify("M9")
    'M2'
"""

from chuk_tonal.algebra import (
    accidentals,
    as_interval,
    as_note,
    as_pitch,
    chroma,
    distance,
    distance_from,
    fifths_from,
    freq,
    from_midi,
    interval,
    is_midi,
    letter,
    midi,
    note,
    note_message,
    number,
    octave,
    pc,
    quality,
    semitones,
    simple_number,
    simplify,
    simplify_asc,
    tr,
    transpose,
    transpose_by,
    well_tempered,
)
from chuk_tonal.config import TonalConfig, get_config, load_config, set_config
from chuk_tonal.core import (
    DecodedPitch,
    IntervalPitch,
    NotePitch,
    Pitch,
    PitchClass,
    decode,
    encode,
    str_ivl,
    str_note,
    str_pitch,
)
from chuk_tonal.lists import (
    as_list,
    chromatic,
    filter_list,
    filter_with,
    harmonize,
    harmonizer,
    map_list,
    map_with,
    midi_range,
    note_range,
    sort_pitches,
    sort_with,
)
from chuk_tonal.notation import (
    NameParser,
    ParseCache,
    get_parser,
    is_interval_str,
    is_note_str,
    parse_interval,
    parse_note,
    parse_pitch,
    set_parser,
)

__version__ = "0.1.0"

__all__ = [
    # Pitch
    "Pitch",
    "PitchClass",
    "NotePitch",
    "IntervalPitch",
    "DecodedPitch",
    "encode",
    "decode",
    "str_note",
    "str_ivl",
    "str_pitch",
    # Parsing
    "NameParser",
    "ParseCache",
    "get_parser",
    "set_parser",
    "parse_note",
    "parse_interval",
    "parse_pitch",
    "is_note_str",
    "is_interval_str",
    # Config
    "TonalConfig",
    "load_config",
    "get_config",
    "set_config",
    # Properties
    "as_note",
    "as_interval",
    "as_pitch",
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
    # Lists
    "as_list",
    "map_list",
    "filter_list",
    "map_with",
    "filter_with",
    "harmonize",
    "harmonizer",
    "midi_range",
    "note_range",
    "chromatic",
    "sort_pitches",
    "sort_with",
]

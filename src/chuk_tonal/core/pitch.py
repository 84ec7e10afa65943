"""
Pitch primitives - PitchClass, NotePitch, IntervalPitch and the codec.

These are the foundational types for all pitch-related operations.
A pitch is stored as a position on the line of fifths (relative to C) plus
an encoded octave. The encoded octave is not the scientific octave: it is
offset so that it stays invariant under accidental changes, which keeps
transposition and distance plain integer addition.

    C4  -> NotePitch(fifths=0, octave=4)
    Db4 -> NotePitch(fifths=-5, octave=7)
    P5  -> IntervalPitch(fifths=1, octave=0, direction=1)
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_tonal.constants import FIFTHS, STEPS, Direction, ErrorMessages


def fifths_octaves(fifths: int) -> int:
    """Number of octaves spanned by stacking `fifths` perfect fifths."""
    return (fifths * 7) // 12


# Octaves each unaltered letter spans on the line of fifths
FIFTH_OCTS: tuple[int, ...] = tuple(fifths_octaves(f) for f in FIFTHS)


@dataclass(frozen=True)
class PitchClass:
    """
    A note name without octave (e.g. "Db").

    Immutable and hashable.
    """

    fifths: int


@dataclass(frozen=True)
class NotePitch:
    """
    A note with a specific octave (e.g. "Db4").

    `octave` is the encoded octave - use decode() to get the scientific one.
    """

    fifths: int
    octave: int


@dataclass(frozen=True)
class IntervalPitch:
    """
    A signed musical distance (e.g. "-M2").

    A descending interval is the negation of the matching ascending one,
    with direction -1.
    """

    fifths: int
    octave: int
    direction: int

    def __post_init__(self) -> None:
        if self.direction not in (Direction.DESCENDING, Direction.ASCENDING):
            raise ValueError(ErrorMessages.INVALID_DIRECTION.format(direction=self.direction))


Pitch = PitchClass | NotePitch | IntervalPitch

PITCH_TYPES = (PitchClass, NotePitch, IntervalPitch)


@dataclass(frozen=True)
class DecodedPitch:
    """
    Musical properties of a pitch.

    step is the letter index (C=0 .. B=6), alt the accidentals (negative =
    flats), oct the scientific octave and dir the interval direction.
    oct and dir are None when the pitch has none.
    """

    step: int
    alt: int
    oct: int | None = None
    dir: int | None = None


# Predicates


def is_pitch(value: object) -> bool:
    """Test if a value is an encoded pitch of any variant."""
    return isinstance(value, PITCH_TYPES)


def is_pitch_class(value: object) -> bool:
    return isinstance(value, PitchClass)


def has_octave(value: object) -> bool:
    """Test if a value is a pitch with octave (note pitch or interval)."""
    return isinstance(value, (NotePitch, IntervalPitch))


def is_note_pitch(value: object) -> bool:
    return isinstance(value, NotePitch)


def is_interval_pitch(value: object) -> bool:
    return isinstance(value, IntervalPitch)


def is_pitch_not_interval(value: object) -> bool:
    """Test if a value is a pitch class or a note pitch."""
    return isinstance(value, (PitchClass, NotePitch))


# Encoding


def direction_of(fifths: int, octave: int) -> int:
    """
    Direction of the interval with the given encoding.

    An encoding reads as an ascending interval when its decoded octave is
    not negative and as a descending one otherwise, so "dd2" stays
    ascending although it sounds a semitone down. Unisons read both ways;
    they take the sign of their height (zero counts as ascending), which
    makes d1 come back as -A1.
    """
    step = decode_step(fifths)
    oct = octave + 4 * decode_alt(fifths) + FIFTH_OCTS[step]
    if step == 0 and oct == 0:
        return -1 if 7 * fifths + 12 * octave < 0 else 1
    return 1 if oct >= 0 else -1


def interval_pitch(fifths: int, octave: int, direction: int | None = None) -> IntervalPitch:
    """Create an interval, deriving the direction from its height if not given."""
    return IntervalPitch(fifths, octave, direction or direction_of(fifths, octave))


def height(pitch: NotePitch | IntervalPitch) -> int:
    """Pitch height in semitones (C0 = 0 for notes)."""
    return pitch.fifths * 7 + 12 * pitch.octave


def encode(step: int, alt: int = 0, oct: int | None = None, dir: int | None = None) -> Pitch | None:
    """
    Create a pitch from its musical properties.

    Args:
        step: Letter index 0-6 (C to B), or simple interval number - 1
        alt: Alteration (negative = flats, positive = sharps)
        oct: Scientific octave. Without it a pitch class is returned
        dir: Interval direction. Without it a note pitch is returned

    Returns:
        The encoded pitch, or None if the step is out of range
    """
    if step < 0 or step > 6:
        return None

    pc = FIFTHS[step] + 7 * alt
    if oct is None:
        return PitchClass(pc)

    o = oct - FIFTH_OCTS[step] - 4 * alt
    if dir is None:
        return NotePitch(pc, o)

    d = -1 if dir < 0 else 1
    return IntervalPitch(d * pc, d * o, d)


# Decoding


def decode_step(fifths: int) -> int:
    """Letter step of a position on the line of fifths."""
    return STEPS[(fifths + 1) % 7]


def decode_alt(fifths: int) -> int:
    """Alteration of a position on the line of fifths."""
    return (fifths + 1) // 7


def decode(pitch: Pitch) -> DecodedPitch:
    """Decode a pitch to its numeric properties."""
    step = decode_step(pitch.fifths)
    alt = decode_alt(pitch.fifths)
    oct = None
    if isinstance(pitch, (NotePitch, IntervalPitch)):
        oct = pitch.octave + 4 * alt + FIFTH_OCTS[step]
    dir = pitch.direction if isinstance(pitch, IntervalPitch) else None
    return DecodedPitch(step, alt, oct, dir)

"""
Tests for the pitch codec.

Tests cover:
- Pitch variants and predicates
- encode / decode
- interval direction and height
"""

import pytest

from chuk_tonal.core import (
    FIFTH_OCTS,
    DecodedPitch,
    IntervalPitch,
    NotePitch,
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


class TestPitchVariants:
    """Tests for PitchClass, NotePitch and IntervalPitch."""

    def test_immutable(self) -> None:
        """Pitches cannot be modified."""
        p = NotePitch(0, 4)
        with pytest.raises(AttributeError):
            p.fifths = 1  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Pitches are hashable values."""
        pitches = {NotePitch(0, 4), NotePitch(0, 4), PitchClass(0)}
        assert len(pitches) == 2

    def test_variants_are_distinct(self) -> None:
        """A pitch class never equals a note pitch with the same fifths."""
        assert PitchClass(0) != NotePitch(0, 0)

    def test_interval_direction_validated(self) -> None:
        """Interval direction must be -1 or 1."""
        with pytest.raises(ValueError):
            IntervalPitch(0, 0, 0)
        with pytest.raises(ValueError):
            IntervalPitch(1, 0, 2)

    def test_predicates(self) -> None:
        """Predicates discriminate the variants."""
        pc, n, i = PitchClass(0), NotePitch(0, 4), IntervalPitch(1, 0, 1)
        assert all(is_pitch(p) for p in (pc, n, i))
        assert not is_pitch("C4")
        assert is_pitch_class(pc) and not is_pitch_class(n)
        assert has_octave(n) and has_octave(i) and not has_octave(pc)
        assert is_note_pitch(n) and not is_note_pitch(i)
        assert is_interval_pitch(i) and not is_interval_pitch(n)
        assert is_pitch_not_interval(pc) and is_pitch_not_interval(n)
        assert not is_pitch_not_interval(i)


class TestEncode:
    """Tests for encode()."""

    def test_fifth_octaves_table(self) -> None:
        """Octaves spanned by each unaltered letter."""
        assert FIFTH_OCTS == (0, 1, 2, -1, 0, 1, 2)
        assert fifths_octaves(-5) == -3

    def test_pitch_class(self) -> None:
        """Without octave, encode returns a pitch class."""
        assert encode(0, 0) == PitchClass(0)
        assert encode(4) == PitchClass(1)  # G
        assert encode(3) == PitchClass(-1)  # F
        assert encode(1, -1) == PitchClass(-5)  # Db
        assert encode(3, 1) == PitchClass(6)  # F#

    def test_note_pitch(self) -> None:
        """With octave, encode returns a note pitch."""
        assert encode(0, 0, 4) == NotePitch(0, 4)
        assert encode(1, -1, 4) == NotePitch(-5, 7)
        assert encode(0, 1, 4) == NotePitch(7, 0)

    def test_enharmonics_share_height(self) -> None:
        """C#4 and Db4 differ in fifths, not in height."""
        cs4 = encode(0, 1, 4)
        db4 = encode(1, -1, 4)
        assert cs4 != db4
        assert height(cs4) == height(db4) == 49

    def test_interval(self) -> None:
        """With direction, encode returns an interval."""
        assert encode(4, 0, 0, 1) == IntervalPitch(1, 0, 1)  # P5
        assert encode(1, 0, 0, 1) == IntervalPitch(2, -1, 1)  # M2

    def test_descending_is_negated(self) -> None:
        """Descending intervals negate the ascending encoding."""
        assert encode(1, 0, 0, -1) == IntervalPitch(-2, 1, -1)
        assert encode(4, 0, 0, -5) == IntervalPitch(-1, 0, -1)

    def test_zero_direction_is_ascending(self) -> None:
        """A zero direction defaults to ascending."""
        assert encode(0, 0, 0, 0) == IntervalPitch(0, 0, 1)

    def test_invalid_step(self) -> None:
        """Steps outside 0-6 give None."""
        assert encode(7, 0) is None
        assert encode(-1, 0, 4) is None


class TestDecode:
    """Tests for decode()."""

    def test_pitch_class(self) -> None:
        """Pitch classes decode without octave and direction."""
        assert decode(PitchClass(0)) == DecodedPitch(0, 0)
        assert decode(PitchClass(6)) == DecodedPitch(3, 1)  # F#
        assert decode(PitchClass(-1)) == DecodedPitch(3, 0)  # F
        assert decode(PitchClass(-7)) == DecodedPitch(0, -1)  # Cb

    def test_note_pitch(self) -> None:
        """Note pitches decode to the scientific octave."""
        assert decode(NotePitch(-5, 7)) == DecodedPitch(1, -1, 4)
        assert decode(NotePitch(0, -1)) == DecodedPitch(0, 0, -1)

    def test_interval(self) -> None:
        """Intervals keep their direction."""
        assert decode(IntervalPitch(1, 0, 1)) == DecodedPitch(4, 0, 0, 1)

    def test_step_and_alt_helpers(self) -> None:
        """Step and alteration of positions on the line of fifths."""
        assert [decode_step(f) for f in range(-1, 6)] == [3, 0, 4, 1, 5, 2, 6]
        assert decode_alt(5) == 0
        assert decode_alt(6) == 1
        assert decode_alt(-2) == -1

    @pytest.mark.parametrize("step", range(7))
    @pytest.mark.parametrize("alt", [-2, -1, 0, 1, 2])
    def test_round_trip(self, step: int, alt: int) -> None:
        """decode undoes encode for notes and ascending intervals."""
        assert decode(encode(step, alt)) == DecodedPitch(step, alt)
        assert decode(encode(step, alt, 3)) == DecodedPitch(step, alt, 3)
        assert decode(encode(step, alt, 1, 1)) == DecodedPitch(step, alt, 1, 1)


class TestDirection:
    """Tests for interval direction and height."""

    def test_direction_of(self) -> None:
        """Direction is the sign of the height, zero counts as ascending."""
        assert direction_of(1, 0) == 1
        assert direction_of(-1, 0) == -1
        assert direction_of(0, 0) == 1
        assert direction_of(5, -3) == -1

    def test_direction_follows_interval_number(self) -> None:
        """Outside unisons the spelling decides, not the sign of the height."""
        dd2 = encode(1, -3, 0, 1)
        assert height(dd2) == -1
        assert direction_of(dd2.fifths, dd2.octave) == 1
        assert direction_of(19, -11) == -1

    def test_unisons_follow_height(self) -> None:
        """Unisons read both ways; the sign of the height decides."""
        d1 = encode(0, -1, 0, 1)
        assert d1 == IntervalPitch(-7, 4, 1)
        assert direction_of(d1.fifths, d1.octave) == -1
        assert direction_of(7, -4) == 1

    def test_interval_pitch_derives_direction(self) -> None:
        """interval_pitch fills in a missing direction."""
        assert interval_pitch(-1, 0) == IntervalPitch(-1, 0, -1)
        assert interval_pitch(1, 0) == IntervalPitch(1, 0, 1)
        assert interval_pitch(1, 0, -1).direction == -1

    def test_height(self) -> None:
        """Height in semitones."""
        assert height(NotePitch(0, 4)) == 48
        assert height(IntervalPitch(1, 0, 1)) == 7
        assert height(IntervalPitch(-2, 1, -1)) == -2

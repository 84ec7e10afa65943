"""
Tests for name rendering and the interval quality convention.
"""

import pytest

from chuk_tonal.core import (
    IntervalPitch,
    NotePitch,
    PitchClass,
    alt_to_quality,
    encode,
    interval_type,
    quality_to_alt,
    str_ivl,
    str_note,
    str_pitch,
    to_accidentals,
    to_letter,
)


class TestQualityConvention:
    """Tests for interval_type, alt_to_quality, quality_to_alt."""

    @pytest.mark.parametrize(
        "num,expected",
        [(1, "P"), (2, "M"), (3, "M"), (4, "P"), (5, "P"), (6, "M"), (7, "M"), (8, "P"),
         (11, "P"), (13, "M"), (-5, "P")],
    )
    def test_interval_type(self, num: int, expected: str) -> None:
        """Unison, fourth, fifth and octave are perfectable."""
        assert interval_type(num) == expected

    @pytest.mark.parametrize(
        "num,alt,expected",
        [
            (3, 0, "M"),
            (3, -1, "m"),
            (3, -2, "d"),
            (3, -3, "dd"),
            (3, 1, "A"),
            (5, 0, "P"),
            (5, -1, "d"),
            (5, -2, "dd"),
            (4, 1, "A"),
            (4, 2, "AA"),
            (1, 0, "P"),
        ],
    )
    def test_alt_to_quality(self, num: int, alt: int, expected: str) -> None:
        """Alterations map to quality tokens on the right axis."""
        assert alt_to_quality(num, alt) == expected

    @pytest.mark.parametrize(
        "kind,quality,expected",
        [
            ("M", "M", 0),
            ("M", "m", -1),
            ("M", "d", -2),
            ("M", "AA", 2),
            ("P", "P", 0),
            ("P", "d", -1),
            ("P", "dd", -2),
            ("P", "A", 1),
        ],
    )
    def test_quality_to_alt(self, kind: str, quality: str, expected: int) -> None:
        """Quality tokens map back to alterations."""
        assert quality_to_alt(kind, quality) == expected

    @pytest.mark.parametrize("kind,quality", [("P", "M"), ("P", "m"), ("M", "P"), ("P", "x")])
    def test_quality_mismatch(self, kind: str, quality: str) -> None:
        """Qualities that do not exist on an axis give None."""
        assert quality_to_alt(kind, quality) is None


class TestStrNote:
    """Tests for note rendering."""

    def test_letters_and_accidentals(self) -> None:
        """Letter and accidental helpers."""
        assert to_letter(0) == "C"
        assert to_letter(6) == "B"
        assert to_letter(7) == "C"
        assert to_accidentals(0) == ""
        assert to_accidentals(-2) == "bb"
        assert to_accidentals(3) == "###"

    def test_pitch_class(self) -> None:
        """Pitch classes render without octave."""
        assert str_note(PitchClass(0)) == "C"
        assert str_note(PitchClass(-5)) == "Db"
        assert str_note(encode(6, -2)) == "Bbb"

    def test_note_pitch(self) -> None:
        """Note pitches render with the scientific octave."""
        assert str_note(NotePitch(0, 4)) == "C4"
        assert str_note(NotePitch(-5, 7)) == "Db4"
        assert str_note(encode(4, 2, 4)) == "G##4"
        assert str_note(encode(0, 0, -1)) == "C-1"

    def test_rejects_intervals(self) -> None:
        """Intervals and non-pitches are not notes."""
        assert str_note(IntervalPitch(1, 0, 1)) is None
        assert str_note("C") is None
        assert str_note(None) is None


class TestStrIvl:
    """Tests for interval rendering."""

    @pytest.mark.parametrize(
        "step,alt,oct,dir,expected",
        [
            (4, 0, 0, 1, "P5"),
            (1, 0, 0, 1, "M2"),
            (2, -1, 0, 1, "m3"),
            (3, 1, 0, 1, "A4"),
            (4, -1, 0, 1, "d5"),
            (0, 0, 1, 1, "P8"),
            (1, 0, 1, 1, "M9"),
            (0, 0, 0, 1, "P1"),
        ],
    )
    def test_ascending(self, step: int, alt: int, oct: int, dir: int, expected: str) -> None:
        """Ascending intervals render quality then number."""
        assert str_ivl(encode(step, alt, oct, dir)) == expected

    @pytest.mark.parametrize(
        "step,alt,oct,expected",
        [
            (1, 0, 0, "-M2"),
            (2, -1, 0, "-m3"),
            (4, 0, 0, "-P5"),
            (3, 1, 0, "-A4"),
            (4, -1, 0, "-d5"),
            (0, 0, 0, "-P1"),
            (0, -1, 0, "-d1"),
            (2, 0, 1, "-M10"),
        ],
    )
    def test_descending(self, step: int, alt: int, oct: int, expected: str) -> None:
        """Descending intervals keep their quality under the sign."""
        assert str_ivl(encode(step, alt, oct, -1)) == expected

    def test_rejects_non_intervals(self) -> None:
        """Notes, pitch classes and strings are not intervals."""
        assert str_ivl(NotePitch(0, 4)) is None
        assert str_ivl(PitchClass(0)) is None
        assert str_ivl("P5") is None

    def test_inconsistent_direction(self) -> None:
        """An interval whose direction contradicts its size has no name."""
        assert str_ivl(IntervalPitch(0, -1, 1)) is None

    def test_str_pitch_dispatch(self) -> None:
        """str_pitch renders any variant."""
        assert str_pitch(IntervalPitch(1, 0, 1)) == "P5"
        assert str_pitch(NotePitch(0, 4)) == "C4"
        assert str_pitch(PitchClass(1)) == "G"
        assert str_pitch(None) is None

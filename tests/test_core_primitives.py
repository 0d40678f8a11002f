"""
Tests for core music primitives.

Tests cover:
- PitchClass (pitch.py)
- ScaleMode, ScaleDegree, compute_scale and pad resolution (scale.py)
"""

import pytest

from chuk_mcp_scales.core import (
    NOTE_NAMES,
    PitchClass,
    ScaleDegree,
    ScaleMode,
    compute_scale,
    degree_label,
    degree_labels,
    octave_tonic,
    resolve_pad,
)
from chuk_mcp_scales.errors import InvalidKeyError, InvalidSlotError


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.D == 2
        assert PitchClass.As == 10
        assert PitchClass.B == 11

    def test_spelling_order(self) -> None:
        """Spellings follow the key selector order."""
        assert [pc.spell() for pc in PitchClass] == NOTE_NAMES
        assert NOTE_NAMES == ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "Bb", "B"]

    def test_to_midi(self) -> None:
        """Convert to MIDI note numbers."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.A.to_midi(4) == 69

    def test_parse(self) -> None:
        """Parse selector names and enharmonic spellings."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("Bb") == PitchClass.As
        assert PitchClass.parse("A#") == PitchClass.As
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("Fs") == PitchClass.Fs

    def test_parse_invalid(self) -> None:
        """Unknown names raise InvalidKeyError."""
        with pytest.raises(InvalidKeyError):
            PitchClass.parse("H")
        with pytest.raises(InvalidKeyError):
            PitchClass.parse("")

    def test_invalid_key_is_value_error(self) -> None:
        """InvalidKeyError is a ValueError."""
        with pytest.raises(ValueError):
            PitchClass.parse("X#")

    def test_coerce(self) -> None:
        """Coerce accepts members, names and indices."""
        assert PitchClass.coerce(PitchClass.G) == PitchClass.G
        assert PitchClass.coerce("G") == PitchClass.G
        assert PitchClass.coerce(7) == PitchClass.G
        with pytest.raises(InvalidKeyError):
            PitchClass.coerce(12)
        with pytest.raises(InvalidKeyError):
            PitchClass.coerce(True)


class TestScaleMode:
    """Tests for ScaleMode."""

    def test_offsets(self) -> None:
        """Modes carry their offset tables."""
        assert ScaleMode.MAJOR.offsets == (0, 2, 4, 5, 7, 9, 11)
        assert ScaleMode.MINOR.offsets == (0, 2, 3, 5, 7, 8, 10)

    def test_offsets_strictly_increase(self) -> None:
        """Every table starts at 0 and strictly increases."""
        for mode in ScaleMode:
            offsets = mode.offsets
            assert len(offsets) == 7
            assert offsets[0] == 0
            assert all(a < b for a, b in zip(offsets, offsets[1:], strict=False))

    def test_parse(self) -> None:
        """Parsing is case-insensitive."""
        assert ScaleMode.parse("Major") == ScaleMode.MAJOR
        assert ScaleMode.parse(" minor ") == ScaleMode.MINOR
        assert ScaleMode.parse(ScaleMode.MINOR) == ScaleMode.MINOR

    def test_parse_invalid(self) -> None:
        """Unknown modes raise ValueError."""
        with pytest.raises(ValueError, match="Invalid mode"):
            ScaleMode.parse("dorian")

    def test_heading(self) -> None:
        """Headings are capitalised."""
        assert ScaleMode.MAJOR.heading == "Major"
        assert ScaleMode.MINOR.heading == "Minor"


class TestScaleDegree:
    """Tests for ScaleDegree."""

    def test_name(self) -> None:
        """Names join spelling and octave."""
        assert ScaleDegree(PitchClass.C, 4).name == "C4"
        assert ScaleDegree(PitchClass.As, 3).name == "Bb3"
        assert str(ScaleDegree(PitchClass.Fs, 5)) == "F#5"

    def test_to_midi(self) -> None:
        """MIDI conversion uses C4 = 60."""
        assert ScaleDegree(PitchClass.C, 4).to_midi() == 60
        assert ScaleDegree(PitchClass.B, 3).to_midi() == 59

    def test_parse(self) -> None:
        """Parse pitch names back."""
        assert ScaleDegree.parse("C4") == ScaleDegree(PitchClass.C, 4)
        assert ScaleDegree.parse("Bb3") == ScaleDegree(PitchClass.As, 3)
        assert ScaleDegree.parse("f#5") == ScaleDegree(PitchClass.Fs, 5)

    def test_parse_invalid(self) -> None:
        """Names without an octave are rejected."""
        with pytest.raises(ValueError):
            ScaleDegree.parse("C")
        with pytest.raises(ValueError):
            ScaleDegree.parse("H4")


class TestComputeScale:
    """Tests for compute_scale."""

    @pytest.mark.parametrize("mode", list(ScaleMode))
    @pytest.mark.parametrize("key", NOTE_NAMES)
    def test_seven_degrees_from_root(self, key: str, mode: ScaleMode) -> None:
        """Every scale has 7 degrees starting on the key."""
        degrees = compute_scale(key, 4, mode)
        assert len(degrees) == 7
        assert degrees[0] == ScaleDegree(PitchClass.parse(key), 4)

    @pytest.mark.parametrize("mode", list(ScaleMode))
    @pytest.mark.parametrize("key", NOTE_NAMES)
    def test_degrees_follow_offsets(self, key: str, mode: ScaleMode) -> None:
        """Each degree sits at its offset above the root."""
        degrees = compute_scale(key, 4, mode)
        root_midi = degrees[0].to_midi()
        assert [d.to_midi() - root_midi for d in degrees] == list(mode.offsets)

    def test_c_major(self) -> None:
        """C major stays in one octave."""
        names = [d.name for d in compute_scale("C", 4, ScaleMode.MAJOR)]
        assert names == ["C4", "D4", "E4", "F4", "G4", "A4", "B4"]

    def test_b_major_rolls_over_on_second_degree(self) -> None:
        """B + 2 semitones (13) crosses the octave boundary."""
        degrees = compute_scale("B", 4, ScaleMode.MAJOR)
        assert degrees[1] == ScaleDegree(PitchClass.Cs, 5)
        assert [d.name for d in degrees] == ["B4", "C#5", "D#5", "E5", "F#5", "G#5", "Bb5"]

    def test_c_major_second_degree_no_rollover(self) -> None:
        """C + 2 semitones stays in the octave."""
        assert compute_scale("C", 4, ScaleMode.MAJOR)[1] == ScaleDegree(PitchClass.D, 4)

    def test_rollover_per_degree(self) -> None:
        """Only degrees whose sum reaches 12 move up."""
        names = [d.name for d in compute_scale("G", 3, ScaleMode.MAJOR)]
        assert names == ["G3", "A3", "B3", "C4", "D4", "E4", "F#4"]

    def test_minor_third(self) -> None:
        """Minor lowers the third."""
        assert compute_scale("C", 4, ScaleMode.MINOR)[2].pitch_class.spell() == "D#"
        assert compute_scale("C", 4, ScaleMode.MAJOR)[2].pitch_class.spell() == "E"

    def test_a_minor(self) -> None:
        """A minor is all naturals."""
        names = [d.name for d in compute_scale("A", 4, "minor")]
        assert names == ["A4", "B4", "C5", "D5", "E5", "F5", "G5"]

    def test_octave_not_range_checked(self) -> None:
        """The engine itself accepts any octave."""
        assert compute_scale("C", 0, ScaleMode.MAJOR)[0].name == "C0"
        assert compute_scale("C", 12, ScaleMode.MAJOR)[0].name == "C12"

    def test_pure(self) -> None:
        """Same inputs give equal, independent results."""
        first = compute_scale("F#", 4, ScaleMode.MINOR)
        second = compute_scale("F#", 4, ScaleMode.MINOR)
        assert first == second
        assert first is not second
        first.pop()
        assert len(compute_scale("F#", 4, ScaleMode.MINOR)) == 7

    def test_invalid_key(self) -> None:
        """Unknown keys raise InvalidKeyError."""
        with pytest.raises(InvalidKeyError):
            compute_scale("Q", 4, ScaleMode.MAJOR)


class TestPads:
    """Tests for pad resolution and labels."""

    def test_octave_tonic(self) -> None:
        """Octave tonic is the root one octave up."""
        assert octave_tonic("C", 4) == ScaleDegree(PitchClass.C, 5)
        assert octave_tonic("B", 4) == ScaleDegree(PitchClass.B, 5)

    @pytest.mark.parametrize("mode", list(ScaleMode))
    def test_slot_seven_ignores_mode(self, mode: ScaleMode) -> None:
        """Pad 7 plays the octave tonic in either mode."""
        assert resolve_pad("C", 4, mode, 7).name == "C5"

    def test_slots_match_scale(self) -> None:
        """Pads 0-6 play the scale degrees."""
        scale = compute_scale("E", 3, ScaleMode.MINOR)
        assert [resolve_pad("E", 3, ScaleMode.MINOR, i) for i in range(7)] == scale

    @pytest.mark.parametrize("slot", [-1, 8, 100])
    def test_invalid_slot(self, slot: int) -> None:
        """Out-of-range slots raise InvalidSlotError."""
        with pytest.raises(InvalidSlotError):
            resolve_pad("C", 4, ScaleMode.MAJOR, slot)

    def test_labels(self) -> None:
        """Minor labels flatten 3, 6 and 7."""
        assert degree_labels(ScaleMode.MAJOR) == ["1", "2", "3", "4", "5", "6", "7", "1"]
        assert degree_labels(ScaleMode.MINOR) == ["1", "2", "b3", "4", "5", "b6", "b7", "1"]

    def test_degree_label(self) -> None:
        """Single labels by slot."""
        assert degree_label(2, "minor") == "b3"
        assert degree_label(7, ScaleMode.MINOR) == "1"
        with pytest.raises(InvalidSlotError):
            degree_label(8, ScaleMode.MAJOR)

"""
Scale primitives - ScaleMode, ScaleDegree and the scale engine.

A mode is a table of semitone offsets from the root. A scale is that table
applied to a key and an octave, giving seven octave-correct pitches.
The eighth pad is always the tonic one octave up.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_scales.constants import OCTAVE_TONIC_SLOT, PAD_COUNT, ErrorMessages
from chuk_mcp_scales.errors import InvalidSlotError

from .pitch import PitchClass


class ScaleMode(str, Enum):
    """The two diatonic modes offered by the mode selector."""

    MAJOR = "major"
    MINOR = "minor"

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitone offsets from the root, one per scale degree."""
        return _MODE_OFFSETS[self]

    @property
    def labels(self) -> tuple[str, ...]:
        """Pad labels, including the octave tonic pad."""
        return _MODE_LABELS[self]

    @property
    def heading(self) -> str:
        """Heading shown above the pads."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: str | ScaleMode) -> ScaleMode:
        """Parse a mode from a string like 'major', 'Minor'."""
        if isinstance(name, ScaleMode):
            return name
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(ErrorMessages.INVALID_MODE.format(mode=name)) from None


# Offset tables (module level to avoid str Enum member issues)
_MODE_OFFSETS: dict[ScaleMode, tuple[int, ...]] = {
    ScaleMode.MAJOR: (0, 2, 4, 5, 7, 9, 11),
    ScaleMode.MINOR: (0, 2, 3, 5, 7, 8, 10),
}

_MODE_LABELS: dict[ScaleMode, tuple[str, ...]] = {
    ScaleMode.MAJOR: ("1", "2", "3", "4", "5", "6", "7", "1"),
    ScaleMode.MINOR: ("1", "2", "b3", "4", "5", "b6", "b7", "1"),
}

_PITCH_NAME = re.compile(r"^\s*([A-Ga-g][#b]?)(-?\d+)\s*$")


@dataclass(frozen=True)
class ScaleDegree:
    """
    A concrete pitch: pitch class plus octave number.

    Created fresh for every query; never mutated.

    Examples:
        ScaleDegree(PitchClass.C, 4) = "C4" (middle C)
        ScaleDegree(PitchClass.As, 3) = "Bb3"
    """

    pitch_class: PitchClass
    octave: int

    @property
    def name(self) -> str:
        """Pitch name handed to the sound source, e.g. 'C4'."""
        return f"{self.pitch_class.spell()}{self.octave}"

    def to_midi(self) -> int:
        """MIDI note number (C4 = 60)."""
        return self.pitch_class.to_midi(self.octave)

    @classmethod
    def parse(cls, name: str) -> ScaleDegree:
        """
        Parse a pitch name like 'C4', 'F#5' or 'Bb3'.

        Raises:
            InvalidKeyError: If the pitch class part is unknown
            ValueError: If the name has no octave number
        """
        match = _PITCH_NAME.match(name)
        if match is None:
            raise ValueError(f"Invalid pitch name: {name}")
        spelling = match.group(1)
        return cls(PitchClass.parse(spelling[0].upper() + spelling[1:]), int(match.group(2)))

    def __str__(self) -> str:
        return self.name


def compute_scale(
    key: PitchClass | str,
    octave: int,
    mode: ScaleMode | str,
) -> list[ScaleDegree]:
    """
    Compute the seven degrees of a scale in ascending order.

    Each degree's octave is derived from its own root + offset sum: a degree
    moves up one octave exactly when that sum reaches 12. For B major the
    second degree (11 + 2 = 13) is C# in the next octave.

    Args:
        key: Root pitch class (or its spelling)
        octave: Octave of the root; not range-checked here
        mode: Major or minor

    Returns:
        Seven ScaleDegrees, degree 0 being the root

    Raises:
        InvalidKeyError: If key is not one of the 12 pitch classes
    """
    root = PitchClass.coerce(key)
    degrees = []
    for offset in ScaleMode.parse(mode).offsets:
        absolute = root.value + offset
        degrees.append(
            ScaleDegree(
                pitch_class=PitchClass(absolute % 12),
                octave=octave + (1 if absolute >= 12 else 0),
            )
        )
    return degrees


def octave_tonic(key: PitchClass | str, octave: int) -> ScaleDegree:
    """The root one octave up - the eighth pad, independent of the mode."""
    return ScaleDegree(PitchClass.coerce(key), octave + 1)


def check_slot(slot: int) -> int:
    """
    Validate a pad slot index.

    Raises:
        InvalidSlotError: If slot is not an int in 0-7
    """
    if isinstance(slot, bool) or not isinstance(slot, int) or not 0 <= slot < PAD_COUNT:
        raise InvalidSlotError(ErrorMessages.INVALID_SLOT.format(slot=slot))
    return slot


def resolve_pad(
    key: PitchClass | str,
    octave: int,
    mode: ScaleMode | str,
    slot: int,
) -> ScaleDegree:
    """
    Resolve a pad slot to the pitch it plays.

    Slots 0-6 are the scale degrees; slot 7 is the octave tonic.
    """
    if check_slot(slot) == OCTAVE_TONIC_SLOT:
        return octave_tonic(key, octave)
    return compute_scale(key, octave, mode)[slot]


def degree_label(slot: int, mode: ScaleMode | str) -> str:
    """Display label for a pad ('b3' style flats in minor)."""
    return ScaleMode.parse(mode).labels[check_slot(slot)]


def degree_labels(mode: ScaleMode | str) -> list[str]:
    """All eight pad labels for a mode."""
    return list(ScaleMode.parse(mode).labels)


"""
Pitch primitives - PitchClass.

PitchClass represents the 12 chromatic pitches (octave-independent).
Intervals are plain semitone counts added to a pitch class index.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_scales.constants import ErrorMessages
from chuk_mcp_scales.errors import InvalidKeyError

# Display names in chromatic order (module level to avoid IntEnum member issues).
# The key selector offers exactly these twelve spellings.
NOTE_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "Bb",
    "B",
]

# Enharmonic spellings accepted when parsing
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (A# == Bb == 10).

    Spelling is a display concern: spell() returns the names in NOTE_NAMES.
    """

    C = 0
    Cs = 1  # C#
    D = 2
    Ds = 3  # D#
    E = 4
    F = 5
    Fs = 6  # F#
    G = 7
    Gs = 8  # G#
    A = 9
    As = 10  # Bb
    B = 11

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self) -> str:
        """Get the display name used by the key selector."""
        return NOTE_NAMES[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'Bb', 'Db'.

        Raises:
            InvalidKeyError: If the name is not a known spelling
        """
        name = name.strip()

        if name in NOTE_NAMES:
            return cls(NOTE_NAMES.index(name))
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise InvalidKeyError(
            ErrorMessages.INVALID_KEY.format(key=name, keys=", ".join(NOTE_NAMES))
        )

    @classmethod
    def coerce(cls, value: PitchClass | str | int) -> PitchClass:
        """
        Accept a PitchClass, a spelling or a 0-11 index.

        Raises:
            InvalidKeyError: If the value does not name one of the 12 pitch classes
        """
        if isinstance(value, PitchClass):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < 12:
            return cls(value)
        raise InvalidKeyError(
            ErrorMessages.INVALID_KEY.format(key=value, keys=", ".join(NOTE_NAMES))
        )

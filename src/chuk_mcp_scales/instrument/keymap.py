"""
Keyboard mapping.

Number keys 1-7 play the scale degrees, 8 plays the octave tonic,
and the up/down arrows move the octave.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_scales.constants import OCTAVE_KEYS, PAD_KEYS


class KeyCommand(str, Enum):
    """What a key press asks the instrument to do."""

    PLAY_PAD = "play_pad"
    SHIFT_OCTAVE = "shift_octave"


@dataclass(frozen=True)
class KeyAction:
    """A resolved key press."""

    command: KeyCommand
    slot: int | None = None
    octave_delta: int = 0


def resolve_key(key: str) -> KeyAction | None:
    """
    Map a key name to an action.

    Returns None for keys the instrument ignores.
    """
    if key in PAD_KEYS:
        return KeyAction(KeyCommand.PLAY_PAD, slot=PAD_KEYS[key])
    if key in OCTAVE_KEYS:
        return KeyAction(KeyCommand.SHIFT_OCTAVE, octave_delta=OCTAVE_KEYS[key])
    return None

"""
Constants for the scale instrument.

No magic strings - pad layout, ranges and key bindings live here.
"""

# Pads: 7 scale degrees plus the tonic one octave up
PAD_COUNT = 8
OCTAVE_TONIC_SLOT = 7

# Octave range offered by the octave selector
MIN_OCTAVE = 1
MAX_OCTAVE = 8
DEFAULT_OCTAVE = 4

# How long a note sounds and a pad stays lit
NOTE_DURATION_MS = 500

# General MIDI program 0 = acoustic grand piano
DEFAULT_PROGRAM = 0
DEFAULT_CHANNEL = 0
DEFAULT_VELOCITY = 100

# Keyboard keys understood by the instrument
PAD_KEYS: dict[str, int] = {
    "1": 0,
    "2": 1,
    "3": 2,
    "4": 3,
    "5": 4,
    "6": 5,
    "7": 6,
    "8": OCTAVE_TONIC_SLOT,
}
OCTAVE_KEYS: dict[str, int] = {
    "ArrowUp": 1,
    "ArrowDown": -1,
}


class ErrorMessages:
    """Standardized error messages."""

    INVALID_KEY = "Invalid key: '{key}'. Expected one of: {keys}."
    INVALID_MODE = "Invalid mode: '{mode}'. Expected 'major' or 'minor'."
    INVALID_SLOT = "Invalid pad slot: {slot}. Expected 0-7."
    OCTAVE_TONIC_MISMATCH = "Pad slot {slot} does not match is_octave_tonic={flag}."
    SOUND_NOT_READY = "Sound source is not ready yet."


class SuccessMessages:
    """Standardized success messages."""

    SELECTION_UPDATED = "Selection is now {title} in {key}, octave {octave}."
    PAD_PLAYED = "Played pad {slot} ({pitch})."
    PAD_SILENT = "Pad {slot} ({pitch}) lit without sound; sound source not ready."

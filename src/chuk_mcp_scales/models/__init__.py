"""
Pydantic models for the scale instrument.

This module provides:
- AppSelection: Key, octave and mode chosen by the player
- InstrumentConfig: Note duration, MIDI output and initial selection
- MidiConfig: MIDI port, program, channel and velocity
"""

from chuk_mcp_scales.models.config import InstrumentConfig, MidiConfig
from chuk_mcp_scales.models.selection import AppSelection

__all__ = [
    "AppSelection",
    "InstrumentConfig",
    "MidiConfig",
]

"""
Configuration models.

The instrument is configured from a YAML document; every field has a
default, so an empty or missing file gives a working instrument.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_scales.constants import (
    DEFAULT_CHANNEL,
    DEFAULT_PROGRAM,
    DEFAULT_VELOCITY,
    NOTE_DURATION_MS,
)
from chuk_mcp_scales.models.selection import AppSelection


class MidiConfig(BaseModel):
    """Where and how notes are sent."""

    port_name: str | None = Field(None, description="MIDI output port (None = system default)")
    program: int = Field(
        DEFAULT_PROGRAM, ge=0, le=127, description="General MIDI program (0 = acoustic grand)"
    )
    channel: int = Field(DEFAULT_CHANNEL, ge=0, le=15, description="MIDI channel (0-15)")
    velocity: int = Field(DEFAULT_VELOCITY, ge=1, le=127, description="Note-on velocity")


class InstrumentConfig(BaseModel):
    """Top-level instrument configuration."""

    note_duration_ms: int = Field(
        NOTE_DURATION_MS, gt=0, description="How long a note sounds and its pad stays lit"
    )
    midi: MidiConfig = Field(default_factory=MidiConfig, description="MIDI output settings")
    selection: AppSelection = Field(
        default_factory=AppSelection, description="Initial key, octave and mode"
    )

    @property
    def note_duration(self) -> float:
        """Note duration in seconds, as the schedulers expect."""
        return self.note_duration_ms / 1000

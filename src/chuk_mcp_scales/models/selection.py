"""
Selection model - what the player has chosen.

The selection is owned by the instrument session. The scale engine and the
playback coordinator receive it on every call and never keep it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_scales.constants import DEFAULT_OCTAVE, MAX_OCTAVE, MIN_OCTAVE
from chuk_mcp_scales.core.pitch import PitchClass
from chuk_mcp_scales.core.scale import ScaleDegree, ScaleMode, compute_scale


class AppSelection(BaseModel):
    """
    Key, octave and mode feeding the scale engine.

    Immutable - changes produce a new selection.
    """

    key: PitchClass = Field(PitchClass.C, description="Root pitch class")
    octave: int = Field(
        DEFAULT_OCTAVE, ge=MIN_OCTAVE, le=MAX_OCTAVE, description="Octave of the root (1-8)"
    )
    mode: ScaleMode = Field(ScaleMode.MAJOR, description="Major or minor")

    model_config = {"frozen": True}

    @field_validator("key", mode="before")
    @classmethod
    def parse_key(cls, v: Any) -> PitchClass:
        """Accept spellings like 'F#' or 'Bb'."""
        return PitchClass.coerce(v)

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v: Any) -> ScaleMode:
        """Accept 'Major', 'minor', etc."""
        return ScaleMode.parse(v)

    @property
    def title(self) -> str:
        """Mode heading, e.g. 'Major'."""
        return self.mode.heading

    def scale(self) -> list[ScaleDegree]:
        """The seven degrees for this selection."""
        return compute_scale(self.key, self.octave, self.mode)

    def with_key(self, key: PitchClass | str) -> AppSelection:
        """Copy with a different root."""
        return AppSelection(key=key, octave=self.octave, mode=self.mode)

    def with_octave(self, octave: int) -> AppSelection:
        """Copy with a different octave (validated to 1-8)."""
        return AppSelection(key=self.key, octave=octave, mode=self.mode)

    def with_mode(self, mode: ScaleMode | str) -> AppSelection:
        """Copy with a different mode."""
        return AppSelection(key=self.key, octave=self.octave, mode=mode)

    def shifted(self, delta: int) -> AppSelection:
        """Copy with the octave moved by delta, clamped to 1-8."""
        octave = max(MIN_OCTAVE, min(MAX_OCTAVE, self.octave + delta))
        return self.with_octave(octave)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with the key spelled for display."""
        return {
            "key": self.key.spell(),
            "octave": self.octave,
            "mode": self.mode.value,
            "title": self.title,
        }

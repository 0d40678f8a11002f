"""
Core music primitives - the scale engine.

These are pure, deterministic building blocks:
- PitchClass: The 12 chromatic pitch classes (0-11)
- ScaleMode: Major/minor offset tables and pad labels
- ScaleDegree: A pitch class at a concrete octave
- compute_scale: Key + octave + mode -> seven octave-correct degrees
- resolve_pad: Pad slot (0-7) -> the pitch that pad plays
"""

from chuk_mcp_scales.core.pitch import NOTE_NAMES, PitchClass
from chuk_mcp_scales.core.scale import (
    ScaleDegree,
    ScaleMode,
    check_slot,
    compute_scale,
    degree_label,
    degree_labels,
    octave_tonic,
    resolve_pad,
)

__all__ = [
    # Pitch
    "NOTE_NAMES",
    "PitchClass",
    # Scale
    "ScaleDegree",
    "ScaleMode",
    "check_slot",
    "compute_scale",
    "degree_label",
    "degree_labels",
    "octave_tonic",
    "resolve_pad",
]

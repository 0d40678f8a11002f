"""
Instrument - the player-facing session and its keyboard mapping.
"""

from chuk_mcp_scales.instrument.keymap import KeyAction, KeyCommand, resolve_key
from chuk_mcp_scales.instrument.session import PadView, ScaleInstrument

__all__ = [
    "KeyAction",
    "KeyCommand",
    "PadView",
    "ScaleInstrument",
    "resolve_key",
]

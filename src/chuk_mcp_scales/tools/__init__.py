"""
MCP tool implementations.

Tools are organized by domain:
- scales - Scale lookups (keys, modes, pitches)
- instrument - Selection, pads and key presses
"""

from chuk_mcp_scales.tools.instrument import register_instrument_tools
from chuk_mcp_scales.tools.scales import register_scale_tools

__all__ = [
    "register_instrument_tools",
    "register_scale_tools",
]

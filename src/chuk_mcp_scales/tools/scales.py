"""
Scale tools - MCP tools for scale lookups.

Pure queries; they do not touch the instrument's selection or pads.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.constants import DEFAULT_OCTAVE
from chuk_mcp_scales.core import NOTE_NAMES, ScaleMode, compute_scale, degree_labels, octave_tonic

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale lookup tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_keys() -> str:
        """
        List the keys the instrument can be set to.

        Returns:
            JSON string with the 12 key names in chromatic order

        Example:
            music_list_keys()
        """
        return json.dumps({"status": "success", "keys": NOTE_NAMES})

    tools["music_list_keys"] = music_list_keys

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_modes() -> str:
        """
        List the available modes with their offsets and pad labels.

        Returns:
            JSON string with one entry per mode

        Example:
            music_list_modes()
        """
        return json.dumps(
            {
                "status": "success",
                "modes": [
                    {
                        "name": mode.value,
                        "title": mode.heading,
                        "offsets": list(mode.offsets),
                        "labels": list(mode.labels),
                    }
                    for mode in ScaleMode
                ],
            }
        )

    tools["music_list_modes"] = music_list_modes

    @mcp.tool  # type: ignore[arg-type]
    async def music_compute_scale(
        key: str,
        octave: int = DEFAULT_OCTAVE,
        mode: str = "major",
    ) -> str:
        """
        Compute the pitches of a scale.

        Returns the seven scale degrees with octave numbers, plus the
        octave tonic played by the eighth pad.

        Args:
            key: Root key (e.g., 'C', 'F#', 'Bb')
            octave: Octave of the root (default: 4)
            mode: 'major' or 'minor' (default: 'major')

        Returns:
            JSON string with the scale pitches

        Example:
            music_compute_scale(key="B", octave=4, mode="major")
        """
        try:
            degrees = compute_scale(key, octave, mode)
            scale_mode = ScaleMode.parse(mode)
            return json.dumps(
                {
                    "status": "success",
                    "key": degrees[0].pitch_class.spell(),
                    "octave": octave,
                    "mode": scale_mode.value,
                    "pitches": [degree.name for degree in degrees],
                    "octave_tonic": octave_tonic(key, octave).name,
                    "labels": degree_labels(scale_mode),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_compute_scale"] = music_compute_scale

    return tools

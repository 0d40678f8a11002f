"""
Instrument tools - MCP tools for playing the scale instrument.

Tools for changing the selection, playing pads and reading pad state.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.constants import SuccessMessages
from chuk_mcp_scales.instrument import ScaleInstrument
from chuk_mcp_scales.models.selection import AppSelection
from chuk_mcp_scales.playback.coordinator import PadTrigger

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _trigger_dict(trigger: PadTrigger) -> dict[str, Any]:
    template = SuccessMessages.PAD_PLAYED if trigger.sounded else SuccessMessages.PAD_SILENT
    return {
        "slot": trigger.slot,
        "pitch": trigger.pitch.name,
        "sounded": trigger.sounded,
        "message": template.format(slot=trigger.slot, pitch=trigger.pitch.name),
    }


def _selection_message(selection: AppSelection) -> str:
    return SuccessMessages.SELECTION_UPDATED.format(
        title=selection.title, key=selection.key.spell(), octave=selection.octave
    )


def register_instrument_tools(
    mcp: ChukMCPServer,
    instrument: ScaleInstrument,
) -> dict[str, Any]:
    """
    Register instrument tools with the MCP server.

    Args:
        mcp: The MCP server instance
        instrument: The scale instrument session

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_selection() -> str:
        """
        Get the current key, octave and mode.

        Returns:
            JSON string with the selection and whether sound is available

        Example:
            music_get_selection()
        """
        return json.dumps(
            {
                "status": "success",
                "selection": instrument.selection.to_dict(),
                "audio_ready": instrument.audio_ready,
            }
        )

    tools["music_get_selection"] = music_get_selection

    @mcp.tool  # type: ignore[arg-type]
    async def music_set_selection(
        key: str | None = None,
        octave: int | None = None,
        mode: str | None = None,
    ) -> str:
        """
        Change the key, octave and/or mode.

        Only the given values change. Nothing is applied if any value
        is invalid.

        Args:
            key: Root key (e.g., 'C', 'F#', 'Bb')
            octave: Octave of the root (1-8)
            mode: 'major' or 'minor'

        Returns:
            JSON string with the new selection and its scale

        Example:
            music_set_selection(key="D", mode="minor")
        """
        try:
            selection = instrument.selection
            if key is not None:
                selection = selection.with_key(key)
            if octave is not None:
                selection = selection.with_octave(octave)
            if mode is not None:
                selection = selection.with_mode(mode)
            instrument.selection = selection

            return json.dumps(
                {
                    "status": "success",
                    "selection": selection.to_dict(),
                    "pitches": [degree.name for degree in selection.scale()],
                    "message": _selection_message(selection),
                }
            )
        except Exception as e:
            logger.exception("Failed to set selection")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_set_selection"] = music_set_selection

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_pads() -> str:
        """
        Get the eight pads with their labels, pitches and lit state.

        Returns:
            JSON string with one entry per pad

        Example:
            music_get_pads()
        """
        return json.dumps(
            {
                "status": "success",
                "title": instrument.selection.title,
                "pads": [pad.to_dict() for pad in instrument.pads()],
            }
        )

    tools["music_get_pads"] = music_get_pads

    @mcp.tool  # type: ignore[arg-type]
    async def music_play_pad(slot: int) -> str:
        """
        Play a pad.

        Pads 0-6 are scale degrees 1-7; pad 7 is the tonic an octave up.
        The pad lights for half a second. If sound has not loaded yet the
        pad still lights, silently.

        Args:
            slot: Pad index (0-7)

        Returns:
            JSON string with the pitch played

        Example:
            music_play_pad(slot=4)
        """
        try:
            trigger = instrument.play_pad(slot)
            return json.dumps({"status": "success", **_trigger_dict(trigger)})
        except Exception as e:
            logger.exception("Failed to play pad")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_play_pad"] = music_play_pad

    @mcp.tool  # type: ignore[arg-type]
    async def music_press_key(key: str) -> str:
        """
        Press a keyboard key.

        '1'-'7' play scale degrees, '8' plays the octave tonic,
        'ArrowUp'/'ArrowDown' move the octave. Other keys are ignored.

        Args:
            key: Key name

        Returns:
            JSON string describing what the key did

        Example:
            music_press_key(key="ArrowUp")
        """
        try:
            result = instrument.press_key(key)
            if result is None:
                return json.dumps({"status": "ignored", "key": key})
            if isinstance(result, PadTrigger):
                return json.dumps({"status": "success", "key": key, **_trigger_dict(result)})
            return json.dumps(
                {
                    "status": "success",
                    "key": key,
                    "selection": result.to_dict(),
                    "message": _selection_message(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to handle key press")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_press_key"] = music_press_key

    return tools

#!/usr/bin/env python3
"""
Async Scales MCP Server using chuk-mcp-server

This server exposes an eight-pad scale-practice instrument as MCP tools.
Pick a key, octave and mode; play scale degrees by pad or by number key;
each pad lights for the length of its note.

The server provides tools for:
- Looking up keys, modes and scale pitches
- Changing the instrument's key, octave and mode
- Playing pads and pressing keys
- Reading which pads are lit
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_scales.config import DEFAULT_CONFIG_NAME, load_config
from chuk_mcp_scales.instrument import ScaleInstrument
from chuk_mcp_scales.playback import AsyncioScheduler, MidiSoundSource
from chuk_mcp_scales.tools import register_instrument_tools, register_scale_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-scales")

# Paths - config from the working directory unless overridden
BASE_PATH = Path.cwd()
CONFIG_PATH = Path(os.environ.get("CHUK_SCALES_CONFIG", BASE_PATH / DEFAULT_CONFIG_NAME))

# Create the instrument; the sound source loads once the event loop runs
config = load_config(CONFIG_PATH)
sound_source = MidiSoundSource.from_config(config.midi)
instrument = ScaleInstrument(sound_source, AsyncioScheduler(), config)

# Register all tools
scale_tools = register_scale_tools(mcp)
instrument_tools = register_instrument_tools(mcp, instrument)

# Export tool functions for direct access
music_list_keys = scale_tools["music_list_keys"]
music_list_modes = scale_tools["music_list_modes"]
music_compute_scale = scale_tools["music_compute_scale"]

music_get_selection = instrument_tools["music_get_selection"]
music_set_selection = instrument_tools["music_set_selection"]
music_get_pads = instrument_tools["music_get_pads"]
music_play_pad = instrument_tools["music_play_pad"]
music_press_key = instrument_tools["music_press_key"]

logger.info("CHUK Scales MCP Server initialized")
logger.info(f"  Config path: {CONFIG_PATH}")
logger.info(f"  MIDI port: {config.midi.port_name or '(default)'}")
logger.info(f"  Selection: {config.selection.title} in {config.selection.key.spell()}")

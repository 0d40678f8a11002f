"""
chuk-mcp-scales - an eight-pad scale-practice instrument.

Pick a key, octave and mode; play the seven scale degrees and the tonic an
octave up, each pad pulsing for the length of its note.
"""

__version__ = "0.1.0"

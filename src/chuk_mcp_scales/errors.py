"""
Exceptions raised by the scale instrument.

Key and slot errors are precondition violations and propagate to the caller.
A sound source that is not ready is an expected startup condition, handled by
the playback coordinator before it can raise.
"""


class InvalidKeyError(ValueError):
    """A key that is not one of the 12 pitch classes."""


class InvalidSlotError(ValueError):
    """A pad slot outside 0-7, or a slot that disagrees with the octave tonic flag."""


class SoundSourceNotReadyError(RuntimeError):
    """Playback was requested from a sound source that has not finished loading."""

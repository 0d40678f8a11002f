"""
Sound sources - where triggered notes are heard.

The playback coordinator only needs the SoundSource protocol. The shipped
implementation sends notes to a live MIDI output port using mido, with the
port opened once, asynchronously, at startup.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

import mido

from chuk_mcp_scales.constants import (
    DEFAULT_CHANNEL,
    DEFAULT_PROGRAM,
    DEFAULT_VELOCITY,
    ErrorMessages,
)
from chuk_mcp_scales.core.scale import ScaleDegree
from chuk_mcp_scales.errors import SoundSourceNotReadyError
from chuk_mcp_scales.models.config import MidiConfig

logger = logging.getLogger(__name__)


class PlayHandle(Protocol):
    """A sounding note."""

    def stop(self) -> None: ...


class SoundSource(Protocol):
    """
    Anything that can play a named pitch such as 'C4'.

    load() is awaited once at startup; close() releases the source.
    """

    def ready(self) -> bool: ...

    def play(self, pitch_name: str) -> PlayHandle: ...

    async def load(self) -> bool: ...

    def close(self) -> None: ...


class MidiPlayHandle:
    """A note sent to a MIDI port; stop() sends the matching note_off once."""

    def __init__(self, port: Any, note: int, channel: int):
        self._port = port
        self.note = note
        self.channel = channel
        self.stopped = False

    def stop(self) -> None:
        if self.stopped:
            return
        self.stopped = True
        self._port.send(mido.Message("note_off", note=self.note, velocity=0, channel=self.channel))

    def __repr__(self) -> str:
        return f"MidiPlayHandle(note={self.note}, stopped={self.stopped})"


class MidiSoundSource:
    """
    Plays pitches on a MIDI output port.

    Readiness moves from not-ready to ready at most once, when load()
    succeeds. If the port cannot be opened the source stays not ready and
    the instrument carries on with visual feedback only.
    """

    def __init__(
        self,
        port_name: str | None = None,
        program: int = DEFAULT_PROGRAM,
        channel: int = DEFAULT_CHANNEL,
        velocity: int = DEFAULT_VELOCITY,
        open_port: Callable[[str | None], Any] | None = None,
    ):
        """
        Initialize the sound source.

        Args:
            port_name: MIDI output port (None = system default)
            program: General MIDI program sent on load (0 = acoustic grand)
            channel: MIDI channel (0-15)
            velocity: Note-on velocity
            open_port: Port factory, defaults to mido.open_output
        """
        self.port_name = port_name
        self.program = program
        self.channel = channel
        self.velocity = velocity
        self._open_port = open_port or mido.open_output
        self._port: Any = None
        self._load_task: asyncio.Task[bool] | None = None

    @classmethod
    def from_config(cls, config: MidiConfig) -> MidiSoundSource:
        """Build from the midi section of the instrument config."""
        return cls(
            port_name=config.port_name,
            program=config.program,
            channel=config.channel,
            velocity=config.velocity,
        )

    def ready(self) -> bool:
        return self._port is not None

    async def load(self) -> bool:
        """
        Open the port and select the instrument voice.

        Concurrent and repeated calls share a single attempt. Cancelling
        one caller does not cancel the shared attempt.

        Returns:
            True if the source is ready
        """
        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self._load())
        return await asyncio.shield(self._load_task)

    async def _load(self) -> bool:
        try:
            port = await asyncio.to_thread(self._open_port, self.port_name)
            port.send(mido.Message("program_change", program=self.program, channel=self.channel))
        except Exception:
            logger.exception(f"Could not open MIDI output {self.port_name or '(default)'}")
            logger.warning("Continuing without sound")
            return False

        self._port = port
        logger.info(f"Sound source ready on {getattr(port, 'name', self.port_name)}")
        return True

    def play(self, pitch_name: str) -> MidiPlayHandle:
        """
        Start a note.

        Raises:
            SoundSourceNotReadyError: If load() has not succeeded
        """
        if self._port is None:
            raise SoundSourceNotReadyError(ErrorMessages.SOUND_NOT_READY)

        note = ScaleDegree.parse(pitch_name).to_midi()
        handle = MidiPlayHandle(self._port, note, self.channel)
        if not 0 <= note <= 127:
            # Top of octave 8 in sharp keys runs past G9
            logger.warning(f"{pitch_name} is outside the MIDI note range, not sent")
            handle.stopped = True
            return handle

        self._port.send(
            mido.Message("note_on", note=note, velocity=self.velocity, channel=self.channel)
        )
        logger.debug(f"note_on {pitch_name} ({note})")
        return handle

    def close(self) -> None:
        """Close the port. The source is not reused afterwards."""
        if self._port is not None:
            self._port.close()

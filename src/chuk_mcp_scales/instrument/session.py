"""
Scale instrument - the session the player interacts with.

Owns the selection (key, octave, mode), the sound source and the playback
coordinator. Pad presses and key presses come in here; pad views go out to
whatever renders them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from chuk_mcp_scales.core.pitch import PitchClass
from chuk_mcp_scales.core.scale import ScaleDegree, ScaleMode, degree_labels, resolve_pad
from chuk_mcp_scales.instrument.keymap import KeyCommand, resolve_key
from chuk_mcp_scales.models.config import InstrumentConfig
from chuk_mcp_scales.models.selection import AppSelection
from chuk_mcp_scales.playback.clock import Scheduler
from chuk_mcp_scales.playback.coordinator import PadState, PadTrigger, PlaybackCoordinator
from chuk_mcp_scales.playback.sound import SoundSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PadView:
    """What a pad shows: its label, the pitch it plays and whether it is lit."""

    slot: int
    label: str
    pitch: ScaleDegree
    active: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "slot": self.slot,
            "label": self.label,
            "pitch": self.pitch.name,
            "active": self.active,
        }


class ScaleInstrument:
    """
    An eight-pad scale instrument.

    Example:
        instrument = ScaleInstrument(MidiSoundSource(), AsyncioScheduler())
        await instrument.start()
        instrument.set_key("D")
        instrument.press_key("3")  # plays F#4
    """

    def __init__(
        self,
        sound_source: SoundSource,
        scheduler: Scheduler,
        config: InstrumentConfig | None = None,
        on_pad_change: Callable[[PadState], None] | None = None,
    ):
        """
        Initialize the instrument.

        Args:
            sound_source: Where notes are played
            scheduler: Clock for note and pad timers
            config: Note duration and initial selection (defaults if None)
            on_pad_change: Called whenever a pad lights up or goes dark
        """
        self.config = config or InstrumentConfig()
        self.sound_source = sound_source
        self.selection = self.config.selection
        self.coordinator = PlaybackCoordinator(
            sound_source,
            scheduler,
            note_duration=self.config.note_duration,
            on_change=on_pad_change,
        )

    @property
    def audio_ready(self) -> bool:
        return self.sound_source.ready()

    async def start(self) -> bool:
        """
        Load the sound source.

        Pads can be played before this completes; they light up silently.

        Returns:
            True if sound is available
        """
        return await self.sound_source.load()

    # Selection

    def set_key(self, key: PitchClass | str) -> AppSelection:
        self.selection = self.selection.with_key(key)
        return self.selection

    def set_octave(self, octave: int) -> AppSelection:
        """Set the octave (1-8); out-of-range values are rejected."""
        self.selection = self.selection.with_octave(octave)
        return self.selection

    def set_mode(self, mode: ScaleMode | str) -> AppSelection:
        self.selection = self.selection.with_mode(mode)
        return self.selection

    def shift_octave(self, delta: int) -> AppSelection:
        """Move the octave up or down, stopping at 1 and 8."""
        self.selection = self.selection.shifted(delta)
        return self.selection

    def scale(self) -> list[ScaleDegree]:
        return self.selection.scale()

    # Input

    def play_pad(self, slot: int) -> PadTrigger:
        """Play a pad by slot; slot 7 is the octave tonic."""
        return self.coordinator.trigger(self.selection, slot)

    def press_key(self, key: str) -> PadTrigger | AppSelection | None:
        """
        Handle a key press.

        Returns:
            The trigger for pad keys, the new selection for arrow keys,
            or None if the key is not mapped
        """
        action = resolve_key(key)
        if action is None:
            return None
        if action.command == KeyCommand.PLAY_PAD and action.slot is not None:
            return self.play_pad(action.slot)
        return self.shift_octave(action.octave_delta)

    # Rendering

    def pads(self) -> list[PadView]:
        """Current view of all eight pads."""
        selection = self.selection
        labels = degree_labels(selection.mode)
        return [
            PadView(
                slot=pad.slot,
                label=labels[pad.slot],
                pitch=resolve_pad(selection.key, selection.octave, selection.mode, pad.slot),
                active=pad.active,
            )
            for pad in self.coordinator.pads
        ]

    def stop(self) -> None:
        """Clear pending pulses and release the sound source."""
        self.coordinator.cancel_all()
        self.sound_source.close()
        logger.info("Scale instrument stopped")

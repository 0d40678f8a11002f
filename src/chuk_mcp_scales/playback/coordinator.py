"""
Playback coordinator - turns pad triggers into sound and a timed pulse.

Each of the 8 pads owns at most one pending deactivation timer. A trigger
cancels that timer before arming a new one, so re-triggering restarts the
pulse: the pad stays lit for exactly one note duration after the most
recent trigger.

Audio stop timers are fire-and-forget and never cancelled; a note that has
started always sounds for its full duration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from chuk_mcp_scales.constants import NOTE_DURATION_MS, OCTAVE_TONIC_SLOT, PAD_COUNT, ErrorMessages
from chuk_mcp_scales.core.scale import ScaleDegree, check_slot, resolve_pad
from chuk_mcp_scales.errors import InvalidSlotError
from chuk_mcp_scales.models.selection import AppSelection
from chuk_mcp_scales.playback.clock import Scheduler, TimerHandle
from chuk_mcp_scales.playback.sound import SoundSource

logger = logging.getLogger(__name__)


class PadState:
    """
    The visual state of one pad.

    `active` is true while the pad's "now playing" pulse is showing.
    """

    __slots__ = ("slot", "active")

    def __init__(self, slot: int):
        self.slot = slot
        self.active = False

    def __repr__(self) -> str:
        return f"PadState(slot={self.slot}, active={self.active})"


@dataclass(frozen=True)
class PadTrigger:
    """Outcome of a trigger: which pad, which pitch, and whether it sounded."""

    slot: int
    pitch: ScaleDegree
    sounded: bool


class PlaybackCoordinator:
    """
    Owns the 8 pad timer slots.

    The coordinator does not keep the selection; callers pass it on
    every trigger.
    """

    def __init__(
        self,
        sound_source: SoundSource,
        scheduler: Scheduler,
        note_duration: float = NOTE_DURATION_MS / 1000,
        on_change: Callable[[PadState], None] | None = None,
    ):
        """
        Initialize the coordinator.

        Args:
            sound_source: Where notes are played
            scheduler: Clock for the audio stop and pad timers
            note_duration: Seconds a note sounds and a pad stays lit
            on_change: Called with a pad whenever its active flag flips
        """
        if note_duration <= 0:
            raise ValueError(f"Note duration must be positive, got {note_duration}")
        self.sound_source = sound_source
        self.scheduler = scheduler
        self.note_duration = note_duration
        self.on_change = on_change
        self._pads = tuple(PadState(slot) for slot in range(PAD_COUNT))
        self._timers: list[TimerHandle | None] = [None] * PAD_COUNT

    @property
    def pads(self) -> tuple[PadState, ...]:
        """Pad states, indexed by slot."""
        return self._pads

    def is_active(self, slot: int) -> bool:
        return self._pads[check_slot(slot)].active

    def pending_timers(self) -> int:
        """Number of pads with a deactivation timer pending."""
        return sum(1 for timer in self._timers if timer is not None)

    def trigger(
        self,
        selection: AppSelection,
        slot: int,
        is_octave_tonic: bool | None = None,
    ) -> PadTrigger:
        """
        Play a pad and start its pulse.

        Args:
            selection: Current key, octave and mode
            slot: Pad index 0-7
            is_octave_tonic: Whether this is the octave tonic pad; defaults
                to slot == 7 and must agree with it when given

        Returns:
            The resolved pitch and whether it was sent to the sound source

        Raises:
            InvalidSlotError: If slot is outside 0-7 or disagrees with is_octave_tonic
        """
        check_slot(slot)
        if is_octave_tonic is not None and is_octave_tonic != (slot == OCTAVE_TONIC_SLOT):
            raise InvalidSlotError(
                ErrorMessages.OCTAVE_TONIC_MISMATCH.format(slot=slot, flag=is_octave_tonic)
            )

        pitch = resolve_pad(selection.key, selection.octave, selection.mode, slot)
        sounded = self._play(pitch)
        self._arm(slot)
        logger.debug(f"Triggered pad {slot} ({pitch.name}, sounded={sounded})")
        return PadTrigger(slot=slot, pitch=pitch, sounded=sounded)

    def cancel_all(self) -> None:
        """Cancel every pending pad timer and clear all pulses."""
        for slot, timer in enumerate(self._timers):
            if timer is not None:
                timer.cancel()
                self._timers[slot] = None
            self._set_active(slot, False)

    def _play(self, pitch: ScaleDegree) -> bool:
        if not self.sound_source.ready():
            logger.debug(f"Sound source not ready, {pitch.name} is visual only")
            return False
        try:
            handle = self.sound_source.play(pitch.name)
        except Exception:
            # The pulse still runs when the sound source fails
            logger.exception(f"Sound source failed to play {pitch.name}")
            return False
        self.scheduler.call_later(self.note_duration, handle.stop)
        return True

    def _arm(self, slot: int) -> None:
        # Cancel first so a stale deactivation can never follow this activation
        previous = self._timers[slot]
        if previous is not None:
            previous.cancel()
            self._timers[slot] = None

        self._set_active(slot, True)
        self._timers[slot] = self.scheduler.call_later(
            self.note_duration, lambda: self._expire(slot)
        )

    def _expire(self, slot: int) -> None:
        self._timers[slot] = None
        self._set_active(slot, False)

    def _set_active(self, slot: int, active: bool) -> None:
        pad = self._pads[slot]
        if pad.active == active:
            return
        pad.active = active
        if self.on_change is not None:
            self.on_change(pad)

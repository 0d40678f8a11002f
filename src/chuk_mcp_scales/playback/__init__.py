"""
Playback - sound sources, the scheduler clock and the pad coordinator.
"""

from chuk_mcp_scales.playback.clock import (
    AsyncioScheduler,
    ManualScheduler,
    Scheduler,
    TimerHandle,
)
from chuk_mcp_scales.playback.coordinator import PadState, PadTrigger, PlaybackCoordinator
from chuk_mcp_scales.playback.sound import (
    MidiPlayHandle,
    MidiSoundSource,
    PlayHandle,
    SoundSource,
)

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "MidiPlayHandle",
    "MidiSoundSource",
    "PadState",
    "PadTrigger",
    "PlayHandle",
    "PlaybackCoordinator",
    "Scheduler",
    "SoundSource",
    "TimerHandle",
]

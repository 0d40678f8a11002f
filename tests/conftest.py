"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_scales.playback import ManualScheduler


class RecordingHandle:
    """Play handle that records when it was stopped."""

    def __init__(self, pitch_name: str, clock: ManualScheduler):
        self.pitch_name = pitch_name
        self._clock = clock
        self.stopped_at: float | None = None

    def stop(self) -> None:
        self.stopped_at = self._clock.now


class RecordingSoundSource:
    """Sound source that records every note it is asked to play."""

    def __init__(self, clock: ManualScheduler, is_ready: bool = True):
        self._clock = clock
        self.is_ready = is_ready
        self.played: list[RecordingHandle] = []
        self.loads = 0
        self.closed = False

    def ready(self) -> bool:
        return self.is_ready

    async def load(self) -> bool:
        self.loads += 1
        return self.is_ready

    def close(self) -> None:
        self.closed = True

    def play(self, pitch_name: str) -> RecordingHandle:
        handle = RecordingHandle(pitch_name, self._clock)
        self.played.append(handle)
        return handle

    @property
    def pitch_names(self) -> list[str]:
        return [handle.pitch_name for handle in self.played]


class FakePort:
    """Stand-in for a mido output port."""

    def __init__(self, name: str = "fake"):
        self.name = name
        self.messages: list = []
        self.closed = False

    def send(self, message) -> None:
        self.messages.append(message)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clock() -> ManualScheduler:
    """A manually advanced clock."""
    return ManualScheduler()


@pytest.fixture
def sound(clock: ManualScheduler) -> RecordingSoundSource:
    """A ready sound source recording every note."""
    return RecordingSoundSource(clock)


@pytest.fixture
def silent_sound(clock: ManualScheduler) -> RecordingSoundSource:
    """A sound source that never finished loading."""
    return RecordingSoundSource(clock, is_ready=False)


@pytest.fixture
def port() -> FakePort:
    """A fake MIDI output port."""
    return FakePort()

"""
Tests for the MIDI sound source.

A fake port stands in for the mido output port so no MIDI backend is needed.
"""

import asyncio

import pytest

from chuk_mcp_scales.errors import SoundSourceNotReadyError
from chuk_mcp_scales.models import MidiConfig
from chuk_mcp_scales.playback import MidiSoundSource


def make_source(port, **kwargs) -> MidiSoundSource:
    """Build a source whose port factory returns the given port."""
    opened: list[str | None] = []

    def open_port(name: str | None):
        opened.append(name)
        return port

    source = MidiSoundSource(open_port=open_port, **kwargs)
    source.opened = opened  # type: ignore[attr-defined]
    return source


class TestLoad:
    """Tests for loading the sound source."""

    def test_not_ready_before_load(self, port) -> None:
        """A fresh source is not ready."""
        source = make_source(port)
        assert source.ready() is False

    @pytest.mark.asyncio
    async def test_load_selects_program(self, port) -> None:
        """Loading opens the port and sends the program change."""
        source = make_source(port, port_name="synth", program=5, channel=2)

        assert await source.load() is True

        assert source.ready() is True
        assert source.opened == ["synth"]
        message = port.messages[0]
        assert message.type == "program_change"
        assert message.program == 5
        assert message.channel == 2

    @pytest.mark.asyncio
    async def test_load_once(self, port) -> None:
        """Repeated loads share the first attempt."""
        source = make_source(port)
        assert await source.load() is True
        assert await source.load() is True
        assert len(source.opened) == 1

    @pytest.mark.asyncio
    async def test_cancelled_caller_does_not_break_load(self, port) -> None:
        """A cancelled load() leaves the shared attempt running."""
        source = make_source(port)

        first = asyncio.create_task(source.load())
        await asyncio.sleep(0)
        first.cancel()
        with pytest.raises(asyncio.CancelledError):
            await first

        assert await source.load() is True
        assert source.ready() is True
        assert len(source.opened) == 1

    @pytest.mark.asyncio
    async def test_load_failure_stays_not_ready(self) -> None:
        """A port that cannot be opened leaves the source silent."""

        def broken(name: str | None):
            raise OSError("no MIDI devices")

        source = MidiSoundSource(open_port=broken)

        assert await source.load() is False
        assert source.ready() is False

    def test_from_config(self) -> None:
        """Config values are carried over."""
        source = MidiSoundSource.from_config(
            MidiConfig(port_name="IAC", program=1, channel=3, velocity=90)
        )
        assert source.port_name == "IAC"
        assert source.program == 1
        assert source.channel == 3
        assert source.velocity == 90


class TestPlay:
    """Tests for playing notes."""

    def test_play_before_ready_raises(self, port) -> None:
        """Direct play on an unloaded source is an error."""
        source = make_source(port)
        with pytest.raises(SoundSourceNotReadyError):
            source.play("C4")

    @pytest.mark.asyncio
    async def test_play_and_stop(self, port) -> None:
        """play sends note_on; stop sends one note_off."""
        source = make_source(port, velocity=80)
        await source.load()

        handle = source.play("A4")
        handle.stop()
        handle.stop()

        assert [m.type for m in port.messages] == ["program_change", "note_on", "note_off"]
        note_on = port.messages[1]
        assert note_on.note == 69
        assert note_on.velocity == 80
        assert port.messages[2].note == 69

    @pytest.mark.asyncio
    async def test_flat_spelling(self, port) -> None:
        """Bb names map to the right MIDI note."""
        source = make_source(port)
        await source.load()
        assert source.play("Bb3").note == 58

    @pytest.mark.asyncio
    async def test_out_of_range_not_sent(self, port) -> None:
        """Notes above G9 are skipped."""
        source = make_source(port)
        await source.load()

        handle = source.play("Bb9")
        handle.stop()

        assert [m.type for m in port.messages] == ["program_change"]

    @pytest.mark.asyncio
    async def test_close(self, port) -> None:
        """close closes the port."""
        source = make_source(port)
        await source.load()
        source.close()
        assert port.closed is True

#!/usr/bin/env python3
"""
Example: Playing the Scale Instrument.

This walks through a short practice session: pick a key, play every pad,
re-trigger a pad mid-pulse and move the octave with the arrow keys.

By default notes are printed and time is advanced by hand, so no MIDI
device is needed. Pass --midi to hear it on the first MIDI output port
(requires the 'audio' extra).

Usage:
    python examples/play_scale.py
    python examples/play_scale.py --midi
"""

import argparse
import asyncio

from chuk_mcp_scales.instrument import ScaleInstrument
from chuk_mcp_scales.playback import AsyncioScheduler, ManualScheduler, MidiSoundSource
from chuk_mcp_scales.playback.coordinator import PadState


class PrintHandle:
    def __init__(self, pitch_name: str, clock: ManualScheduler):
        self.pitch_name = pitch_name
        self.clock = clock

    def stop(self) -> None:
        print(f"    [{self.clock.now:4.2f}s] release {self.pitch_name}")


class PrintSoundSource:
    """Sound source that prints notes instead of playing them."""

    def __init__(self, clock: ManualScheduler):
        self.clock = clock

    def ready(self) -> bool:
        return True

    async def load(self) -> bool:
        return True

    def close(self) -> None:
        pass

    def play(self, pitch_name: str) -> PrintHandle:
        print(f"    [{self.clock.now:4.2f}s] play {pitch_name}")
        return PrintHandle(pitch_name, self.clock)


def render(instrument: ScaleInstrument) -> str:
    cells = []
    for pad in instrument.pads():
        mark = "*" if pad.active else " "
        cells.append(f"{mark}{pad.label}:{pad.pitch.name}{mark}")
    return " | ".join(cells)


def offline_demo() -> None:
    """Demonstrate the instrument with a hand-driven clock."""
    print("CHUK Scale Instrument Demo")
    print("=" * 40)
    print()

    clock = ManualScheduler()

    def on_change(pad: PadState) -> None:
        state = "on" if pad.active else "off"
        print(f"    [{clock.now:4.2f}s] pad {pad.slot + 1} {state}")

    instrument = ScaleInstrument(PrintSoundSource(clock), clock, on_pad_change=on_change)

    # Pick a key
    instrument.set_key("B")
    print(f"{instrument.selection.title} in B, octave {instrument.selection.octave}:")
    print("  " + render(instrument))
    print()

    # Play every pad in turn
    print("Playing pads 1-8:")
    for key in "12345678":
        instrument.press_key(key)
        clock.advance(0.5)
    print()

    # A re-trigger restarts the pulse
    print("Re-triggering pad 1 after 250ms:")
    instrument.press_key("1")
    clock.advance(0.25)
    instrument.press_key("1")
    print("  " + render(instrument))
    clock.advance(0.5)
    print()

    # Minor mode, one octave down
    instrument.set_mode("minor")
    instrument.press_key("ArrowDown")
    print(f"{instrument.selection.title} in B, octave {instrument.selection.octave}:")
    print("  " + render(instrument))
    print()

    instrument.stop()
    print("Demo complete!")


async def midi_demo() -> None:
    """Play the current scale up and down on a real MIDI port."""
    instrument = ScaleInstrument(MidiSoundSource(), AsyncioScheduler())
    if not await instrument.start():
        print("No MIDI output available; pads would light silently.")

    try:
        for slot in [*range(8), *reversed(range(7))]:
            trigger = instrument.play_pad(slot)
            print(f"  pad {slot + 1}: {trigger.pitch.name}")
            await asyncio.sleep(0.5)
        await asyncio.sleep(0.5)
    finally:
        instrument.stop()


def main() -> None:
    parser = argparse.ArgumentParser(description="Scale instrument demo")
    parser.add_argument("--midi", action="store_true", help="Play on a MIDI output port")
    args = parser.parse_args()

    if args.midi:
        asyncio.run(midi_demo())
    else:
        offline_demo()


if __name__ == "__main__":
    main()

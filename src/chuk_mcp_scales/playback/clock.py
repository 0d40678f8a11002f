"""
Schedulers - the single event-driven clock behind every timer.

All timers run on one cooperative clock: callbacks fire one at a time and
never interleave with a trigger. Production code schedules on the asyncio
event loop; tests drive a ManualScheduler by hand.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """A pending callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Schedules callbacks after a delay in seconds."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """
    Scheduler backed by the running asyncio loop.

    The loop is looked up on every call, so the scheduler can be built
    before the loop starts (e.g. at module import in the server).
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(delay, callback)


class ManualTimer:
    """Handle returned by ManualScheduler."""

    __slots__ = ("when", "callback", "cancelled")

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"ManualTimer(when={self.when:.3f}, {state})"


class ManualScheduler:
    """
    Deterministic clock advanced explicitly.

    Due callbacks fire in time order; callbacks due at the same instant fire
    in the order they were scheduled. Cancelled timers never fire.

    Example:
        clock = ManualScheduler()
        clock.call_later(0.5, done)
        clock.advance(0.5)  # done() runs here
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._sequence = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        timer = ManualTimer(self.now + delay, callback)
        heapq.heappush(self._queue, (timer.when, next(self._sequence), timer))
        return timer

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing every timer that comes due.

        Returns:
            Number of callbacks that fired
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds})")
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = when
            timer.callback()
            fired += 1
        self.now = target
        return fired

    def pending(self) -> int:
        """Number of timers still waiting to fire."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

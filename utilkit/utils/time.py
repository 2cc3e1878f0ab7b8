"""
Time and clock abstractions for deterministic testing.

This module provides a simple, testable way to obtain "now" and to wait for a
duration via a clock object, rather than calling datetime.now() or
asyncio.sleep() directly. Code that needs time (the simulated fetcher, the
timestamped greeting) takes a Clock, so tests can substitute a ManualClock and
run instantly and reproducibly.

The key insight: depending on a Clock abstraction instead of system time makes
timer-based code testable without real delays. A ManualClock "sleeps" by
advancing its own virtual time.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import List, Protocol


class Clock(Protocol):
    """
    Abstract time source protocol.

    **Conceptual**: A Clock is any object that can answer "what time is it?"
    and can suspend the current coroutine for a given duration. By depending on
    this abstraction, timer-based code becomes deterministic under test.

    **Usage**: Consumers accept a Clock instance (injected via constructor or
    function parameter). In production pass a RealClock; in tests pass a
    ManualClock.

    **Example**:
        async def run(clock: Clock):
            started = clock.now()
            await clock.sleep(0.1)
            return clock.now() - started

        asyncio.run(run(RealClock()))        # waits ~100ms
        asyncio.run(run(ManualClock(t0)))    # returns immediately, exactly 100ms
    """

    def now(self) -> datetime:
        """
        Return the current time according to this clock.

        Returns:
            datetime object representing "now" (timezone-aware, UTC preferred).
        """
        ...

    async def sleep(self, seconds: float) -> None:
        """
        Suspend the calling coroutine for the given number of seconds.

        Args:
            seconds: Non-negative duration.
        """
        ...


class RealClock:
    """
    Clock backed by the system clock and the running asyncio event loop.

    **Usage**:
        clock = RealClock()
        current_time = clock.now()  # Returns current UTC time
        await clock.sleep(0.05)     # Really waits 50ms
    """

    def now(self) -> datetime:
        """
        Return the current UTC time from the system clock.

        Returns:
            datetime object with current time in UTC timezone.
        """
        return datetime.now(timezone.utc)

    async def sleep(self, seconds: float) -> None:
        """Wait on the event loop timer for the given number of seconds."""
        await asyncio.sleep(seconds)


class ManualClock:
    """
    Clock with virtual time that only moves when told to (for deterministic tests).

    **Conceptual**: now() returns a stored timestamp. sleep() does not wait for
    real time; it advances the stored timestamp by the requested duration,
    records the duration, and yields control to the event loop once so other
    tasks still interleave as they would with a real timer.

    **Usage**:
        clock = ManualClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
        await clock.sleep(0.1)
        clock.now()      # 2024-01-01T00:00:00.100000+00:00
        clock.sleeps     # [0.1]

    Attributes:
        sleeps: Durations (seconds) passed to sleep(), in call order.
    """

    def __init__(self, start: datetime):
        """
        Initialize a ManualClock at a fixed timestamp.

        Args:
            start: Initial value returned by now().
                   Should be timezone-aware (UTC recommended).
        """
        self._now = start
        self.sleeps: List[float] = []

    def now(self) -> datetime:
        """Return the current virtual time."""
        return self._now

    def advance(self, seconds: float) -> None:
        """
        Move virtual time forward without suspending.

        Raises:
            ValueError: If seconds is negative (time never runs backwards) or
                moves the clock outside the datetime range.
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance clock by a negative duration: {seconds}")
        try:
            self._now = self._now + timedelta(seconds=seconds)
        except OverflowError:
            raise ValueError(f"Cannot advance clock by {seconds}s: out of datetime range")

    async def sleep(self, seconds: float) -> None:
        """Advance virtual time by seconds and yield to the event loop once."""
        self.advance(seconds)
        self.sleeps.append(seconds)
        await asyncio.sleep(0)


def get_real_clock() -> Clock:
    """
    Factory function to create a RealClock instance.

    Returns:
        RealClock instance.
    """
    return RealClock()


def get_manual_clock(start: datetime) -> Clock:
    """
    Factory function to create a ManualClock starting at a given timestamp.

    **Usage**:
        # In a test setup:
        clock = get_manual_clock(datetime(2015, 1, 5, tzinfo=timezone.utc))
        # Pass clock to functions/classes that need deterministic time

    Args:
        start: The datetime the clock starts at (timezone-aware recommended).

    Returns:
        ManualClock instance configured with start.
    """
    return ManualClock(start)

"""
Simulated data fetcher driven by a clock.

**Conceptual**: SimulatedFetcher stands in for a slow data source. It waits for
the requested delay on its injected Clock, then resolves with a message that
mentions the delay. With a RealClock the wait is real (asyncio timer); with a
ManualClock it is virtual and instant, which keeps tests fast and exact.

**Delay policy**:
  - Any number of milliseconds from 0 up to MAX_DELAY_MS (one day) is valid,
    including 0 (resolves after a single event loop turn).
  - Negative, NaN, infinite, over-limit and non-numeric delays are rejected with
    InvalidDelayError. The check runs inside the coroutine, so the caller
    sees the rejection when awaiting, like any other async failure.

There is no cancellation API; cancelling the awaiting task interrupts the
clock's sleep through normal asyncio cancellation.
"""

import logging
import math
from typing import Optional

from utilkit.fetch.base import DataFetcher
from utilkit.utils.errors import InvalidDelayError
from utilkit.utils.messages import get_message
from utilkit.utils.time import Clock, get_real_clock
from utilkit.utils.validation import is_number

logger = logging.getLogger(__name__)

# Upper bound keeps virtual clocks inside the datetime range
MAX_DELAY_MS = 24 * 60 * 60 * 1000


class SimulatedFetcher:
    """
    DataFetcher that completes after a timer instead of doing real I/O.

    Attributes:
        clock: Time source used to wait (RealClock unless injected).
        locale: Locale for result and error messages (None = configured locale).
    """

    def __init__(self, clock: Optional[Clock] = None, locale: Optional[str] = None):
        self.clock = clock or get_real_clock()
        self.locale = locale

    def _validate_delay(self, delay_ms) -> None:
        valid = is_number(delay_ms)
        if valid:
            try:
                as_float = float(delay_ms)
            except OverflowError:
                # ints beyond float range, e.g. 10**400
                valid = False
            else:
                valid = math.isfinite(as_float) and 0 <= as_float <= MAX_DELAY_MS

        if not valid:
            raise InvalidDelayError(
                get_message("invalid_delay", self.locale, delay_ms=delay_ms),
                delay_ms=delay_ms,
            )

    async def fetch(self, delay_ms: float) -> str:
        """
        Wait delay_ms milliseconds on the clock, then return a message.

        Args:
            delay_ms: Delay in milliseconds, between 0 and MAX_DELAY_MS.

        Returns:
            "Data after {delay_ms}ms" (localized).

        Raises:
            InvalidDelayError: If delay_ms is not a usable delay.
        """
        try:
            self._validate_delay(delay_ms)
        except InvalidDelayError:
            logger.debug("Rejecting fetch with delay %r", delay_ms)
            raise

        logger.debug("Fetching with simulated delay of %sms", delay_ms)
        await self.clock.sleep(delay_ms / 1000.0)
        return get_message("fetch_result", self.locale, delay_ms=delay_ms)


def get_default_fetcher() -> DataFetcher:
    """Return a SimulatedFetcher on the real clock with the configured locale."""
    return SimulatedFetcher(clock=get_real_clock())


async def fetch_data(delay_ms: float, *, fetcher: Optional[DataFetcher] = None) -> str:
    """
    Fetch data asynchronously, completing after delay_ms milliseconds.

    Delegates to the given fetcher, or to a SimulatedFetcher on the real clock.
    Whatever the fetcher raises propagates unchanged to the awaiting caller.

    Args:
        delay_ms: Delay in milliseconds.
        fetcher: Data source to use (inject a stub in tests).

    Returns:
        Text message from the fetcher, e.g. "Data after 100ms".

    Raises:
        AsyncFailureError: If the fetch is rejected (e.g. InvalidDelayError).

    Usage example:
        >>> await fetch_data(100)
        'Data after 100ms'
    """
    if fetcher is None:
        fetcher = get_default_fetcher()
    return await fetcher.fetch(delay_ms)

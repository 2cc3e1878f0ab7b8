"""
Base abstraction for data fetchers.

**Conceptual**: This module defines the DataFetcher protocol, the interface
every data source behind fetch_data must implement. Code that needs data takes
a DataFetcher instead of calling a concrete implementation, so tests can hand
in a stub that resolves or rejects on demand instead of patching modules.

**Why protocols over inheritance?**
  - Structural typing: any object with a matching async fetch() qualifies.
  - Stubs in tests need no base class.

**Contract** all implementations MUST honour:
  1. fetch() is a coroutine function; one call completes exactly once.
  2. On success it resolves to a text message.
  3. On failure it raises an AsyncFailureError subclass when awaited
     (not when the coroutine is created).
"""

from typing import Protocol


class DataFetcher(Protocol):
    """
    Protocol for asynchronous data fetches.

    **Example usage**:
        >>> fetcher = SimulatedFetcher(clock=ManualClock(t0))
        >>> await fetch_data(100, fetcher=fetcher)
        'Data after 100ms'
    """

    async def fetch(self, delay_ms: float) -> str:
        """
        Fetch data, completing after roughly delay_ms milliseconds.

        Args:
            delay_ms: How long the fetch takes, in milliseconds.

        Returns:
            Text describing the fetched data.

        Raises:
            AsyncFailureError: If the fetch cannot complete (e.g. InvalidDelayError).
        """
        ...

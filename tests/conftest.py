"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import utilkit...' and
'import main' work, and provides shared fixtures.
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from utilkit.config.settings import reset_settings  # noqa: E402
from utilkit.utils.errors import AsyncFailureError  # noqa: E402
from utilkit.utils.time import get_manual_clock  # noqa: E402


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """
    Run every test with default settings (English locale).

    Clears UTILKIT_* variables and the settings singleton before the test and
    resets the singleton again afterwards.
    """
    for name in ("UTILKIT_LOCALE", "UTILKIT_LOG_LEVEL", "UTILKIT_DEFAULT_DELAY_MS"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def start_time():
    return datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def manual_clock(start_time):
    """ManualClock starting at start_time (virtual time, no real waiting)."""
    return get_manual_clock(start_time)


class StubFetcher:
    """
    DataFetcher stand-in for tests.

    Resolves with "Stub: data after {delay_ms}ms" unless told to fail, and
    records every delay it was asked for.
    """

    def __init__(self):
        self.requests = []
        self._error = None

    def fail_next(self, error: AsyncFailureError) -> None:
        """Make the next fetch raise error (only once)."""
        self._error = error

    async def fetch(self, delay_ms):
        self.requests.append(delay_ms)
        if self._error is not None:
            error, self._error = self._error, None
            raise error
        return f"Stub: data after {delay_ms}ms"


@pytest.fixture
def stub_fetcher():
    return StubFetcher()

"""
Tests for utilkit/utils/monitoring.py

CallRecorder must be transparent: same results, same exceptions, plus a record
of every call.
"""

import pytest

from utilkit.fetch.simulated import SimulatedFetcher
from utilkit.utils.arithmetic import multiply
from utilkit.utils.errors import InvalidArgumentError
from utilkit.utils.monitoring import CallRecorder, record_calls
from utilkit.utils.text import greet


def test_record_calls_returns_recorder():
    """Test record_calls wraps the function and keeps its metadata."""
    recorded = record_calls(greet)

    assert isinstance(recorded, CallRecorder)
    assert recorded.wrapped is greet
    assert recorded.__name__ == "greet"
    assert not recorded.called


def test_recorder_forwards_results_and_records_arguments():
    """Test positional and keyword arguments are both recorded."""
    recorded = record_calls(greet)

    assert recorded("Alice") == "Hello, Alice!"
    assert recorded("Alice", locale="fr") == "Bonjour, Alice !"

    assert recorded.called
    assert recorded.call_count == 2
    assert recorded.calls == [(("Alice",), {}), (("Alice",), {"locale": "fr"})]
    assert recorded.was_called_with("Alice", locale="fr")
    assert not recorded.was_called_with("Bob")


def test_recorder_records_calls_that_raise():
    """Test failing calls are recorded and the exception passes through."""
    recorded = record_calls(multiply)

    with pytest.raises(InvalidArgumentError):
        recorded("a", 2)

    assert recorded.calls == [(("a", 2), {})]


def test_recorder_reset():
    """Test reset() clears recorded calls."""
    recorded = record_calls(multiply)
    recorded(2, 3)

    recorded.reset()

    assert recorded.call_count == 0
    assert not recorded.called


@pytest.mark.asyncio
async def test_recorder_wraps_coroutine_functions(manual_clock):
    """Test awaiting the recorder's result awaits the original coroutine."""
    fetcher = SimulatedFetcher(clock=manual_clock)
    recorded = record_calls(fetcher.fetch)

    result = await recorded(100)

    assert result == "Data after 100ms"
    assert recorded.was_called_with(100)

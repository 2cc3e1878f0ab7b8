"""
Call recording for observing functions without changing them.

**Conceptual**: A CallRecorder wraps a callable, remembers every call's
arguments, and forwards the call unchanged. It is the explicit, injectable
counterpart of patching a module attribute with a spy: the caller decides
which function to observe and holds the recorder, so nothing global changes.

**Usage**:
    recorded = record_calls(multiply)
    recorded(2, 3)          # 6
    recorded.call_count     # 1
    recorded.calls          # [((2, 3), {})]

Works for coroutine functions too: the wrapper returns whatever the wrapped
callable returns, so awaiting the result awaits the original coroutine.
"""

import functools
import logging
from typing import Any, Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

RecordedCall = Tuple[Tuple[Any, ...], Dict[str, Any]]


class CallRecorder:
    """
    Transparent wrapper that records the arguments of each call.

    Calls are recorded before the wrapped function runs, so calls that raise
    are recorded as well.

    Attributes:
        wrapped: The observed callable.
        calls: (args, kwargs) for each call, in call order.
    """

    def __init__(self, func: Callable):
        self.wrapped = func
        self.calls: List[RecordedCall] = []
        functools.update_wrapper(self, func)

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        logger.debug("Call #%d to %s: args=%r kwargs=%r",
                     len(self.calls), getattr(self.wrapped, "__name__", self.wrapped),
                     args, kwargs)
        return self.wrapped(*args, **kwargs)

    @property
    def call_count(self) -> int:
        """Number of recorded calls."""
        return len(self.calls)

    @property
    def called(self) -> bool:
        """True once at least one call was recorded."""
        return bool(self.calls)

    def was_called_with(self, *args, **kwargs) -> bool:
        """Return True if any recorded call used exactly these arguments."""
        return (args, kwargs) in self.calls

    def reset(self) -> None:
        """Forget all recorded calls."""
        self.calls.clear()


def record_calls(func: Callable) -> CallRecorder:
    """Wrap func in a CallRecorder."""
    return CallRecorder(func)

"""
Error classes raised by the utilities.

**Conceptual**: Every failure the utilities can produce belongs to one of two
kinds. InvalidArgument errors are raised synchronously when a caller passes a
value of the wrong type or shape. AsyncFailure errors surface when an awaited
operation (fetch_data) cannot complete. Callers can catch UtilityError to handle
both, or catch the specific subclass for fine-grained handling.

The concrete classes also inherit from the matching built-in exception
(TypeError, ValueError), so code written against plain Python conventions
keeps working:

    try:
        multiply("a", 2)
    except TypeError:
        ...
"""


class UtilityError(Exception):
    """
    Base exception for all utilkit errors.

    Attributes:
        kind: Short, stable name of the error category (e.g. "InvalidArgument").
    """
    kind = "UtilityError"


class InvalidArgumentError(UtilityError, TypeError):
    """
    Raised when a caller-supplied value fails type/shape validation.

    **Examples**: multiply("a", 2), filter_even(None).

    **Recovery**: None; fix the calling code. Raised immediately, never retried.
    """
    kind = "InvalidArgument"


class AsyncFailureError(UtilityError):
    """
    Raised when an asynchronous operation could not complete successfully.

    Surfaces to the caller only when the coroutine is awaited.
    """
    kind = "AsyncFailure"


class InvalidDelayError(AsyncFailureError, ValueError):
    """
    Raised by a fetcher when the requested delay is unusable.

    **Examples**: negative delay, NaN, infinity, non-numeric delay.

    Attributes:
        delay_ms: The rejected delay value, kept for diagnostics.
    """
    kind = "InvalidDelay"

    def __init__(self, message: str, delay_ms=None):
        super().__init__(message)
        self.delay_ms = delay_ms

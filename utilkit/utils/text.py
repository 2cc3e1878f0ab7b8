"""
Greeting helpers.

greet() is total over names: no name value makes it raise. Anything that is not
a non-empty string is greeted as the "unknown" person. Only an unsupported
locale (a configuration error) makes it raise.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from utilkit.utils.messages import get_message
from utilkit.utils.time import Clock, get_real_clock


def greet(name: Any, *, locale: Optional[str] = None) -> str:
    """
    Return a greeting for name.

    Args:
        name: Person to greet. Only non-empty strings are used verbatim;
              "", None, numbers and other objects fall back to "unknown".
        locale: Locale for the greeting (None = configured locale).

    Returns:
        "Hello, {name}!" or "Hello, unknown!" (localized).

    Raises:
        ValueError: Only for a configuration error: an unsupported locale
            passed explicitly or set in UTILKIT_LOCALE. The name itself never
            causes an error.

    Examples:
        >>> greet("Alice", locale="en")
        'Hello, Alice!'
        >>> greet(123, locale="en")
        'Hello, unknown!'
    """
    if not isinstance(name, str) or name == "":
        name = get_message("unknown_name", locale)
    return get_message("greeting", locale, name=name)


@dataclass(frozen=True)
class Greeting:
    """
    A greeting stamped with the time it was produced.

    Attributes:
        message: The greeting text, as returned by greet().
        timestamp: When the greeting was built (timezone-aware).
    """
    message: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, str]:
        """Return a JSON-friendly dict with an ISO-8601 timestamp."""
        return {
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


def build_greeting(
    name: Any,
    clock: Optional[Clock] = None,
    *,
    locale: Optional[str] = None,
) -> Greeting:
    """
    Build a timestamped Greeting for name.

    Pass a ManualClock to get a fully deterministic result that can be
    compared against a literal expected value in tests.

    Args:
        name: Person to greet (same rules as greet()).
        clock: Time source (default RealClock).
        locale: Locale for the greeting (None = configured locale).

    Returns:
        Greeting with message and timestamp.
    """
    clock = clock or get_real_clock()
    return Greeting(message=greet(name, locale=locale), timestamp=clock.now())

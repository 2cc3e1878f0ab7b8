"""
Arithmetic utilities.

Both functions are pure: no side effects, identical inputs always give
identical outputs. That makes them safe to wrap with a call recorder
(see utilkit.utils.monitoring) without altering behaviour.
"""

from typing import Optional

from utilkit.utils.validation import require_numbers


def add(a, b):
    """
    Return the sum of two numbers.

    **Conceptual**: Plain addition. Negative and fractional values work as
    expected; float results carry the usual floating point rounding, so compare
    them with pytest.approx rather than ==.

    No validation is performed: non-numeric inputs fall through to Python's
    own + operator (so add("a", "b") concatenates, add(1, "b") raises TypeError).

    Args:
        a: First operand.
        b: Second operand.

    Returns:
        a + b

    Examples:
        >>> add(2, 3)
        5
        >>> add(-1, 1)
        0
    """
    return a + b


def multiply(a, b, *, locale: Optional[str] = None):
    """
    Return the product of two numbers.

    Unlike add, multiply validates its inputs: strings, None, bools and
    containers are rejected, which prevents surprises such as "ab" * 2.

    Args:
        a: First factor (int, float or numpy scalar).
        b: Second factor.
        locale: Locale for the error message (None = configured locale).

    Returns:
        a * b

    Raises:
        InvalidArgumentError: If a or b is not a number
            ("arguments must be numbers").

    Examples:
        >>> multiply(4, 5)
        20
    """
    require_numbers(a, b, locale=locale)
    return a * b

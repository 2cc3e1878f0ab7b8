"""
Input validation helpers shared by the utilities.

**Conceptual**: Python is duck-typed, so "is this a number?" and "is this an
ordered sequence?" need an explicit, consistent answer. Centralising the checks
here keeps multiply, filter_even and the fetchers in agreement.

**Rules**:
  - A number is any numbers.Real that is not a bool. numpy scalar types
    (np.int64, np.float64) register with the numbers ABCs and count as numbers.
  - An ordered sequence is a list, tuple, range or other collections.abc.Sequence
    that is not text, a 1-D numpy array, or a pandas Series.
"""

import logging
import numbers
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np
import pandas as pd

from utilkit.utils.errors import InvalidArgumentError
from utilkit.utils.messages import get_message

logger = logging.getLogger(__name__)

# str/bytes are Sequences in Python but are text, not containers of numbers
_TEXT_TYPES = (str, bytes, bytearray)


def is_number(value: Any) -> bool:
    """
    Return True if value is a real number (bools excluded).

    Examples:
        >>> is_number(3), is_number(2.5), is_number(np.int64(4))
        (True, True, True)
        >>> is_number("3"), is_number(None), is_number(True)
        (False, False, False)
    """
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def is_ordered_sequence(value: Any) -> bool:
    """
    Return True if value is an ordered, non-text sequence.

    numpy arrays are accepted only when one-dimensional.
    """
    if isinstance(value, pd.Series):
        return True
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, Sequence)


def require_numbers(*values: Any, locale: Optional[str] = None) -> None:
    """
    Raise InvalidArgumentError unless every value is a number.

    Args:
        *values: Values to check.
        locale: Locale for the error message (None = configured locale).

    Raises:
        InvalidArgumentError: If any value is not a number.
    """
    for value in values:
        if not is_number(value):
            logger.debug("Rejected non-numeric argument: %r", value)
            raise InvalidArgumentError(
                get_message("arguments_must_be_numbers", locale)
            )


def require_ordered_sequence(value: Any, locale: Optional[str] = None) -> None:
    """
    Raise InvalidArgumentError unless value is an ordered sequence.

    Raises:
        InvalidArgumentError: If value is None, text, a mapping/set, a scalar,
            or a multi-dimensional array.
    """
    if not is_ordered_sequence(value):
        logger.debug("Rejected non-sequence argument of type %s", type(value).__name__)
        raise InvalidArgumentError(
            get_message("argument_must_be_sequence", locale)
        )

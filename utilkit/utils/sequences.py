"""
Sequence utilities.

**Conceptual**: filter_even keeps the even-valued elements of an ordered
sequence and drops everything else, preserving order. It accepts plain Python
sequences as well as numpy arrays and pandas Series, and returns the same kind
of container it was given so callers can keep working in their own idiom:

  - list, range, other Sequence -> list
  - tuple -> tuple
  - 1-D numpy.ndarray -> numpy.ndarray (vectorised)
  - pandas.Series -> pandas.Series (original index labels kept)

An element is even when it is a number (see utilkit.utils.validation.is_number)
and value % 2 == 0. Non-numeric elements, NaN and infinities are never even.
"""

from typing import Any, Optional

import numpy as np
import pandas as pd

from utilkit.utils.validation import is_number, require_ordered_sequence


def _is_even(value: Any) -> bool:
    return is_number(value) and value % 2 == 0


def _even_mask_numeric(values: np.ndarray) -> np.ndarray:
    # inf % 2 yields NaN with an "invalid value" warning; NaN is simply not even
    with np.errstate(invalid="ignore"):
        return values % 2 == 0


def _has_real_dtype(dtype) -> bool:
    return np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)


def _has_real_series_dtype(series: pd.Series) -> bool:
    dtype = series.dtype
    return (
        pd.api.types.is_numeric_dtype(dtype)
        and not pd.api.types.is_bool_dtype(dtype)
        and not pd.api.types.is_complex_dtype(dtype)
    )


def filter_even(sequence, *, locale: Optional[str] = None):
    """
    Return the even-valued elements of sequence, in order.

    The input is never modified; a new container is always returned.

    Args:
        sequence: Ordered sequence of numbers (list, tuple, range, 1-D ndarray,
                  pandas Series, or any non-text collections.abc.Sequence).
        locale: Locale for the error message (None = configured locale).

    Returns:
        New container of the even elements (type rules in the module docstring).

    Raises:
        InvalidArgumentError: If sequence is not an ordered sequence
            ("argument must be a sequence"), e.g. None, a string, a dict or set.

    Examples:
        >>> filter_even([1, 2, 3, 4, 5, 6])
        [2, 4, 6]
        >>> filter_even((3, 8))
        (8,)
    """
    require_ordered_sequence(sequence, locale=locale)

    if isinstance(sequence, pd.Series):
        if _has_real_series_dtype(sequence):
            # Nullable dtypes (Int64, Float64) give <NA> for missing values
            mask = (sequence % 2 == 0).fillna(False).astype(bool)
        else:
            mask = pd.Series(
                [_is_even(v) for v in sequence], index=sequence.index, dtype=bool
            )
        return sequence[mask].copy()

    if isinstance(sequence, np.ndarray):
        if _has_real_dtype(sequence.dtype):
            return sequence[_even_mask_numeric(sequence)]
        mask = np.array([_is_even(v) for v in sequence], dtype=bool)
        return sequence[mask]

    evens = [value for value in sequence if _is_even(value)]
    if isinstance(sequence, tuple):
        return tuple(evens)
    return evens

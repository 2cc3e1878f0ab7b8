"""
Tests for utilkit/utils/arithmetic.py

add is unvalidated addition; multiply rejects anything that is not a number.
"""

import numpy as np
import pytest

from utilkit.utils.arithmetic import add, multiply
from utilkit.utils.errors import InvalidArgumentError
from utilkit.utils.monitoring import record_calls


def test_add_positive_integers():
    """Test add on small positive integers and zero."""
    assert add(2, 3) == 5
    assert add(0, 0) == 0


def test_add_negative_and_fractional():
    """Test add with negatives and floats (floats compared approximately)."""
    assert add(-1, 1) == 0
    assert add(1.5, 2.5) == pytest.approx(4.0, abs=1e-2)
    assert add(0.1, 0.2) == pytest.approx(0.3)


@pytest.mark.parametrize("a,b", [(2, 3), (-7, 4), (1.25, -0.5), (10**12, 3)])
def test_add_is_commutative(a, b):
    """Test add(a, b) == add(b, a)."""
    assert add(a, b) == add(b, a)


def test_add_numpy_scalars():
    """Test add works on numpy scalar types."""
    assert add(np.int64(2), np.int64(3)) == 5


def test_multiply_returns_product():
    """Test multiply on integers matches a * b exactly."""
    assert multiply(4, 5) == 20
    assert multiply(-3, 7) == -21
    assert multiply(0, 99) == 0


def test_multiply_floats():
    """Test multiply with float inputs."""
    assert multiply(2.5, 4) == pytest.approx(10.0)


@pytest.mark.parametrize("a,b", [("a", 2), (2, "b"), (None, 3), (True, 2), ([2], 2)])
def test_multiply_rejects_non_numbers(a, b):
    """Test multiply raises InvalidArgumentError for non-numeric arguments."""
    with pytest.raises(InvalidArgumentError, match="arguments must be numbers"):
        multiply(a, b)


def test_multiply_error_is_a_type_error():
    """Test the error can be caught as a plain TypeError."""
    with pytest.raises(TypeError):
        multiply("a", 2)


def test_multiply_error_message_localized():
    """Test the error message follows the requested locale."""
    with pytest.raises(InvalidArgumentError, match="Les arguments doivent être des nombres"):
        multiply("a", 2, locale="fr")


def test_multiply_can_be_observed():
    """Test wrapping multiply in a call recorder counts calls without changing results."""
    recorded = record_calls(multiply)

    assert recorded(2, 3) == 6

    assert recorded.call_count == 1
    assert recorded.was_called_with(2, 3)

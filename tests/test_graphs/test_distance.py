"""Tests for finite-or-infinite Distance values."""

import pytest

from bellford.errors import InvalidArgument
from bellford.graphs import INFINITY, Distance


def test_infinity_is_untagged_distance():
    """Test that INFINITY carries no value."""
    assert INFINITY.value is None
    assert INFINITY.is_infinite
    assert not INFINITY.is_finite
    assert INFINITY == Distance()


def test_ordering():
    """Test ordering between finite and infinite distances."""
    assert Distance(-5) < Distance(0) < Distance(3)
    assert Distance(10**30) < INFINITY
    assert not INFINITY < INFINITY
    assert INFINITY >= Distance(2**63 - 1)
    assert max([Distance(1), INFINITY, Distance(7)]) is INFINITY


def test_large_finite_is_not_infinite():
    """Test that a huge finite value never collides with INFINITY."""
    big = Distance(2**63 - 1)
    assert big.is_finite
    assert big != INFINITY


def test_conversions():
    """Test int, float and str conversions."""
    assert int(Distance(-4)) == -4
    assert float(Distance(3)) == 3.0
    assert float(INFINITY) == float("inf")
    assert str(Distance(12)) == "12"
    assert str(INFINITY) == "INF"


def test_int_of_infinity_raises():
    """Test that an infinite distance has no integer value."""
    with pytest.raises(InvalidArgument):
        int(INFINITY)


def test_rejects_non_integer_values():
    """Test that only integers or None are accepted."""
    with pytest.raises(InvalidArgument):
        Distance(1.5)
    with pytest.raises(InvalidArgument):
        Distance(True)


def test_hashable():
    """Test that distances can be used as set members."""
    assert {Distance(1), Distance(1), INFINITY} == {Distance(1), INFINITY}

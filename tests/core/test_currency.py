"""
Tests for display rounding of currency amounts.
"""

import math

import pytest
from rentallab.core.currency import RoundingPolicy, round_currency


@pytest.mark.parametrize(
    "value,expected",
    [
        (0.0, 0.0),
        (1.4, 1.0),
        (1.5, 2.0),
        (2.5, 3.0),
        (-2.5, -3.0),
        (-1.4, -1.0),
        (17831.49, 17831.0),
        (397500.0, 397500.0),
    ],
)
def test_half_away_from_zero(value, expected):
    assert round_currency(value) == expected


def test_bankers_policy():
    assert round_currency(2.5, RoundingPolicy.BANKERS) == 2.0
    assert round_currency(3.5, RoundingPolicy.BANKERS) == 4.0


def test_returns_float():
    assert isinstance(round_currency(12.7), float)


def test_non_finite_pass_through():
    assert math.isnan(round_currency(float("nan")))
    assert round_currency(float("inf")) == float("inf")
    assert round_currency(float("-inf")) == float("-inf")


def test_values_beyond_default_decimal_precision():
    # 28 significant digits is the default decimal context
    assert round_currency(1e28) == 1e28
    assert round_currency(1e30) == 1e30
    assert round_currency(-1.5e300) == -1.5e300
    assert round_currency(1.7976931348623157e308) == 1.7976931348623157e308

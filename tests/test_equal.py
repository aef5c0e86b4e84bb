import sys

import pytest

from helixkit.equal import DigitsEqual, Equal


def test_equal_tolerates_rounding_error():
    assert 0.1 + 0.2 != 0.3
    assert Equal()(0.1 + 0.2, 0.3)


def test_equal_rejects_distinct_values():
    assert not Equal()(1.0, 1.1)


def test_equal_zero_imprecision_is_strict():
    assert not Equal(0)(0.1 + 0.2, 0.3)
    assert Equal(0)(2.5, 2.5)


def test_equal_subnormal_difference():
    assert Equal()(0.0, 5e-324)


def test_equal_integers_use_exact_comparison():
    assert Equal()(7, 7)
    assert not Equal(1000)(7, 8)


def test_equal_is_symmetric():
    compare = Equal(4)
    for left, right in [(1.0, 1.0 + 1e-15), (3.0, 3.1), (1e10, 1e10 + 1)]:
        assert compare(left, right) == compare(right, left)


def test_equal_negative_imprecision_raises():
    with pytest.raises(ValueError):
        Equal(-1)


def test_digits_equal_within_digits():
    assert DigitsEqual(3)(1.0, 1.0001)
    assert not DigitsEqual(3)(1.0, 1.01)


def test_digits_equal_default_precision():
    assert DigitsEqual()(0.1 + 0.2, 0.3)
    assert not DigitsEqual()(1.0, 1.000001)


def test_digits_equal_beyond_epsilon_is_exact():
    compare = DigitsEqual(20)
    assert not compare(0.1 + 0.2, 0.3)
    assert compare(0.5, 0.5)


def test_digits_equal_integers():
    assert DigitsEqual(1)(10, 10)
    assert not DigitsEqual(1)(10, 11)


def test_digits_equal_more_digits_is_stricter():
    left, right = 1.0, 1.0 + 1e-6
    assert DigitsEqual(4)(left, right)
    assert not DigitsEqual(8)(left, right)
    assert DigitsEqual(sys.float_info.dig)(left, left)
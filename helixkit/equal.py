"""Equality of floating-point values to within a relative precision."""

from __future__ import annotations

import sys

_EPSILON = sys.float_info.epsilon
_MINIMUM = sys.float_info.min
_DEFAULT_DIGITS = sys.float_info.dig


def _is_float(left: object, right: object) -> bool:
    return isinstance(left, float) or isinstance(right, float)


def _within(left: float, right: float, precision: float) -> bool:
    difference = abs(left - right)
    tolerance = abs(left + right) * precision
    # Equal when within the scaled precision, or when the difference is subnormal.
    return difference < tolerance or difference < _MINIMUM


class Equal:
    """Compare floats to within ``imprecision`` units of epsilon.

    Non-float operands compare with ``==``.
    """

    def __init__(self, imprecision: int = 1) -> None:
        if imprecision < 0:
            raise ValueError("imprecision must not be negative")
        self.imprecision = imprecision
        self.precision = _EPSILON * imprecision

    def __call__(self, left: object, right: object) -> bool:
        if not _is_float(left, right):
            return left == right
        return _within(float(left), float(right), self.precision)  # type: ignore[arg-type]


class DigitsEqual:
    """Compare floats to ``digits`` significant decimal figures.

    Non-float operands compare with ``==``.
    """

    def __init__(self, digits: int = _DEFAULT_DIGITS) -> None:
        if digits < 0:
            raise ValueError("digits must not be negative")
        self.digits = digits
        self.precision = 1.0 / float(10**digits)

    def __call__(self, left: object, right: object) -> bool:
        if not _is_float(left, right):
            return left == right
        if self.precision < _EPSILON:
            return left == right
        return _within(float(left), float(right), self.precision)  # type: ignore[arg-type]
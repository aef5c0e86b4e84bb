"""Detect overflow when converting numbers to fixed-width integer types."""

from __future__ import annotations

import math
import sys
from enum import Enum

_FLOAT_DIGITS = sys.float_info.mant_dig


class IntegerType(Enum):
    """Fixed-width integer types described by bit count and signedness."""

    INT8 = (8, True)
    UINT8 = (8, False)
    INT16 = (16, True)
    UINT16 = (16, False)
    INT32 = (32, True)
    UINT32 = (32, False)
    INT64 = (64, True)
    UINT64 = (64, False)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    @property
    def digits(self) -> int:
        """Number of binary digits excluding the sign bit."""
        return self.bits - 1 if self.signed else self.bits

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << self.digits) - 1


def get_extrema(target: IntegerType) -> tuple[float, float]:
    """The float range that converts to ``target`` without overflow.

    When a float cannot represent the maximum exactly, the next lower
    representable value is used.
    """
    minimum = float(target.minimum)
    maximum = float(target.maximum)
    if target.digits > _FLOAT_DIGITS:
        maximum = math.nextafter(maximum, 0.0)
    return minimum, maximum


def will_overflow(target: IntegerType, value: float) -> bool:
    """True when the float ``value`` lies outside the range of ``target``."""
    minimum, maximum = get_extrema(target)
    return value > maximum or value < minimum


def check_convertible(target: IntegerType, value: int | float) -> bool:
    """True when ``value`` converts to ``target`` without overflow."""
    if isinstance(value, int):
        return target.minimum <= value <= target.maximum
    if isinstance(value, float):
        return not will_overflow(target, value)
    raise TypeError("value must be an integer or a float")
"""Integral exponentiation by repeated multiplication."""

from __future__ import annotations

import math
import operator
from itertools import repeat


def power(base: int, exponent: int) -> int:
    """Return ``base`` multiplied by itself ``exponent`` times.

    An exponent of zero gives 1. Negative exponents are rejected.
    """
    exponent = operator.index(exponent)
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return math.prod(repeat(base, exponent))
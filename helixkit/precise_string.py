"""Convert numbers to text without losing significant digits."""

from __future__ import annotations

import math
import numbers
import struct

from helixkit.formatter import fast_formatter

# Room for a sign, a decimal point, 'e', an exponent sign and a terminator.
_EXTRA_SIZE = 5

# kind: (format, significant digits, maximum exponent digits)
_FLOAT_FORMATS: dict[str, tuple[str, int, int]] = {
    "float": ("%.7g", 7, 2),
    "double": ("%.16lg", 16, 3),
    "long double": ("%.19Lg", 19, 4),
}


def _as_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def precise_string(value: int | float, kind: str = "double") -> str:
    """Return ``value`` as text.

    Integers are written in full. Floats are written with the significant
    digits of ``kind``: "float", "double" or "long double"; a "float" value
    is first rounded to single precision.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if not isinstance(value, numbers.Real):
        raise TypeError(f"a number is required, not {type(value).__name__}")

    try:
        fmt, digits, exponent_digits = _FLOAT_FORMATS[kind]
    except KeyError:
        raise ValueError(f"unsupported floating-point kind: {kind!r}") from None

    number = float(value)
    if kind == "float":
        number = _as_single(number)

    return fast_formatter(digits + exponent_digits + _EXTRA_SIZE, fmt, number)
"""Scale numbers, rounding results that are bound for integer types."""

from __future__ import annotations

import math
from typing import Union

from helixkit.overflow import IntegerType, will_overflow

Target = Union[IntegerType, type]


def _round_half_away_from_zero(value: float) -> float:
    fraction, whole = math.modf(value)
    if abs(fraction) >= 0.5:
        whole += math.copysign(1.0, value)
    return whole


def round_if_integral(
    target: Target, value: int | float, check_overflow: bool = True
) -> int | float:
    """Convert ``value`` to ``target``, rounding half away from zero for integers.

    ``target`` is an ``IntegerType``, ``int`` (unbounded) or ``float``. With
    ``check_overflow`` a value outside an ``IntegerType`` raises OverflowError.
    """
    if target is float:
        return float(value)

    if isinstance(target, IntegerType):
        if isinstance(value, int):
            if check_overflow and not target.minimum <= value <= target.maximum:
                raise OverflowError("value will overflow target type.")
            return value
        rounded = _round_half_away_from_zero(float(value))
        if check_overflow and will_overflow(target, rounded):
            raise OverflowError("value will overflow target type.")
        return int(rounded)

    if target is int:
        if isinstance(value, int):
            return value
        return int(_round_half_away_from_zero(float(value)))

    raise TypeError(f"unsupported target type: {target!r}")


def _target_for(value: object) -> Target:
    if isinstance(value, bool):
        raise TypeError("bool values cannot be scaled")
    if isinstance(value, int):
        return IntegerType.INT64
    if isinstance(value, float):
        return float
    raise TypeError(f"cannot scale value of type {type(value).__name__}")


def multiply_rounded(
    scale: int | float, *args: int | float, check_overflow: bool = True
) -> int | float | tuple[int | float, ...]:
    """Multiply each value by ``scale``, keeping each value's type.

    Integer values are rounded and treated as signed 64-bit. One value gives a
    single result; several give a tuple.
    """
    if not args:
        raise TypeError("multiply_rounded requires at least one value")
    results = tuple(
        round_if_integral(_target_for(value), scale * value, check_overflow)
        for value in args
    )
    return results[0] if len(results) == 1 else results
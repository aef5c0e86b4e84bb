"""printf-style formatting with C length modifiers and conversions."""

from __future__ import annotations

import math
import numbers
import operator
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>hh|h|ll|l|L|z|j|t)?"
    r"(?P<conversion>[diouxXeEfFgGaAcs%])"
)

# Width in bits of the integer an argument is converted to before printing.
_LENGTH_BITS = {
    "hh": 8,
    "h": 16,
    "": 32,
    "l": 64,
    "ll": 64,
    "L": 64,
    "z": 64,
    "j": 64,
    "t": 64,
}

_INTEGER_DIGITS = {"d": "d", "i": "d", "u": "d", "o": "o", "x": "x", "X": "X"}
_MANTISSA_HEX_DIGITS = 13


@dataclass(frozen=True)
class _Spec:
    flags: str
    width: int | None
    precision: int | None
    length: str
    conversion: str


def _next_argument(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _pad(head: str, body: str, spec: _Spec, zero_pad: bool) -> str:
    text = head + body
    width = spec.width
    if width is None or len(text) >= width:
        return text
    if "-" in spec.flags:
        return text.ljust(width)
    if zero_pad:
        return head + body.rjust(width - len(head), "0")
    return text.rjust(width)


def _sign(negative: bool, flags: str) -> str:
    if negative:
        return "-"
    if "+" in flags:
        return "+"
    if " " in flags:
        return " "
    return ""


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _format_integer(value: Any, spec: _Spec) -> str:
    conversion = spec.conversion
    signed = conversion in "di"
    number = _wrap(operator.index(value), _LENGTH_BITS[spec.length], signed)
    magnitude = abs(number)
    digits = format(magnitude, _INTEGER_DIGITS[conversion])

    if spec.precision is not None:
        if spec.precision == 0 and magnitude == 0:
            digits = ""
        else:
            digits = digits.zfill(spec.precision)

    prefix = ""
    if "#" in spec.flags:
        if conversion == "o" and not digits.startswith("0"):
            digits = "0" + digits
        elif conversion in "xX" and magnitude:
            prefix = "0" + conversion

    sign = _sign(number < 0, spec.flags) if signed else ""
    zero_pad = (
        "0" in spec.flags and "-" not in spec.flags and spec.precision is None
    )
    return _pad(sign + prefix, digits, spec, zero_pad)


def _as_float(value: Any) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"a real number is required, not {type(value).__name__}")
    return float(value)


def _format_decimal_float(number: float, spec: _Spec) -> str:
    flags = spec.flags
    if not math.isfinite(number):
        # Zero padding does not apply to infinity and NaN.
        flags = flags.replace("0", "")
    width = str(spec.width) if spec.width else ""
    precision = "" if spec.precision is None else f".{spec.precision}"
    return f"%{flags}{width}{precision}{spec.conversion}" % number


def _format_hex_float(number: float, spec: _Spec) -> str:
    upper = spec.conversion == "A"
    sign = _sign(math.copysign(1.0, number) < 0, spec.flags)
    magnitude = abs(number)

    if not math.isfinite(magnitude):
        body = "nan" if math.isnan(magnitude) else "inf"
        return _pad("", sign + (body.upper() if upper else body), spec, False)

    mantissa, exponent_text = magnitude.hex()[2:].split("p")
    lead, fraction = mantissa.split(".")
    lead_digit = int(lead)
    fraction = fraction.ljust(_MANTISSA_HEX_DIGITS, "0")
    precision = spec.precision

    if precision is None:
        fraction = fraction.rstrip("0")
    elif precision < _MANTISSA_HEX_DIGITS:
        shift = 4 * (_MANTISSA_HEX_DIGITS - precision)
        quotient, remainder = divmod(int(fraction, 16), 1 << shift)
        half = 1 << (shift - 1)
        if remainder > half or (remainder == half and quotient & 1):
            quotient += 1
        if quotient == 1 << (4 * precision):
            quotient = 0
            lead_digit += 1
        fraction = format(quotient, f"0{precision}x") if precision else ""
    else:
        fraction = fraction.ljust(precision, "0")

    point = "." if fraction or "#" in spec.flags else ""
    body = f"{lead_digit}{point}{fraction}p{int(exponent_text):+d}"
    prefix = "0x"
    if upper:
        prefix, body = prefix.upper(), body.upper()
    zero_pad = "0" in spec.flags and "-" not in spec.flags
    return _pad(sign + prefix, body, spec, zero_pad)


def _format_char(value: Any, spec: _Spec) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        character = value
    else:
        character = chr(operator.index(value) & 0xFF)
    return _pad("", character, spec, False)


def _format_string(value: Any, spec: _Spec) -> str:
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("latin-1")
    else:
        text = str(value)
    if spec.precision is not None:
        text = text[: spec.precision]
    return _pad("", text, spec, False)


def _convert(match: re.Match[str], arguments: Iterator[Any]) -> str:
    conversion = match["conversion"]
    if conversion == "%":
        return "%"

    flags = "".join(dict.fromkeys(match["flags"]))

    width: int | None = None
    width_text = match["width"]
    if width_text == "*":
        width = operator.index(_next_argument(arguments))
        if width < 0:
            # A negative width argument means left justification.
            if "-" not in flags:
                flags += "-"
            width = -width
    elif width_text:
        width = int(width_text)

    precision: int | None = None
    precision_text = match["precision"]
    if precision_text == "*":
        requested = operator.index(_next_argument(arguments))
        precision = requested if requested >= 0 else None
    elif precision_text is not None:
        precision = int(precision_text or "0")

    spec = _Spec(flags, width, precision, match["length"] or "", conversion)
    value = _next_argument(arguments)

    if conversion in _INTEGER_DIGITS:
        return _format_integer(value, spec)
    if conversion in "eEfFgG":
        return _format_decimal_float(_as_float(value), spec)
    if conversion in "aA":
        return _format_hex_float(_as_float(value), spec)
    if conversion == "c":
        return _format_char(value, spec)
    return _format_string(value, spec)


def formatter(fmt: str, *args: Any) -> str:
    """Format ``args`` according to the printf-style format ``fmt``.

    Length modifiers narrow integer arguments as a C program would; ``*``
    takes the width or precision from the arguments. Extra arguments are
    ignored; too few raise TypeError, a malformed specification ValueError.
    """
    arguments = iter(args)
    parts: list[str] = []
    position = 0

    while True:
        percent = fmt.find("%", position)
        if percent < 0:
            parts.append(fmt[position:])
            break
        parts.append(fmt[position:percent])
        match = _SPEC.match(fmt, percent)
        if match is None:
            raise ValueError(
                f"invalid conversion specification at position {percent}: "
                f"{fmt[percent:]!r}"
            )
        parts.append(_convert(match, arguments))
        position = match.end()

    return "".join(parts)


def fast_formatter(char_count: int, fmt: str, *args: Any) -> str:
    """Format like ``formatter`` but reject results longer than ``char_count``."""
    result = formatter(fmt, *args)
    if len(result) > char_count:
        raise ValueError(
            f"formatted length ({len(result)}) is greater than requested "
            f"buffer size ({char_count})"
        )
    return result


def get_formatter_count(fmt: str) -> int:
    """Count the conversion specifications in ``fmt``; ``%%`` is not counted."""
    count = 0
    last_was_formatter = False

    for character in fmt:
        if character == "%":
            if last_was_formatter:
                # This '%' escapes the previous one.
                count -= 1
                last_was_formatter = False
            else:
                count += 1
                last_was_formatter = True
        else:
            last_was_formatter = False

    return count
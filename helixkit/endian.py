"""Byte-order conversions between the host and big- or little-endian layouts.

Values are described by a single ``struct`` format character such as ``"H"``
(16-bit unsigned), ``"i"`` (32-bit signed), ``"q"`` (64-bit signed) or ``"d"``
(double). A conversion returns the value whose host representation holds the
bytes of the requested layout, so converting to a layout and back is lossless.
"""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterable

_CODES = frozenset("bBhHiIlLqQefd")


def _check_format(fmt: str) -> str:
    if len(fmt) != 1 or fmt not in _CODES:
        raise ValueError(f"unsupported format character: {fmt!r}")
    return fmt


def _convert(value: int | float, fmt: str, source: str, target: str) -> int | float:
    """Pack ``value`` with byte order ``source`` and unpack it with ``target``."""
    fmt = _check_format(fmt)
    if struct.calcsize("=" + fmt) == 1:
        # Single bytes have no order to change.
        struct.pack("=" + fmt, value)
        return value
    try:
        packed = struct.pack(source + fmt, value)
    except struct.error as error:
        raise ValueError(f"{value!r} does not fit format {fmt!r}") from error
    return struct.unpack(target + fmt, packed)[0]


def host_is_big_endian() -> bool:
    """True when the host stores the most significant byte first."""
    return sys.byteorder == "big"


def reverse_byte_order(value: int | float, fmt: str) -> int | float:
    """Return ``value`` with the order of its bytes reversed."""
    return _convert(value, fmt, ">", "<")


def host_to_big_endian(value: int | float, fmt: str) -> int | float:
    """Return the host value whose bytes are ``value`` laid out big-endian."""
    return _convert(value, fmt, ">", "=")


def big_endian_to_host(value: int | float, fmt: str) -> int | float:
    """Interpret the host bytes of ``value`` as big-endian."""
    return _convert(value, fmt, "=", ">")


def host_to_little_endian(value: int | float, fmt: str) -> int | float:
    """Return the host value whose bytes are ``value`` laid out little-endian."""
    return _convert(value, fmt, "<", "=")


def little_endian_to_host(value: int | float, fmt: str) -> int | float:
    """Interpret the host bytes of ``value`` as little-endian."""
    return _convert(value, fmt, "=", "<")


def host_to_big_endian_all(values: Iterable[int | float], fmt: str) -> list[int | float]:
    """Apply ``host_to_big_endian`` to every value."""
    return [host_to_big_endian(value, fmt) for value in values]


def big_endian_to_host_all(values: Iterable[int | float], fmt: str) -> list[int | float]:
    """Apply ``big_endian_to_host`` to every value."""
    return [big_endian_to_host(value, fmt) for value in values]


def host_to_little_endian_all(
    values: Iterable[int | float], fmt: str
) -> list[int | float]:
    """Apply ``host_to_little_endian`` to every value."""
    return [host_to_little_endian(value, fmt) for value in values]


def little_endian_to_host_all(
    values: Iterable[int | float], fmt: str
) -> list[int | float]:
    """Apply ``little_endian_to_host`` to every value."""
    return [little_endian_to_host(value, fmt) for value in values]
"""Read and write values as raw binary data on byte streams."""

from __future__ import annotations

import struct
from typing import Any, BinaryIO

_SHORT_STRING_LIMIT = 255
_SKIP_CHUNK = 256
_BYTE_ORDER = "@=<>!"
_COUNT_CODES = frozenset("bBhHiIlLqQ")


class BinaryIoError(RuntimeError):
    """Binary data could not be read from the stream."""


def _read_exactly(stream: BinaryIO, count: int, what: str) -> bytes:
    data = stream.read(count) if count else b""
    if data is None or len(data) != count:
        raise BinaryIoError(f"Failed to extract {what}.")
    return data


def read(stream: BinaryIO, fmt: str) -> Any:
    """Read the values described by the ``struct`` format ``fmt``.

    One value is returned alone; several are returned as a tuple.
    """
    layout = struct.Struct(fmt)
    values = layout.unpack(_read_exactly(stream, layout.size, "value"))
    return values[0] if len(values) == 1 else values


def write(stream: BinaryIO, fmt: str, value: Any) -> None:
    """Write ``value`` (a tuple when ``fmt`` holds several items) to ``stream``."""
    layout = struct.Struct(fmt)
    item_count = len(layout.unpack(bytes(layout.size)))
    packed = layout.pack(*value) if item_count > 1 else layout.pack(value)
    stream.write(packed)


def read_short_string(stream: BinaryIO) -> str:
    """Read a string stored as a one-byte length followed by UTF-8 bytes."""
    length = _read_exactly(stream, 1, "string")[0]
    return _read_exactly(stream, length, "string").decode("utf-8")


def write_short_string(stream: BinaryIO, value: str) -> None:
    """Write ``value`` as a one-byte length followed by its UTF-8 bytes."""
    encoded = value.encode("utf-8")
    if len(encoded) > _SHORT_STRING_LIMIT:
        raise ValueError(
            f"String length is limited to {_SHORT_STRING_LIMIT} characters"
        )
    stream.write(bytes([len(encoded)]) + encoded)


def skip(stream: BinaryIO, byte_count: int) -> None:
    """Read and discard ``byte_count`` bytes."""
    if byte_count < 0:
        raise ValueError("byte_count must not be negative")
    while byte_count > 0:
        chunk = min(byte_count, _SKIP_CHUNK)
        _read_exactly(stream, chunk, "bytes to skip")
        byte_count -= chunk


def _count_layout(count_format: str) -> tuple[struct.Struct, int]:
    order = count_format[0] if count_format[:1] in tuple(_BYTE_ORDER) else "="
    code = count_format[1:] if order == count_format[:1] else count_format
    if len(code) != 1 or code not in _COUNT_CODES:
        raise ValueError(f"count format must be one integer type: {count_format!r}")
    layout = struct.Struct(order + code)
    bits = layout.size * 8
    maximum = (1 << (bits - 1)) - 1 if code.islower() else (1 << bits) - 1
    return layout, maximum


def write_string(stream: BinaryIO, text: str | bytes, count_format: str = "I") -> None:
    """Write a length of type ``count_format`` followed by the string's bytes.

    Without a byte-order prefix the length is written in host order.
    """
    layout, maximum = _count_layout(count_format)
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if len(data) > maximum:
        raise ValueError(f"String length is limited to {maximum}")
    stream.write(layout.pack(len(data)))
    stream.write(data)


def read_string(stream: BinaryIO, count_format: str = "I") -> str:
    """Read a string written by ``write_string`` with the same count format."""
    layout, _ = _count_layout(count_format)
    raw = stream.read(layout.size)
    if raw is None or len(raw) != layout.size:
        raise BinaryIoError("Failed to extract charCount")
    (count,) = layout.unpack(raw)
    if count < 0:
        raise BinaryIoError("Negative charCount")
    return _read_exactly(stream, count, "string").decode("utf-8")
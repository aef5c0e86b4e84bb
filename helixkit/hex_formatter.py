"""Render bytes as hexadecimal, optionally with offsets and printable text."""

from __future__ import annotations

import operator
from typing import Any

from helixkit.formatter import fast_formatter

ROW_WIDTH = 16

_ROW_PAD = "   "
_TEXT_GAP = "    "
_OFFSET_GAP = "   "


def _as_bytes(data: Any) -> bytes:
    """The raw bytes of any object supporting the buffer protocol."""
    return memoryview(data).tobytes()


def _rows(data: bytes) -> list[tuple[int, bytes]]:
    return [
        (offset, data[offset : offset + ROW_WIDTH])
        for offset in range(0, len(data), ROW_WIDTH)
    ]


def get_printable(data: Any) -> str:
    """Each byte as its ASCII character if printable, otherwise '.'."""
    return "".join(
        chr(byte) if 0x20 <= byte <= 0x7E else "." for byte in _as_bytes(data)
    )


def format_hex(data: Any) -> str:
    """Each byte as two lower-case hex digits, separated by single spaces."""
    return " ".join(f"{byte:02x}" for byte in _as_bytes(data))


def format_hex_lines_with_ascii(data: Any) -> str:
    """Rows of 16 bytes: hex offset, hex values, then the printable text."""
    lines = []
    for offset, row in _rows(_as_bytes(data)):
        padding = _ROW_PAD * (ROW_WIDTH - len(row))
        lines.append(
            f"0x{offset:06x}{_OFFSET_GAP}{format_hex(row)}{padding}"
            f"{_TEXT_GAP}{get_printable(row)}\n"
        )
    return "".join(lines)


def format_hex_lines(data: Any) -> str:
    """An 'Offset' header, then rows of 16 bytes with decimal offsets."""
    lines = ["Offset\n"]
    for offset, row in _rows(_as_bytes(data)):
        lines.append(f"{offset:6d}{_OFFSET_GAP}{format_hex(row)}\n")
    return "".join(lines)


def format_byte(byte: int) -> str:
    """A byte as a signed char widened to 16 bits, in decimal, at least 2 wide."""
    byte = operator.index(byte)
    if not -128 <= byte <= 255:
        raise ValueError(f"{byte} is not a byte value")
    signed = byte - 256 if byte > 127 else byte
    return f"{signed & 0xFFFF:2d}"


def get_hex_string(byte: int) -> str:
    """The low byte of ``byte`` as '0x' and two upper-case hex digits."""
    return fast_formatter(5, "0x%02hhX", byte)
"""Build printf formats from a numeric type and a base, and apply them."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Any

from helixkit.formatter import formatter

_WIDTH_AND_PRECISION = "*.*"


class _Kind(enum.Enum):
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"


@dataclass(frozen=True)
class _NumericType:
    size: int
    kind: _Kind
    length: str | None = None


_TYPES: dict[str, _NumericType] = {
    "int8": _NumericType(1, _Kind.SIGNED),
    "uint8": _NumericType(1, _Kind.UNSIGNED),
    "int16": _NumericType(2, _Kind.SIGNED),
    "uint16": _NumericType(2, _Kind.UNSIGNED),
    "int32": _NumericType(4, _Kind.SIGNED),
    "uint32": _NumericType(4, _Kind.UNSIGNED),
    "int64": _NumericType(8, _Kind.SIGNED),
    "uint64": _NumericType(8, _Kind.UNSIGNED),
    "int128": _NumericType(16, _Kind.SIGNED),
    "uint128": _NumericType(16, _Kind.UNSIGNED),
    "size_t": _NumericType(8, _Kind.UNSIGNED, "z"),
    "float": _NumericType(4, _Kind.FLOAT),
    "double": _NumericType(8, _Kind.FLOAT),
    "long double": _NumericType(16, _Kind.FLOAT),
}

_LENGTH_BY_SIZE = {1: "hh", 2: "h", 4: "", 8: "l"}


def _lookup(type_name: str) -> _NumericType:
    name = type_name.strip()
    numeric_type = _TYPES.get(name)
    if numeric_type is None and name.endswith("_t"):
        numeric_type = _TYPES.get(name[:-2])
    if numeric_type is None:
        raise ValueError(f"unsupported type: {type_name!r}")
    return numeric_type


def _length_modifier(numeric_type: _NumericType) -> str:
    if numeric_type.length is not None:
        return numeric_type.length
    if numeric_type.size == 16:
        return "L" if numeric_type.kind is _Kind.FLOAT else "ll"
    return _LENGTH_BY_SIZE[numeric_type.size]


def _specifier(numeric_type: _NumericType, base: int) -> str:
    kind = numeric_type.kind
    if kind is _Kind.FLOAT:
        if base == 10:
            # Alternative form keeps the decimal point and trailing zeros.
            return "#g"
        if base == 16:
            return "a"
    else:
        if base == 10:
            return "d" if kind is _Kind.SIGNED else "u"
        if base == 8:
            return "#o"
        if base == 16:
            return "#x"
    raise ValueError(f"base {base} is not supported for {kind.value} types")


def auto_format(type_name: str, base: int = 10) -> str:
    """Return the format for ``type_name`` in ``base``, with ``*.*`` placeholders.

    The length modifier precedes the specifier, e.g. ``"%*.*l#g"`` for a
    double in base 10.
    """
    numeric_type = _lookup(type_name)
    return (
        "%"
        + _WIDTH_AND_PRECISION
        + _length_modifier(numeric_type)
        + _specifier(numeric_type, base)
    )


def auto_formatter(
    value: Any,
    type_name: str,
    base: int = 10,
    width: int = -1,
    precision: int = -1,
) -> str:
    """Format ``value`` as ``type_name`` in ``base``.

    A negative width or precision leaves that part at its default.
    """
    numeric_type = _lookup(type_name)
    specifier = _specifier(numeric_type, base)
    flags = specifier[:-1]
    conversion = specifier[-1]
    fmt = (
        "%"
        + flags
        + _WIDTH_AND_PRECISION
        + _length_modifier(numeric_type)
        + conversion
    )
    return formatter(fmt, width, precision, value)


if sys.platform == "win32":  # pragma: no cover
    _TYPES = dict(_TYPES)
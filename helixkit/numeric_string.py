"""Ordering of strings that compares embedded runs of digits as numbers."""

from __future__ import annotations

import string
from itertools import groupby

_DIGITS = frozenset(string.digits)


def _is_digit(character: str) -> bool:
    return character in _DIGITS


class Chunk:
    """A run of characters that are either all digits or all non-digits."""

    __slots__ = ("value_as_string", "is_numeric", "value_as_int")

    def __init__(self, value_as_string: str, is_numeric: bool) -> None:
        self.value_as_string = value_as_string
        self.is_numeric = is_numeric
        self.value_as_int = int(value_as_string) if is_numeric else 0

    def __lt__(self, other: Chunk) -> bool:
        if self.is_numeric and other.is_numeric:
            return self.value_as_int < other.value_as_int
        return self.value_as_string < other.value_as_string

    def __gt__(self, other: Chunk) -> bool:
        if self.is_numeric and other.is_numeric:
            return self.value_as_int > other.value_as_int
        return self.value_as_string > other.value_as_string

    def __repr__(self) -> str:
        return f"Chunk({self.value_as_string!r}, {self.is_numeric})"


class NumericString:
    """A string ordered chunk by chunk, with digit runs compared numerically."""

    __slots__ = ("value", "chunks")

    def __init__(self, value: str = "") -> None:
        self.value = value
        self.chunks = [
            Chunk("".join(run), is_numeric)
            for is_numeric, run in groupby(value, key=_is_digit)
        ]

    def __lt__(self, other: NumericString) -> bool:
        for mine, theirs in zip(self.chunks, other.chunks):
            if mine < theirs:
                return True
            if mine > theirs:
                return False
        # Equal so far: the one with fewer chunks sorts first.
        return len(self.chunks) < len(other.chunks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericString):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"NumericString({self.value!r})"


def numeric_string_compare(first: str, second: str) -> bool:
    """True when ``first`` sorts before ``second`` in numeric-string order."""
    return NumericString(first) < NumericString(second)
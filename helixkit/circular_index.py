"""An index that wraps back to zero after reaching a fixed count."""

from __future__ import annotations

import operator


class CircularIndex:
    """An index in ``range(wrap_count)`` whose arithmetic wraps around."""

    __slots__ = ("_wrap_count", "_index")

    def __init__(self, wrap_count: int, index: int = 0) -> None:
        wrap_count = operator.index(wrap_count)
        if wrap_count <= 0:
            raise ValueError("wrap_count must be positive")
        self._wrap_count = wrap_count
        self._index = operator.index(index) % wrap_count

    @property
    def wrap_count(self) -> int:
        return self._wrap_count

    def increment(self) -> CircularIndex:
        """Advance by one in place, wrapping to zero; returns self."""
        self._index = (self._index + 1) % self._wrap_count
        return self

    def decrement(self) -> CircularIndex:
        """Step back by one in place, wrapping to the last index; returns self."""
        self._index = (self._index + self._wrap_count - 1) % self._wrap_count
        return self

    def _offset(self, other: object) -> int:
        if isinstance(other, CircularIndex):
            return other._index % self._wrap_count
        return operator.index(other) % self._wrap_count

    def __add__(self, other: CircularIndex | int) -> CircularIndex:
        try:
            offset = self._offset(other)
        except TypeError:
            return NotImplemented
        return CircularIndex(self._wrap_count, self._index + offset)

    def __sub__(self, other: CircularIndex | int) -> CircularIndex:
        try:
            offset = self._offset(other)
        except TypeError:
            return NotImplemented
        # Adding the wrap count first keeps the result from going below zero.
        return CircularIndex(
            self._wrap_count, self._index + self._wrap_count - offset
        )

    def __int__(self) -> int:
        return self._index

    def __index__(self) -> int:
        return self._index

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CircularIndex):
            return self._index == other._index
        if isinstance(other, int):
            return self._index == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def reset(self) -> None:
        """Return the index to zero."""
        self._index = 0

    def __repr__(self) -> str:
        return f"CircularIndex({self._wrap_count}, {self._index})"
"""A fixed-capacity ring buffer with bulk write, peek and read."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any

from helixkit.circular_index import CircularIndex


class CircularBufferError(IndexError):
    """The buffer holds too few elements, or too little free space."""


def _format_element(element: Any) -> str:
    if isinstance(element, int) and not isinstance(element, bool):
        return f"{element:2}"
    return str(element)


def _count(count: int) -> int:
    count = operator.index(count)
    if count < 0:
        raise ValueError("count must not be negative")
    return count


class CircularBuffer:
    """A ring of ``capacity`` slots with separate read and write positions.

    The positions wrap modulo the capacity, so writing exactly ``capacity``
    elements into an empty buffer leaves it reading as empty.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = operator.index(capacity)
        self._write_index = CircularIndex(self._capacity)
        self._read_index = CircularIndex(self._capacity)
        self._elements: list[Any] = [0] * self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def reset(self) -> None:
        """Discard all stored elements."""
        self._write_index.reset()
        self._read_index.reset()

    def is_empty(self) -> bool:
        return self._read_index == self._write_index

    def __len__(self) -> int:
        return int(self._write_index - self._read_index)

    def available(self) -> int:
        """Number of elements that may still be written."""
        return self._capacity - len(self)

    def writable_size(self) -> int:
        """Elements writable without passing the end of storage or the reader."""
        return min(self.available(), self._capacity - int(self._write_index))

    def front(self) -> Any:
        """The oldest stored element."""
        if self.is_empty():
            raise CircularBufferError("Buffer is empty")
        return self._elements[self._read_index]

    def back(self) -> Any:
        """The newest stored element."""
        if self.is_empty():
            raise CircularBufferError("Buffer is empty")
        return self._elements[self._write_index - 1]

    def format_elements(self) -> str:
        """The stored elements, oldest first, each followed by a space."""
        return "".join(
            f"{_format_element(element)} " for element in self.peek(len(self))
        )

    def format_contents(self) -> str:
        """Every slot of the underlying storage, each followed by a space."""
        return "".join(f"{_format_element(element)} " for element in self._elements)

    def write(self, items: Iterable[Any]) -> None:
        """Append all of ``items``, or nothing if they do not fit."""
        items = list(items)
        count = len(items)
        if count > self.available():
            raise CircularBufferError(
                f"Cannot write {count} elements; {self.available()} available"
            )

        start = int(self._write_index)
        tail = min(count, self._capacity - start)
        self._elements[start : start + tail] = items[:tail]
        # The remainder continues at the start of storage.
        self._elements[: count - tail] = items[tail:]
        self._write_index = self._write_index + count

    def peek(self, count: int) -> list[Any]:
        """Return the oldest ``count`` elements without consuming them."""
        count = _count(count)
        if count > len(self):
            raise CircularBufferError(
                f"Cannot read {count} elements; {len(self)} stored"
            )

        start = int(self._read_index)
        tail = min(count, self._capacity - start)
        return self._elements[start : start + tail] + self._elements[: count - tail]

    def read(self, count: int) -> list[Any]:
        """Return and consume the oldest ``count`` elements."""
        items = self.peek(count)
        self._read_index = self._read_index + len(items)
        return items

    def remove(self, count: int) -> None:
        """Consume ``count`` elements without returning them."""
        self._read_index = self._read_index + _count(count)
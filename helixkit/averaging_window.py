"""A fixed-size window of samples with a running sum and simple statistics."""

from __future__ import annotations

import math
from typing import Union

from helixkit.circular_index import CircularIndex

Number = Union[int, float]


def _divide(total: Number, count: int) -> Number:
    """Divide like the element type: integers truncate toward zero."""
    if isinstance(total, int):
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient
    return total / count


class AveragingWindow:
    """Keeps the last ``element_count`` samples and their running sum.

    Without an initial value the window starts filled with zeros and is not
    full until every slot has been written once.
    """

    def __init__(self, element_count: int, initial_value: Number | None = None) -> None:
        self._index = CircularIndex(element_count)
        self.element_count = self._index.wrap_count
        if initial_value is None:
            self._elements: list[Number] = [0] * self.element_count
            self._sum: Number = 0
            self._is_full = False
        else:
            self._elements = [initial_value] * self.element_count
            self._sum = initial_value * self.element_count
            self._is_full = True

    def add_element(self, element: Number) -> None:
        """Replace the oldest sample with ``element``."""
        self._sum -= self._elements[self._index]
        self._elements[self._index] = element
        self._sum += element
        self._index.increment()

        if not self._is_full and self._index == 0:
            # The index wrapped, so every slot has now been written.
            self._is_full = True

    def is_full(self) -> bool:
        return self._is_full

    def _mean(self) -> Number:
        return _divide(self._sum, self.element_count)

    def average(self) -> Number:
        """The mean in the element type; integer sums truncate toward zero."""
        return self._mean()

    def average_as_float(self) -> float:
        return float(self._sum) / self.element_count

    def variance(self, average: float | None = None) -> float:
        """Population variance about ``average``, by default the typed mean."""
        if average is None:
            average = self._mean()
        return (
            sum((element - average) ** 2 for element in self._elements)
            / self.element_count
        )

    def standard_deviation(self, average: float | None = None) -> float:
        """Square root of the variance, by default about the float mean."""
        if average is None:
            average = self.average_as_float()
        return math.sqrt(self.variance(average))

    def reset(self) -> None:
        """Zero every slot and mark the window as not full."""
        self._index.reset()
        self._elements = [0] * self.element_count
        self._sum = 0
        self._is_full = False

    def minimum(self) -> Number:
        return min(self._elements)

    def maximum(self) -> Number:
        return max(self._elements)
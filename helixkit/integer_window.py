"""An averaging window of 2**N integers whose average is a right shift."""

from __future__ import annotations

import operator

from helixkit.averaging_window import AveragingWindow
from helixkit.power import power


class IntegerWindow(AveragingWindow):
    """Holds ``2 ** exponent`` integer samples."""

    def __init__(self, exponent: int, initial_value: int | None = None) -> None:
        if initial_value is not None and not isinstance(initial_value, int):
            raise TypeError("IntegerWindow holds integers only")
        self.exponent = operator.index(exponent)
        super().__init__(power(2, self.exponent), initial_value)

    def average(self) -> int:
        """The sum shifted right by the exponent (rounds toward negative infinity)."""
        return self._sum >> self.exponent
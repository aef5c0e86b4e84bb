"""Scope guards: run cleanup on exit, and undo operations not committed."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType


class Cleanup:
    """Context manager that calls a function when the block exits."""

    def __init__(self, cleanup_function: Callable[[], object]) -> None:
        self._cleanup_function = cleanup_function

    def __enter__(self) -> Cleanup:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self._cleanup_function()


class Operation:
    """Performs an operation at once and undoes it on exit unless committed.

    If the operation raises, no undo is recorded.
    """

    def __init__(
        self,
        do_operation: Callable[[], object],
        undo_operation: Callable[[], object],
    ) -> None:
        self._undo_operation: Callable[[], object] | None = None
        do_operation()
        self._undo_operation = undo_operation

    def commit(self) -> None:
        """Keep the operation; nothing is undone afterwards."""
        self._undo_operation = None

    def undo(self) -> None:
        """Undo the operation now if it is not committed; at most once."""
        undo_operation, self._undo_operation = self._undo_operation, None
        if undo_operation is not None:
            undo_operation()

    def __enter__(self) -> Operation:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.undo()
"""Wrap text written to standard output in terminal color codes."""

from __future__ import annotations

import sys
from typing import TextIO

BLACK = "\u001b[30m"
RED = "\u001b[31m"
GREEN = "\u001b[32m"
YELLOW = "\u001b[33m"
BLUE = "\u001b[34m"
MAGENTA = "\u001b[35m"
CYAN = "\u001b[36m"
WHITE = "\u001b[37m"

BRIGHT_BLACK = "\u001b[30;1m"
BRIGHT_RED = "\u001b[31;1m"
BRIGHT_GREEN = "\u001b[32;1m"
BRIGHT_YELLOW = "\u001b[33;1m"
BRIGHT_BLUE = "\u001b[34;1m"
BRIGHT_MAGENTA = "\u001b[35;1m"
BRIGHT_CYAN = "\u001b[36;1m"
BRIGHT_WHITE = "\u001b[37;1m"
RESET = "\u001b[0m"

BOLD = "\u001b[1m"
UNDERLINE = "\u001b[4m"
REVERSED = "\u001b[7m"


def is_terminal() -> bool:
    """True when standard output is attached to a terminal."""
    stdout = sys.stdout
    if stdout is None:
        return False
    try:
        return bool(stdout.isatty())
    except (AttributeError, ValueError, OSError):
        return False


class Colorize:
    """Writes to a stream, adding color codes only when it is a terminal stdout."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.is_terminal = stream is sys.stdout and is_terminal()

    def __call__(self, color: str, *args: object) -> None:
        """Write every argument as text, wrapped in ``color`` and a reset."""
        if self.is_terminal:
            self._stream.write(color)
        self._stream.write("".join(str(arg) for arg in args))
        if self.is_terminal:
            self._stream.write(RESET)
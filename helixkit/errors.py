"""Helpers that describe operating-system error numbers."""

from __future__ import annotations

import os


def string_error(error_number: int) -> str:
    """Return the system's description of ``error_number``."""
    return os.strerror(error_number)


def errno_message(message: str, error_number: int = 0) -> str:
    """Append the error number and its description to ``message`` when positive."""
    if error_number > 0:
        return f"{message}, errno={error_number}: {string_error(error_number)}"
    return message
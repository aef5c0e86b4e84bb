"""List the entries of a directory."""

from __future__ import annotations

import os


class ListDirectoryError(OSError):
    """Listing a directory failed."""


class BadDirectory(ListDirectoryError):
    """The path could not be opened as a directory."""


def list_directory(path: str) -> list[str]:
    """Return the names in ``path``, excluding '.' and '..'."""
    try:
        names = os.listdir(path)
    except OSError as error:
        raise BadDirectory(error.errno, f"ListDirectory failed: {path}") from error
    return [name for name in names if name not in (".", "..")]
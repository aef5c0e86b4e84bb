"""File-system path manipulation and queries using '/' as the separator."""

from __future__ import annotations

import errno
import os
import re
import stat

PATH_SEPARATOR = "/"

_REPEATED_SEPARATORS = re.compile(re.escape(PATH_SEPARATOR) + "{2,}")

_MKDIR_ERRORS: dict[int, str] = {
    errno.EACCES: (
        "Search permission is denied on a component of the path prefix, or "
        "write permission is denied on the parent directory of the directory "
        "to be created."
    ),
    errno.EEXIST: "The named file exists.",
    errno.ELOOP: (
        "A loop exists in symbolic links encountered during resolution of "
        "the path argument."
    ),
    errno.EMLINK: "The link count of the parent directory would exceed {LINK_MAX}.",
    errno.ENAMETOOLONG: (
        "The length of the path argument exceeds {PATH_MAX} or a pathname "
        "component is longer than {NAME_MAX}."
    ),
    errno.ENOENT: (
        "A component of the path prefix specified by path does not name an "
        "existing directory or path is an empty string."
    ),
    errno.ENOSPC: (
        "The file system does not contain enough space to hold the contents "
        "of the new directory or to extend the parent directory of the new "
        "directory."
    ),
    errno.ENOTDIR: "A component of the path prefix is not a directory.",
    errno.EROFS: "The parent directory resides on a read-only file system.",
}


class PathError(OSError):
    """A file-system operation on a path failed."""


def join(*args: str) -> str:
    """Join the parts with '/', collapsing any run of separators into one."""
    return _REPEATED_SEPARATORS.sub(PATH_SEPARATOR, PATH_SEPARATOR.join(args))


def base(file_name: str) -> str:
    """Return the part after the last separator, or the whole name."""
    return file_name.rpartition(PATH_SEPARATOR)[2]


def directory(file_name: str) -> str:
    """Return the part before the last separator, or an empty string."""
    head, separator, _ = file_name.rpartition(PATH_SEPARATOR)
    return head if separator else ""


def split(file_name: str) -> tuple[str, str]:
    """Split at the last separator into (directory, base)."""
    head, separator, tail = file_name.rpartition(PATH_SEPARATOR)
    return (head, tail) if separator else ("", file_name)


def split_extension(name: str) -> tuple[str, str]:
    """Split at the last '.' into (stem, '.extension')."""
    position = name.rfind(".")
    if position < 0:
        return name, ""
    return name[:position], name[position:]


def _stat_mode(name: str) -> int | None:
    try:
        return os.stat(name).st_mode
    except (OSError, ValueError):
        return None


def exists(name: str) -> bool:
    """True when something with this name exists."""
    return _stat_mode(name) is not None


def is_fifo(name: str) -> bool:
    """True when ``name`` is a named pipe."""
    mode = _stat_mode(name)
    return mode is not None and stat.S_ISFIFO(mode)


def is_file(name: str) -> bool:
    """True when ``name`` is a regular file."""
    mode = _stat_mode(name)
    return mode is not None and stat.S_ISREG(mode)


def is_directory(name: str) -> bool:
    """True when ``name`` is a directory."""
    mode = _stat_mode(name)
    return mode is not None and stat.S_ISDIR(mode)


def make_fifo(name: str) -> None:
    """Create a named pipe with mode 0644."""
    try:
        os.mkfifo(name, 0o644)
    except OSError as error:
        raise PathError(error.errno, f"MakeFifo({name}) failed") from error


def make_unique_system_name(system_name: str) -> str:
    """Append '-N' to the stem until the name does not exist."""
    parent, name = split(system_name)
    stem, extension = split_extension(name)
    unique_name = system_name
    suffix = 0

    while exists(unique_name):
        suffix += 1
        unique_name = f"{stem}-{suffix}{extension}"
        if parent:
            unique_name = join(parent, unique_name)

    return unique_name


def make_directory(path_name: str) -> None:
    """Create one directory; an existing directory is not an error."""
    try:
        os.mkdir(path_name, 0o755)
    except OSError as error:
        code = error.errno
        if code == errno.EEXIST:
            if not is_directory(path_name):
                raise PathError(
                    code,
                    f"Failed to create directory {path_name}. File already exists.",
                ) from error
            return
        detail = _MKDIR_ERRORS.get(code, f"Unknown errno {code}")
        raise PathError(
            code, f"Failed to create directory: {path_name}, {detail}"
        ) from error


def make_directories(path_name: str) -> None:
    """Create a directory and every missing parent, like ``mkdir -p``."""
    if not path_name:
        return

    parts = path_name.split(PATH_SEPARATOR)

    if parts[0] == "":
        # Absolute path: the first directory keeps its leading separator.
        parts.pop(0)
        paths = [PATH_SEPARATOR + parts[0]]
    else:
        paths = [parts[0]]

    for part in parts[1:]:
        paths.append(join(paths[-1], part))

    for sub_directory in paths:
        make_directory(sub_directory)


def get_creation_time(file_name: str) -> int:
    """Return the status-change time of the file in whole seconds."""
    try:
        return int(os.stat(file_name).st_ctime)
    except (OSError, ValueError) as error:
        raise PathError(errno.ENOENT, f"Unable to access {file_name}") from error
"""Querying and creating directories, and the working directory."""

from __future__ import annotations

import os
import stat

from .paths import SEP, is_absolute

_WINDOWS = os.name == "nt"


def _stat_mode(path: str) -> int | None:
    try:
        return os.stat(path).st_mode
    except FileNotFoundError:
        return None


def directory_exists(directory: str) -> bool:
    """Return True if the path exists and is a directory.

    A missing path gives False; any other failure raises OSError.
    """
    mode = _stat_mode(directory)
    return mode is not None and stat.S_ISDIR(mode)


def file_exists(filename: str) -> bool:
    """Return True if the path exists and is a regular file.

    Symbolic links are followed. A missing path gives False; any other
    failure raises OSError.
    """
    mode = _stat_mode(filename)
    return mode is not None and stat.S_ISREG(mode)


def _make_one(directory: str) -> None:
    try:
        os.mkdir(directory, 0o777)
    except FileExistsError:
        pass


def _prefixes(directory: str):
    """Yield each leading part of the path that ends at a separator or the end."""
    size = len(directory)
    for index in range(1, size + 1):
        current = directory[index] if index < size else ""
        previous = directory[index - 1]
        if current == SEP or (current == "" and previous != SEP):
            yield directory[:index]


def create_directory(directory: str) -> None:
    """Create a directory and any missing parents.

    An existing directory is not an error; other failures raise OSError.
    """
    prefixes = _prefixes(directory)
    if _WINDOWS and is_absolute(directory):
        next(prefixes, None)
    for prefix in prefixes:
        _make_one(prefix)


def set_current_directory(directory: str) -> None:
    """Change the working directory of the process."""
    os.chdir(directory)


def get_current_directory() -> str:
    """Return the working directory of the process."""
    return os.getcwd()
"""Absolute file names and the location of the running program."""

from __future__ import annotations

import errno
import os
import shutil
import sys

from .paths import SEP, basename, is_absolute, parent_path

_WINDOWS = os.name == "nt"

_BIN_DIRECTORIES = frozenset({"bin", "sbin", "xbin"})


def expand_filename(filename: str) -> str:
    """Return the full absolute path of a filename.

    Symbolic links are resolved. When the path does not exist, the
    longest existing leading directory is resolved and the remainder is
    appended unchanged. Errors other than a missing path raise OSError.
    """
    if _WINDOWS:
        return os.path.abspath(filename)

    try:
        return os.path.realpath(filename, strict=True)
    except FileNotFoundError:
        pass

    for index in range(len(filename) - 1, -1, -1):
        if filename[index] != SEP:
            continue
        prefix = filename[:index]
        if not prefix:
            continue
        try:
            resolved = os.path.realpath(prefix, strict=True)
        except OSError:
            continue
        return resolved + filename[index:]

    return os.path.abspath(filename)


def get_app_filename() -> str:
    """Return the absolute file name of the running program.

    Raises FileNotFoundError if it cannot be determined.
    """
    name = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    if not name:
        raise FileNotFoundError(errno.ENOENT, "cannot determine the program file")

    has_separator = SEP in name or (os.altsep is not None and os.altsep in name)
    if is_absolute(name) or has_separator:
        return expand_filename(name)

    found = shutil.which(name)
    if found is None:
        raise FileNotFoundError(errno.ENOENT, "program not found on PATH", name)
    return expand_filename(found)


def get_app_directory() -> str:
    """Return the directory the program is installed in.

    That is the directory holding the program file, or its parent when
    the program lives in a 'bin', 'sbin' or 'xbin' directory.
    """
    filename = get_app_filename()
    directory = parent_path(filename, 1)
    if basename(directory) in _BIN_DIRECTORIES:
        directory = parent_path(filename, 2)
    return directory
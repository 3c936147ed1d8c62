"""Pure string operations on filesystem paths."""

from __future__ import annotations

import os

SEP = os.sep
"""The path separator of the running platform."""

NAME_MAX = 255
"""Longest allowed length of a single path component."""

INVALID_FILENAME_CHARS = "'%\" /\\:*?<>|^"

_WINDOWS = os.name == "nt"


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 32 or code == 127


def is_absolute(path: str) -> bool:
    """Return True if the path starts at the filesystem root."""
    if path[:1] == SEP:
        return True
    if _WINDOWS:
        return (
            len(path) >= 3
            and path[0].isascii()
            and path[0].isupper()
            and path[1] == ":"
            and path[2] == SEP
        )
    return False


def is_relative(path: str) -> bool:
    """Return True if the path is not absolute."""
    return not is_absolute(path)


def basename(path: str) -> str:
    """Return the final component of a path."""
    return path.rpartition(SEP)[2]


def strip_path_sep(path: str) -> str:
    """Remove trailing separators, keeping a lone root separator."""
    if not path:
        return path
    end = len(path) - 1
    while end > 0 and path[end] == SEP:
        if _WINDOWS and end == 2 and path[0].isalpha() and path[1] == ":":
            break
        end -= 1
    return path[: end + 1]


def dirname(path: str) -> str:
    """Return the directory part of a path, without trailing separators."""
    head = path[: len(path) - len(basename(path))]
    return strip_path_sep(head)


def get_extension(filename: str) -> str | None:
    """Return the extension of a filename, or None if it has none.

    The extension is the text after the last dot of the final component;
    it must be non-empty and purely alphanumeric. A dot at the very start
    of the whole string does not begin an extension.
    """
    name = basename(filename)
    if "." not in name:
        return None
    dot = len(filename) - len(name) + name.rindex(".")
    if dot == 0:
        return None
    extension = filename[dot + 1:]
    if not extension:
        return None
    if not all(ch.isascii() and ch.isalnum() for ch in extension):
        return None
    return extension


def remove_extensions(filename: str) -> str:
    """Strip every extension from a filename, e.g. 'a.tar.gz' -> 'a'."""
    while True:
        extension = get_extension(filename)
        if extension is None:
            return filename
        filename = filename[: -(len(extension) + 1)]


def normalize_path(path: str, single_component: bool = False) -> str:
    """Make a path safe to use as a file name.

    Control characters and characters that are invalid in file names are
    replaced with underscores (separators are kept unless the path is a
    single component), leading and trailing dots are removed and every
    component is cut to NAME_MAX characters.
    """
    prefix_size = 3 if _WINDOWS and is_absolute(path) else 0
    prefix, rest = path[:prefix_size], path[prefix_size:]

    rest = "".join(
        ch
        if (not single_component and ch == SEP)
        or not (_is_control(ch) or ch in INVALID_FILENAME_CHARS)
        else "_"
        for ch in rest
    )
    rest = rest.strip(".")

    return SEP.join(component[:NAME_MAX] for component in (prefix + rest).split(SEP))


def parent_path(path: str, maxdepth: int = 1) -> str:
    """Return the ancestor of a path that lies maxdepth levels up.

    A trailing separator is ignored. If the path does not have that many
    levels, the root is returned for absolute paths and an empty string
    for relative ones.
    """
    depth = 1
    for index in range(len(path) - 2, -1, -1):
        if path[index] == SEP:
            if depth == maxdepth:
                return path[:index] or SEP
            depth += 1
        if index == 0 and is_absolute(path):
            return path[: 3 if _WINDOWS else 1]
    return ""
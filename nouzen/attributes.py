"""Symbolic links and permission bits of files."""

from __future__ import annotations

import os
import stat
from enum import IntFlag

_WINDOWS = os.name == "nt"


class FileMode(IntFlag):
    """Portable permission bits reported by get_file_permissions."""

    NONE = 0
    USER_EXEC = 0x00000001
    USER_WRITE = 0x00000002
    USER_READ = 0x00000004
    GROUP_EXEC = 0x00000010
    GROUP_WRITE = 0x00000020
    GROUP_READ = 0x00000040
    OTHERS_EXEC = 0x00000080
    OTHERS_WRITE = 0x00000100
    OTHERS_READ = 0x00000200


_POSIX_BITS = (
    (stat.S_IRUSR, FileMode.USER_READ),
    (stat.S_IWUSR, FileMode.USER_WRITE),
    (stat.S_IXUSR, FileMode.USER_EXEC),
    (stat.S_IRGRP, FileMode.GROUP_READ),
    (stat.S_IWGRP, FileMode.GROUP_WRITE),
    (stat.S_IXGRP, FileMode.GROUP_EXEC),
    (stat.S_IROTH, FileMode.OTHERS_READ),
    (stat.S_IWOTH, FileMode.OTHERS_WRITE),
    (stat.S_IXOTH, FileMode.OTHERS_EXEC),
)

_FILE_ATTRIBUTE_READONLY = 0x1
_FILE_ATTRIBUTE_REPARSE_POINT = 0x400


def symlink_exists(path: str) -> bool:
    """Return True if the path itself is a symbolic link.

    Raises OSError if the path cannot be examined, including when it
    does not exist.
    """
    info = os.lstat(path)
    if _WINDOWS:
        attributes = getattr(info, "st_file_attributes", 0)
        return bool(attributes & _FILE_ATTRIBUTE_REPARSE_POINT)
    return stat.S_ISLNK(info.st_mode)


def create_symlink(source: str, destination: str) -> None:
    """Create a symbolic link at destination that points to source."""
    target_is_directory = _WINDOWS and os.path.isdir(source)
    os.symlink(source, destination, target_is_directory=target_is_directory)


def get_symlink(path: str) -> str:
    """Return the target a symbolic link points to."""
    return os.readlink(path)


def get_file_permissions(path: str) -> FileMode:
    """Return the permission bits of a path, without following links."""
    info = os.lstat(path)
    if _WINDOWS:
        mode = (
            FileMode.USER_EXEC | FileMode.USER_READ
            | FileMode.GROUP_EXEC | FileMode.GROUP_READ
            | FileMode.OTHERS_EXEC | FileMode.OTHERS_READ
        )
        attributes = getattr(info, "st_file_attributes", 0)
        if not attributes & _FILE_ATTRIBUTE_READONLY:
            mode |= FileMode.USER_WRITE | FileMode.GROUP_WRITE | FileMode.OTHERS_WRITE
        return mode

    mode = FileMode.NONE
    for bit, flag in _POSIX_BITS:
        if info.st_mode & bit:
            mode |= flag
    return mode


def set_file_writable(path: str) -> None:
    """Grant the owner write permission on a path."""
    info = os.lstat(path)
    os.chmod(path, stat.S_IMODE(info.st_mode) | stat.S_IWUSR)
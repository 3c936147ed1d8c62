"""Copying, moving and removing files and directory trees."""

from __future__ import annotations

import errno
import os
import shutil

from .attributes import set_file_writable

_WINDOWS = os.name == "nt"


def copy_file(source: str, destination: str) -> None:
    """Copy the contents of source to destination, overwriting it."""
    shutil.copyfile(source, destination)


def move_file(source: str, destination: str) -> None:
    """Move a file, replacing destination if it exists.

    A symbolic link is moved itself, not its target. When a plain rename
    is impossible (across filesystems), the file is copied and the source
    removed.
    """
    try:
        os.replace(source, destination)
        return
    except OSError as error:
        fallback = error.errno == errno.EXDEV or (
            _WINDOWS and isinstance(error, PermissionError)
        )
        if not fallback:
            raise
    copy_file(source, destination)
    remove_file(source)


def remove_file(filename: str) -> None:
    """Delete a file; a file that does not exist is not an error.

    On Windows, a read-only attribute does not prevent deletion.
    """
    try:
        os.unlink(filename)
    except FileNotFoundError:
        pass
    except PermissionError:
        if not _WINDOWS:
            raise
        set_file_writable(filename)
        os.unlink(filename)


def remove_empty_directory(directory: str) -> None:
    """Delete an existing empty directory."""
    os.rmdir(directory)


def _remove_recursive(directory: str, remove_itself: bool) -> None:
    with os.scandir(directory) as entries:
        children = [(entry.path, entry.is_dir(follow_symlinks=False)) for entry in entries]
    for path, is_directory in children:
        if is_directory:
            _remove_recursive(path, True)
        else:
            remove_file(path)
    if remove_itself:
        remove_empty_directory(directory)


def remove_directory(directory: str) -> None:
    """Delete a directory together with everything inside it."""
    _remove_recursive(directory, True)


def remove_directory_contents(directory: str) -> None:
    """Delete everything inside a directory, keeping the directory."""
    _remove_recursive(directory, False)
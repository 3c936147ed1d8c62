import errno
import os
from unittest import mock

import pytest

from nouzen.fileops import (
    copy_file,
    move_file,
    remove_directory,
    remove_directory_contents,
    remove_empty_directory,
    remove_file,
)


def test_copy_file_copies_contents(tmp_path):
    source = tmp_path / "a"
    source.write_bytes(b"payload" * 3000)
    destination = tmp_path / "b"
    copy_file(str(source), str(destination))
    assert destination.read_bytes() == source.read_bytes()
    assert source.exists()


def test_copy_file_overwrites_destination(tmp_path):
    source = tmp_path / "a"
    source.write_text("new")
    destination = tmp_path / "b"
    destination.write_text("old and longer")
    copy_file(str(source), str(destination))
    assert destination.read_text() == "new"


def test_copy_file_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(str(tmp_path / "missing"), str(tmp_path / "b"))


def test_move_file_moves(tmp_path):
    source = tmp_path / "a"
    source.write_text("content")
    destination = tmp_path / "b"
    move_file(str(source), str(destination))
    assert not source.exists()
    assert destination.read_text() == "content"


def test_move_file_replaces_destination(tmp_path):
    source = tmp_path / "a"
    source.write_text("fresh")
    destination = tmp_path / "b"
    destination.write_text("stale")
    move_file(str(source), str(destination))
    assert destination.read_text() == "fresh"
    assert not source.exists()


def test_move_file_falls_back_across_devices(tmp_path):
    source = tmp_path / "a"
    source.write_text("content")
    destination = tmp_path / "b"
    with mock.patch("os.replace", side_effect=OSError(errno.EXDEV, "cross-device")):
        move_file(str(source), str(destination))
    assert destination.read_text() == "content"
    assert not source.exists()


def test_move_file_other_error_raises(tmp_path):
    source = tmp_path / "a"
    source.write_text("content")
    with mock.patch("os.replace", side_effect=OSError(errno.EIO, "io")):
        with pytest.raises(OSError) as info:
            move_file(str(source), str(tmp_path / "b"))
    assert info.value.errno == errno.EIO
    assert source.exists()


def test_move_file_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        move_file(str(tmp_path / "missing"), str(tmp_path / "b"))


def test_remove_file_deletes(tmp_path):
    path = tmp_path / "a"
    path.write_text("x")
    remove_file(str(path))
    assert not path.exists()


def test_remove_file_missing_is_not_error(tmp_path):
    path = tmp_path / "missing"
    remove_file(str(path))
    assert not path.exists()


def test_remove_empty_directory(tmp_path):
    directory = tmp_path / "empty"
    directory.mkdir()
    remove_empty_directory(str(directory))
    assert not directory.exists()


def test_remove_empty_directory_not_empty_raises(tmp_path):
    directory = tmp_path / "full"
    directory.mkdir()
    (directory / "file").write_text("x")
    with pytest.raises(OSError):
        remove_empty_directory(str(directory))
    assert directory.exists()


def _make_tree(root):
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "top.txt").write_text("1")
    (root / "sub" / "mid.txt").write_text("2")
    (root / "sub" / "deeper" / "low.txt").write_text("3")


def test_remove_directory_removes_tree(tmp_path):
    root = tmp_path / "tree"
    root.mkdir()
    _make_tree(root)
    remove_directory(str(root))
    assert not root.exists()


def test_remove_directory_contents_keeps_directory(tmp_path):
    root = tmp_path / "tree"
    root.mkdir()
    _make_tree(root)
    remove_directory_contents(str(root))
    assert root.is_dir()
    assert list(root.iterdir()) == []


def test_remove_directory_does_not_follow_symlinks(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "keep.txt").write_text("keep")
    root = tmp_path / "tree"
    root.mkdir()
    os.symlink(str(outside), str(root / "link"), target_is_directory=True)
    remove_directory(str(root))
    assert not root.exists()
    assert (outside / "keep.txt").read_text() == "keep"


def test_remove_directory_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        remove_directory(str(tmp_path / "missing"))
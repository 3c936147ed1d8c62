import os

import pytest

from nouzen.attributes import (
    FileMode,
    create_symlink,
    get_file_permissions,
    get_symlink,
    set_file_writable,
    symlink_exists,
)


@pytest.fixture
def regular_file(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("data")
    return str(path)


def test_create_symlink_then_detect(tmp_path, regular_file):
    link = str(tmp_path / "link")
    create_symlink(regular_file, link)
    assert symlink_exists(link) is True


def test_regular_file_is_not_symlink(regular_file):
    assert symlink_exists(regular_file) is False


def test_symlink_exists_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        symlink_exists(str(tmp_path / "missing"))


def test_get_symlink_returns_target(tmp_path, regular_file):
    link = str(tmp_path / "link")
    create_symlink(regular_file, link)
    assert get_symlink(link) == regular_file


def test_get_symlink_on_regular_file_raises(regular_file):
    with pytest.raises(OSError):
        get_symlink(regular_file)


def test_create_symlink_existing_destination_raises(tmp_path, regular_file):
    with pytest.raises(FileExistsError):
        create_symlink(regular_file, regular_file)


def test_dangling_symlink_is_detected(tmp_path):
    link = str(tmp_path / "dangling")
    create_symlink(str(tmp_path / "nowhere"), link)
    assert symlink_exists(link) is True


def test_get_file_permissions_maps_bits(regular_file):
    os.chmod(regular_file, 0o644)
    assert get_file_permissions(regular_file) == (
        FileMode.USER_READ | FileMode.USER_WRITE | FileMode.GROUP_READ | FileMode.OTHERS_READ
    )


def test_get_file_permissions_values(regular_file):
    os.chmod(regular_file, 0o700)
    mode = get_file_permissions(regular_file)
    assert int(mode) == FileMode.USER_READ | FileMode.USER_WRITE | FileMode.USER_EXEC
    assert FileMode.USER_EXEC == 0x1
    assert FileMode.OTHERS_READ == 0x200


def test_get_file_permissions_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_file_permissions(str(tmp_path / "missing"))


def test_set_file_writable_adds_user_write(regular_file):
    os.chmod(regular_file, 0o444)
    assert FileMode.USER_WRITE not in get_file_permissions(regular_file)
    set_file_writable(regular_file)
    mode = get_file_permissions(regular_file)
    assert FileMode.USER_WRITE in mode
    assert FileMode.USER_READ in mode
    assert FileMode.OTHERS_READ in mode


def test_set_file_writable_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        set_file_writable(str(tmp_path / "missing"))
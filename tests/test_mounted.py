import os
import socket

import pytest

from mntinfo.info import get_mounts
from mntinfo.mounted import (
    mounted,
    mounted_by_mountinfo,
    mounted_by_stat,
    mounted_fast,
    normalize_path,
)


@pytest.mark.parametrize(
    "path",
    ["/", "/../../", "/tmp/..", "../" * (4096 // 3)],
)
def test_root_is_always_mounted(path):
    assert mounted(path) is True
    assert mounted_fast(path) == (True, True)


def test_non_existent_path_raises():
    with pytest.raises(FileNotFoundError):
        mounted("/non/existent/path")
    with pytest.raises(FileNotFoundError):
        mounted_fast("/non/existent/path")


def test_broken_symlink_raises(tmp_path):
    link = tmp_path / "broken-symlink"
    os.symlink("/some/non/existent/dest", link)
    with pytest.raises(FileNotFoundError):
        mounted(str(link))
    with pytest.raises(FileNotFoundError):
        normalize_path(str(link))


def test_not_mounted_directory(tmp_path):
    d = tmp_path / "dir"
    d.mkdir()
    assert mounted(str(d)) is False
    assert mounted_fast(str(d)) == (False, False)
    real = normalize_path(str(d))
    assert mounted_by_stat(real) is False
    assert mounted_by_mountinfo(real) is False


def test_symlink_to_not_mounted_directory(tmp_path):
    d = tmp_path / "dir"
    d.mkdir()
    link = tmp_path / "symlink"
    os.symlink(d, link)
    assert mounted(str(link)) is False
    assert normalize_path(str(link)) == os.path.realpath(str(d))


def test_not_mounted_file(tmp_path):
    f = tmp_path / "file"
    f.write_text("hello")
    assert mounted(str(f)) is False
    assert mounted_by_stat(normalize_path(str(f))) is False


def test_not_mounted_socket(tmp_path):
    path = str(tmp_path / "sock")
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(path)
        sock.listen(1)
        assert mounted(path) is False
    finally:
        sock.close()


def test_normalize_path_resolves_relative_and_dots(tmp_path, monkeypatch):
    sub = tmp_path / "a" / "b"
    sub.mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    expected = os.path.realpath(str(tmp_path / "a"))
    assert normalize_path("a/b/..") == expected
    assert normalize_path("./a//") == expected


def test_proc_is_mounted():
    assert mounted("/proc") is True
    assert mounted_by_stat("/proc") is True
    assert mounted_fast("/proc") == (True, True)


def test_mounted_by_mountinfo_finds_listed_mounts():
    mounts = get_mounts()
    assert len(mounts) >= 2
    assert mounted_by_mountinfo(mounts[0].mountpoint) is True
    assert mounted_by_mountinfo("/non/existent/mount/point") is False


def test_mounted_agrees_with_mountinfo_for_proc():
    assert mounted_by_mountinfo("/proc") == mounted("/proc")
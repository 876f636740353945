import pytest

from mntinfo import flags
from mntinfo.flags import merge_tmpfs_options, parse_options


def test_mount_options_parsing():
    flag, data = parse_options("noatime,ro,noexec,size=10k")
    assert data == "size=10k"
    assert flag == flags.NOATIME | flags.RDONLY | flags.NOEXEC


def test_clear_flag_undoes_earlier_set():
    flag, data = parse_options("ro,rw")
    assert flag == 0
    assert data == ""


def test_empty_options():
    assert parse_options("") == (0, "")


def test_defaults_is_passed_as_data():
    assert parse_options("defaults") == (0, "defaults")


def test_unknown_options_keep_order_in_data():
    flag, data = parse_options("mode=755,nosuid,uid=0")
    assert flag == flags.NOSUID
    assert data == "mode=755,uid=0"


def test_merge_tmpfs_options():
    options = [
        "noatime", "ro", "size=10k", "defaults", "noexec", "atime",
        "defaults", "rw", "rprivate", "size=1024k", "slave", "exec",
    ]
    assert merge_tmpfs_options(options) == ["atime", "rw", "size=1024k", "slave", "exec"]


def test_merge_tmpfs_options_invalid():
    options = [
        "noatime", "ro", "size=10k", "atime", "rw", "rprivate",
        "size=1024k", "slave", "size", "exec",
    ]
    with pytest.raises(ValueError, match="invalid tmpfs option"):
        merge_tmpfs_options(options)


def test_merge_rejects_unknown_data_key():
    with pytest.raises(ValueError):
        merge_tmpfs_options(["foo=bar"])


def test_merge_accepts_empty_key():
    assert merge_tmpfs_options(["=x", "=y"]) == ["=y"]


def test_merge_keeps_last_data_value():
    assert merge_tmpfs_options(["mode=700", "uid=1", "mode=755"]) == ["uid=1", "mode=755"]


def test_merge_empty():
    assert merge_tmpfs_options([]) == []


def test_recursive_option_sets_base_flag():
    flag, data = parse_options("rbind")
    assert data == ""
    assert flag == flags.RBIND
    assert flag & flags.BIND == flags.BIND


def test_merge_keeps_only_last_propagation_mode():
    assert merge_tmpfs_options(["private", "rprivate"]) == ["rprivate"]
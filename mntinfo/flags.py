"""Mount flags and parsing of fstab-style mount option strings."""

from __future__ import annotations

import sys
from typing import NamedTuple

_MS_RDONLY = 0x1
_MS_NOSUID = 0x2
_MS_NODEV = 0x4
_MS_NOEXEC = 0x8
_MS_SYNCHRONOUS = 0x10
_MS_REMOUNT = 0x20
_MS_MANDLOCK = 0x40
_MS_DIRSYNC = 0x80
_MS_NOATIME = 0x400
_MS_NODIRATIME = 0x800
_MS_BIND = 0x1000
_MS_REC = 0x4000
_MS_SILENT = 0x8000
_MS_UNBINDABLE = 0x20000
_MS_PRIVATE = 0x40000
_MS_SLAVE = 0x80000
_MS_SHARED = 0x100000
_MS_RELATIME = 0x200000
_MS_STRICTATIME = 0x1000000
_MNT_DETACH = 0x2

if sys.platform.startswith(("freebsd", "openbsd")):
    RDONLY = 0x1
    SYNCHRONOUS = 0x2
    NOEXEC = 0x4
    NOSUID = 0x8
    NOATIME = 0x10000000 if sys.platform.startswith("freebsd") else 0x8000

    # Not supported on these platforms.
    BIND = DIRSYNC = MANDLOCK = NODEV = NODIRATIME = 0
    UNBINDABLE = RUNBINDABLE = PRIVATE = RPRIVATE = 0
    SHARED = RSHARED = SLAVE = RSLAVE = RBIND = 0
    RELATIME = REMOUNT = STRICTATIME = 0
    MNT_DETACH = 0
else:
    RDONLY = _MS_RDONLY
    NOSUID = _MS_NOSUID
    NODEV = _MS_NODEV
    NOEXEC = _MS_NOEXEC
    SYNCHRONOUS = _MS_SYNCHRONOUS
    DIRSYNC = _MS_DIRSYNC
    REMOUNT = _MS_REMOUNT
    MANDLOCK = _MS_MANDLOCK
    NOATIME = _MS_NOATIME
    NODIRATIME = _MS_NODIRATIME
    BIND = _MS_BIND
    RBIND = _MS_BIND | _MS_REC
    UNBINDABLE = _MS_UNBINDABLE
    RUNBINDABLE = _MS_UNBINDABLE | _MS_REC
    PRIVATE = _MS_PRIVATE
    RPRIVATE = _MS_PRIVATE | _MS_REC
    SLAVE = _MS_SLAVE
    RSLAVE = _MS_SLAVE | _MS_REC
    SHARED = _MS_SHARED
    RSHARED = _MS_SHARED | _MS_REC
    RELATIME = _MS_RELATIME
    STRICTATIME = _MS_STRICTATIME
    MNT_DETACH = _MNT_DETACH


class _FlagSpec(NamedTuple):
    clear: bool
    flag: int


_FLAGS: dict[str, _FlagSpec] = {
    "defaults": _FlagSpec(False, 0),
    "ro": _FlagSpec(False, RDONLY),
    "rw": _FlagSpec(True, RDONLY),
    "suid": _FlagSpec(True, NOSUID),
    "nosuid": _FlagSpec(False, NOSUID),
    "dev": _FlagSpec(True, NODEV),
    "nodev": _FlagSpec(False, NODEV),
    "exec": _FlagSpec(True, NOEXEC),
    "noexec": _FlagSpec(False, NOEXEC),
    "sync": _FlagSpec(False, SYNCHRONOUS),
    "async": _FlagSpec(True, SYNCHRONOUS),
    "dirsync": _FlagSpec(False, DIRSYNC),
    "remount": _FlagSpec(False, REMOUNT),
    "mand": _FlagSpec(False, MANDLOCK),
    "nomand": _FlagSpec(True, MANDLOCK),
    "atime": _FlagSpec(True, NOATIME),
    "noatime": _FlagSpec(False, NOATIME),
    "diratime": _FlagSpec(True, NODIRATIME),
    "nodiratime": _FlagSpec(False, NODIRATIME),
    "bind": _FlagSpec(False, BIND),
    "rbind": _FlagSpec(False, RBIND),
    "unbindable": _FlagSpec(False, UNBINDABLE),
    "runbindable": _FlagSpec(False, RUNBINDABLE),
    "private": _FlagSpec(False, PRIVATE),
    "rprivate": _FlagSpec(False, RPRIVATE),
    "shared": _FlagSpec(False, SHARED),
    "rshared": _FlagSpec(False, RSHARED),
    "slave": _FlagSpec(False, SLAVE),
    "rslave": _FlagSpec(False, RSLAVE),
    "relatime": _FlagSpec(False, RELATIME),
    "norelatime": _FlagSpec(True, RELATIME),
    "strictatime": _FlagSpec(False, STRICTATIME),
    "nostrictatime": _FlagSpec(True, STRICTATIME),
}

_VALID_DATA_KEYS = frozenset(
    {"", "size", "mode", "uid", "gid", "nr_inodes", "nr_blocks", "mpol"}
)

_PROPAGATION_FLAGS = frozenset(
    {
        "bind",
        "rbind",
        "unbindable",
        "runbindable",
        "private",
        "rprivate",
        "shared",
        "rshared",
        "slave",
        "rslave",
    }
)

_PROPAGATION_KEY = -1


def _lookup(option: str) -> _FlagSpec | None:
    """Return the flag spec for an option if it is supported on this platform."""
    spec = _FLAGS.get(option)
    if spec is None or spec.flag == 0:
        return None
    return spec


def merge_tmpfs_options(options: list[str]) -> list[str]:
    """Merge tmpfs mount options so that no flag or data key appears twice.

    Later options win. All propagation flags share a single slot.
    Raises ValueError for an option that is neither a known flag nor a
    valid ``key=value`` data option.
    """
    seen_flags: set[int] = set()
    seen_data: set[str] = set()
    kept: list[str] = []

    for option in reversed(options):
        if option == "defaults":
            continue
        spec = _lookup(option)
        if spec is not None:
            key = _PROPAGATION_KEY if option in _PROPAGATION_FLAGS else spec.flag
            if key not in seen_flags:
                kept.append(option)
                seen_flags.add(key)
            continue
        parts = option.split("=", 1)
        if len(parts) != 2 or parts[0] not in _VALID_DATA_KEYS:
            raise ValueError(f"invalid tmpfs option {parts!r}")
        if parts[0] not in seen_data:
            kept.append(option)
            seen_data.add(parts[0])

    kept.reverse()
    return kept


def parse_options(options: str) -> tuple[int, str]:
    """Split fstab-style options into mount flags and filesystem data."""
    flag = 0
    data: list[str] = []
    for option in options.split(","):
        spec = _lookup(option)
        if spec is None:
            data.append(option)
        elif spec.clear:
            flag &= ~spec.flag
        else:
            flag |= spec.flag
    return flag, ",".join(data)
"""Reading and parsing the kernel mount table (``/proc/<pid>/mountinfo``)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO, Iterable, Union

from .filters import FilterFunc

_MOUNTINFO_SELF = "/proc/self/mountinfo"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_BACKSLASH = 0x5C


@dataclass(frozen=True)
class Info:
    """One mounted filesystem, as described by a line of mountinfo."""

    id: int = 0
    parent: int = 0
    major: int = 0
    minor: int = 0
    root: str = ""
    mountpoint: str = ""
    options: str = ""
    optional: str = ""
    fstype: str = ""
    source: str = ""
    vfs_options: str = ""


def _atoi(text: str) -> int:
    """Parse a decimal integer, giving 0 for anything that is not one."""
    if _INT_RE.fullmatch(text) is None:
        return 0
    return int(text)


def _show(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


def unescape(path: str) -> str:
    """Undo the octal escapes (``\\040``, ``\\011``, ``\\012``, ``\\134``) used in mountinfo paths.

    Raises ValueError on a malformed escape sequence.
    """
    if "\\" not in path:
        return path

    raw = path.encode("utf-8", "surrogateescape")
    out = bytearray()
    i = 0
    while i < len(raw):
        byte = raw[i]
        if byte != _BACKSLASH:
            out.append(byte)
            i += 1
            continue
        seq = raw[i:]
        if len(seq) < 4:
            raise ValueError(f"bad escape sequence {_show(seq)!r}: too short")
        digits = seq[1:4]
        if not all(0x30 <= d <= 0x37 for d in digits):
            raise ValueError(f"bad escape sequence {_show(seq[:3])!r}: not a digit")
        value = int(digits, 8)
        if value > 255:
            raise ValueError(f"bad escape sequence {_show(seq[:4])!r}: out of range")
        out.append(value)
        i += 4
    return out.decode("utf-8", "surrogateescape")


def _unescape_field(value: str, what: str) -> str:
    try:
        return unescape(value)
    except ValueError as exc:
        raise ValueError(f"parsing {value!r} failed: {what}: {exc}") from exc


def _parse_line(text: str) -> Info:
    # Layout: ID PARENT MAJOR:MINOR ROOT MOUNTPOINT OPTIONS [OPTIONAL...] - FSTYPE SOURCE SUPEROPTS
    fields = text.split(" ")
    count = len(fields)
    if count < 10:
        raise ValueError(f"parsing {text!r} failed: not enough fields ({count})")

    # Old kernels could leave spaces in the last field (cifs "unc="),
    # so look backwards for the separator.
    sep = count - 4
    while fields[sep] != "-":
        sep -= 1
        if sep == 5:
            raise ValueError(f"parsing {text!r} failed: missing - separator")

    mountpoint = _unescape_field(fields[4], "mount point")
    fstype = _unescape_field(fields[sep + 1], "fstype")
    source = _unescape_field(fields[sep + 2], "source")

    major_minor = fields[2].split(":", 2)
    if len(major_minor) != 2:
        raise ValueError(
            f"parsing {text!r} failed: unexpected major:minor pair {major_minor}"
        )

    root = _unescape_field(fields[3], "root")

    return Info(
        id=_atoi(fields[0]),
        parent=_atoi(fields[1]),
        major=_atoi(major_minor[0]),
        minor=_atoi(major_minor[1]),
        root=root,
        mountpoint=mountpoint,
        options=fields[5],
        optional=" ".join(fields[6:sep]),
        fstype=fstype,
        source=source,
        vfs_options=fields[sep + 3],
    )


def _lines(reader: Iterable[Union[str, bytes]]) -> Iterable[str]:
    for line in reader:
        if isinstance(line, bytes):
            line = line.decode("utf-8", "surrogateescape")
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def get_mounts_from_reader(
    reader: Union[IO[str], IO[bytes], Iterable[Union[str, bytes]]],
    filter: FilterFunc | None = None,
) -> list[Info]:
    """Parse mountinfo text from ``reader``, keeping entries the filter accepts.

    ``reader`` may be a text or binary file, or any iterable of lines.
    Raises ValueError on a malformed line.
    """
    out: list[Info] = []
    for text in _lines(reader):
        info = _parse_line(text)
        stop = False
        if filter is not None:
            skip, stop = filter(info)
            if skip:
                continue
        out.append(info)
        if stop:
            break
    return out


def get_mounts(filter: FilterFunc | None = None) -> list[Info]:
    """Return the mounts seen by the current process, optionally filtered."""
    with open(_MOUNTINFO_SELF, "rb") as f:
        return get_mounts_from_reader(f, filter)


def pid_mount_info(pid: int) -> list[Info]:
    """Return the mounts in the mount namespace of process ``pid``."""
    with open(f"/proc/{pid}/mountinfo", "rb") as f:
        return get_mounts_from_reader(f, None)
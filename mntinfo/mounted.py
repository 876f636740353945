"""Detecting whether a path is a mount point."""

from __future__ import annotations

import os

from .filters import single_entry_filter
from .info import get_mounts


def normalize_path(path: str) -> str:
    """Return ``path`` made absolute, with symlinks resolved, checking that it exists.

    Raises OSError (FileNotFoundError for a missing path or a broken symlink).
    """
    real = os.path.realpath(os.path.abspath(path), strict=True)
    os.stat(real)
    return real


def mounted_by_stat(path: str) -> bool:
    """Tell whether ``path`` lies on a different device than its parent.

    ``path`` must be normalized. Bind mounts are not detected this way.
    Raises OSError if either path cannot be examined.
    """
    dev = os.lstat(path).st_dev
    parent = os.path.dirname(path)
    return dev != os.lstat(parent).st_dev


def mounted_by_mountinfo(path: str) -> bool:
    """Tell whether ``path`` is listed as a mount point in the mount table.

    ``path`` must be normalized.
    """
    return bool(get_mounts(single_entry_filter(path)))


def _mounted_fast(path: str) -> tuple[bool, bool]:
    if path == os.sep:
        return True, True
    # A differing device proves a mount; the same device proves nothing,
    # because bind mounts share the device of their parent.
    if mounted_by_stat(path):
        return True, True
    return False, False


def mounted_fast(path: str) -> tuple[bool, bool]:
    """Detect a mount point without reading the mount table.

    Returns ``(mounted, sure)``; the answer can only be trusted when ``sure``
    is true. Raises OSError for a path that does not exist.
    """
    if path == os.sep:
        return True, True
    return _mounted_fast(normalize_path(path))


def mounted(path: str) -> bool:
    """Tell whether ``path`` is a mount point.

    Tries the fast check first and falls back to the mount table.
    Raises OSError for a path that does not exist.
    """
    if path == os.sep:
        return True
    real = normalize_path(path)
    is_mount, sure = _mounted_fast(real)
    if sure:
        return is_mount
    return mounted_by_mountinfo(real)
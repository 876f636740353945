"""Filters for selecting entries from the mount table.

A filter takes a mount entry (anything with ``mountpoint`` and ``fstype``
attributes) and returns a ``(skip, stop)`` pair: ``skip`` drops the entry,
``stop`` ends parsing after it.
"""

from __future__ import annotations

from typing import Any, Callable, Tuple

FilterFunc = Callable[[Any], Tuple[bool, bool]]


def prefix_filter(prefix: str) -> FilterFunc:
    """Keep entries whose mount point is ``prefix`` or lies below it as a path."""

    def _filter(entry: Any) -> tuple[bool, bool]:
        skip = not (entry.mountpoint + "/").startswith(prefix + "/")
        return skip, False

    return _filter


def single_entry_filter(mountpoint: str) -> FilterFunc:
    """Keep only the entry for ``mountpoint`` and stop once it is found."""

    def _filter(entry: Any) -> tuple[bool, bool]:
        if entry.mountpoint == mountpoint:
            return False, True
        return True, False

    return _filter


def parents_filter(path: str) -> FilterFunc:
    """Keep entries whose mount points can be parents of ``path``."""

    def _filter(entry: Any) -> tuple[bool, bool]:
        return not path.startswith(entry.mountpoint), False

    return _filter


def fstype_filter(*args: str) -> FilterFunc:
    """Keep entries whose filesystem type is one of the given types."""
    wanted = frozenset(args)

    def _filter(entry: Any) -> tuple[bool, bool]:
        return entry.fstype not in wanted, False

    return _filter
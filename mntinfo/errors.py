"""Errors raised by mount and unmount operations."""

from __future__ import annotations


class MountError(Exception):
    """A mount or unmount operation failed; the underlying error is kept as ``err``."""

    def __init__(
        self,
        op: str,
        *,
        target: str,
        err: BaseException,
        source: str = "",
        flags: int = 0,
        data: str = "",
    ) -> None:
        super().__init__(op, target, err)
        self.op = op
        self.source = source
        self.target = target
        self.flags = flags
        self.data = data
        self.err = err
        self.__cause__ = err

    @property
    def errno(self) -> int | None:
        """The errno of the underlying error, if it has one."""
        return getattr(self.err, "errno", None)

    def __str__(self) -> str:
        where = f"{self.source}:{self.target}" if self.source else self.target
        out = f"{self.op} {where}"
        if self.flags:
            out += f", flags: 0x{self.flags:x}"
        if self.data:
            out += f", data: {self.data}"
        return f"{out}: {self.err}"
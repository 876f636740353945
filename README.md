# mntinfo

Tools for inspecting mounts on Linux from Python:

- parse `/proc/self/mountinfo` (or any reader holding the same format)
  into `Info` records, with filters that skip entries or stop early;
- tell whether a path is a mount point, including bind mounts;
- turn fstab-style option strings into mount flags and filesystem data,
  and merge tmpfs option lists without duplicates.

The package has no dependencies beyond the standard library.

## Installation

```
pip install mntinfo
```

## Reading the mount table

```python
from mntinfo.info import get_mounts, get_mounts_from_reader
from mntinfo.filters import prefix_filter, fstype_filter

for m in get_mounts(prefix_filter("/sys")):
    print(m.mountpoint, m.fstype, m.source)

with open("/proc/self/mountinfo") as f:
    tmpfs = get_mounts_from_reader(f, fstype_filter("tmpfs"))
```

`get_mounts_from_reader` accepts a text or binary file, or any iterable
of lines, and raises `ValueError` on a malformed line. `get_mounts`
reads the table of the current process; `pid_mount_info(pid)` reads the
table of another process.

Each entry is a frozen `Info` dataclass with the fields `id`, `parent`,
`major`, `minor`, `root`, `mountpoint`, `options`, `optional`, `fstype`,
`source` and `vfs_options`.

A filter takes an `Info` and returns a pair `(skip, stop)`. The
filters in `mntinfo.filters`:

- `prefix_filter(prefix)`: mount points equal to or under `prefix`
  (as a path, so `/foo` does not match `/foobar`);
- `single_entry_filter(mountpoint)`: exactly one mount point, then stop;
- `parents_filter(path)`: mount points that may be parents of `path`;
- `fstype_filter(*types)`: entries of the given filesystem types.

Path arguments to filters should be absolute, cleaned and free of
symlinks; `mntinfo.mounted.normalize_path` produces such a path.

Escaped characters in paths (`\040` for a space, `\011` for a tab,
`\012` for a newline, `\134` for a backslash) are decoded;
`mntinfo.info.unescape` does this on its own and raises `ValueError` on
a malformed escape.

## Is this a mount point?

```python
from mntinfo.mounted import mounted, mounted_fast

mounted("/proc")            # True
is_mount, sure = mounted_fast("/home/me")
```

`mounted` always gives a definite answer: it compares the device of the
path with that of its parent, and when that cannot decide it looks the
path up in the mount table, which also finds bind mounts. `mounted_fast`
never reads the table and returns `(mounted, sure)`; only a `True`
`sure` can be trusted, and bind mounts are reported as not sure. A path
that does not exist raises `FileNotFoundError`.

The single checks are available too: `mounted_by_stat(path)` and
`mounted_by_mountinfo(path)` expect a path already passed through
`normalize_path`.

## Mount options

```python
from mntinfo.flags import parse_options, merge_tmpfs_options

flags, data = parse_options("noatime,ro,noexec,size=10k")
# data == "size=10k"

merge_tmpfs_options(["noatime", "ro", "size=10k", "atime", "size=1024k"])
# ["ro", "atime", "size=1024k"]
```

`parse_options` sets and clears flags such as `RDONLY`, `NOEXEC` or
`NOATIME` (constants in `mntinfo.flags`) and passes everything it does
not know on as filesystem data. `merge_tmpfs_options` keeps the last of
conflicting options, keeps only one propagation mode, drops `defaults`,
and raises `ValueError` for anything that is neither a known flag nor a
valid `key=value` data option (`size`, `mode`, `uid`, `gid`,
`nr_inodes`, `nr_blocks`, `mpol`).

`mntinfo.errors.MountError` describes a failed mount or unmount
operation: its message names the operation, source, target, flags and
data, and the underlying error is kept as `err` (its `errno` as
`errno`).

## What the package does not do

It does not mount or unmount anything, and it does not change mount
propagation. The flag values, option parsing and `MountError` are there
for code that performs those operations itself.

## Running the tests

```
pip install -e .[test]
pytest
```
"""Byte-for-byte comparison of files and directory trees."""

import filecmp
from pathlib import Path
from typing import Set


def contents_equal(first: Path, second: Path) -> bool:
    """Return True when both paths exist and hold identical content.

    A missing path on either side, or a file compared against a directory,
    is never equal. Directories are equal when they hold the same relative
    entries and every file pair matches byte for byte.
    """
    first, second = Path(first), Path(second)
    if first.is_file() and second.is_file():
        return filecmp.cmp(first, second, shallow=False)
    if first.is_dir() and second.is_dir():
        return _trees_equal(first, second)
    return False


def _relative_entries(root: Path) -> Set[str]:
    return {path.relative_to(root).as_posix() for path in root.rglob("*")}


def _trees_equal(first: Path, second: Path) -> bool:
    entries = _relative_entries(first)
    if entries != _relative_entries(second):
        return False

    for entry in sorted(entries):
        left, right = first / entry, second / entry
        if left.is_dir() != right.is_dir():
            return False
        if left.is_file() and not filecmp.cmp(left, right, shallow=False):
            return False
    return True

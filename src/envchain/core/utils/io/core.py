"""Core text I/O helpers.

Readers take a shared advisory lock while reading so a concurrent writer
holding an exclusive lock never hands us a half-written file.
"""
from __future__ import annotations

import fcntl
from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    """Read a text file under a shared lock.

    Raises:
        OSError: If the file cannot be opened or read (missing, directory,
            permissions).
        UnicodeDecodeError: If the content does not match ``encoding``.
    """
    with open(Path(path), "r", encoding=encoding) as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        try:
            return f.read()
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def read_lines(path: PathLike, *, encoding: str = "utf-8") -> List[str]:
    """Return the non-empty lines of ``path`` without line terminators."""
    return [line for line in read_text(path, encoding=encoding).splitlines() if line]


__all__ = ["PathLike", "read_text", "read_lines"]

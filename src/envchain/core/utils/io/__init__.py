"""I/O helpers shared by the env reader and the settings loader."""
from __future__ import annotations

from .core import PathLike, read_lines, read_text
from .yaml import read_yaml

__all__ = ["PathLike", "read_text", "read_lines", "read_yaml"]

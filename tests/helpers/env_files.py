"""Helpers for writing env file trees in tests.

All functions create parent directories automatically if they don't exist.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping


def write_env(path: Path, *lines: str) -> Path:
    """Write ``lines`` as a newline-terminated env file and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def write_env_tree(root: Path, files: Mapping[str, str]) -> Path:
    """Write ``{relative_name: content}`` under ``root`` and return ``root``."""
    for name, content in files.items():
        target = Path(root) / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return Path(root)

"""Env file reading: directive parsing and include resolution."""
from __future__ import annotations

from .directive import LoadDirective, parse_load_directive
from .loader import EnvFileLoader, IncludeStack, load_env_files

__all__ = [
    "EnvFileLoader",
    "IncludeStack",
    "LoadDirective",
    "load_env_files",
    "parse_load_directive",
]

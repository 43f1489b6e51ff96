"""
envchain - layered .env loading

Loads KEY=VALUE files with ``load()`` / ``load?()`` includes, circular
include detection and scalar type casting.
"""

from envchain.core.exceptions import (
    CircularEnvIncludeError,
    EnvChainError,
    EnvFileNotFoundError,
    EnvFileNotReadableError,
)
from envchain.core.reader import EnvFileLoader, load_env_files

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "CircularEnvIncludeError",
    "EnvChainError",
    "EnvFileLoader",
    "EnvFileNotFoundError",
    "EnvFileNotReadableError",
    "load_env_files",
]

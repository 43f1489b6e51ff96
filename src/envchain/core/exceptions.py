from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence


class EnvChainError(Exception):
    """Base exception for envchain."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class EnvFileNotFoundError(EnvChainError, FileNotFoundError):
    """Raised when a required ``load()`` include does not exist."""

    def __init__(self, file_path: str) -> None:
        message = f"Environment file not found: {file_path}"
        EnvChainError.__init__(self, message, context={"file_path": file_path})
        FileNotFoundError.__init__(self, message)
        self.file_path = file_path


class EnvFileNotReadableError(EnvChainError, PermissionError):
    """Raised when an env file exists but cannot be opened or read."""

    def __init__(self, file_path: str) -> None:
        message = f"Environment file is not readable: {file_path}"
        EnvChainError.__init__(self, message, context={"file_path": file_path})
        PermissionError.__init__(self, message)
        self.file_path = file_path


class CircularEnvIncludeError(EnvChainError, RuntimeError):
    """Raised when a file is included while it is still being loaded.

    ``include_stack`` holds the canonical paths that were open when the cycle
    was detected, oldest first. ``file_path`` is the file that closed the
    cycle, so the full trace reads ``stack[0] -> ... -> stack[-1] -> file_path``.
    """

    def __init__(self, file_path: str, include_stack: Sequence[str]) -> None:
        self.file_path = file_path
        self.include_stack: List[str] = list(include_stack)
        trace = " -> ".join([*self.include_stack, file_path])
        message = f"Circular include detected: {trace}"
        EnvChainError.__init__(
            self,
            message,
            context={"file_path": file_path, "include_stack": list(self.include_stack)},
        )
        RuntimeError.__init__(self, message)


__all__ = [
    "EnvChainError",
    "EnvFileNotFoundError",
    "EnvFileNotReadableError",
    "CircularEnvIncludeError",
]

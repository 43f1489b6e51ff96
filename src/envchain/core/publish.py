"""Publication sinks for public-mode loading.

The loader never touches process-wide state directly; in public mode it hands
each resolved key to a publisher. ``EnvironPublisher`` is the production sink,
``RecordingPublisher`` keeps writes in memory.
"""
from __future__ import annotations

import os
from typing import Any, Dict, MutableMapping, Optional, Protocol


class EnvPublisher(Protocol):
    def publish(self, key: str, value: str) -> None: ...


def format_env_value(value: Any) -> str:
    """Render a cast value as an environment string."""
    if value is None:
        return ""
    return str(value)


class EnvironPublisher:
    """Write values into ``os.environ`` (or a substitute mapping).

    Assigning into ``os.environ`` also updates the process environment table,
    so child processes see published values.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def publish(self, key: str, value: str) -> None:
        self._environ[key] = value


class RecordingPublisher:
    """Capture published values in write order."""

    def __init__(self) -> None:
        self.published: Dict[str, str] = {}

    def publish(self, key: str, value: str) -> None:
        self.published[key] = value


__all__ = [
    "EnvPublisher",
    "EnvironPublisher",
    "RecordingPublisher",
    "format_env_value",
]

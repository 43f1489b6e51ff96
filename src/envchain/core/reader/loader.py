"""Load values from env files, following ``load()`` / ``load?()`` includes.

Files are processed depth-first in document order. Each top-level ``load()``
call owns its own ``IncludeStack`` of canonical paths, which is how circular
includes are detected. Later definitions win, across lines, includes and
top-level files alike.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from envchain.core.casting import TypeCaster, is_composite
from envchain.core.config import LoaderSettings, load_settings
from envchain.core.exceptions import (
    CircularEnvIncludeError,
    EnvFileNotFoundError,
    EnvFileNotReadableError,
)
from envchain.core.publish import EnvironPublisher, EnvPublisher, format_env_value
from envchain.core.reader.directive import LoadDirective, parse_load_directive
from envchain.core.utils.io import PathLike, read_lines

logger = logging.getLogger(__name__)

DirectiveParser = Callable[[str], Optional[LoadDirective]]


class IncludeStack:
    """Canonical paths of the files currently open, oldest first."""

    def __init__(self) -> None:
        self._paths: List[str] = []

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def paths(self) -> List[str]:
        return list(self._paths)

    @contextmanager
    def enter(self, path: str) -> Iterator[None]:
        """Hold ``path`` on the stack for the duration of the block.

        Raises:
            CircularEnvIncludeError: If ``path`` is already open.
        """
        if path in self._paths:
            raise CircularEnvIncludeError(path, self._paths)
        self._paths.append(path)
        try:
            yield
        finally:
            self._paths.pop()


class EnvFileLoader:
    """Read and return the values defined in a list of env files.

    Usage:
        loader = EnvFileLoader()
        values = loader.load([".env", ".env.local"], public=False)

    In public mode values are handed to ``publisher`` (``os.environ`` by
    default) instead of being returned.
    """

    def __init__(
        self,
        caster: Optional[Callable[[str], Any]] = None,
        directive_parser: Optional[DirectiveParser] = None,
        publisher: Optional[EnvPublisher] = None,
        *,
        settings: Optional[LoaderSettings] = None,
    ) -> None:
        self._cast = caster or TypeCaster()
        self._parse_directive = directive_parser or parse_load_directive
        self._publisher = publisher or EnvironPublisher()
        self._settings = settings

    @property
    def settings(self) -> LoaderSettings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    def load(self, files: Iterable[PathLike], public: Optional[bool] = None) -> Dict[str, Any]:
        """Load ``files`` in order and return the merged values.

        Top-level files that do not exist are skipped. ``public=None`` uses the
        configured default.

        Raises:
            CircularEnvIncludeError: If an include chain loops back on itself.
            EnvFileNotFoundError: If a required ``load()`` target is missing.
            EnvFileNotReadableError: If a file exists but cannot be read.
        """
        if public is None:
            public = self.settings.public

        stack = IncludeStack()
        values: Dict[str, Any] = {}
        for file in files:
            path = Path(file)
            if not path.exists():
                logger.debug("Skipping missing env file %s", path)
                continue
            values.update(self._load_file(path, public, stack))
        return values

    __call__ = load

    def _load_file(self, file: Path, public: bool, stack: IncludeStack) -> Dict[str, Any]:
        try:
            real_path = file.resolve(strict=True)
        except (OSError, RuntimeError):
            # Vanished or dangling: contributes nothing, like a missing top-level file.
            logger.debug("Cannot resolve env file %s, skipping", file)
            return {}

        with stack.enter(str(real_path)):
            logger.debug("Loading env file %s (depth %d)", real_path, len(stack))
            try:
                rows = read_lines(file, encoding=self.settings.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise EnvFileNotReadableError(str(file)) from exc

            return self._load_values(rows, public, real_path.parent, stack)

    def _load_values(
        self,
        rows: Iterable[str],
        public: bool,
        base_dir: Path,
        stack: IncludeStack,
    ) -> Dict[str, Any]:
        result: Dict[str, Any] = {}

        for row in rows:
            line = row.strip()

            if line.startswith("#"):
                continue

            directive = self._parse_directive(line)
            if directive is not None:
                result.update(self._process_include(directive, public, base_dir, stack))
                continue

            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip() if value else value
            typed = self._cast(value)

            if public:
                if not key:
                    # A process environment cannot hold an empty name.
                    logger.debug("Not publishing empty env key from %s", base_dir)
                    continue
                self._publish(key, value, typed)
            else:
                result[key] = typed

        return result

    def _process_include(
        self,
        directive: LoadDirective,
        public: bool,
        base_dir: Path,
        stack: IncludeStack,
    ) -> Dict[str, Any]:
        include_path = self._resolve_include_path(directive.path, base_dir)

        if not include_path.exists():
            if directive.optional:
                logger.debug("Optional env include %s not found, skipping", include_path)
                return {}
            raise EnvFileNotFoundError(str(include_path))

        if not os.access(include_path, os.R_OK):
            raise EnvFileNotReadableError(str(include_path))

        logger.debug("Including env file %s", include_path)
        return self._load_file(include_path, public, stack)

    @staticmethod
    def _resolve_include_path(path: str, base_dir: Path) -> Path:
        """Absolute paths are kept; relative ones hang off the including file's directory."""
        if path.startswith("/"):
            return Path(path)
        return base_dir / path

    def _publish(self, key: str, raw: str, typed: Any) -> None:
        value = raw if is_composite(typed) or isinstance(typed, bool) else format_env_value(typed)
        self._publisher.publish(key, value)


def load_env_files(
    files: Iterable[PathLike],
    public: Optional[bool] = None,
    *,
    caster: Optional[Callable[[str], Any]] = None,
    publisher: Optional[EnvPublisher] = None,
    settings: Optional[LoaderSettings] = None,
) -> Dict[str, Any]:
    """Convenience wrapper: build an ``EnvFileLoader`` and load ``files``."""
    loader = EnvFileLoader(caster=caster, publisher=publisher, settings=settings)
    return loader.load(files, public)


__all__ = ["EnvFileLoader", "IncludeStack", "load_env_files"]

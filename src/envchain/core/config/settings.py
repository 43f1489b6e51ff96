"""Loader settings.

Settings sources (highest to lowest priority):
1. Environment variables: ENVCHAIN_<section>__<key> (e.g. ENVCHAIN_loader__public=false)
2. An explicit settings YAML file passed to ``load_settings(path)``
3. Bundled defaults: envchain.data/config/defaults.yaml

The merged result is validated against ``settings.schema.yaml``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from envchain.core.casting import TypeCaster
from envchain.core.schemas import validate_payload
from envchain.core.utils.io import read_yaml
from envchain.core.utils.merge import deep_merge
from envchain.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "ENVCHAIN_"
SCHEMA_NAME = "settings.schema.yaml"


@dataclass(frozen=True)
class LoaderSettings:
    encoding: str = "utf-8"
    public: bool = True


def _iter_env_overrides(
    environ: Mapping[str, str], sections: Iterable[str]
) -> Iterator[Tuple[List[str], Any]]:
    known = set(sections)
    coerce = TypeCaster()
    for key in sorted(environ.keys()):
        if not key.startswith(ENV_PREFIX):
            continue
        raw = key[len(ENV_PREFIX):]
        segs = [seg.lower() for seg in raw.split("__")]
        if not raw or any(seg == "" for seg in segs):
            logger.warning("Ignoring malformed %s* key: %s", ENV_PREFIX, key)
            continue
        if segs[0] not in known:
            # Unrelated variables sharing the prefix (e.g. ENVCHAIN_HOME).
            logger.debug("Ignoring %s: not a settings section", key)
            continue
        yield segs, coerce(environ[key])


def _set_nested(root: Dict[str, Any], path: List[str], value: Any) -> None:
    cur = root
    for part in path[:-1]:
        nxt = cur.get(part)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[part] = nxt
        cur = nxt
    cur[path[-1]] = value


def load_settings_dict(
    path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return the merged, validated settings mapping."""
    cfg: Dict[str, Any] = read_yaml(
        get_data_path("config", "defaults.yaml"), default={}, raise_on_error=True
    )

    if path is not None:
        # Fail closed: an explicitly requested settings file must exist and parse.
        override = read_yaml(Path(path), default={}, raise_on_error=True)
        if not isinstance(override, dict):
            raise ValueError(f"Settings file must contain a YAML mapping: {path}")
        cfg = deep_merge(cfg, override)

    env = os.environ if environ is None else environ
    for seg_path, value in _iter_env_overrides(env, cfg.keys()):
        _set_nested(cfg, seg_path, value)

    validate_payload(cfg, SCHEMA_NAME)
    return cfg


def load_settings(
    path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> LoaderSettings:
    """Load loader settings from defaults, an optional file and the environment.

    Raises:
        FileNotFoundError: If ``path`` is given but does not exist.
        SchemaValidationError: If the merged settings are invalid.
    """
    loader_cfg = load_settings_dict(path, environ=environ)["loader"]
    return LoaderSettings(encoding=loader_cfg["encoding"], public=loader_cfg["public"])


__all__ = [
    "ENV_PREFIX",
    "LoaderSettings",
    "load_settings",
    "load_settings_dict",
]

"""Loader settings package."""
from __future__ import annotations

from .settings import ENV_PREFIX, LoaderSettings, load_settings, load_settings_dict

__all__ = ["ENV_PREFIX", "LoaderSettings", "load_settings", "load_settings_dict"]

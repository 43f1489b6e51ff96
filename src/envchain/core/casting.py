"""Default scalar type casting for env values.

The loader only needs a ``(raw: str) -> Any`` callable; this is the one used
when none is injected. It recognizes, in order: quoted strings, booleans,
integers, floats and ``[...]`` arrays. Anything else is returned trimmed.
"""
from __future__ import annotations

import json
import re
from typing import Any, List, Optional

_QUOTED_RE = re.compile(r"""(["'])(.*)\1""", re.DOTALL)


def is_composite(value: Any) -> bool:
    """True when ``value`` is an array-like or mapping cast result."""
    return isinstance(value, (list, tuple, dict))


class TypeCaster:
    """Callable converting a raw env string into a typed value."""

    def __call__(self, value: Optional[str]) -> Any:
        if not value:
            return ""
        s = value.strip()
        quoted = self._as_quoted(s)
        if quoted is not None:
            return quoted
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_array):
            result = caster(s)
            if result is not None:
                return result
        return s

    def _as_quoted(self, v: str) -> Optional[str]:
        match = _QUOTED_RE.fullmatch(v)
        if match is None:
            return None
        return match.group(2)

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v):
            try:
                return int(v)
            except ValueError:
                return None
        return None

    def _as_float(self, v: str) -> Optional[float]:
        if re.fullmatch(r"[-+]?\d*\.\d+", v) or re.fullmatch(r"[-+]?\d+\.\d*", v):
            try:
                return float(v)
            except ValueError:
                return None
        return None

    def _as_array(self, v: str) -> Optional[List[Any]]:
        if not (v.startswith("[") and v.endswith("]")):
            return None
        try:
            data = json.loads(v)
        except ValueError:
            data = None
        if isinstance(data, list):
            return data

        inner = v[1:-1].strip()
        if not inner:
            return []
        return [self(item) for item in inner.split(",")]


__all__ = ["TypeCaster", "is_composite"]

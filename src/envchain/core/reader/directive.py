"""Parse ``load()`` and ``load?()`` include directives from env file lines.

Syntax:
- ``load(.env.database)``            required include
- ``load?(.env.local)``              optional include, silently skipped when missing
- ``load("path with spaces/.env")``  quoted paths, single or double quotes
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# load[?]( ["|'] path ["|'] ), the closing quote must match the opening one
LOAD_DIRECTIVE_PATTERN = re.compile(r"""load(\?)?\((["']?)(.+?)\2\)""")


@dataclass(frozen=True)
class LoadDirective:
    path: str
    optional: bool = False


def parse_load_directive(line: str) -> Optional[LoadDirective]:
    """Return the include directive on ``line``, or None if it is not one.

    Matching is case-sensitive and must cover the whole trimmed line. The path
    is returned exactly as written between the delimiters. Never raises.
    """
    match = LOAD_DIRECTIVE_PATTERN.fullmatch(line.strip())
    if match is None:
        return None

    path = match.group(3)
    if not path.strip():
        return None

    return LoadDirective(path=path, optional=match.group(1) == "?")


__all__ = ["LOAD_DIRECTIVE_PATTERN", "LoadDirective", "parse_load_directive"]

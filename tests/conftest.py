import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'envchain'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


@pytest.fixture(autouse=True)
def _clear_envchain_overrides(monkeypatch):
    """Settings overrides from a developer shell must never leak into tests."""
    for key in list(os.environ):
        if key.startswith("ENVCHAIN_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def env_dir(tmp_path: Path) -> Path:
    """Directory holding the env files of one test."""
    d = tmp_path / "env"
    d.mkdir()
    return d

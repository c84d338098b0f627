from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make the api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; drop the cache around every test."""
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def users_file(tmp_path):
    """Write a user document and return its path."""
    def _write(document) -> Path:
        path = tmp_path / "user.json"
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write

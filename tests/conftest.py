"""
Pytest configuration.

This file adds the project root to the Python path so that tests can import
the domain, services, and api packages without an install, and resets
process-wide caches between tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from services.offset_service import clear_cache  # noqa: E402
from services.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_caches(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("FIXED_OFFSET_INTERN", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    clear_cache()
    yield
    get_settings.cache_clear()
    clear_cache()

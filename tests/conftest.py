"""Root conftest — shared test configuration.

Invariants:
    - Every test starts with no SHORTSTOP_* overrides and a fresh Settings cache
    - Every test that needs a module registry gets its own (no cross-test caching)
"""

import os

import pytest

from shortstop_handlers.config import get_settings
from shortstop_handlers.infrastructure.module_registry import ModuleRegistry

FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fixtures")
TESTS_DIR = os.path.dirname(FIXTURES_DIR)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("SHORTSTOP_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry():
    return ModuleRegistry()


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def tests_dir():
    return TESTS_DIR

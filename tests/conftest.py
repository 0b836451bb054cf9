"""Shared fixtures for the valguard test-suite."""

import pytest

from valguard.config import get_settings
from valguard.i18n.catalog import default_catalog


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate tests from VALGUARD_* variables in the developer's environment."""
    for name in ("VALGUARD_DEFAULT_LOCALE", "VALGUARD_MESSAGES_DIR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    default_catalog.cache_clear()
    yield
    get_settings.cache_clear()
    default_catalog.cache_clear()

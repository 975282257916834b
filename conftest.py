"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from montant_rdc.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Default settings for every test, whatever the developer's .env says."""
    for name in ("CURRENCY_SYMBOL", "CURRENCY_NAME", "DECIMALS", "LOG_LEVEL"):
        monkeypatch.delenv(f"MONTANT_RDC_{name}", raising=False)
    monkeypatch.chdir(Path(__file__).parent / "tests")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

"""
Config test fixtures: clean application environment via monkeypatch.
"""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove the application-level env vars AppConfig reads, for isolation."""
    for var in ("ENVIRONMENT",):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch

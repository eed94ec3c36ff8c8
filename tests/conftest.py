"""
Root conftest.py: sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without installing the package.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'ol_styles', 'ol_engine', 'config', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


_TRANSLATOR_ENV_VARS = (
    "OLSTYLES_DEFAULT_RADIUS",
    "OLSTYLES_DEFAULT_FONT_SIZE",
    "OLSTYLES_DEFAULT_FONT_FAMILY",
    "OLSTYLES_STRICT_SYMBOLIZERS",
    "OLSTYLES_LOG_DEFAULT_FALLBACK",
)


@pytest.fixture(autouse=True)
def clean_translator_env(monkeypatch):
    """
    Remove translator env overrides and the cached config singleton.

    Tests that need an override set it with monkeypatch after this runs.
    """
    from config import reset_config

    for key in _TRANSLATOR_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def translator_config():
    """Translator config with stock defaults."""
    from config import TranslatorConfig
    return TranslatorConfig()


@pytest.fixture
def parser(translator_config):
    """OlStyleParser with stock defaults."""
    from ol_styles import OlStyleParser
    return OlStyleParser(translator_config)


@pytest.fixture
def translator(translator_config):
    """SymbolizerTranslator with stock defaults."""
    from ol_styles import SymbolizerTranslator
    return SymbolizerTranslator(translator_config)

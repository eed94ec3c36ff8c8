# ============================================================================
# CLAUDE CONTEXT - CONFIG PACKAGE INIT
# ============================================================================
# PURPOSE: Configuration package exports
# EXPORTS: AppConfig, TranslatorConfig, get_config singleton, reset_config, debug_config
# INTERFACES: Pydantic BaseModel
# PYDANTIC_MODELS: AppConfig, TranslatorConfig
# DEPENDENCIES: domain config modules
# ENTRY_POINTS: from config import get_config
# ============================================================================

"""
Configuration Package

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── app_config.py            # Main config (composes domain configs)
    ├── translator_config.py     # Symbolizer translation settings
    └── defaults.py              # Default value constants

Usage:
    from config import get_config
    config = get_config()
    radius = config.translator.default_circle_radius
"""

from typing import Optional

from util_logger import LoggerFactory, ComponentType

from .translator_config import TranslatorConfig
from .app_config import AppConfig

logger = LoggerFactory.create_logger(ComponentType.CONFIG, "AppConfig")


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
        logger.debug(
            f"Loaded configuration for environment {_config_instance.environment!r}",
            extra={'custom_dimensions': {'translator': _config_instance.translator.model_dump()}}
        )
    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get configuration as a plain dict for diagnostics.

    Returns:
        Dictionary with configuration values, or an error entry
    """
    try:
        config = get_config()
        return {
            'environment': config.environment,
            'translator': config.translator.model_dump(),
        }
    except Exception as e:
        return {'error': f'Configuration validation failed: {e}'}


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'AppConfig',
    'TranslatorConfig',
    'get_config',
    'reset_config',
    'debug_config',
]

"""
Main Application Configuration.

Composes domain-specific configuration modules:
    - TranslatorConfig (symbolizer defaults, unknown kind policy)

Exports:
    AppConfig: Main configuration class

Dependencies:
    pydantic: BaseModel for configuration validation
    config.translator_config: TranslatorConfig
    config.defaults: Default value constants
"""

import os

from pydantic import BaseModel, Field

from .translator_config import TranslatorConfig
from .defaults import AppDefaults


# ============================================================================
# APPLICATION CONFIGURATION
# ============================================================================

class AppConfig(BaseModel):
    """
    Application configuration - composition of domain configs.
    """

    environment: str = Field(
        default=AppDefaults.ENVIRONMENT,
        description="Environment name (dev, qa, prod)",
        examples=["dev", "qa", "prod"]
    )

    translator: TranslatorConfig = Field(default_factory=TranslatorConfig)

    @classmethod
    def from_environment(cls):
        """Load all configs from environment."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", AppDefaults.ENVIRONMENT),
            translator=TranslatorConfig.from_environment(),
        )

"""
Style Translator Configuration.

Provides configuration for:
    - Symbolizer geometry defaults (circle radius)
    - Text font defaults
    - Unknown symbolizer kind policy (lenient default style or strict error)

Exports:
    TranslatorConfig: Pydantic translator configuration model
"""

import os

from pydantic import BaseModel, Field, ValidationError

from config.defaults import SymbolizerDefaults
from exceptions import ConfigurationError


# ============================================================================
# TRANSLATOR CONFIGURATION
# ============================================================================

class TranslatorConfig(BaseModel):
    """
    Symbolizer translation settings.

    Controls the defaults applied when a symbolizer omits a field and the
    policy for symbolizer kinds with no translation.
    """

    default_circle_radius: float = Field(
        default=SymbolizerDefaults.CIRCLE_RADIUS,
        gt=0,
        description="Circle radius used when a Circle symbolizer has none, and when reading a non-numeric native radius",
        examples=[5, 8]
    )

    default_font_size: float = Field(
        default=SymbolizerDefaults.FONT_SIZE,
        gt=0,
        description="Font size in pixels for Text symbolizers without a size"
    )

    default_font_family: str = Field(
        default=SymbolizerDefaults.FONT_FAMILY,
        min_length=1,
        description="Font family for Text symbolizers without a font list",
        examples=["sans-serif", "Arial"]
    )

    strict_symbolizers: bool = Field(
        default=False,
        description="Raise UnknownSymbolizerKindError for unknown kinds on write "
                    "instead of returning the engine default style"
    )

    log_default_fallback: bool = Field(
        default=True,
        description="Log a warning each time the engine default style is substituted"
    )

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        try:
            return cls(
                default_circle_radius=float(os.environ.get(
                    "OLSTYLES_DEFAULT_RADIUS", str(SymbolizerDefaults.CIRCLE_RADIUS))),
                default_font_size=float(os.environ.get(
                    "OLSTYLES_DEFAULT_FONT_SIZE", str(SymbolizerDefaults.FONT_SIZE))),
                default_font_family=os.environ.get(
                    "OLSTYLES_DEFAULT_FONT_FAMILY", SymbolizerDefaults.FONT_FAMILY),
                strict_symbolizers=os.environ.get("OLSTYLES_STRICT_SYMBOLIZERS", "false").lower() == "true",
                log_default_fallback=os.environ.get("OLSTYLES_LOG_DEFAULT_FALLBACK", "true").lower() == "true",
            )
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(f"Invalid translator configuration: {e}") from e

"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - AppDefaults: Environment name
    - SymbolizerDefaults: Geometry and font fallbacks for symbolizer translation
    - EngineDefaults: The engine's own default style (used for unknown symbolizer kinds)

Usage:
    from config.defaults import SymbolizerDefaults

    # In Pydantic Field definitions:
    default_circle_radius: float = Field(default=SymbolizerDefaults.CIRCLE_RADIUS, ...)
"""


# =============================================================================
# APPLICATION DEFAULTS
# =============================================================================

class AppDefaults:
    """Core application defaults."""

    ENVIRONMENT = "dev"


# =============================================================================
# SYMBOLIZER DEFAULTS
# =============================================================================

class SymbolizerDefaults:
    """
    Fallbacks applied while translating symbolizers.

    CIRCLE_RADIUS is used on both directions: on write when the symbolizer has
    no radius, on read when the native circle radius is not a finite number.
    """

    CIRCLE_RADIUS = 5

    # Text font: "{style} {weight} {size}px {family}"
    FONT_STYLE = "normal"
    FONT_WEIGHT = "normal"
    FONT_SIZE = 12
    FONT_FAMILY = "sans-serif"

    TEXT_OFFSET = (0, 0)


# =============================================================================
# ENGINE DEFAULT STYLE
# =============================================================================

class EngineDefaults:
    """
    The engine's stock style: thin circle, light fill, standard stroke.

    Returned for symbolizer kinds that have no translation.
    """

    FILL_COLOR = "rgba(255,255,255,0.4)"
    STROKE_COLOR = "#3399CC"
    STROKE_WIDTH = 1.25
    CIRCLE_RADIUS = 5

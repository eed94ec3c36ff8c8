# ============================================================================
# CLAUDE CONTEXT - STYLE-TYPE CLASSIFIER
# ============================================================================
# STATUS: Service - native style classification
# PURPOSE: Infer Point / Fill / Line from the layers of a native style
# EXPORTS: CLASSIFICATION_PRECEDENCE, get_style_type_from_ol_style
# DEPENDENCIES: ol_engine, util_logger
# ============================================================================
"""
Style-Type Classifier.

Infers the declarative style type from the layers a native style carries.
Precedence follows the engine's drawing order for a single feature:

    1. image layer           -> Point
    2. fill layer            -> Fill   (a stroke next to it is the outline)
    3. stroke without fill   -> Line

Anything else cannot be classified.
"""

from typing import Callable, Tuple

from exceptions import ClassificationError
from ol_engine import Fill, ImageStyle, Stroke, Style as OlStyle
from util_logger import LoggerFactory, ComponentType

from .models import StyleType

logger = LoggerFactory.create_logger(ComponentType.CLASSIFIER, "StyleTypeClassifier")


def _has_image(ol_style: OlStyle) -> bool:
    return isinstance(ol_style.get_image(), ImageStyle)


def _has_fill(ol_style: OlStyle) -> bool:
    return isinstance(ol_style.get_fill(), Fill)


def _has_stroke_only(ol_style: OlStyle) -> bool:
    return isinstance(ol_style.get_stroke(), Stroke) and ol_style.get_fill() is None


# First match wins
CLASSIFICATION_PRECEDENCE: Tuple[Tuple[StyleType, Callable[[OlStyle], bool]], ...] = (
    (StyleType.POINT, _has_image),
    (StyleType.FILL, _has_fill),
    (StyleType.LINE, _has_stroke_only),
)


def get_style_type_from_ol_style(ol_style: OlStyle) -> StyleType:
    """
    Classify a native style.

    Args:
        ol_style: Native engine style

    Returns:
        StyleType of the first matching layer test

    Raises:
        ClassificationError: no image, fill or stroke layer
    """
    for style_type, matches in CLASSIFICATION_PRECEDENCE:
        if matches(ol_style):
            logger.debug(f"Classified native style as {style_type.value}")
            return style_type

    raise ClassificationError(
        "StyleType could not be detected: no recognizable style layer",
        style_snapshot=ol_style.to_dict(),
    )

"""
Native rendering engine objects.

Style layers and features of the OpenLayers-like engine that the translator
targets. The engine draws whatever ``Style`` (or style function result) it is
handed; ``None`` from a style function means "do not draw with this entry".

Usage:
    from ol_engine import Style, Circle, Fill, Stroke, Feature

    style = Style(image=Circle(radius=6, fill=Fill("#ff0000")))
"""

from .style import (
    Fill,
    Stroke,
    ImageStyle,
    Circle,
    Text,
    Style,
    StyleFunction,
    NativeStyleEntry,
)
from .feature import Feature

__all__ = [
    "Fill",
    "Stroke",
    "ImageStyle",
    "Circle",
    "Text",
    "Style",
    "StyleFunction",
    "NativeStyleEntry",
    "Feature",
]

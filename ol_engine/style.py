# ============================================================================
# CLAUDE CONTEXT - NATIVE ENGINE STYLES
# ============================================================================
# STATUS: Data model - engine style layers
# PURPOSE: Style, image, fill, stroke and text layers handed to the renderer
# EXPORTS: Fill, Stroke, ImageStyle, Circle, Text, Style, StyleFunction, NativeStyleEntry
# DEPENDENCIES: Standard library only
# ============================================================================
"""
Native engine style objects.

In-memory style model of the OpenLayers-like rendering engine. A ``Style``
holds up to four layers (image, fill, stroke, text); the image layer of a
point style is a ``Circle``. Objects expose ``get_*``/``set_*`` accessors the
way the engine binding does, and every translation builds new instances.

Exports:
    Fill, Stroke, ImageStyle, Circle, Text, Style
    StyleFunction: Callable[[Feature, resolution], Optional[Style]]
    NativeStyleEntry: Style or StyleFunction
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union

ColorLike = Union[str, Sequence[float]]


class Fill:
    """Fill layer: a single color."""

    def __init__(self, color: Optional[ColorLike] = None):
        self._color = color

    def get_color(self) -> Optional[ColorLike]:
        return self._color

    def set_color(self, color: Optional[ColorLike]) -> None:
        self._color = color

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self._color}

    def __repr__(self) -> str:
        return f"Fill(color={self._color!r})"


class Stroke:
    """Stroke layer: color, width and line decoration."""

    def __init__(
        self,
        color: Optional[ColorLike] = None,
        width: Optional[float] = None,
        line_cap: Optional[str] = None,
        line_join: Optional[str] = None,
        line_dash: Optional[List[float]] = None,
    ):
        self._color = color
        self._width = width
        self._line_cap = line_cap
        self._line_join = line_join
        self._line_dash = list(line_dash) if line_dash is not None else None

    def get_color(self) -> Optional[ColorLike]:
        return self._color

    def set_color(self, color: Optional[ColorLike]) -> None:
        self._color = color

    def get_width(self) -> Optional[float]:
        return self._width

    def set_width(self, width: Optional[float]) -> None:
        self._width = width

    def get_line_cap(self) -> Optional[str]:
        return self._line_cap

    def get_line_join(self) -> Optional[str]:
        return self._line_join

    def get_line_dash(self) -> Optional[List[float]]:
        return self._line_dash

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self._color,
            "width": self._width,
            "line_cap": self._line_cap,
            "line_join": self._line_join,
            "line_dash": self._line_dash,
        }

    def __repr__(self) -> str:
        return f"Stroke(color={self._color!r}, width={self._width!r})"


class ImageStyle:
    """Base class for image layers (point markers)."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__}


class Circle(ImageStyle):
    """Circle marker with optional fill and stroke."""

    def __init__(
        self,
        radius: Any = None,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
    ):
        self._radius = radius
        self._fill = fill
        self._stroke = stroke

    def get_radius(self) -> Any:
        return self._radius

    def set_radius(self, radius: Any) -> None:
        self._radius = radius

    def get_fill(self) -> Optional[Fill]:
        return self._fill

    def get_stroke(self) -> Optional[Stroke]:
        return self._stroke

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "Circle",
            "radius": self._radius,
            "fill": self._fill.to_dict() if self._fill else None,
            "stroke": self._stroke.to_dict() if self._stroke else None,
        }

    def __repr__(self) -> str:
        return f"Circle(radius={self._radius!r}, fill={self._fill!r}, stroke={self._stroke!r})"


class Text:
    """Text label layer."""

    def __init__(
        self,
        text: Optional[str] = None,
        font: Optional[str] = None,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
        offset_x: float = 0,
        offset_y: float = 0,
    ):
        self._text = text
        self._font = font
        self._fill = fill
        self._stroke = stroke
        self._offset_x = offset_x
        self._offset_y = offset_y

    def get_text(self) -> Optional[str]:
        return self._text

    def set_text(self, text: Optional[str]) -> None:
        self._text = text

    def get_font(self) -> Optional[str]:
        return self._font

    def get_fill(self) -> Optional[Fill]:
        return self._fill

    def get_stroke(self) -> Optional[Stroke]:
        return self._stroke

    def get_offset_x(self) -> float:
        return self._offset_x

    def get_offset_y(self) -> float:
        return self._offset_y

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self._text,
            "font": self._font,
            "fill": self._fill.to_dict() if self._fill else None,
            "stroke": self._stroke.to_dict() if self._stroke else None,
            "offset_x": self._offset_x,
            "offset_y": self._offset_y,
        }


class Style:
    """
    Container for the layers used to render one feature.

    Any layer may be absent. The engine draws the image layer for points, the
    fill and stroke layers for polygons and lines, and the text layer on top.
    """

    def __init__(
        self,
        image: Optional[ImageStyle] = None,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
        text: Optional[Text] = None,
    ):
        self._image = image
        self._fill = fill
        self._stroke = stroke
        self._text = text

    def get_image(self) -> Optional[ImageStyle]:
        return self._image

    def set_image(self, image: Optional[ImageStyle]) -> None:
        self._image = image

    def get_fill(self) -> Optional[Fill]:
        return self._fill

    def set_fill(self, fill: Optional[Fill]) -> None:
        self._fill = fill

    def get_stroke(self) -> Optional[Stroke]:
        return self._stroke

    def set_stroke(self, stroke: Optional[Stroke]) -> None:
        self._stroke = stroke

    def get_text(self) -> Optional[Text]:
        return self._text

    def set_text(self, text: Optional[Text]) -> None:
        self._text = text

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of all layers, for diagnostics and error payloads."""
        return {
            "image": self._image.to_dict() if self._image else None,
            "fill": self._fill.to_dict() if self._fill else None,
            "stroke": self._stroke.to_dict() if self._stroke else None,
            "text": self._text.to_dict() if self._text else None,
        }

    def __repr__(self) -> str:
        return (f"Style(image={self._image!r}, fill={self._fill!r}, "
                f"stroke={self._stroke!r}, text={self._text is not None})")


StyleFunction = Callable[[Any, float], Optional[Style]]
NativeStyleEntry = Union[Style, StyleFunction]

# ============================================================================
# CLAUDE CONTEXT - SYMBOLIZER TRANSLATOR
# ============================================================================
# STATUS: Service - symbolizer translation in both directions
# PURPOSE: Map declarative Circle/Line/Fill/Text symbolizers to native engine layers and back
# EXPORTS: SymbolizerTranslator, SymbolizerResult, default_ol_style
# DEPENDENCIES: ol_engine, ol_styles.color, config
# ============================================================================
"""
Symbolizer Translator.

Read direction (native -> declarative):
- Point: circle radius, fill color/opacity, stroke color/opacity/width
- Line: stroke color/opacity, width, cap, join, dash
- Fill: fill color/opacity, outline color (verbatim) and width

Write direction (declarative -> native):
- Circle -> Style(image=Circle)
- Line -> Style(stroke=Stroke)
- Fill -> Style(fill=Fill, stroke=Stroke)
- Text -> style function reading the label from the feature at render time
- anything else -> engine default style, reported via SymbolizerResult

Usage:
    translator = SymbolizerTranslator()
    result = translator.write_symbolizer(CircleSymbolizer(color="#ff0000"))
    symbolizer = translator.get_symbolizer_from_ol_style(ol_style)
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from pydantic import ValidationError

from config import TranslatorConfig, get_config
from config.defaults import EngineDefaults, SymbolizerDefaults
from exceptions import NativeStyleValueError, UnknownSymbolizerKindError, UnsupportedDirectionError
from ol_engine import Circle, Fill, NativeStyleEntry, Stroke, Style as OlStyle, StyleFunction, Text
from util_logger import LoggerFactory, ComponentType

from . import color as codec
from .classifier import get_style_type_from_ol_style
from .models import (
    AnySymbolizer,
    CircleSymbolizer,
    FillSymbolizer,
    LineSymbolizer,
    StyleType,
    Symbolizer,
    SymbolizerKind,
    TextSymbolizer,
    coerce_symbolizer,
)

logger = LoggerFactory.create_logger(ComponentType.TRANSLATOR, "SymbolizerTranslator")


def default_ol_style() -> OlStyle:
    """
    The engine's stock style: thin circle, light fill, standard stroke.

    Built fresh on every call.
    """
    fill = Fill(color=EngineDefaults.FILL_COLOR)
    stroke = Stroke(color=EngineDefaults.STROKE_COLOR, width=EngineDefaults.STROKE_WIDTH)
    return OlStyle(
        image=Circle(radius=EngineDefaults.CIRCLE_RADIUS, fill=fill, stroke=stroke),
        fill=fill,
        stroke=stroke,
    )


@dataclass(frozen=True)
class SymbolizerResult:
    """
    Outcome of writing one symbolizer.

    ``used_default`` is True when the kind had no translation and ``native``
    is the engine default style.
    """
    native: NativeStyleEntry
    kind: str
    used_default: bool = False


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _read_model(model: Type[Symbolizer], **fields: Any) -> Symbolizer:
    """Build a symbolizer from native values; out-of-range values raise NativeStyleValueError."""
    try:
        return model(**fields)
    except ValidationError as e:
        kind = model.model_fields["kind"].default
        raise NativeStyleValueError(kind, f"{e.error_count()} invalid value(s)") from e


class SymbolizerTranslator:
    """
    Translates symbolizers between the declarative model and native styles.

    Holds only configuration; every call builds new native objects.
    """

    def __init__(self, config: Optional[TranslatorConfig] = None):
        """
        Initialize translator.

        Args:
            config: Translator settings (global config if not provided)
        """
        self.config = config or get_config().translator

        self._readers: Dict[StyleType, Callable[[OlStyle], Symbolizer]] = {
            StyleType.POINT: self.get_point_symbolizer_from_ol_style,
            StyleType.LINE: self.get_line_symbolizer_from_ol_style,
            StyleType.FILL: self.get_fill_symbolizer_from_ol_style,
        }
        self._writers: Dict[str, Callable[[Any], NativeStyleEntry]] = {
            SymbolizerKind.CIRCLE.value: self.get_ol_point_symbolizer_from_circle_symbolizer,
            SymbolizerKind.LINE.value: self.get_ol_line_symbolizer_from_line_symbolizer,
            SymbolizerKind.FILL.value: self.get_ol_polygon_symbolizer_from_fill_symbolizer,
            SymbolizerKind.TEXT.value: self.get_ol_text_symbolizer_from_text_symbolizer,
        }

    # ========================================================================
    # READ: NATIVE -> DECLARATIVE
    # ========================================================================

    def get_point_symbolizer_from_ol_style(self, ol_style: OlStyle) -> CircleSymbolizer:
        """Circle symbolizer from a style whose image layer is a circle marker."""
        image = ol_style.get_image()
        radius = image.get_radius() if isinstance(image, Circle) else None
        fill = image.get_fill() if isinstance(image, Circle) else None
        stroke = image.get_stroke() if isinstance(image, Circle) else None

        return _read_model(
            CircleSymbolizer,
            color=codec.split_hex(fill.get_color()) if fill else None,
            opacity=codec.split_opacity(fill.get_color()) if fill else None,
            radius=radius if _is_finite_number(radius) else self.config.default_circle_radius,
            strokeColor=codec.split_hex(stroke.get_color()) if stroke else None,
            strokeOpacity=codec.split_opacity(stroke.get_color()) if stroke else None,
            strokeWidth=stroke.get_width() if stroke else None,
        )

    def get_line_symbolizer_from_ol_style(self, ol_style: OlStyle) -> LineSymbolizer:
        """Line symbolizer from a style with a stroke layer and no fill."""
        stroke = ol_style.get_stroke()

        return _read_model(
            LineSymbolizer,
            color=codec.split_hex(stroke.get_color()) if stroke else None,
            opacity=codec.split_opacity(stroke.get_color()) if stroke else None,
            width=stroke.get_width() if stroke else None,
            cap=stroke.get_line_cap() if stroke else None,
            join=stroke.get_line_join() if stroke else None,
            dasharray=stroke.get_line_dash() if stroke else None,
        )

    def get_fill_symbolizer_from_ol_style(self, ol_style: OlStyle) -> FillSymbolizer:
        """
        Fill symbolizer from a style with a fill layer.

        The stroke color becomes ``outlineColor`` verbatim; its opacity is not
        split out.
        """
        fill = ol_style.get_fill()
        stroke = ol_style.get_stroke()

        return _read_model(
            FillSymbolizer,
            color=codec.split_hex(fill.get_color()) if fill else None,
            opacity=codec.split_opacity(fill.get_color()) if fill else None,
            outlineColor=codec.to_css(stroke.get_color()) if stroke else None,
            outlineWidth=stroke.get_width() if stroke else None,
        )

    def get_symbolizer_from_ol_style(
        self,
        ol_style: OlStyle,
        style_type: Optional[StyleType] = None
    ) -> Symbolizer:
        """
        Symbolizer for a native style.

        Only one symbolizer per rule is supported, so the classified style type
        picks exactly one reader.

        Args:
            ol_style: Native engine style
            style_type: Pre-computed classification (classified here if None)

        Raises:
            ClassificationError: style has no recognizable layer
            UnknownSymbolizerKindError: style type has no reader
        """
        if style_type is None:
            style_type = get_style_type_from_ol_style(ol_style)

        reader = self._readers.get(style_type)
        if reader is None:
            raise UnknownSymbolizerKindError(style_type)
        return reader(ol_style)

    def read_symbolizer(self, kind: str, ol_style: OlStyle) -> Symbolizer:
        """
        Read a symbolizer of an explicit kind.

        Raises:
            UnsupportedDirectionError: kind is write-only (Text)
            UnknownSymbolizerKindError: kind has no translation
        """
        kind = kind.value if isinstance(kind, SymbolizerKind) else kind
        if kind == SymbolizerKind.TEXT.value:
            raise UnsupportedDirectionError(kind, "read")

        kind_to_type = {
            SymbolizerKind.CIRCLE.value: StyleType.POINT,
            SymbolizerKind.LINE.value: StyleType.LINE,
            SymbolizerKind.FILL.value: StyleType.FILL,
        }
        if kind not in kind_to_type:
            raise UnknownSymbolizerKindError(kind)
        return self._readers[kind_to_type[kind]](ol_style)

    # ========================================================================
    # WRITE: DECLARATIVE -> NATIVE
    # ========================================================================

    def get_ol_point_symbolizer_from_circle_symbolizer(self, symbolizer: CircleSymbolizer) -> OlStyle:
        """Native circle marker style. No stroke is emitted without a strokeColor."""
        stroke = None
        if symbolizer.strokeColor:
            stroke = Stroke(
                color=codec.merge(symbolizer.strokeColor, symbolizer.strokeOpacity),
                width=symbolizer.strokeWidth,
            )
        radius = symbolizer.radius
        if radius is None:
            radius = self.config.default_circle_radius

        return OlStyle(
            image=Circle(
                radius=radius,
                fill=Fill(color=codec.merge(symbolizer.color, symbolizer.opacity)),
                stroke=stroke,
            )
        )

    def get_ol_line_symbolizer_from_line_symbolizer(self, symbolizer: LineSymbolizer) -> OlStyle:
        """Native stroke style; width passes through unchanged."""
        return OlStyle(
            stroke=Stroke(
                color=codec.merge(symbolizer.color, symbolizer.opacity),
                width=symbolizer.width,
                line_cap=symbolizer.cap,
                line_join=symbolizer.join,
                line_dash=symbolizer.dasharray,
            )
        )

    def get_ol_polygon_symbolizer_from_fill_symbolizer(self, symbolizer: FillSymbolizer) -> OlStyle:
        """Native polygon style; the outline color is used verbatim."""
        return OlStyle(
            stroke=Stroke(
                color=symbolizer.outlineColor,
                width=symbolizer.outlineWidth,
            ),
            fill=Fill(color=codec.merge(symbolizer.color, symbolizer.opacity)),
        )

    def get_text_font(self, symbolizer: TextSymbolizer) -> str:
        """
        CSS font shorthand for a text symbolizer.

        Format: "{fontStyle} {fontWeight} {size}px {families}", e.g.
        "italic bold 14px Arial, sans-serif".
        """
        size = symbolizer.size or self.config.default_font_size
        families = ", ".join(symbolizer.font) if symbolizer.font else self.config.default_font_family
        return " ".join([
            symbolizer.fontStyle or SymbolizerDefaults.FONT_STYLE,
            symbolizer.fontWeight or SymbolizerDefaults.FONT_WEIGHT,
            f"{size:g}px",
            families,
        ])

    def get_ol_text_symbolizer_from_text_symbolizer(self, symbolizer: TextSymbolizer) -> StyleFunction:
        """
        Style function for a text symbolizer.

        Font, color and offset are resolved once here; the label itself is read
        from the feature attribute named by ``field`` on every call.
        """
        font = self.get_text_font(symbolizer)
        text_color = codec.merge(symbolizer.color, symbolizer.opacity)
        offset_x, offset_y = symbolizer.offset or SymbolizerDefaults.TEXT_OFFSET
        field = symbolizer.field

        def text_style_function(feature: Any, resolution: float) -> OlStyle:
            value = feature.get(field) if field else None
            return OlStyle(
                text=Text(
                    text=str(value) if value is not None else None,
                    font=font,
                    fill=Fill(color=text_color),
                    stroke=Stroke(color=text_color),
                    offset_x=offset_x,
                    offset_y=offset_y,
                )
            )

        return text_style_function

    def write_symbolizer(self, symbolizer: Any) -> SymbolizerResult:
        """
        Translate one symbolizer, reporting whether the default style was used.

        Args:
            symbolizer: Symbolizer model or dict

        Returns:
            SymbolizerResult with the native style or style function

        Raises:
            UnknownSymbolizerKindError: unknown kind and strict_symbolizers set
        """
        symbolizer = coerce_symbolizer(symbolizer)
        writer = self._writers.get(symbolizer.kind)

        if writer is None:
            if self.config.strict_symbolizers:
                raise UnknownSymbolizerKindError(symbolizer.kind)
            if self.config.log_default_fallback:
                logger.warning(
                    f"No translation for symbolizer kind '{symbolizer.kind}', using engine default style",
                    extra={'custom_dimensions': {'symbolizer_kind': symbolizer.kind}}
                )
            return SymbolizerResult(native=default_ol_style(), kind=symbolizer.kind, used_default=True)

        return SymbolizerResult(native=writer(symbolizer), kind=symbolizer.kind)

    def get_ol_symbolizer_from_symbolizer(self, symbolizer: AnySymbolizer) -> NativeStyleEntry:
        """Native style (or style function) for a symbolizer."""
        return self.write_symbolizer(symbolizer).native

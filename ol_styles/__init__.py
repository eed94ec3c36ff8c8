# ============================================================================
# CLAUDE CONTEXT - OPENLAYERS STYLES MODULE
# ============================================================================
# STATUS: Style translation between declarative styles and native engine styles
# PURPOSE: Author styles once, render them through the OpenLayers-like engine
# EXPORTS: OlStyleParser, models, compile_filter, NO_STYLE
# DEPENDENCIES: pydantic, shapely (via ol_engine)
# ============================================================================
"""
OpenLayers Styles Module.

Translates engine-neutral styles to native engine styles and back:
- Classify native styles (Point / Line / Fill)
- Translate Circle, Line, Fill and Text symbolizers
- Compile rule filters into per-feature style selectors

Usage:
    from ol_styles import OlStyleParser, Style

    parser = OlStyleParser()
    ol_styles = await parser.write_style(style)
"""

from .models import (
    StyleType,
    SymbolizerKind,
    Symbolizer,
    CircleSymbolizer,
    LineSymbolizer,
    FillSymbolizer,
    TextSymbolizer,
    Rule,
    Style,
)
from .filters import FilterOperator, compile_filter
from .dispatcher import NO_STYLE, RuleTranslation
from .symbolizers import SymbolizerTranslator, SymbolizerResult, default_ol_style
from .parser import OlStyleParser

__all__ = [
    "StyleType",
    "SymbolizerKind",
    "Symbolizer",
    "CircleSymbolizer",
    "LineSymbolizer",
    "FillSymbolizer",
    "TextSymbolizer",
    "Rule",
    "Style",
    "FilterOperator",
    "compile_filter",
    "NO_STYLE",
    "RuleTranslation",
    "SymbolizerTranslator",
    "SymbolizerResult",
    "default_ol_style",
    "OlStyleParser",
]

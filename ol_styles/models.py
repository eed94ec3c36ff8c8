# ============================================================================
# CLAUDE CONTEXT - DECLARATIVE STYLE PYDANTIC MODELS
# ============================================================================
# STATUS: Data models - engine-neutral style description
# PURPOSE: Type-safe Style / Rule / Symbolizer models consumed and produced by the parser
# EXPORTS: StyleType, SymbolizerKind, Symbolizer models, Rule, Style, coerce_symbolizer
# DEPENDENCIES: pydantic
# ============================================================================
"""
Declarative Style Pydantic Models.

Defines schemas for:
- Symbolizers (Circle, Line, Fill, Text), tagged by ``kind``
- Rules (one symbolizer plus an optional filter expression)
- Styles (style type plus ordered rules)

Field names follow the declarative style vocabulary (``strokeColor``,
``outlineColor``, ``fontWeight``) so documents validate without aliasing.

Filters are kept as plain nested lists, operator first:
    ["And", ["==", "NAME", "New York"], ["<", "POPULATION", 1000000]]
"""

from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


# ============================================================================
# ENUMS
# ============================================================================

class StyleType(str, Enum):
    """Geometry family a style targets. Text is never classified on read."""
    POINT = "Point"
    LINE = "Line"
    FILL = "Fill"


class SymbolizerKind(str, Enum):
    """Symbolizer kinds with a native translation."""
    CIRCLE = "Circle"
    LINE = "Line"
    FILL = "Fill"
    TEXT = "Text"


# ============================================================================
# SYMBOLIZER MODELS
# ============================================================================

_KNOWN_KINDS = frozenset(k.value for k in SymbolizerKind)


class Symbolizer(BaseModel):
    """
    Base symbolizer.

    Also used as-is for kinds without a native translation (e.g. "Icon"),
    which keep their extra fields so the caller can inspect them.
    """
    model_config = ConfigDict(extra="allow")

    kind: str
    color: Optional[str] = None
    opacity: Optional[float] = Field(default=None, ge=0, le=1)

    @model_validator(mode="after")
    def _known_kinds_use_their_model(self):
        if type(self) is Symbolizer and self.kind in _KNOWN_KINDS:
            raise ValueError(f"{self.kind} symbolizer does not match the {self.kind} schema")
        return self


class CircleSymbolizer(Symbolizer):
    """Point rendered as a circle marker."""
    model_config = ConfigDict(extra="ignore")

    kind: Literal["Circle"] = "Circle"
    radius: Optional[float] = Field(default=None, ge=0)
    strokeColor: Optional[str] = None
    strokeWidth: Optional[float] = Field(default=None, ge=0)
    strokeOpacity: Optional[float] = Field(default=None, ge=0, le=1)


class LineSymbolizer(Symbolizer):
    """Line rendered as a stroke."""
    model_config = ConfigDict(extra="ignore")

    kind: Literal["Line"] = "Line"
    width: Optional[float] = Field(default=None, ge=0)
    cap: Optional[Literal["butt", "round", "square"]] = None
    join: Optional[Literal["bevel", "round", "miter"]] = None
    dasharray: Optional[List[float]] = None


class FillSymbolizer(Symbolizer):
    """
    Polygon rendered as fill plus outline.

    The outline carries a color and width only; outline opacity is not modeled.
    """
    model_config = ConfigDict(extra="ignore")

    kind: Literal["Fill"] = "Fill"
    outlineColor: Optional[str] = None
    outlineWidth: Optional[float] = Field(default=None, ge=0)


class TextSymbolizer(Symbolizer):
    """Label whose content is read from a feature attribute at render time."""
    model_config = ConfigDict(extra="ignore")

    kind: Literal["Text"] = "Text"
    field: Optional[str] = None
    offset: Optional[List[float]] = Field(default=None, min_length=2, max_length=2)
    font: Optional[List[str]] = None
    size: Optional[float] = Field(default=None, gt=0)
    fontStyle: Optional[str] = None
    fontWeight: Optional[str] = None


AnySymbolizer = Union[CircleSymbolizer, LineSymbolizer, FillSymbolizer, TextSymbolizer, Symbolizer]

_SYMBOLIZER_ADAPTER = TypeAdapter(AnySymbolizer)


def coerce_symbolizer(value: Any) -> AnySymbolizer:
    """
    Validate a dict or model into the most specific symbolizer model.

    Model instances pass through; base ``Symbolizer`` instances only ever
    carry kinds without a dedicated model.
    """
    if isinstance(value, Symbolizer):
        return value
    return _SYMBOLIZER_ADAPTER.validate_python(value)


# ============================================================================
# RULE AND STYLE MODELS
# ============================================================================

class Rule(BaseModel):
    """One symbolizer plus an optional attribute filter."""
    name: Optional[str] = None
    symbolizer: AnySymbolizer = Field(union_mode="left_to_right")
    filter: Optional[List[Any]] = None


class Style(BaseModel):
    """
    Engine-neutral style document.

    Rules are translated in order; the engine draws every entry whose rule
    applies to a feature.
    """
    name: Optional[str] = None
    type: StyleType
    rules: List[Rule] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize without unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)

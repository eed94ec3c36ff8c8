# ============================================================================
# CLAUDE CONTEXT - EXCEPTIONS
# ============================================================================
# STATUS: Shared by ol_styles, ol_engine and config
# PURPOSE: Exception hierarchy separating contract violations from translation failures
# EXPORTS: ContractViolationError, BusinessLogicError, StyleTranslationError and subclasses,
#          StyleValidationError, ConfigurationError
# DEPENDENCIES: None (standard library only)
# ============================================================================

"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Translation Failures (expected runtime issues with a given style)

Translation failures carry the offending value (operator name, symbolizer
kind, style snapshot) so callers can report it without re-parsing messages.
"""

from typing import Any, Dict, Optional


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate:
    - Wrong types passed to the parser entry points
    - Native objects that are not engine styles

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the calling code.
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime failures.

    These are normal failures that occur when translating styles
    and should be reported to the caller without crashing.
    """
    pass


class StyleTranslationError(BusinessLogicError):
    """Base class for failures while translating a style in either direction."""
    pass


class ClassificationError(StyleTranslationError):
    """
    Native style has no recognizable layer.

    Examples:
        - Style with neither image, fill nor stroke
        - Style carrying only unknown layer objects
    """

    def __init__(self, message: str, style_snapshot: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.style_snapshot = style_snapshot or {}


class UnsupportedDirectionError(StyleTranslationError):
    """
    Translation requested in a direction the symbolizer kind does not support.

    Examples:
        - Reading a Text symbolizer back from a native style
        - Reading a style function (only static styles can be read)
    """

    def __init__(self, kind: str, direction: str = "read"):
        super().__init__(f"Cannot translate {kind} in the '{direction}' direction")
        self.kind = kind
        self.direction = direction


class UnsupportedFilterOperatorError(StyleTranslationError):
    """Filter tree contains an operator with no compiled counterpart."""

    def __init__(self, operator: Any):
        super().__init__(f"Unsupported filter operator: {operator!r}")
        self.operator = operator


class FilterSyntaxError(StyleTranslationError):
    """
    Filter node is structurally invalid.

    Examples:
        - Comparison without a literal
        - Not with more than one sub-filter
        - Property name that is not a string
    """

    def __init__(self, message: str, node: Any = None):
        super().__init__(message)
        self.node = node


class UnknownSymbolizerKindError(StyleTranslationError):
    """
    Symbolizer kind has no translation.

    Only surfaced on the read path and in strict mode on the write path;
    the default write path degrades to the engine default style instead.
    """

    def __init__(self, kind: Any):
        super().__init__(f"Unknown symbolizer kind: {kind!r}")
        self.kind = kind


class NativeStyleValueError(StyleTranslationError):
    """
    Native style carries a value the declarative model cannot hold.

    Examples:
        - Stroke with a negative width
        - Circle with a negative radius

    Wraps the underlying pydantic ValidationError as __cause__.
    """

    def __init__(self, kind: str, message: str):
        super().__init__(f"Cannot read {kind} symbolizer from native style: {message}")
        self.kind = kind


class ColorParseError(StyleTranslationError):
    """Color value is not a hex string, rgb()/rgba() string, color keyword or channel sequence."""

    def __init__(self, value: Any):
        super().__init__(f"Cannot parse color value: {value!r}")
        self.value = value


class StyleValidationError(BusinessLogicError):
    """
    Declarative style input failed model validation.

    Wraps the underlying pydantic ValidationError as __cause__.
    """
    pass


class ConfigurationError(Exception):
    """
    System configuration error.

    These are typically fatal and indicate misconfiguration
    that prevents the translator from operating.

    Examples:
        - Non-numeric OLSTYLES_DEFAULT_RADIUS
        - Negative default font size
    """
    pass

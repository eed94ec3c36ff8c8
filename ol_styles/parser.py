# ============================================================================
# CLAUDE CONTEXT - OPENLAYERS STYLE PARSER
# ============================================================================
# STATUS: Entry point - read/write between declarative styles and native styles
# PURPOSE: Orchestrate classification, symbolizer translation and rule dispatch
# EXPORTS: OlStyleParser
# DEPENDENCIES: pydantic, ol_engine, ol_styles.*
# ============================================================================
"""
OpenLayers Style Parser.

Reads a native engine style into a declarative Style and writes a declarative
Style into native style entries.

- read_style: native Style -> Style with a single rule
- write_style: Style -> list of native styles / style functions, one per rule

Both entry points are coroutines for composition with async callers; they do
no I/O and complete without suspending.

Usage:
    parser = OlStyleParser()
    ol_styles = await parser.write_style(style)
    style = await parser.read_style(ol_style)
"""

from typing import Any, List, Optional, Union

from pydantic import ValidationError

from config import TranslatorConfig, get_config
from exceptions import ContractViolationError, StyleValidationError, UnsupportedDirectionError
from ol_engine import NativeStyleEntry, Style as OlStyle
from util_logger import LoggerFactory, ComponentType, LogContext, log_exceptions

from .classifier import get_style_type_from_ol_style
from .dispatcher import RuleDispatcher, RuleTranslation
from .filters import Predicate, compile_filter
from .models import Rule, Style, StyleType, Symbolizer, SymbolizerKind
from .symbolizers import SymbolizerTranslator

logger = LoggerFactory.create_logger(ComponentType.PARSER, "OlStyleParser")


class OlStyleParser:
    """
    Parser between declarative styles and OpenLayers-like native styles.

    Stateless apart from configuration; one instance can serve concurrent
    translations.
    """

    title = "OpenLayers Style Parser"

    def __init__(self, config: Optional[TranslatorConfig] = None):
        """
        Initialize parser.

        Args:
            config: Translator settings (global config if not provided)
        """
        self.config = config or get_config().translator
        self.translator = SymbolizerTranslator(self.config)
        self.dispatcher = RuleDispatcher(self.translator)

    # ========================================================================
    # READ: NATIVE -> DECLARATIVE
    # ========================================================================

    def get_style_type_from_ol_style(self, ol_style: OlStyle) -> StyleType:
        """Classify a native style (image > fill > stroke)."""
        return get_style_type_from_ol_style(ol_style)

    def get_symbolizer_from_ol_style(self, ol_style: OlStyle,
                                     style_type: Optional[StyleType] = None) -> Symbolizer:
        """Single symbolizer for a native style."""
        return self.translator.get_symbolizer_from_ol_style(ol_style, style_type)

    def get_rules_from_ol_style(self, ol_style: OlStyle,
                                style_type: Optional[StyleType] = None) -> List[Rule]:
        """Rules for a native style. Always exactly one rule without a filter."""
        symbolizer = self.get_symbolizer_from_ol_style(ol_style, style_type)
        return [Rule(symbolizer=symbolizer)]

    def ol_style_to_style(self, ol_style: Union[OlStyle, Any]) -> Style:
        """
        Declarative Style for a native style.

        Raises:
            UnsupportedDirectionError: style function or text-only style
            ContractViolationError: value is not a native style
            ClassificationError: no image, fill or stroke layer
        """
        if not isinstance(ol_style, OlStyle):
            if callable(ol_style):
                raise UnsupportedDirectionError("StyleFunction", "read")
            raise ContractViolationError(
                f"read_style expects an ol_engine.Style, got {type(ol_style).__name__}"
            )

        has_geometry_layer = any(
            layer is not None
            for layer in (ol_style.get_image(), ol_style.get_fill(), ol_style.get_stroke())
        )
        if ol_style.get_text() is not None and not has_geometry_layer:
            raise UnsupportedDirectionError(SymbolizerKind.TEXT.value, "read")

        style_type = self.get_style_type_from_ol_style(ol_style)
        return Style(type=style_type, rules=self.get_rules_from_ol_style(ol_style, style_type))

    @log_exceptions(logger=logger)
    async def read_style(self, ol_style: OlStyle) -> Style:
        """
        Read a native style.

        Args:
            ol_style: Native engine style

        Returns:
            Style with one rule
        """
        style = self.ol_style_to_style(ol_style)
        logger.info(f"Read native style as {style.type.value} style")
        return style

    # ========================================================================
    # WRITE: DECLARATIVE -> NATIVE
    # ========================================================================

    def _coerce_style(self, style: Union[Style, dict]) -> Style:
        if isinstance(style, Style):
            return style
        if isinstance(style, dict):
            try:
                return Style.model_validate(style)
            except ValidationError as e:
                raise StyleValidationError(f"Invalid style document: {e.error_count()} error(s)") from e
        raise ContractViolationError(
            f"write_style expects a Style or dict, got {type(style).__name__}"
        )

    def get_ol_symbolizer_from_symbolizer(self, symbolizer: Union[Symbolizer, dict]) -> NativeStyleEntry:
        """Native style or style function for one symbolizer."""
        try:
            return self.translator.get_ol_symbolizer_from_symbolizer(symbolizer)
        except ValidationError as e:
            raise StyleValidationError(f"Invalid symbolizer: {e.error_count()} error(s)") from e

    def get_ol_filter_from_filter(self, filter_: List[Any]) -> Predicate:
        """Compiled predicate for a filter expression."""
        return compile_filter(filter_)

    def translate_style(self, style: Union[Style, dict]) -> List[RuleTranslation]:
        """
        Translate every rule, keeping per-rule details.

        Use this instead of write_style to find out which rules fell back to
        the engine default style.
        """
        style = self._coerce_style(style)
        context = LogContext(style_name=style.name).to_dict()
        if not style.rules:
            logger.warning(
                f"Style {style.name!r} has no rules; nothing will be rendered",
                extra={'custom_dimensions': context}
            )
        translations = self.dispatcher.translate_rules(style.rules)

        fallbacks = [i for i, t in enumerate(translations) if t.used_default]
        if fallbacks:
            logger.warning(
                f"Rules {fallbacks} of style {style.name!r} use the engine default style",
                extra={'custom_dimensions': {**context, 'default_style_rules': fallbacks}}
            )
        return translations

    def style_to_ol_style(self, style: Union[Style, dict]) -> List[NativeStyleEntry]:
        """Native style entries, one per rule, in rule order."""
        return [translation.entry for translation in self.translate_style(style)]

    @log_exceptions(logger=logger)
    async def write_style(self, style: Union[Style, dict]) -> List[NativeStyleEntry]:
        """
        Write a declarative style.

        Args:
            style: Style model or dict of the same shape

        Returns:
            Native styles and style functions, one per rule
        """
        entries = self.style_to_ol_style(style)
        logger.info(f"Wrote {len(entries)} native style entries")
        return entries

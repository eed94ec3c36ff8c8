# ============================================================================
# CLAUDE CONTEXT - RULE DISPATCHER
# ============================================================================
# STATUS: Service - rule to native entry translation
# PURPOSE: Gate translated styles behind compiled rule filters
# EXPORTS: NO_STYLE, RuleTranslation, make_style_selector, RuleDispatcher
# DEPENDENCIES: ol_engine, ol_styles.filters, ol_styles.symbolizers
# ============================================================================
"""
Rule Dispatcher.

Turns each declarative rule into one native style entry:

- no filter: the translated style (or text style function) itself
- filter: a style selector ``(feature, resolution)`` that returns the
  translated style when the compiled predicate accepts the feature's
  attributes, and ``NO_STYLE`` otherwise

The filter is compiled once per rule; selectors only evaluate it.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from ol_engine import NativeStyleEntry, StyleFunction
from util_logger import LoggerFactory, ComponentType, LogContext

from .filters import Predicate, compile_filter
from .models import Rule
from .symbolizers import SymbolizerTranslator

logger = LoggerFactory.create_logger(ComponentType.DISPATCHER, "RuleDispatcher")

# What a selector returns when its rule does not apply to the feature.
# The engine skips the entry for that feature.
NO_STYLE = None


@dataclass(frozen=True)
class RuleTranslation:
    """
    One translated rule.

    Attributes:
        entry: Native style or style function handed to the engine
        kind: Symbolizer kind of the rule
        used_default: Engine default style substituted for an unknown kind
        filtered: Entry is a selector gated by the rule's filter
    """
    entry: NativeStyleEntry
    kind: str
    used_default: bool = False
    filtered: bool = False


def _feature_attributes(feature: Any) -> Mapping[str, Any]:
    if isinstance(feature, Mapping):
        return feature
    return feature.get_properties()


def make_style_selector(native: NativeStyleEntry, predicate: Predicate) -> StyleFunction:
    """
    Wrap a native entry so it only applies to features accepted by predicate.

    Style functions (text labels) are called on a match; static styles are
    returned as-is.
    """
    if callable(native):
        def style_selector(feature: Any, resolution: float):
            if predicate(_feature_attributes(feature)):
                return native(feature, resolution)
            return NO_STYLE
    else:
        def style_selector(feature: Any, resolution: float):
            if predicate(_feature_attributes(feature)):
                return native
            return NO_STYLE

    return style_selector


class RuleDispatcher:
    """Translates rules into native style entries, preserving rule order."""

    def __init__(self, translator: Optional[SymbolizerTranslator] = None):
        self.translator = translator or SymbolizerTranslator()

    def translate_rule(self, rule: Rule, index: Optional[int] = None) -> RuleTranslation:
        """
        Translate one rule.

        Raises:
            UnsupportedFilterOperatorError: filter uses an unknown operator
            FilterSyntaxError: filter node is malformed
            UnknownSymbolizerKindError: unknown kind in strict mode
        """
        result = self.translator.write_symbolizer(rule.symbolizer)

        if not rule.filter:
            return RuleTranslation(entry=result.native, kind=result.kind, used_default=result.used_default)

        predicate = compile_filter(rule.filter)
        logger.debug(
            f"Compiled filter for rule {index if index is not None else rule.name!r}",
            extra={'custom_dimensions': {
                **LogContext(rule_index=index).to_dict(),
                'filter_operator': str(rule.filter[0]),
            }}
        )
        return RuleTranslation(
            entry=make_style_selector(result.native, predicate),
            kind=result.kind,
            used_default=result.used_default,
            filtered=True,
        )

    def translate_rules(self, rules: Sequence[Rule]) -> List[RuleTranslation]:
        """Translate rules in order; one translation per rule."""
        return [self.translate_rule(rule, index) for index, rule in enumerate(rules)]

# ============================================================================
# CLAUDE CONTEXT - FILTER COMPILER
# ============================================================================
# STATUS: Service - filter expression compilation
# PURPOSE: Compile declarative filter trees into per-feature predicates
# EXPORTS: FilterOperator, OPERATOR_ALIASES, Predicate, normalize_operator, compile_filter
# DEPENDENCIES: Standard library only
# ============================================================================
"""
Filter Compiler.

Turns a nested filter expression into a predicate over a feature's attribute
map. The tree is walked once; the result is a tree of closures, so evaluating
a feature never re-parses the filter.

Filter shapes (operator first):
    [op, "PROPERTY", literal]                     comparison / like
    ["PropertyIsNull", "PROPERTY"]                null test
    ["PropertyIsBetween", "PROPERTY", lo, hi]     lo <= value <= hi
    ["And" | "Or", sub, sub, ...]                 boolean combination
    ["Not", sub]                                  negation

Usage:
    predicate = compile_filter(["And", ["==", "NAME", "New York"], ["<", "POPULATION", 1000000]])
    predicate({"NAME": "New York", "POPULATION": 1})  # True
"""

import operator as op
import re
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from exceptions import FilterSyntaxError, UnsupportedFilterOperatorError

Predicate = Callable[[Mapping[str, Any]], bool]


# ============================================================================
# OPERATORS
# ============================================================================

class FilterOperator(str, Enum):
    """Canonical filter operators."""
    EQUAL_TO = "PropertyIsEqualTo"
    NOT_EQUAL_TO = "PropertyIsNotEqualTo"
    LIKE = "PropertyIsLike"
    LESS_THAN = "PropertyIsLessThan"
    LESS_THAN_OR_EQUAL_TO = "PropertyIsLessThanOrEqualTo"
    GREATER_THAN = "PropertyIsGreaterThan"
    GREATER_THAN_OR_EQUAL_TO = "PropertyIsGreaterThanOrEqualTo"
    IS_NULL = "PropertyIsNull"
    BETWEEN = "PropertyIsBetween"
    AND = "And"
    OR = "Or"
    NOT = "Not"


# Symbolic spellings accepted next to the canonical names
OPERATOR_ALIASES: Dict[str, FilterOperator] = {
    "=": FilterOperator.EQUAL_TO,
    "==": FilterOperator.EQUAL_TO,
    "!=": FilterOperator.NOT_EQUAL_TO,
    "<>": FilterOperator.NOT_EQUAL_TO,
    "≠": FilterOperator.NOT_EQUAL_TO,
    "*=": FilterOperator.LIKE,
    "like": FilterOperator.LIKE,
    "<": FilterOperator.LESS_THAN,
    "<=": FilterOperator.LESS_THAN_OR_EQUAL_TO,
    "≤": FilterOperator.LESS_THAN_OR_EQUAL_TO,
    ">": FilterOperator.GREATER_THAN,
    ">=": FilterOperator.GREATER_THAN_OR_EQUAL_TO,
    "≥": FilterOperator.GREATER_THAN_OR_EQUAL_TO,
    "&&": FilterOperator.AND,
    "||": FilterOperator.OR,
    "!": FilterOperator.NOT,
}


def normalize_operator(token: Any) -> FilterOperator:
    """
    Canonical operator for a filter token.

    Raises:
        UnsupportedFilterOperatorError: token is not a known operator
    """
    if isinstance(token, FilterOperator):
        return token
    if isinstance(token, str):
        if token in OPERATOR_ALIASES:
            return OPERATOR_ALIASES[token]
        try:
            return FilterOperator(token)
        except ValueError:
            pass
    raise UnsupportedFilterOperatorError(token)


# ============================================================================
# VALUE COMPARISON
# ============================================================================

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_number(value: Any) -> Optional[float]:
    """Numeric reading of a literal, or None."""
    if _is_number(value):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _make_comparator(compare: Callable[[Any, Any], bool], literal: Any, ordering: bool) -> Callable[[Any], bool]:
    """
    Test of an attribute value against a fixed literal.

    A number compared with a numeric string compares numerically, in either
    direction. Ordering between incomparable values (None, str vs int) is False.
    """
    literal_number = _as_number(literal)
    literal_is_number = _is_number(literal)

    def test(value: Any) -> bool:
        left, right = value, literal
        if _is_number(value) and literal_number is not None:
            right = literal_number
        elif literal_is_number and isinstance(value, str):
            value_number = _as_number(value)
            if value_number is not None:
                left = value_number
        if ordering and (left is None or right is None):
            return False
        try:
            return bool(compare(left, right))
        except TypeError:
            return False

    return test


_COMPARISONS = {
    FilterOperator.EQUAL_TO: (op.eq, False),
    FilterOperator.NOT_EQUAL_TO: (op.ne, False),
    FilterOperator.LESS_THAN: (op.lt, True),
    FilterOperator.LESS_THAN_OR_EQUAL_TO: (op.le, True),
    FilterOperator.GREATER_THAN: (op.gt, True),
    FilterOperator.GREATER_THAN_OR_EQUAL_TO: (op.ge, True),
}


def like_pattern_to_regex(pattern: str, wildcard: str = "*", single_char: str = ".",
                          escape: str = "!") -> "re.Pattern[str]":
    """
    Compile an OGC-style like pattern.

    ``*`` matches any run of characters, ``.`` exactly one, ``!`` escapes the
    next character. The whole value must match.
    """
    parts: List[str] = []
    escaped = False
    for ch in pattern:
        if escaped:
            parts.append(re.escape(ch))
            escaped = False
        elif ch == escape:
            escaped = True
        elif ch == wildcard:
            parts.append(".*")
        elif ch == single_char:
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    if escaped:
        parts.append(re.escape(escape))
    return re.compile("".join(parts), re.DOTALL)


# ============================================================================
# COMPILATION
# ============================================================================

def _property_name(node: Sequence[Any]) -> str:
    name = node[1]
    if not isinstance(name, str):
        raise FilterSyntaxError(f"Filter property name must be a string, got {name!r}", node=node)
    return name


def _require_arity(node: Sequence[Any], *allowed: int) -> None:
    if len(node) not in allowed:
        expected = " or ".join(str(n - 1) for n in allowed)
        raise FilterSyntaxError(
            f"{node[0]!r} expects {expected} argument(s), got {len(node) - 1}", node=node
        )


def _compile_comparison(operator: FilterOperator, node: Sequence[Any]) -> Predicate:
    _require_arity(node, 3)
    prop = _property_name(node)
    compare, ordering = _COMPARISONS[operator]
    test = _make_comparator(compare, node[2], ordering)

    def predicate(attributes: Mapping[str, Any]) -> bool:
        return test(attributes.get(prop))

    return predicate


def _compile_like(operator: FilterOperator, node: Sequence[Any]) -> Predicate:
    _require_arity(node, 3)
    prop = _property_name(node)
    if not isinstance(node[2], str):
        raise FilterSyntaxError(f"Like pattern must be a string, got {node[2]!r}", node=node)
    regex = like_pattern_to_regex(node[2])

    def predicate(attributes: Mapping[str, Any]) -> bool:
        value = attributes.get(prop)
        if value is None:
            return False
        return regex.fullmatch(str(value)) is not None

    return predicate


def _compile_is_null(operator: FilterOperator, node: Sequence[Any]) -> Predicate:
    _require_arity(node, 2, 3)
    prop = _property_name(node)

    def predicate(attributes: Mapping[str, Any]) -> bool:
        return attributes.get(prop) is None

    return predicate


def _compile_between(operator: FilterOperator, node: Sequence[Any]) -> Predicate:
    _require_arity(node, 4)
    prop = _property_name(node)
    return _compile_combination(FilterOperator.AND, [
        FilterOperator.AND,
        [FilterOperator.GREATER_THAN_OR_EQUAL_TO, prop, node[2]],
        [FilterOperator.LESS_THAN_OR_EQUAL_TO, prop, node[3]],
    ])


def _compile_combination(operator: FilterOperator, node: Sequence[Any]) -> Predicate:
    predicates = tuple(compile_filter(sub) for sub in node[1:])

    if operator is FilterOperator.AND:
        def predicate(attributes: Mapping[str, Any]) -> bool:
            return all(p(attributes) for p in predicates)
    else:
        def predicate(attributes: Mapping[str, Any]) -> bool:
            return any(p(attributes) for p in predicates)

    return predicate


def _compile_negation(operator: FilterOperator, node: Sequence[Any]) -> Predicate:
    _require_arity(node, 2)
    inner = compile_filter(node[1])

    def predicate(attributes: Mapping[str, Any]) -> bool:
        return not inner(attributes)

    return predicate


_COMPILERS: Dict[FilterOperator, Callable[[FilterOperator, Sequence[Any]], Predicate]] = {
    **{comparison: _compile_comparison for comparison in _COMPARISONS},
    FilterOperator.LIKE: _compile_like,
    FilterOperator.IS_NULL: _compile_is_null,
    FilterOperator.BETWEEN: _compile_between,
    FilterOperator.AND: _compile_combination,
    FilterOperator.OR: _compile_combination,
    FilterOperator.NOT: _compile_negation,
}


def compile_filter(filter_: Sequence[Any]) -> Predicate:
    """
    Compile a filter tree into a predicate.

    Args:
        filter_: Filter expression, operator first

    Returns:
        Pure function of a feature's attribute map

    Raises:
        UnsupportedFilterOperatorError: unknown operator anywhere in the tree
        FilterSyntaxError: malformed node
    """
    if not isinstance(filter_, (list, tuple)) or not filter_:
        raise FilterSyntaxError(f"Filter must be a non-empty list, got {filter_!r}", node=filter_)

    operator = normalize_operator(filter_[0])
    return _COMPILERS[operator](operator, filter_)

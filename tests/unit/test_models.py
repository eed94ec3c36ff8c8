"""
Declarative style model tests: enums, symbolizer validation, documents.
"""

import pytest
from pydantic import ValidationError

from ol_styles.models import (
    CircleSymbolizer,
    FillSymbolizer,
    LineSymbolizer,
    Rule,
    Style,
    StyleType,
    Symbolizer,
    SymbolizerKind,
    TextSymbolizer,
    coerce_symbolizer,
)


class TestEnums:
    def test_style_type_count(self):
        assert len(StyleType) == 3

    def test_style_type_values(self):
        assert {t.value for t in StyleType} == {"Point", "Line", "Fill"}

    def test_symbolizer_kind_count(self):
        assert len(SymbolizerKind) == 4

    def test_text_is_not_a_style_type(self):
        with pytest.raises(ValueError):
            StyleType("Text")


class TestCoerceSymbolizer:
    @pytest.mark.parametrize("data,model", [
        ({"kind": "Circle", "radius": 3}, CircleSymbolizer),
        ({"kind": "Line", "width": 2}, LineSymbolizer),
        ({"kind": "Fill", "outlineColor": "#000000"}, FillSymbolizer),
        ({"kind": "Text", "field": "name"}, TextSymbolizer),
    ])
    def test_known_kinds_pick_their_model(self, data, model):
        assert type(coerce_symbolizer(data)) is model

    def test_unknown_kind_keeps_extra_fields(self):
        symbolizer = coerce_symbolizer({"kind": "Icon", "image": "pin.png"})
        assert type(symbolizer) is Symbolizer
        assert symbolizer.model_extra == {"image": "pin.png"}

    def test_instances_pass_through(self):
        symbolizer = CircleSymbolizer(radius=2)
        assert coerce_symbolizer(symbolizer) is symbolizer

    def test_invalid_known_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            coerce_symbolizer({"kind": "Circle", "radius": -1})

    def test_base_model_rejects_known_kind(self):
        with pytest.raises(ValidationError):
            Symbolizer(kind="Fill")

    @pytest.mark.parametrize("opacity", [-0.1, 1.5])
    def test_opacity_range(self, opacity):
        with pytest.raises(ValidationError):
            LineSymbolizer(opacity=opacity)

    def test_zero_opacity_is_valid(self):
        assert FillSymbolizer(opacity=0).opacity == 0

    def test_zero_radius_is_valid(self):
        assert CircleSymbolizer(radius=0).radius == 0

    def test_offset_needs_two_values(self):
        with pytest.raises(ValidationError):
            TextSymbolizer(offset=[1])


class TestStyleDocument:
    def test_rule_symbolizer_resolves_model(self):
        rule = Rule.model_validate({"symbolizer": {"kind": "Circle", "radius": 4}})
        assert isinstance(rule.symbolizer, CircleSymbolizer)
        assert rule.filter is None

    def test_rules_default_empty(self):
        assert Style(type="Line").rules == []

    def test_unknown_style_type(self):
        with pytest.raises(ValidationError):
            Style(type="Raster")

    def test_to_dict_drops_unset_fields(self):
        style = Style(name="cities", type=StyleType.POINT, rules=[
            Rule(symbolizer=CircleSymbolizer(color="#ff0000"), filter=["==", "NAME", "Rome"]),
        ])
        assert style.to_dict() == {
            "name": "cities",
            "type": "Point",
            "rules": [{
                "symbolizer": {"kind": "Circle", "color": "#ff0000"},
                "filter": ["==", "NAME", "Rome"],
            }],
        }

"""
Rule dispatcher tests: filters gate translated styles per feature.
"""

import pytest

from exceptions import FilterSyntaxError, UnsupportedFilterOperatorError
from ol_engine import Style as OlStyle
from ol_styles.dispatcher import NO_STYLE, RuleDispatcher, make_style_selector
from ol_styles.models import CircleSymbolizer, Rule, Symbolizer, TextSymbolizer


@pytest.fixture
def dispatcher(translator):
    return RuleDispatcher(translator)


class TestUnfilteredRule:
    def test_entry_is_the_translated_style(self, dispatcher):
        translation = dispatcher.translate_rule(Rule(symbolizer=CircleSymbolizer(color="#ff0000")))
        assert isinstance(translation.entry, OlStyle)
        assert translation.filtered is False
        assert translation.used_default is False
        assert translation.kind == "Circle"

    def test_empty_filter_is_no_filter(self, dispatcher):
        translation = dispatcher.translate_rule(Rule(symbolizer=CircleSymbolizer(), filter=[]))
        assert translation.filtered is False
        assert isinstance(translation.entry, OlStyle)


class TestCityScenario:
    def test_matching_feature_gets_the_style(self, dispatcher, city_filter, make_feature):
        translation = dispatcher.translate_rule(
            Rule(symbolizer=CircleSymbolizer(color="#ff0000", radius=6), filter=city_filter)
        )
        selector = translation.entry

        result = selector(make_feature(NAME="New York", POPULATION=1), 1)

        assert translation.filtered is True
        assert isinstance(result, OlStyle)
        assert result.get_image().get_radius() == 6

    def test_same_style_object_for_every_match(self, dispatcher, city_filter, make_feature):
        selector = dispatcher.translate_rule(
            Rule(symbolizer=CircleSymbolizer(color="#ff0000"), filter=city_filter)
        ).entry
        first = selector(make_feature(NAME="New York", POPULATION=1), 1)
        second = selector(make_feature(NAME="New York", POPULATION=2), 1)
        assert first is second

    @pytest.mark.parametrize("properties", [
        {"NAME": "New York", "POPULATION": 1000000000000},
        {"NAME": "Berlin", "POPULATION": 1},
        {"NAME": "New York"},
        {},
    ])
    def test_non_matching_feature_gets_no_style(self, dispatcher, city_filter, make_feature, properties):
        selector = dispatcher.translate_rule(
            Rule(symbolizer=CircleSymbolizer(color="#ff0000"), filter=city_filter)
        ).entry
        assert selector(make_feature(**properties), 1) is NO_STYLE

    def test_plain_mapping_is_accepted(self, dispatcher, city_filter):
        selector = dispatcher.translate_rule(
            Rule(symbolizer=CircleSymbolizer(), filter=city_filter)
        ).entry
        assert selector({"NAME": "New York", "POPULATION": 10}, 1) is not NO_STYLE


class TestFilteredText:
    def test_text_function_runs_only_on_match(self, dispatcher, make_feature):
        selector = dispatcher.translate_rule(
            Rule(symbolizer=TextSymbolizer(field="NAME"), filter=["==", "CAPITAL", True])
        ).entry

        labelled = selector(make_feature(NAME="Berlin", CAPITAL=True), 1)
        skipped = selector(make_feature(NAME="Hamburg", CAPITAL=False), 1)

        assert labelled.get_text().get_text() == "Berlin"
        assert skipped is NO_STYLE


class TestSelectorWrapping:
    def test_static_entry(self):
        native = OlStyle()
        selector = make_style_selector(native, lambda attributes: True)
        assert selector({}, 1) is native

    def test_callable_entry_is_called(self):
        calls = []

        def style_function(feature, resolution):
            calls.append((feature, resolution))
            return "drawn"

        selector = make_style_selector(style_function, lambda attributes: attributes.get("ok"))
        assert selector({"ok": True}, 2.5) == "drawn"
        assert selector({"ok": False}, 2.5) is NO_STYLE
        assert calls == [({"ok": True}, 2.5)]


class TestRuleSequence:
    def test_order_and_count_preserved(self, dispatcher):
        rules = [
            Rule(symbolizer=CircleSymbolizer()),
            Rule(symbolizer=Symbolizer(kind="Icon")),
            Rule(symbolizer=TextSymbolizer(field="name")),
        ]
        translations = dispatcher.translate_rules(rules)

        assert [t.kind for t in translations] == ["Circle", "Icon", "Text"]
        assert [t.used_default for t in translations] == [False, True, False]
        assert callable(translations[2].entry)

    def test_no_rules(self, dispatcher):
        assert dispatcher.translate_rules([]) == []


class TestFilterErrors:
    def test_unknown_operator_fails_translation(self, dispatcher):
        with pytest.raises(UnsupportedFilterOperatorError):
            dispatcher.translate_rule(Rule(symbolizer=CircleSymbolizer(), filter=["~=", "A", 1]))

    def test_malformed_node_fails_translation(self, dispatcher):
        with pytest.raises(FilterSyntaxError):
            dispatcher.translate_rule(Rule(symbolizer=CircleSymbolizer(), filter=["==", "A"]))


class TestLogging:
    def test_filter_compilation_logs_rule_index(self, dispatcher, caplog):
        with caplog.at_level("DEBUG", logger="dispatcher.RuleDispatcher"):
            dispatcher.translate_rules([
                Rule(symbolizer=CircleSymbolizer()),
                Rule(symbolizer=CircleSymbolizer(), filter=["==", "A", 1]),
            ])
        dims = [r.custom_dimensions for r in caplog.records if r.name == "dispatcher.RuleDispatcher"]
        assert dims[-1]["rule_index"] == 1
        assert dims[-1]["filter_operator"] == "=="

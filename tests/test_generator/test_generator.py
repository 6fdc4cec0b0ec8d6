"""Tests for the layout rule generator."""

import logging

import pytest

from flowcolumns import LayoutRuleGenerator, OptionResolver, OptionSet, render_css
from flowcolumns.generator import BASE_PROPERTIES, base_rule


def _selectors(rule) -> list[str]:
    return [s.text for s in rule.selectors]


@pytest.fixture()
def gen() -> LayoutRuleGenerator:
    return LayoutRuleGenerator()


# ---------------------------------------------------------------------------
# Base rule
# ---------------------------------------------------------------------------


class TestBaseRule:
    def test_first_emission_includes_base(self, gen):
        sheet = gen.emit_columns("50% 50%")
        base = sheet.rules[0]
        assert _selectors(base) == [".column", "[data-column]"]
        assert base.properties == BASE_PROPERTIES
        assert gen.base_emitted

    def test_base_emitted_once(self, gen):
        gen.emit_columns("50% 50%")
        second = gen.emit_columns("25% 75%")
        assert len(second) == 2
        assert all(rule.properties != BASE_PROPERTIES for rule in second)

    def test_generators_track_base_independently(self):
        LayoutRuleGenerator().emit_columns("100%")
        assert len(LayoutRuleGenerator().emit_columns("100%")) == 2

    def test_ensure_base(self, gen):
        assert gen.ensure_base(OptionSet()) == base_rule(OptionSet())
        assert gen.ensure_base(OptionSet()) is None

    def test_custom_markers(self):
        rule = base_rule(OptionSet(class_name="col", attribute_name="data-col"))
        assert _selectors(rule) == [".col", "[data-col]"]


# ---------------------------------------------------------------------------
# Column rules
# ---------------------------------------------------------------------------


class TestColumnRules:
    def test_one_rule_per_column(self, gen):
        sheet = gen.emit_columns("25% 50% 25%", scope=".row")
        columns = sheet.rules[1:]
        assert [_selectors(r) for r in columns] == [
            [".row > .column:nth-of-type(3n+1)"],
            [".row > .column:nth-of-type(3n+2)"],
            [".row > .column:nth-of-type(3n+3)"],
        ]
        assert [r.properties for r in columns] == [
            {"clear": "left", "width": "25%"},
            {"width": "50%"},
            {"clear": "right", "width": "25%"},
        ]

    def test_comments_name_columns(self, gen):
        sheet = gen.emit_columns("100% 320px")
        assert [r.comment for r in sheet.rules[1:]] == [
            "column 1 of 2: 100%",
            "column 2 of 2: 320px",
        ]

    def test_default_scope(self, gen):
        sheet = gen.emit_columns("100%")
        assert _selectors(sheet.rules[1]) == [".columns > .column:nth-of-type(1n+1)"]

    def test_fixed_and_fluid(self, gen):
        sheet = gen.emit_columns("100% 320px")
        assert sheet.rules[1].properties["width"] == "calc(100% - 320px)"
        assert sheet.rules[2].properties["width"] == "320px"

    def test_gutter(self, gen):
        gen.set_options(gutter="30px")
        sheet = gen.emit_columns("25% 50% 25%")
        paddings = [
            (r.properties["padding-left"], r.properties["padding-right"])
            for r in sheet.rules[1:]
        ]
        assert paddings == [("0", "20px"), ("10px", "10px"), ("20px", "0")]

    def test_all_schemes(self, gen):
        gen.set_options(
            use_attribute_selector=True,
            use_sibling_chain_fallback=True,
            sibling_chain_max_depth=1,
        )
        sheet = gen.emit_columns("50% 50%", scope=".row")
        assert _selectors(sheet.rules[2]) == [
            '.row > [data-column~="2-2"]',
            ".row > .column:nth-of-type(2n+2)",
            ".row > .column:first-child + .column",
        ]

    def test_accepts_width_objects(self, gen):
        from flowcolumns import FixedLength, Percentage

        sheet = gen.emit_columns([Percentage(100), FixedLength(20, "em")])
        assert sheet.rules[2].properties["width"] == "20em"


class TestLegacyStrategy:
    def test_containment_rule(self, gen):
        sheet = gen.emit_columns("100% 320px", scope=".row", use_width_calculation=False)
        containment = sheet.rules[1]
        assert _selectors(containment) == [".row"]
        assert containment.properties == {"overflow": "hidden"}

    def test_negative_margin(self, gen):
        sheet = gen.emit_columns("100% 320px", use_width_calculation=False)
        fluid = sheet.rules[2]
        assert fluid.properties["margin-left"] == "-320px"
        assert fluid.properties["padding-left"] == "320px"
        assert fluid.properties["width"] == "100%"

    def test_gutter_unit_mismatch_raises(self, gen):
        with pytest.raises(ValueError, match="needs calc"):
            gen.emit_columns("320px 100%", gutter="1em", use_width_calculation=False)
        assert not gen.base_emitted
        assert gen.resolver.current() == OptionSet()

    def test_mixed_fixed_units_raise(self, gen):
        with pytest.raises(ValueError):
            gen.emit_columns("100% 200px 2em", use_width_calculation=False)


class TestNoScheme:
    def test_columns_skipped_with_warning(self, gen, caplog):
        with caplog.at_level(logging.WARNING, logger="flowcolumns"):
            sheet = gen.emit_columns("50% 50%", use_structural_selector=False)
        assert len(sheet) == 1  # base rule only
        assert "selects no elements" in caplog.text


# ---------------------------------------------------------------------------
# Option lifecycle across emissions
# ---------------------------------------------------------------------------


class TestOptionLifecycle:
    def test_one_shot_applies_to_one_emission(self, gen):
        gen.set_options(gutter="10px")
        gen.set_options_once(gutter=20)
        first = gen.emit_columns("50% 50%")
        second = gen.emit_columns("50% 50%")
        assert first.rules[1].properties["padding-right"] == "10px"
        assert second.rules[0].properties["padding-right"] == "5px"

    def test_overrides_are_one_shot(self, gen):
        first = gen.emit_columns("50% 50%", gutter="20px")
        second = gen.emit_columns("50% 50%")
        assert "padding-right" in first.rules[1].properties
        assert "padding-right" not in second.rules[0].properties

    def test_set_options_persists(self, gen):
        gen.set_options(use_attribute_selector=True, use_structural_selector=False)
        gen.emit_columns("100%")
        sheet = gen.emit_columns("100%")
        assert _selectors(sheet.rules[0]) == ['.columns > [data-column~="1-1"]']

    def test_reset_options(self, gen):
        gen.set_options(gutter=20)
        gen.reset_options()
        assert gen.resolver.current() == OptionSet()

    def test_shared_resolver(self):
        resolver = OptionResolver(OptionSet(class_name="col"))
        gen = LayoutRuleGenerator(resolver)
        sheet = gen.emit_columns("100%")
        assert _selectors(sheet.rules[1]) == [".columns > .col:nth-of-type(1n+1)"]

    def test_failed_parse_leaves_options_alone(self, gen):
        from flowcolumns.parser import ParseError

        with pytest.raises(ParseError):
            gen.emit_columns("50 50", gutter=20)
        assert gen.resolver.current().gutter.is_zero


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


class TestRenderedOutput:
    def test_two_columns(self, gen):
        css = render_css(gen.emit_columns("50% 50%", scope=".row"))
        assert css == (
            "/* column base */\n"
            ".column,\n"
            "[data-column] {\n"
            "  float: left;\n"
            "  position: relative;\n"
            "  box-sizing: border-box;\n"
            "}\n"
            "\n"
            "/* column 1 of 2: 50% */\n"
            ".row > .column:nth-of-type(2n+1) {\n"
            "  clear: left;\n"
            "  width: 50%;\n"
            "}\n"
            "\n"
            "/* column 2 of 2: 50% */\n"
            ".row > .column:nth-of-type(2n+2) {\n"
            "  clear: right;\n"
            "  width: 50%;\n"
            "}\n"
        )

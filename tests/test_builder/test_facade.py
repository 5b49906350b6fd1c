"""Tests for the SelectorFacade entry point."""
from __future__ import annotations

import pytest

from selectorkit import (
    BuilderConfig,
    Combinator,
    DuplicateCategoryError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorBuilder,
    SelectorFacade,
    css_selector_builder,
)


@pytest.fixture
def builder() -> SelectorFacade:
    return SelectorFacade()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


class TestFactories:
    def test_each_factory_returns_fresh_builder(self, builder: SelectorFacade) -> None:
        first = builder.element("div")
        second = builder.element("span")
        assert isinstance(first, SelectorBuilder)
        assert first is not second
        assert first.stringify() == "div"
        assert second.stringify() == "span"

    def test_factory_applies_first_value(self, builder: SelectorFacade) -> None:
        assert builder.element("div").stringify() == "div"
        assert builder.id("main").stringify() == "#main"
        assert builder.class_("box").stringify() == ".box"
        assert builder.attr("disabled").stringify() == "[disabled]"
        assert builder.pseudo_class("hover").stringify() == ":hover"
        assert builder.pseudo_element("marker").stringify() == "::marker"

    def test_id_and_classes(self, builder: SelectorFacade) -> None:
        selector = builder.id("main").class_("container").class_("editable")
        assert selector.stringify() == "#main.container.editable"

    def test_attribute_and_pseudo_class(self, builder: SelectorFacade) -> None:
        selector = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert selector.stringify() == 'a[href$=".png"]:focus'

    def test_factory_builders_still_validate(self, builder: SelectorFacade) -> None:
        with pytest.raises(DuplicateCategoryError):
            builder.id("a").id("b")
        with pytest.raises(OrderViolationError):
            builder.pseudo_element("after").pseudo_class("hover")
        with pytest.raises(OrderViolationError):
            builder.id("main").class_("container").element("table")


# ---------------------------------------------------------------------------
# Combine
# ---------------------------------------------------------------------------


class TestFacadeCombine:
    def test_three_way_nested(self, builder: SelectorFacade) -> None:
        result = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_stringify_passes_through_last_combine(self, builder: SelectorFacade) -> None:
        assert builder.stringify() == ""
        builder.combine(builder.element("a"), ">", builder.element("b"))
        assert builder.stringify() == "a > b"
        builder.combine(builder.element("c"), "~", builder.element("d"))
        assert builder.stringify() == "c ~ d"

    def test_default_is_permissive(self, builder: SelectorFacade) -> None:
        result = builder.combine(builder.element("a"), "<<", builder.element("b"))
        assert result.stringify() == "a << b"


class TestStrictCombinators:
    def test_rejects_unknown_symbol(self) -> None:
        strict = SelectorFacade(BuilderConfig(strict_combinators=True))
        with pytest.raises(InvalidCombinatorError) as excinfo:
            strict.combine(strict.element("a"), "<<", strict.element("b"))
        assert excinfo.value.symbol == "<<"
        assert strict.stringify() == ""

    @pytest.mark.parametrize("symbol", [" ", ">", "+", "~", Combinator.CHILD])
    def test_accepts_css_combinators(self, symbol) -> None:
        strict = SelectorFacade(BuilderConfig(strict_combinators=True))
        result = strict.combine(strict.element("a"), symbol, strict.element("b"))
        assert result.left == "a"
        assert result.right == "b"


class TestModuleFacade:
    def test_default_instance(self) -> None:
        assert isinstance(css_selector_builder, SelectorFacade)
        assert css_selector_builder.config == BuilderConfig()
        assert css_selector_builder.element("p").stringify() == "p"

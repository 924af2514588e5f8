import pytest

from cssbuild.core.builder import CssSelectorBuilder, css_selector_builder as css
from cssbuild.core.selectors import (
    CombinedSelector,
    DuplicateFragment,
    OrderViolation,
    SelectorBuilder,
)


def test_id_and_classes():
    assert css.id("main").class_("container").class_("editable").stringify() == (
        "#main.container.editable"
    )


def test_element_attribute_pseudo_class():
    selector = css.element("a").attr('href$=".png"').pseudo_class("focus")

    assert selector.stringify() == 'a[href$=".png"]:focus'


def test_every_entry_point_returns_a_fresh_builder():
    first = css.element("div")
    second = css.element("div")

    assert isinstance(first, SelectorBuilder)
    assert first is not second
    first.class_("x")
    assert second.stringify() == "div"


@pytest.mark.parametrize(
    "entry, value, expected",
    [
        ("element", "p", "p"),
        ("id", "nav", "#nav"),
        ("class_", "btn", ".btn"),
        ("class", "btn", ".btn"),
        ("attr", "disabled", "[disabled]"),
        ("pseudo_class", "checked", ":checked"),
        ("pseudo_element", "after", "::after"),
    ],
)
def test_single_fragment_entry_points(entry: str, value: str, expected: str):
    assert getattr(css, entry)(value).stringify() == expected


def test_duplicate_id_after_class():
    selector = css.element("div").id("main").class_("x")

    with pytest.raises(DuplicateFragment):
        selector.id("y")


def test_element_after_id_is_out_of_order():
    with pytest.raises(OrderViolation):
        css.id("main").element("div")


def test_combine_joins_with_single_spaces():
    a = css.element("h1")
    b = css.class_("lead")

    combined = css.combine(a, "+", b)

    assert isinstance(combined, CombinedSelector)
    assert combined.stringify() == a.stringify() + " + " + b.stringify()


def test_nested_combination():
    selector = css.combine(
        css.element("div").id("main").class_("container").class_("draggable"),
        "+",
        css.combine(
            css.element("table").id("data"),
            "~",
            css.combine(
                css.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                css.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )

    assert selector.stringify() == (
        "div#main.container.draggable + table#data ~ "
        "tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_left_nested_combination_keeps_single_spacing():
    selector = css.combine(
        css.combine(css.element("a"), "~", css.element("b")), ">", css.element("c")
    )

    assert selector.stringify() == "a ~ b > c"


def test_facade_is_stateless():
    assert CssSelectorBuilder() == css

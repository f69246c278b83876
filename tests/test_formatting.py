"""Tests for console rendering."""

from decimal import Decimal

from product_sorting.formatting import (
    TABLE_HEADER,
    format_price,
    format_product,
    render_groups,
    render_products,
)
from product_sorting.models import Product, ProductGroup


def test_format_product_with_category():
    assert format_product(Product("Widget", "A", Decimal("10.9"), 100)) == "Widget | A | 10.90 | 100"


def test_missing_category_shows_dash():
    assert format_product(Product("Widget", None, Decimal("10"), 1)) == "Widget | - | 10.00 | 1"


def test_price_has_two_fraction_digits():
    assert format_price(Decimal("1.005")) == "1.01"
    assert format_price(Decimal("1234.5")) == "1234.50"


def test_render_products_starts_with_header():
    lines = render_products([Product("Widget", None, Decimal("1"), 1)])

    assert lines == [TABLE_HEADER, "Widget | - | 1.00 | 1"]


def test_render_groups_indents_items():
    group = ProductGroup(
        "Widget",
        (
            Product("Widget", None, Decimal("1"), 1),
            Product("widget", "B", Decimal("2"), 2),
        ),
    )

    assert render_groups([group]) == [
        TABLE_HEADER,
        "Widget:",
        "  Widget | - | 1.00 | 1",
        "  widget | B | 2.00 | 2",
    ]


def test_render_empty():
    assert render_products([]) == [TABLE_HEADER]
    assert render_groups([]) == [TABLE_HEADER]

"""Tests for writing catalogues back to CSV."""

from decimal import Decimal

from product_sorting.models import Product
from product_sorting.processors.catalog_reader import read_products
from product_sorting.processors.catalog_writer import write_products


def test_written_catalog_reads_back_identically(tmp_path):
    products = [
        Product("Widget, Large", "A", Decimal("10.00"), 5),
        Product('The "Best" Gadget', None, Decimal("1.5"), 0),
        Product("Doohickey", "ZZ", Decimal("-2.125"), -1),
    ]

    path = write_products(tmp_path / "out.csv", products)

    assert read_products(path) == products


def test_three_column_output_without_categories(tmp_path):
    products = [Product("Widget", None, Decimal("9.99"), 3)]

    path = write_products(tmp_path / "out.csv", products)

    assert path.read_text(encoding="utf-8") == "Product Name,Price (ZAR),Quantity\nWidget,9.99,3\n"


def test_category_column_can_be_forced(tmp_path):
    products = [Product("Widget", None, Decimal("9.99"), 3)]

    path = write_products(tmp_path / "out.csv", products, include_category=True)

    assert path.read_text(encoding="utf-8").splitlines()[1] == "Widget,,9.99,3"
    assert read_products(path) == products


def test_large_price_is_written_without_exponent(tmp_path):
    products = [Product("Widget", None, Decimal("1E+3"), 1)]

    path = write_products(tmp_path / "out.csv", products)

    assert "1000,1" in path.read_text(encoding="utf-8")
    assert read_products(path)[0].price == Decimal("1000")


def test_creates_parent_directories(tmp_path):
    path = write_products(tmp_path / "nested" / "dir" / "out.csv", [])

    assert path.exists()
    assert read_products(path) == []

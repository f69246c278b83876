"""Pytest fixtures for catalogue reading, sorting and CLI tests."""

from decimal import Decimal

import pytest

from product_sorting.models import Product


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path."""

    def _write(content: str, name: str = "products.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_products():
    return [
        Product("Widget", None, Decimal("12.50"), 3),
        Product("Alpha", None, Decimal("9.99"), 5),
        Product("Beta", None, Decimal("9.99"), 2),
    ]

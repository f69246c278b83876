"""
Product sorting package.

Loads a flat-file product catalogue and produces sorted or grouped views of it.
"""

from .exceptions import CatalogError, CatalogFormatError, CatalogNotFoundError
from .models import Product, ProductGroup
from .processors import (
    CatalogReader,
    NameNormalizer,
    normalize_category_from_name,
    parse_line,
    read_products,
    write_products,
)
from .product_sorter import (
    group_by_name_then_price,
    sort_by_name_ascending,
    sort_by_price_ascending,
    sort_by_quantity_ascending,
)

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogNotFoundError",
    "CatalogReader",
    "NameNormalizer",
    "Product",
    "ProductGroup",
    "group_by_name_then_price",
    "normalize_category_from_name",
    "parse_line",
    "read_products",
    "sort_by_name_ascending",
    "sort_by_price_ascending",
    "sort_by_quantity_ascending",
    "write_products",
]

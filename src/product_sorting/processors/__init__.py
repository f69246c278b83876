"""
Processors package.

Processing turns a raw CSV catalogue into validated Product values and back.
"""

from .record_parser import format_line, parse_line
from .catalog_reader import CatalogReader, read_products
from .catalog_writer import write_products
from .name_normalizer import NameNormalizer, normalize_category_from_name

__all__ = [
    "CatalogReader",
    "NameNormalizer",
    "format_line",
    "normalize_category_from_name",
    "parse_line",
    "read_products",
    "write_products",
]

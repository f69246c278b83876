"""Plain-text rendering of products and groups for the console."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from .models import Product, ProductGroup

TABLE_HEADER = "Name | Category | Price | Quantity"
NO_CATEGORY = "-"

_CENTS = Decimal("0.01")


def format_price(price: Decimal) -> str:
    return str(price.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_product(product: Product) -> str:
    category = product.category or NO_CATEGORY
    return f"{product.name} | {category} | {format_price(product.price)} | {product.quantity}"


def render_products(products: Iterable[Product]) -> List[str]:
    lines = [TABLE_HEADER]
    lines.extend(format_product(p) for p in products)
    return lines


def render_groups(groups: Iterable[ProductGroup]) -> List[str]:
    lines = [TABLE_HEADER]
    for group in groups:
        lines.append(f"{group.name}:")
        lines.extend(f"  {format_product(p)}" for p in group.items)
    return lines

"""
Sorting and grouping views over a product list.

Every function returns a new list and leaves its input untouched. Name
comparisons are case-insensitive and ordinal (upper-cased code points), so
the order does not depend on the host locale.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from .models import Product, ProductGroup


def _upper_char(ch: str) -> str:
    upper = ch.upper()
    # Characters whose upper case expands ("ß" -> "SS") compare as themselves.
    return upper if len(upper) == 1 else ch


def name_key(name: str) -> str:
    return "".join(_upper_char(ch) for ch in name)


def sort_by_price_ascending(products: Iterable[Product]) -> List[Product]:
    """Sort by price, then by name."""
    return sorted(products, key=lambda p: (p.price, name_key(p.name)))


def sort_by_quantity_ascending(products: Iterable[Product]) -> List[Product]:
    """Sort by quantity, then by name."""
    return sorted(products, key=lambda p: (p.quantity, name_key(p.name)))


def sort_by_name_ascending(products: Iterable[Product]) -> List[Product]:
    """Sort by name, then by price so same-named items stay price ordered."""
    return sorted(products, key=lambda p: (name_key(p.name), p.price))


def group_by_name_then_price(products: Iterable[Product]) -> List[ProductGroup]:
    """
    Group products by case-insensitive name.

    Groups are ordered by name and each group's items by price. Equal prices
    keep their input order. A group is labelled with the spelling of the first
    product that opened it.
    """
    buckets: Dict[str, List[Product]] = {}
    labels: Dict[str, str] = {}
    for product in products:
        key = name_key(product.name)
        if key not in buckets:
            buckets[key] = []
            labels[key] = product.name
        buckets[key].append(product)

    return [
        ProductGroup(name=labels[key], items=tuple(sorted(buckets[key], key=lambda p: p.price)))
        for key in sorted(buckets)
    ]


SORT_OPTIONS: Dict[str, Callable[[Iterable[Product]], List[Product]]] = {
    "price": sort_by_price_ascending,
    "quantity": sort_by_quantity_ascending,
    "name": sort_by_name_ascending,
}

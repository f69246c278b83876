"""
Category inference from product names.

A catalogue without a category column often encodes the category as a short
trailing token in the name ("Widget AA"). NameNormalizer splits that token
off into the category field.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..models import Product


class NameNormalizer:
    def __init__(self, *, max_category_length: int = 2) -> None:
        if max_category_length < 1:
            raise ValueError("max_category_length must be at least 1")
        self.max_category_length = max_category_length

    def normalize(self, products: Iterable[Product]) -> List[Product]:
        """Return a new list with categories inferred where missing, in input order."""
        normalized: List[Product] = []
        for product in products:
            if product.category and product.category.strip():
                normalized.append(product)
                continue

            split = self.split_name(product.name)
            if split is None:
                normalized.append(product)
            else:
                base_name, category = split
                normalized.append(product.with_changes(name=base_name, category=category))

        return normalized

    def split_name(self, name: str) -> Optional[Tuple[str, str]]:
        """Split a trailing short alphabetic token off `name` as (base_name, CATEGORY)."""
        if not name or not name.strip():
            return None

        parts = [p for p in name.strip().split(" ") if p]
        if len(parts) < 2:
            return None

        last = parts[-1]
        if 1 <= len(last) <= self.max_category_length and last.isalpha():
            base_name = " ".join(parts[:-1])
            if base_name.strip():
                return base_name, last.upper()

        return None


def normalize_category_from_name(products: Iterable[Product]) -> List[Product]:
    return NameNormalizer().normalize(products)

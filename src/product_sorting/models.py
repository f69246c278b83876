"""
Catalogue value types.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Product:
    """A single catalogue row."""

    name: str
    category: Optional[str]
    price: Decimal
    quantity: int

    def with_changes(self, **changes: Any) -> "Product":
        return replace(self, **changes)


@dataclass(frozen=True)
class ProductGroup:
    """Products sharing a name (case-insensitive), ordered by price."""

    name: str
    items: Tuple[Product, ...]

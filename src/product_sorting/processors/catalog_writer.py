"""Write Product values back out in the catalogue CSV format."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..models import Product
from .record_parser import format_line

THREE_COLUMN_HEADER = ["Product Name", "Price (ZAR)", "Quantity"]
FOUR_COLUMN_HEADER = ["Product Name", "Category", "Price (ZAR)", "Quantity"]


def product_fields(product: Product, include_category: bool) -> List[str]:
    fields = [product.name]
    if include_category:
        fields.append(product.category or "")
    fields.extend([format(product.price, "f"), str(product.quantity)])
    return fields


def write_products(
    path: Union[str, Path],
    products: Iterable[Product],
    *,
    include_category: Optional[bool] = None,
    encoding: str = "utf-8",
) -> Path:
    """
    Write products to a CSV file with a header row.

    The category column is written when any product has a category, unless
    `include_category` says otherwise. Returns the written path.
    """
    rows = list(products)
    if include_category is None:
        include_category = any(p.category for p in rows)

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    header = FOUR_COLUMN_HEADER if include_category else THREE_COLUMN_HEADER
    lines = [format_line(header)]
    lines.extend(format_line(product_fields(p, include_category)) for p in rows)

    with open(out_path, "w", encoding=encoding, newline="") as f:
        f.write("\n".join(lines) + "\n")

    return out_path

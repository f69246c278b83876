"""
CSV catalogue reader.

Reads a product list file and returns validated Product values:
- 3 columns: name, price, quantity
- 4 columns: name, category, price, quantity
- an optional header row is detected and skipped
- blank lines are ignored

Numbers use a fixed invariant convention ("." decimal point, "," grouping)
regardless of the host locale.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import CatalogFormatError, CatalogNotFoundError
from ..models import Product
from .record_parser import parse_line

PathLike = Union[str, Path]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_PRICE_PATTERN = re.compile(r"([+-]?)(?=[0-9.])([0-9][0-9,]*)?(?:\.([0-9]*))?([+-]?)")
_QUANTITY_PATTERN = re.compile(r"[+-]?[0-9]+")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _split_lines(content: str) -> List[str]:
    if not content:
        return []
    lines = _LINE_BREAK.split(content)
    # A terminating newline does not open another line.
    if lines[-1] == "":
        lines.pop()
    return lines


def looks_like_header(line: str) -> bool:
    fields = parse_line(line)
    if len(fields) < 3:
        return False

    price_index = 2 if len(fields) >= 4 else 1
    quantity_index = 3 if len(fields) >= 4 else 2

    return (
        "product" in fields[0].lower()
        and "price" in fields[price_index].lower()
        and "quantity" in fields[quantity_index].lower()
    )


def parse_price(text: str) -> Optional[Decimal]:
    """Parse a decimal price, or return None when it is not a valid number."""
    s = text.strip()
    match = _PRICE_PATTERN.fullmatch(s)
    if match is None:
        return None
    leading_sign, integer_part, fraction_part, trailing_sign = match.groups()
    if not integer_part and not fraction_part:
        return None
    # The sign may lead or trail ("10-"), but not both.
    if leading_sign and trailing_sign:
        return None
    sign = leading_sign or trailing_sign
    digits = (integer_part or "").replace(",", "")
    if fraction_part is not None:
        digits += "." + fraction_part
    try:
        return Decimal(sign + digits)
    except InvalidOperation:
        return None


def parse_quantity(text: str) -> Optional[int]:
    """Parse a signed 32-bit integer quantity, or return None."""
    s = text.strip()
    if _QUANTITY_PATTERN.fullmatch(s) is None:
        return None
    value = int(s)
    if value < _INT32_MIN or value > _INT32_MAX:
        return None
    return value


class CatalogReader:
    """Reads product catalogues from CSV files."""

    def __init__(self, *, encoding: str = "utf-8-sig") -> None:
        self.encoding = encoding

    def read(self, path: PathLike) -> List[Product]:
        """
        Read and validate all products in a CSV file.

        Args:
            path: Path to the CSV file

        Returns:
            Products in file order (header and blank lines excluded)

        Raises:
            CatalogNotFoundError: If the path is not an existing file
            CatalogFormatError: If a row is malformed
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise CatalogNotFoundError(path)

        # Undecodable bytes become U+FFFD instead of failing the load.
        with open(file_path, "r", encoding=self.encoding, errors="replace", newline="") as f:
            lines = _split_lines(f.read())

        if not lines:
            return []

        start_index = 1 if looks_like_header(lines[0]) else 0
        products: List[Product] = []

        for index in range(start_index, len(lines)):
            line = lines[index]
            if not line.strip():
                continue
            products.append(self._parse_row(line, index + 1))

        return products

    def _parse_row(self, line: str, line_number: int) -> Product:
        fields = parse_line(line)
        if len(fields) not in (3, 4):
            raise CatalogFormatError(line_number, "Invalid CSV format")

        name = fields[0].strip()
        if not name:
            raise CatalogFormatError(line_number, "Missing product name")

        if len(fields) == 4:
            category: Optional[str] = fields[1].strip() or None
            price_field, quantity_field = fields[2], fields[3]
        else:
            category = None
            price_field, quantity_field = fields[1], fields[2]

        price = parse_price(price_field)
        if price is None:
            raise CatalogFormatError(line_number, "Invalid price")

        quantity = parse_quantity(quantity_field)
        if quantity is None:
            raise CatalogFormatError(line_number, "Invalid quantity")

        return Product(name=name, category=category, price=price, quantity=quantity)


def read_products(path: PathLike, *, encoding: str = "utf-8-sig") -> List[Product]:
    """Read products from `path` with a default CatalogReader."""
    return CatalogReader(encoding=encoding).read(path)

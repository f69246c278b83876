"""Errors raised while loading a product catalogue."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class CatalogError(Exception):
    """Base class for catalogue loading failures."""


class CatalogNotFoundError(CatalogError, FileNotFoundError):
    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"CSV file not found: {self.path}")


class CatalogFormatError(CatalogError, ValueError):
    """A malformed row; `line_number` is 1-based and counts the header line."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{reason} on line {line_number}.")

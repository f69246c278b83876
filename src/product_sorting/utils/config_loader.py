"""
Catalogue configuration loader.

This module loads config/catalog_config.yml and validates it with Pydantic.
Environment variables (optionally from a .env file) override the file paths.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV = "PRODUCT_SORTING_CONFIG"
CSV_ENV = "PRODUCT_SORTING_CSV"
DATA_DIR_ENV = "PRODUCT_SORTING_DATA_DIR"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "catalog_config.yml"


class ReaderConfig(BaseModel):
    encoding: str = "utf-8-sig"


class PathsConfig(BaseModel):
    data_dir: str = "data"
    default_csv: str = "data/product_list.csv"


class NormalizerConfig(BaseModel):
    enabled_by_default: bool = False
    max_category_length: int = Field(default=2, ge=1, le=10)


class CatalogConfig(BaseModel):
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    normalizer: NormalizerConfig = Field(default_factory=NormalizerConfig)


def _apply_env_overrides(config: CatalogConfig) -> CatalogConfig:
    default_csv = os.getenv(CSV_ENV)
    if default_csv:
        config.paths.default_csv = default_csv
    data_dir = os.getenv(DATA_DIR_ENV)
    if data_dir:
        config.paths.data_dir = data_dir
    return config


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate catalogue configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to $PRODUCT_SORTING_CONFIG,
            then config/catalog_config.yml

    Returns:
        Validated CatalogConfig object

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    if config_path is None and os.getenv(CONFIG_ENV):
        config_path = Path(os.environ[CONFIG_ENV])

    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.warning("Catalog config not found at %s, using defaults", DEFAULT_CONFIG_PATH)
            return _apply_env_overrides(CatalogConfig())
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        config = CatalogConfig(**data)
        logger.info("Successfully loaded catalog config from %s", config_path)
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise

    return _apply_env_overrides(config)

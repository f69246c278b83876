"""
Console front end for the product catalogue.

Two modes:
- one-shot: ``--sort price|quantity|name|group`` prints a single view and exits
- interactive (default): prompts for a CSV file, then shows a menu
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO

from .exceptions import CatalogError
from .formatting import render_groups, render_products
from .models import Product
from .processors.catalog_reader import CatalogReader
from .processors.name_normalizer import NameNormalizer
from .product_sorter import SORT_OPTIONS, group_by_name_then_price
from .utils.config_loader import CatalogConfig, load_catalog_config

logger = logging.getLogger(__name__)

TITLE = "Product Sorting Console Application"

MENU_CHOICES = {
    "1": "price",
    "2": "quantity",
    "3": "name",
    "4": "group",
}

InputFn = Callable[[str], str]


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def list_csv_files(data_dir: Path) -> List[Path]:
    if not data_dir.is_dir():
        return []
    return sorted(data_dir.glob("*.csv"), key=lambda p: str(p).upper())


def build_view(products: Sequence[Product], view: Optional[str]) -> List[str]:
    """Render `products` under one of the named views; unknown views keep file order."""
    if view == "group":
        return render_groups(group_by_name_then_price(products))
    sort = SORT_OPTIONS.get(view or "")
    return render_products(sort(products) if sort else list(products))


class CatalogApp:
    """Interactive session over a single loaded catalogue."""

    def __init__(
        self,
        config: CatalogConfig,
        *,
        input_fn: InputFn = input,
        output: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.input_fn = input_fn
        self.output = output or sys.stdout
        self.reader = CatalogReader(encoding=config.reader.encoding)
        self.normalizer = NameNormalizer(max_category_length=config.normalizer.max_category_length)
        self.normalize_names = config.normalizer.enabled_by_default

    def write(self, line: str = "") -> None:
        print(line, file=self.output)

    def load_products(self) -> List[Product]:
        """Prompt for a CSV path until one loads."""
        default_path = self.config.paths.default_csv
        data_dir = Path(self.config.paths.data_dir)
        # The last listing stays selectable across retries.
        listed: List[Path] = []

        while True:
            answer = self.input_fn(
                f"Enter CSV file path (Enter for default: {default_path}), or type 'l' to list files: "
            )
            if answer.strip().lower() == "l":
                listed = list_csv_files(data_dir)
                for number, path in enumerate(listed, start=1):
                    self.write(f"{number}. {path.name}")
                answer = self.input_fn("Select a number or paste a path (Enter for default): ")

            choice = answer.strip()
            if choice.isdecimal() and 1 <= int(choice) <= len(listed):
                path = str(listed[int(choice) - 1])
            elif not choice:
                path = default_path
            else:
                path = choice.strip('"')

            try:
                products = self.reader.read(path)
                logger.info("Loaded %d products from %s", len(products), path)
                return products
            except (CatalogError, OSError) as e:
                logger.debug("Failed to load %s: %s", path, e)
                self.write(f"Error: {e}")

    def effective_products(self, products: List[Product]) -> List[Product]:
        if self.normalize_names:
            return self.normalizer.normalize(products)
        return products

    def run_menu(self, products: List[Product]) -> int:
        while True:
            state = "ON" if self.normalize_names else "OFF"
            self.write("1. Sort by Price (ascending)")
            self.write("2. Sort by Quantity (ascending)")
            self.write("3. Sort by Product Name (ascending)")
            self.write("4. Group by Product Name and sort by Price (ascending)")
            self.write(f"5. Toggle name normalization (currently {state})")
            self.write("0. Exit")
            choice = self.input_fn("Choose an option (0-5): ").strip()

            if choice == "0":
                self.write("Goodbye.")
                return 0
            if choice == "5":
                self.normalize_names = not self.normalize_names
                self.write(f"Name normalization: {'ON' if self.normalize_names else 'OFF'}")
                continue

            view = MENU_CHOICES.get(choice)
            for line in build_view(self.effective_products(products), view):
                self.write(line)
            return 0

    def run(self) -> int:
        self.write(TITLE)
        self.write("=" * len(TITLE))
        self.write()
        products = self.load_products()
        return self.run_menu(products)


def run_once(
    config: CatalogConfig,
    input_path: Optional[Path],
    view: str,
    normalize: bool,
    output: Optional[TextIO] = None,
) -> int:
    output = output or sys.stdout
    path = input_path or Path(config.paths.default_csv)
    reader = CatalogReader(encoding=config.reader.encoding)

    try:
        products = reader.read(path)
    except (CatalogError, OSError) as e:
        logger.error("Could not load %s: %s", path, e)
        return 1

    logger.info("Loaded %d products from %s", len(products), path)
    if normalize:
        products = NameNormalizer(max_category_length=config.normalizer.max_category_length).normalize(products)

    for line in build_view(products, view):
        print(line, file=output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort or group a CSV product catalogue")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to catalog config YAML file (default: config/catalog_config.yml)",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Path to the product CSV (default: paths.default_csv from config)",
    )
    parser.add_argument(
        "--sort",
        choices=["price", "quantity", "name", "group"],
        default=None,
        help="Print one view and exit instead of starting the interactive menu",
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Infer categories from trailing name tokens (e.g. 'Widget AA')",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, input_fn: InputFn = input, output: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        config = load_catalog_config(args.config)
        if args.sort:
            return run_once(config, args.input, args.sort, args.normalize, output=output)

        if args.input:
            config.paths.default_csv = str(args.input)
        app = CatalogApp(config, input_fn=input_fn, output=output)
        if args.normalize:
            app.normalize_names = True
        return app.run()
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except EOFError:
        logger.warning("Input closed before a choice was made")
        return 1
    except Exception as e:
        logger.error("Error: %s: %s", type(e).__name__, str(e), exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Run the product sorting console application from a source checkout.

Examples:
    python scripts/run_sorting.py
    python scripts/run_sorting.py --input data/product_list.csv --sort group --normalize
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src/ to path so `product_sorting` imports work without installing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from product_sorting.cli import main


if __name__ == "__main__":
    raise SystemExit(main())

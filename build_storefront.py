#!/usr/bin/env python3
"""
Build Storefront Page

Fetches the published product sheet and writes the product grid as a
static HTML page.

Usage:
    python3 build_storefront.py
    python3 build_storefront.py --output public/index.html --sort price-asc
    python3 build_storefront.py --csv-file exports/produkter.csv --verbose
"""

import argparse
import logging
import sys
from functools import partial

from storefront.common.config_loader import load_storefront_config
from storefront.common.constants import (
    SORT_ALIASES,
    SORT_NAME_ASC,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
)
from storefront.common.log_config import setup_logging
from storefront.models import FilterState
from storefront.rendering import HtmlGridRenderer
from storefront.sheets import Storefront, read_local_sheet

logger = logging.getLogger("storefront.build")


def main():
    parser = argparse.ArgumentParser(
        description="Render the product sheet as a static storefront page"
    )
    parser.add_argument(
        "--config",
        help="Storefront YAML config (default: config/storefront.yaml)"
    )
    parser.add_argument(
        "--url",
        help="Published sheet CSV URL (overrides the config)"
    )
    parser.add_argument(
        "--csv-file",
        help="Read a local CSV export instead of fetching the sheet"
    )
    parser.add_argument(
        "--image-base",
        help="Image directory or URL prefix (images are {image-base}/{ID}.jpg)"
    )
    parser.add_argument(
        "--output",
        default="output/index.html",
        help="Output HTML path (default: output/index.html)"
    )
    parser.add_argument("--query", default="", help="Initial search text")
    parser.add_argument("--category", default="", help="Initial category")
    parser.add_argument(
        "--sort",
        default="",
        choices=["", SORT_NAME_ASC, SORT_PRICE_ASC, SORT_PRICE_DESC, *SORT_ALIASES],
        help="Initial sort order (navn-asc, pris-asc and pris-desc also accepted)"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only warnings and errors")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_storefront_config(
            args.config,
            sheet_csv_url=args.url,
            image_base=args.image_base,
        )
        if not args.csv_file and not config.sheet_csv_url:
            raise ValueError("No sheet CSV URL configured (use --url or the config file)")
    except (FileNotFoundError, ValueError) as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    fetch = partial(read_local_sheet, args.csv_file) if args.csv_file else None

    renderer = HtmlGridRenderer(config)
    storefront = Storefront(config, renderer, fetch=fetch)
    state = FilterState(query=args.query, category=args.category, sort=args.sort)

    loaded = storefront.load(state)
    renderer.set_controls(state)
    renderer.write(args.output)

    if loaded:
        print(f"Rendered {len(storefront.products)} products to {args.output}")
    sys.exit(0 if loaded else 1)


if __name__ == "__main__":
    main()

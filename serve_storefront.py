#!/usr/bin/env python3
"""
Serve Storefront

Loads the published product sheet once and serves the interactive grid.
Changing the search box, category or sort order re-filters the loaded
products; the sheet is not fetched again until the server restarts.

Usage:
    python3 serve_storefront.py
    python3 serve_storefront.py --port 8080 --static-dir public
    python3 serve_storefront.py --csv-file exports/produkter.csv

Static files (product images under img/) are served from --static-dir, the
same directory build_storefront.py writes into by default.
"""

import argparse
import logging
import sys
from functools import partial

from storefront.common.config_loader import load_storefront_config
from storefront.common.log_config import setup_logging
from storefront.rendering import HtmlGridRenderer
from storefront.server import DEFAULT_STATIC_DIR, create_server
from storefront.sheets import Storefront, read_local_sheet

logger = logging.getLogger("storefront.serve")


def main():
    parser = argparse.ArgumentParser(
        description="Serve the product sheet as an interactive storefront"
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
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    parser.add_argument(
        "--static-dir",
        default=DEFAULT_STATIC_DIR,
        help="Directory served as-is; holds img/{ID}.jpg (default: output)"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only warnings and errors")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_storefront_config(args.config, sheet_csv_url=args.url)
        if not args.csv_file and not config.sheet_csv_url:
            raise ValueError("No sheet CSV URL configured (use --url or the config file)")
    except (FileNotFoundError, ValueError) as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    fetch = partial(read_local_sheet, args.csv_file) if args.csv_file else None

    renderer = HtmlGridRenderer(config)
    storefront = Storefront(config, renderer, fetch=fetch)
    storefront.load()

    server = create_server(
        storefront,
        renderer,
        host=args.host,
        port=args.port,
        static_dir=args.static_dir,
    )
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nStopping server")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()

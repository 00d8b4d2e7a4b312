"""
Storefront Loader

Orchestrates one load cycle: fetch the sheet, parse the CSV, normalize the
rows, fill the category control and render the initial grid. Afterwards
apply_filters() re-renders the loaded products whenever a control changes,
without touching the network again.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..catalog.categories import category_options, extract_categories
from ..catalog.filtering import apply_filters
from ..catalog.normalizer import normalize_rows
from ..common.csv_utils import parse_csv_text
from ..models import FilterState, ProductRow, StorefrontConfig
from ..rendering.renderer import ProductRenderer
from .client import SheetClient, SheetFetchError

logger = logging.getLogger(__name__)


class Storefront:
    """
    Loaded storefront state bound to a renderer.

    Usage:
        storefront = Storefront(config, HtmlGridRenderer(config))
        if storefront.load():
            storefront.apply_filters(FilterState(query="kaffe"))
    """

    def __init__(
        self,
        config: StorefrontConfig,
        renderer: ProductRenderer,
        fetch: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize the storefront.

        Args:
            config: Storefront settings
            renderer: Where products, categories and errors are rendered
            fetch: Zero-argument callable returning the CSV text
                   (default: download config.sheet_csv_url)
        """
        self.config = config
        self.renderer = renderer
        self._fetch = fetch or self._fetch_from_sheet
        self._products: Tuple[ProductRow, ...] = ()
        self.categories: List[str] = []
        self.loaded = False

    @property
    def products(self) -> Tuple[ProductRow, ...]:
        """All products of the last successful load, in sheet order."""
        return self._products

    def _fetch_from_sheet(self) -> str:
        with SheetClient(self.config.sheet_csv_url, timeout=self.config.request_timeout) as client:
            return client.fetch_csv()

    def load(self, state: Optional[FilterState] = None) -> bool:
        """
        Run fetch, parse, normalize and the initial render.

        Args:
            state: Initial control values (default: no filters)

        Returns:
            True on success, False if the sheet could not be fetched
            (the grid then shows the configured error message)
        """
        try:
            csv_text = self._fetch()
        except SheetFetchError as e:
            logger.error("Could not load products: %s", e)
            self.renderer.show_error(self.config.error_message)
            return False

        rows = parse_csv_text(csv_text)
        self._products = tuple(normalize_rows(rows))
        self.loaded = True
        logger.info("Loaded %d products from %d rows", len(self._products), len(rows))

        self.categories = extract_categories(self._products)
        self.renderer.populate_categories(
            category_options(self.categories, self.config.all_categories_label)
        )

        self.apply_filters(state or FilterState())
        return True

    def apply_filters(self, state: FilterState) -> List[ProductRow]:
        """
        Re-render the loaded products for new control values.

        Returns:
            The products that were rendered, in display order
        """
        items = apply_filters(self._products, state)
        self.renderer.render(items)
        return items

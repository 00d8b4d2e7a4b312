"""
Filter/Sort Engine

Applies the storefront controls (search text, category, sort order)
to the loaded product list.
"""

import logging
from typing import Iterable, List

from ..common.constants import (
    SORT_ALIASES,
    SORT_NAME_ASC,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
)
from ..common.danish_locale import danish_sort_key
from ..models import FilterState, ProductRow

logger = logging.getLogger(__name__)


def normalize_sort_key(sort: str) -> str:
    """Map Danish sort aliases ("pris-asc") onto the canonical keys."""
    sort = (sort or '').strip()
    return SORT_ALIASES.get(sort, sort)


def matches_query(product: ProductRow, query: str) -> bool:
    """Case-insensitive substring match on name, category or ID."""
    return any(
        query in field.lower()
        for field in (product.name, product.category, product.id)
        if field
    )


def sort_products(items: List[ProductRow], sort: str) -> None:
    """
    Sort items in place.

    Unknown or empty sort keys leave the order unchanged. Sorting is stable,
    so equal names or prices keep their sheet order.
    """
    sort = normalize_sort_key(sort)

    if sort == SORT_NAME_ASC:
        items.sort(key=lambda p: danish_sort_key(p.name))
    elif sort == SORT_PRICE_ASC:
        items.sort(key=lambda p: p.effective_price)
    elif sort == SORT_PRICE_DESC:
        items.sort(key=lambda p: p.effective_price, reverse=True)
    elif sort:
        logger.debug("Ignoring unknown sort key: %s", sort)


def apply_filters(products: Iterable[ProductRow], state: FilterState) -> List[ProductRow]:
    """
    Products to show for the given control values.

    Hidden and sold-out products never appear. The input is not modified.

    Args:
        products: All loaded products, in sheet order
        state: Current control values

    Returns:
        New list of products to render
    """
    items = [p for p in products if p.is_listed]

    query = (state.query or '').strip().lower()
    if query:
        items = [p for p in items if matches_query(p, query)]

    if state.category:
        items = [p for p in items if p.category == state.category]

    sort_products(items, state.sort)
    return items

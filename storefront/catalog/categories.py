"""
Category Extractor

Builds the category list offered in the storefront's category select.
"""

from typing import Iterable, List, Tuple

from ..common.danish_locale import danish_sort_key
from ..models import ProductRow

ALL_CATEGORIES_LABEL = "Alle kategorier"


def extract_categories(products: Iterable[ProductRow]) -> List[str]:
    """
    Distinct categories of listed products, in Danish alphabetical order.

    Only products that are shown and in stock count, so a category whose
    products are all hidden or sold out is not offered.

    Args:
        products: Normalized products

    Returns:
        Sorted, non-empty category names
    """
    categories = {p.category for p in products if p.is_listed and p.category}
    return sorted(categories, key=danish_sort_key)


def category_options(
    categories: Iterable[str],
    all_label: str = ALL_CATEGORIES_LABEL,
) -> List[Tuple[str, str]]:
    """
    Select options for the category control.

    Returns:
        (value, label) pairs, starting with the empty "all categories" option

    Example:
        >>> category_options(["Kaffe", "Te"])
        [('', 'Alle kategorier'), ('Kaffe', 'Kaffe'), ('Te', 'Te')]
    """
    return [('', all_label)] + [(c, c) for c in categories]

"""
Catalog logic over normalized spreadsheet rows.

Modules:
    normalizer - Number parsing and row normalization (ProductRow)
    categories - Category list for the category control
    filtering  - Search, category filter and sort order
"""

from .categories import category_options, extract_categories
from .filtering import apply_filters, sort_products
from .normalizer import normalize_row, normalize_rows, to_number

__all__ = [
    'to_number',
    'normalize_row',
    'normalize_rows',
    'extract_categories',
    'category_options',
    'apply_filters',
    'sort_products',
]

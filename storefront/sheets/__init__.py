"""
Spreadsheet source and loading.

Modules:
    client - SheetClient for the published CSV export
    loader - Storefront: fetch, normalize, render and re-filter
"""

from .client import SheetClient, SheetFetchError, read_local_sheet
from .loader import Storefront

__all__ = ['SheetClient', 'SheetFetchError', 'Storefront', 'read_local_sheet']

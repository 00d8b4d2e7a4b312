"""
Data models for the storefront.

This module contains pure data classes with no business logic.
"""

from .filters import FilterState
from .product import ProductRow
from .settings import StorefrontConfig, build_placeholder_image

__all__ = ['ProductRow', 'FilterState', 'StorefrontConfig', 'build_placeholder_image']

"""
Rendering modules.

Modules:
    sanitizer - Allow-list HTML sanitizer for descriptions
    renderer  - ProductRenderer protocol and the HTML grid renderer
"""

from .renderer import HtmlGridRenderer, PAGE_TEMPLATE, ProductRenderer
from .sanitizer import ALLOWED_TAGS, is_safe_href, sanitize_html

__all__ = [
    'ProductRenderer',
    'HtmlGridRenderer',
    'PAGE_TEMPLATE',
    'sanitize_html',
    'is_safe_href',
    'ALLOWED_TAGS',
]

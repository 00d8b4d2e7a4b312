"""
Storefront configuration model.

Explicit settings handed to the loader and renderer at startup.
"""

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote

PLACEHOLDER_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="300">'
    '<rect width="100%" height="100%" fill="#e5e7eb"/>'
    '<text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" '
    'fill="#6b7280" font-size="16">{caption}</text></svg>'
)


def build_placeholder_image(caption: str = "Intet billede") -> str:
    """
    Build the inline SVG shown when a product image fails to load.

    Args:
        caption: Text drawn in the middle of the placeholder

    Returns:
        data: URI with the URL-encoded SVG
    """
    svg = PLACEHOLDER_SVG.format(caption=caption)
    return "data:image/svg+xml;utf8," + quote(svg, safe="-_.!~*'()")


@dataclass
class StorefrontConfig:
    """Settings for one storefront."""
    sheet_csv_url: str = ""
    image_base: str = "img"                 # images live at {image_base}/{ID}.jpg
    placeholder_image: str = field(default_factory=build_placeholder_image)
    request_timeout: Optional[float] = None  # None waits for the sheet indefinitely
    page_title: str = "Produkter"
    all_categories_label: str = "Alle kategorier"
    error_message: str = (
        "Kunne ikke hente data. Tjek at arket er publiceret som CSV "
        "og at SHEET_CSV_URL er korrekt."
    )

    def image_url(self, product_id: str) -> str:
        """Conventional image location for a product."""
        base = self.image_base.rstrip("/")
        return f"{base}/{quote(product_id)}.jpg"

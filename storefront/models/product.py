"""
Product data models.

Pure data classes for representing normalized spreadsheet rows.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductRow:
    """
    One product, normalized from a spreadsheet row.

    Instances are built once per load and never mutated.

    Field Groups:
    - Identity: id, name, category
    - Pricing: base price (ex moms), current price (inkl. moms), derived
      normal price and offer flag
    - Listing: stock count and the "Vist" visibility flag
    - Content: sanitized description markup
    """

    # Identity
    id: str
    name: str = ""
    category: str = ""

    # Pricing
    base_price: float = 0.0         # "Basispris", ex moms
    current_price: float = 0.0      # "Pris i alt", inkl. moms
    normal_price: float = 0.0       # base_price incl. moms, or current_price
    is_on_offer: bool = False

    # Listing
    stock_count: float = 0.0        # "Antal"
    visible: bool = True            # "Vist"

    # Content (sanitized HTML)
    description_html: str = ""
    short_description_html: str = ""

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.id:
            raise ValueError("Product ID is required")

    @property
    def effective_price(self) -> float:
        """Price shown to the customer: the current price, else the normal price."""
        return self.current_price or self.normal_price

    @property
    def is_listed(self) -> bool:
        """True when the product may appear in the grid at all."""
        return self.visible and self.stock_count > 0

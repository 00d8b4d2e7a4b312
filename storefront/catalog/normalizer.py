"""
Row Normalizer

Turns raw spreadsheet rows into ProductRow records:
- Danish numbers ("12,50", "1.234,50") parsed to floats, invalid input is 0
- Normal price derived from the base price plus moms
- Offer detection with a rounding tolerance
- "Vist" visibility flag (empty or 1 means shown)
- Descriptions sanitized to allow-listed HTML
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List, Mapping, Optional

from ..common.constants import (
    COL_BASE_PRICE,
    COL_CATEGORY,
    COL_DESCRIPTION,
    COL_ID,
    COL_NAME,
    COL_QUANTITY,
    COL_SHORT_DESCRIPTION,
    COL_SHOWN,
    COL_TOTAL_PRICE,
    OFFER_TOLERANCE,
    VAT_MULTIPLIER,
)
from ..common.text_utils import clean_cell, strip_trailing_period
from ..models import ProductRow
from ..rendering.sanitizer import sanitize_html

logger = logging.getLogger(__name__)

# Leading float literal, the part parseFloat-style parsing accepts
_FLOAT_PREFIX = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def to_number(value) -> float:
    """
    Parse a Danish-formatted number, never raising.

    When the text has a comma, dots are thousands separators and the comma
    is the decimal point. Trailing text after the number is ignored.

    Args:
        value: Cell value (str, int, float or None)

    Returns:
        Parsed number, 0 for None or unparseable input

    Example:
        >>> to_number("12,50")
        12.5
        >>> to_number("1.234,50")
        1234.5
        >>> to_number("abc")
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    text = str(value).strip()
    if ',' in text:
        text = text.replace('.', '').replace(',', '.', 1)

    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0

    try:
        number = float(match.group(0))
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def is_shown(value) -> bool:
    """An empty "Vist" cell means shown, otherwise the value must be 1."""
    text = clean_cell(value)
    if text == '':
        return True
    return to_number(text) == 1


def normal_price_for(base_price: float, current_price: float) -> float:
    """Base price plus moms, falling back to the current price (never negative)."""
    if base_price > 0:
        return base_price * VAT_MULTIPLIER
    return max(current_price, 0.0)


def is_offer(current_price: float, normal_price: float) -> bool:
    """True when the current price is meaningfully below the normal price."""
    return (
        current_price > 0
        and normal_price > 0
        and current_price < normal_price - OFFER_TOLERANCE
    )


def normalize_row(row: Mapping[str, Optional[str]]) -> Optional[ProductRow]:
    """
    Normalize one spreadsheet row.

    Args:
        row: Mapping of column header to raw cell value

    Returns:
        ProductRow, or None if the row has no ID
    """
    product_id = clean_cell(row.get(COL_ID))
    if not product_id:
        logger.warning("Skipping row without %s: %s", COL_ID, dict(row))
        return None

    base_price = to_number(row.get(COL_BASE_PRICE))
    current_price = to_number(row.get(COL_TOTAL_PRICE))
    normal_price = normal_price_for(base_price, current_price)

    short_raw = clean_cell(row.get(COL_SHORT_DESCRIPTION))
    # The long column wins whenever it has any text, even if nothing survives sanitizing
    description_raw = clean_cell(row.get(COL_DESCRIPTION)) or short_raw

    return ProductRow(
        id=product_id,
        name=clean_cell(row.get(COL_NAME)),
        category=strip_trailing_period(clean_cell(row.get(COL_CATEGORY))),
        base_price=base_price,
        current_price=current_price,
        normal_price=normal_price,
        is_on_offer=is_offer(current_price, normal_price),
        stock_count=to_number(row.get(COL_QUANTITY)),
        visible=is_shown(row.get(COL_SHOWN)),
        description_html=sanitize_html(description_raw),
        short_description_html=sanitize_html(short_raw),
    )


def normalize_rows(rows: Iterable[Mapping[str, Optional[str]]]) -> List[ProductRow]:
    """
    Normalize all rows, dropping those without an ID.

    Args:
        rows: Parsed CSV rows in sheet order

    Returns:
        Products in sheet order
    """
    products = []
    total = 0
    for row in rows:
        total += 1
        product = normalize_row(row)
        if product is not None:
            products.append(product)

    logger.debug("Normalized %d of %d rows (%d skipped)",
                 len(products), total, total - len(products))
    return products

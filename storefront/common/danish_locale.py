"""
Danish Locale Utilities

Danish alphabetical ordering and DKK price formatting for the storefront.
Danish sorts æ, ø and å after z, and treats "aa" as å.
"""

import math
import unicodedata

# Letters placed after z, in Danish alphabet order. Private use code points
# keep them above every Latin letter and apart from real punctuation.
DANISH_LETTER_MAP = {
    'æ': '\uE000', 'ä': '\uE000',
    'ø': '\uE001', 'ö': '\uE001',
    'å': '\uE002',
    'ü': 'y',
}

NBSP = '\xa0'
CURRENCY_SUFFIX = 'kr.'


def _primary_letters(text: str) -> str:
    """Map text to its primary collation letters (case and accents ignored)."""
    lowered = text.lower().replace('aa', 'å')

    result = []
    for char in lowered:
        if char in DANISH_LETTER_MAP:
            result.append(DANISH_LETTER_MAP[char])
            continue
        for part in unicodedata.normalize('NFD', char):
            if unicodedata.category(part) != 'Mn':
                result.append(part)
    return ''.join(result)


def danish_sort_key(text: str) -> tuple:
    """
    Sort key ordering strings the way Danish collation does.

    Primary order ignores case and accents, ties are broken by accents and
    then by case (uppercase first).

    Example:
        >>> sorted(["Øl", "Aalborg", "Zebra", "Æble"], key=danish_sort_key)
        ['Zebra', 'Æble', 'Øl', 'Aalborg']
    """
    text = text or ''
    return (_primary_letters(text), text.lower(), text)


def format_dkk(amount) -> str:
    """
    Format an amount as Danish kroner.

    Args:
        amount: Number to format

    Returns:
        Text like "1.234,50 kr." (non-breaking space before the currency),
        empty string for None or NaN

    Example:
        >>> format_dkk(125)
        '125,00\\xa0kr.'
    """
    if amount is None or isinstance(amount, bool):
        return ''
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return ''
    if math.isnan(value) or math.isinf(value):
        return ''

    rounded = round(value, 2)
    digits = f"{abs(rounded):,.2f}"
    # Swap en-US separators for Danish ones
    digits = digits.replace(',', '_').replace('.', ',').replace('_', '.')
    sign = '-' if rounded < 0 else ''
    return f"{sign}{digits}{NBSP}{CURRENCY_SUFFIX}"


def format_quantity(quantity: float) -> str:
    """
    Format a stock quantity without a trailing ".0".

    Example:
        >>> format_quantity(3.0)
        '3'
        >>> format_quantity(2.5)
        '2.5'
    """
    if float(quantity).is_integer():
        return str(int(quantity))
    return str(float(quantity))

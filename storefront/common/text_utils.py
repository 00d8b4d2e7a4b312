"""
Text Utilities

Helper functions for cleaning spreadsheet cells.
"""

import re

_TRAILING_PERIOD = re.compile(r'\.$')


def clean_cell(value) -> str:
    """
    Return a cell value as a trimmed string.

    Args:
        value: Raw cell value (None for cells missing from a short row)

    Returns:
        Trimmed text, empty string for None
    """
    if value is None:
        return ''
    return str(value).strip()


def strip_trailing_period(text: str) -> str:
    """
    Remove a single trailing period.

    Example:
        >>> strip_trailing_period("Kaffe.")
        'Kaffe'
    """
    if not text:
        return text
    return _TRAILING_PERIOD.sub('', text)

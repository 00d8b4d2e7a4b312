"""
CSV Utilities

Common functions for parsing spreadsheet CSV exports into rows keyed by
the header row. Handles large description fields and BOM-prefixed exports.
"""

import csv
import io
from pathlib import Path
from typing import Dict, Iterator, List


def configure_csv(field_size_limit: int = 10 * 1024 * 1024) -> None:
    """
    Configure CSV module for large fields.

    Args:
        field_size_limit: Maximum field size in bytes (default: 10MB)
    """
    csv.field_size_limit(field_size_limit)


def iter_csv_rows(text: str) -> Iterator[Dict[str, str]]:
    """
    Parse CSV text and yield rows as dictionaries.

    The first line is the header. Blank lines are skipped. Rows shorter than
    the header get None for the missing columns.

    Args:
        text: CSV document as text

    Yields:
        Dictionary for each row with column names as keys
    """
    if text.startswith('\ufeff'):
        text = text[1:]

    reader = csv.DictReader(io.StringIO(text, newline=''))
    for row in reader:
        yield row


def parse_csv_text(text: str) -> List[Dict[str, str]]:
    """Parse a whole CSV document into a list of row dictionaries."""
    return list(iter_csv_rows(text))


def read_csv_file(file_path: str | Path, encoding: str = 'utf-8-sig') -> str:
    """
    Read a local CSV export as text.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8-sig, tolerates a BOM)

    Returns:
        File content
    """
    with open(file_path, 'r', encoding=encoding, newline='') as f:
        return f.read()


# Initialize CSV configuration on module import
configure_csv()

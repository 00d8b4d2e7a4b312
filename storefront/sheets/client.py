"""
Spreadsheet CSV Client

Fetches a spreadsheet published as CSV (e.g. Google Sheets
"Publish to web"). One unauthenticated GET, no caching, no retry.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from ..common.csv_utils import read_csv_file

logger = logging.getLogger(__name__)


class SheetFetchError(Exception):
    """The published sheet could not be fetched."""


class SheetClient:
    """
    Client for a published spreadsheet CSV export.

    Usage:
        with SheetClient(url) as client:
            csv_text = client.fetch_csv()
    """

    NO_CACHE_HEADERS = {
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            url: Published CSV URL
            timeout: Request timeout in seconds (None waits indefinitely)
            session: Optional shared requests session
        """
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def fetch_csv(self) -> str:
        """
        Download the sheet as CSV text.

        Returns:
            CSV document decoded as UTF-8

        Raises:
            SheetFetchError: On network failure or a non-success status
        """
        if not self.url:
            raise SheetFetchError("No sheet CSV URL configured")

        logger.info("Fetching sheet CSV from %s", self.url)
        try:
            response = self.session.get(
                self.url,
                headers=self.NO_CACHE_HEADERS,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise SheetFetchError(f"Request failed: {e}") from e

        if not response.ok:
            raise SheetFetchError(
                f"Kunne ikke hente CSV fra Google Sheets (HTTP {response.status_code})."
            )

        text = response.content.decode("utf-8-sig", errors="replace")
        logger.debug("Fetched %d bytes of CSV", len(response.content))
        return text


def read_local_sheet(path: str | Path) -> str:
    """
    Read a CSV export saved on disk, for working without the published sheet.

    Raises:
        SheetFetchError: If the file cannot be read or is not UTF-8
    """
    logger.info("Reading sheet CSV from %s", path)
    try:
        return read_csv_file(path)
    except (OSError, UnicodeDecodeError) as e:
        raise SheetFetchError(f"Could not read {path}: {e}") from e

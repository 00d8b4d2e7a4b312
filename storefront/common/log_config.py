"""
Logging Configuration

Configures logging for the storefront scripts.
Log records go to stderr; stdout only carries the build summary line.
"""

import logging
import sys


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger("storefront")
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

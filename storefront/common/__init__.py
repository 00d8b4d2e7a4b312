# Common utilities
from .config_loader import (
    build_storefront_config,
    load_config,
    load_storefront_config,
)
from .csv_utils import configure_csv, parse_csv_text, read_csv_file
from .danish_locale import danish_sort_key, format_dkk, format_quantity
from .log_config import setup_logging
from .text_utils import clean_cell, strip_trailing_period

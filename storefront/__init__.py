"""
Sheet Storefront

Renders a filterable product grid from a spreadsheet published as CSV.

Modules:
    models     - Data models (ProductRow, FilterState, StorefrontConfig)
    common     - Shared utilities (config loader, logging, CSV, Danish locale)
    catalog    - Row normalization, category extraction, filtering and sorting
    rendering  - HTML sanitizer and product grid renderer
    sheets     - Spreadsheet CSV client and the storefront loader
    server     - Local HTTP server for the interactive grid
"""

"""
Shared constants for the storefront.

Column names of the spreadsheet and the pricing rules applied to them.
"""

# Spreadsheet columns (header row of the published CSV)
COL_ID = 'ID'
COL_NAME = 'Navn'
COL_CATEGORY = 'Kategori'
COL_BASE_PRICE = 'Basispris'         # ex moms
COL_TOTAL_PRICE = 'Pris i alt'       # inkl. moms
COL_QUANTITY = 'Antal'
COL_SHOWN = 'Vist'
COL_SHORT_DESCRIPTION = 'Kort beskrivelse'
COL_DESCRIPTION = 'Beskrivelse'

SHEET_COLUMNS = [
    COL_ID, COL_NAME, COL_CATEGORY, COL_BASE_PRICE, COL_TOTAL_PRICE,
    COL_QUANTITY, COL_SHOWN, COL_SHORT_DESCRIPTION, COL_DESCRIPTION,
]

# Danish VAT (moms) is 25%, applied to the base price to get the normal price
VAT_MULTIPLIER = 1.25

# A current price must undercut the normal price by more than this to count
# as an offer, so rounding in the sheet does not flag every product
OFFER_TOLERANCE = 0.49

# Sort keys understood by the filter engine
SORT_NAME_ASC = 'name-asc'
SORT_PRICE_ASC = 'price-asc'
SORT_PRICE_DESC = 'price-desc'

SORT_ALIASES = {
    'navn-asc': SORT_NAME_ASC,
    'pris-asc': SORT_PRICE_ASC,
    'pris-desc': SORT_PRICE_DESC,
}

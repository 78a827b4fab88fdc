"""Default configuration values."""

# Default warehouse priority (can be modified in UI).
# Empty means "use the order of the inventory file columns".
DEFAULT_WAREHOUSE_PRIORITY: list[str] = []

# Default excluded warehouses
DEFAULT_EXCLUDED_WAREHOUSES: list[str] = []

# Spell checking: language of the bundled pyspellchecker dictionary
DEFAULT_DICTIONARY_LANGUAGE = "en"

# Column names (fixed input format)
# Order file: long format, one row per requested item
# Inventory file: wide format, item column + one column per warehouse
ITEM_COLUMN = "item"
QUANTITY_COLUMN = "quantity"
WAREHOUSE_COLUMN = "warehouse"

ORDER_REQUIRED_COLUMNS = [ITEM_COLUMN, QUANTITY_COLUMN]
INVENTORY_REQUIRED_COLUMNS = [ITEM_COLUMN]

# Maximum rows scanned when looking for the header row
MAX_HEADER_SEARCH_ROWS = 20

# Output columns for the shipment sheet
OUTPUT_COLUMNS = [
    WAREHOUSE_COLUMN,
    ITEM_COLUMN,
    QUANTITY_COLUMN,
]

# Output directory for the command-line script
OUTPUT_DIR = "output"

# Validation error messages
NULL_INPUT_MESSAGE = "Inputs is null or undefined"
NOT_AN_OBJECT_MESSAGE = "Inputs is not of type object"
INVALID_FORMAT_MESSAGE = "Inputs format is invalid"

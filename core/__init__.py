"""Core module for order allocation logic."""

from .errors import (
    AllocationInputError,
    NullInputError,
    NotAnObjectError,
    InvalidFormatError,
)
from .models import (
    ShipmentLine,
    ShipmentPlan,
    ShipmentExport,
    ItemAvailability,
    AllocationConfig,
    merge_warehouse_priority,
)
from .spelling import (
    SpellingDictionary,
    PySpellCheckerDictionary,
    WordListDictionary,
    build_dictionary,
)
from .validator import InputValidator, is_valid_quantity
from .allocator import (
    InventoryAllocator,
    remove_zero_requested_items,
    is_inventory_available,
    is_order_complete,
    summarize_availability,
)
from .file_loader import (
    find_header_row,
    load_excel_with_header,
    load_table,
    validate_required_columns,
    get_quantity_value,
    order_from_dataframe,
    warehouses_from_dataframe,
)
from .exporter import (
    shipment_to_dataframe,
    remaining_inventory,
    generate_shipment_export,
)

__all__ = [
    # Errors
    "AllocationInputError",
    "NullInputError",
    "NotAnObjectError",
    "InvalidFormatError",
    # Models
    "ShipmentLine",
    "ShipmentPlan",
    "ShipmentExport",
    "ItemAvailability",
    "AllocationConfig",
    "merge_warehouse_priority",
    # Spelling
    "SpellingDictionary",
    "PySpellCheckerDictionary",
    "WordListDictionary",
    "build_dictionary",
    # Validation
    "InputValidator",
    "is_valid_quantity",
    # Allocation
    "InventoryAllocator",
    "remove_zero_requested_items",
    "is_inventory_available",
    "is_order_complete",
    "summarize_availability",
    # File loader
    "find_header_row",
    "load_excel_with_header",
    "load_table",
    "validate_required_columns",
    "get_quantity_value",
    "order_from_dataframe",
    "warehouses_from_dataframe",
    # Export
    "shipment_to_dataframe",
    "remaining_inventory",
    "generate_shipment_export",
]

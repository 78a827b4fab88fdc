#!/usr/bin/env python3
"""
Compute the cheapest shipment for an order from an inventory table

- Order file: columns "item", "quantity"
- Inventory file: column "item" plus one column per warehouse
  (column order = warehouse priority, leftmost is used first)
- Writes the shipment and the remaining inventory to an Excel file
"""

import logging
import sys
from pathlib import Path

from core import (
    AllocationConfig,
    AllocationInputError,
    InventoryAllocator,
    generate_shipment_export,
    load_table,
    order_from_dataframe,
    validate_required_columns,
    warehouses_from_dataframe,
)
from core.config import (
    INVENTORY_REQUIRED_COLUMNS,
    ORDER_REQUIRED_COLUMNS,
    OUTPUT_DIR,
)


def load_inputs(order_file: str, inventory_file: str) -> tuple[dict, list[dict]]:
    """Load order and warehouses, exiting with a message on bad files."""
    tables = {}
    for label, path, required in (
        ("order", order_file, ORDER_REQUIRED_COLUMNS),
        ("inventory", inventory_file, INVENTORY_REQUIRED_COLUMNS),
    ):
        print(f"Loading {label} from {path}...")
        df, error = load_table(path)
        if error:
            print(f"Error: {error}")
            sys.exit(1)

        is_valid, missing = validate_required_columns(df, required)
        if not is_valid:
            print(f"Error: {label} file is missing columns: {', '.join(missing)}")
            sys.exit(1)
        tables[label] = df

    return order_from_dataframe(tables["order"]), warehouses_from_dataframe(tables["inventory"])


def allocate(order_file: str, inventory_file: str, word_list: str | None = None):
    """
    Main allocation function

    Args:
        order_file: Path to order file (.xlsx or .csv)
        inventory_file: Path to inventory file (.xlsx or .csv)
        word_list: Optional word list used instead of the English dictionary
    """
    order, warehouses = load_inputs(order_file, inventory_file)
    print(f"Order items: {len(order)}")
    print(f"Warehouses: {len(warehouses)}")

    allocator = InventoryAllocator(config=AllocationConfig(word_list_path=word_list))
    try:
        plan = allocator.compute_plan(order, warehouses)
    except AllocationInputError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if plan.is_empty:
        print("\nOrder cannot be shipped.")
        for availability in plan.shortfalls:
            print(
                f"  {availability.item}: requested {availability.requested}, "
                f"available {availability.available} (missing {availability.shortfall})"
            )
        return None

    print("\n=== Shipment ===")
    for entry in plan.shipments:
        for warehouse, items in entry.items():
            print(f"  {warehouse}:")
            for item, quantity in items.items():
                print(f"    └─ {item}: {quantity}")

    output_path = Path(OUTPUT_DIR)
    output_path.mkdir(exist_ok=True)

    export = generate_shipment_export(plan.shipments, warehouses)
    filepath = output_path / export.filename
    filepath.write_bytes(export.data)

    print(f"\n=== Summary ===")
    print(f"Warehouses used: {plan.warehouse_count}")
    print(f"Total units shipped: {plan.total_quantity}")
    print(f"Created: {filepath}")

    return filepath


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if a not in ("-v", "--verbose")]
    verbose = len(args) < len(sys.argv) - 1
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args) < 2:
        print("Usage: python allocate_order.py <order_file> <inventory_file> [word_list.txt] [-v]")
        print("  order_file     = table with 'item' and 'quantity' columns")
        print("  inventory_file = table with 'item' and one column per warehouse")
        print("  word_list.txt  = item names allowed instead of the English dictionary")
        sys.exit(1)

    allocate(args[0], args[1], args[2] if len(args) > 2 else None)

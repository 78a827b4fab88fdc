"""Shipment export - builds tables and an Excel workbook from a shipment."""

import io
from datetime import datetime
from typing import Optional

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils.dataframe import dataframe_to_rows

from .config import ITEM_COLUMN, OUTPUT_COLUMNS, QUANTITY_COLUMN, WAREHOUSE_COLUMN
from .models import Shipment, ShipmentExport, ShipmentPlan

HEADER_FILL = PatternFill("solid", fgColor="FFFF00")


def shipment_to_dataframe(shipments: list[Shipment]) -> pd.DataFrame:
    """One row per (warehouse, item) in shipment order."""
    lines = ShipmentPlan(shipments=shipments).lines
    return pd.DataFrame(
        {
            WAREHOUSE_COLUMN: [line.warehouse for line in lines],
            ITEM_COLUMN: [line.item for line in lines],
            QUANTITY_COLUMN: [line.quantity for line in lines],
        },
        columns=OUTPUT_COLUMNS,
    )


def remaining_inventory(warehouses: list[dict], shipments: list[Shipment]) -> pd.DataFrame:
    """
    Inventory left in each warehouse after shipping.

    The result has the same wide layout as the inventory input (item column
    plus one column per warehouse), so it can be used as input for the next
    order. Neither argument is modified.

    Warehouses sharing a name are matched to shipment entries in order.
    """
    shipped_by_position: list[dict] = [{} for _ in warehouses]
    next_start = 0
    for entry in shipments:
        for name, items in entry.items():
            for pos in range(next_start, len(warehouses)):
                if warehouses[pos]["name"] == name:
                    shipped_by_position[pos] = items
                    next_start = pos + 1
                    break

    items: list[str] = []
    for warehouse in warehouses:
        for item in warehouse["inventory"]:
            if item not in items:
                items.append(item)

    data = {ITEM_COLUMN: items}
    for warehouse, shipped in zip(warehouses, shipped_by_position):
        column = []
        for item in items:
            if item in warehouse["inventory"]:
                column.append(warehouse["inventory"][item] - shipped.get(item, 0))
            else:
                column.append(None)
        data[warehouse["name"]] = column

    # Duplicate warehouse names collapse to one column; keep the last
    return pd.DataFrame(data, dtype=object)


def _write_sheet(ws, df: pd.DataFrame) -> None:
    for row in dataframe_to_rows(df, index=False, header=True):
        # openpyxl cannot store NaN, blank cells stay empty
        ws.append([None if not isinstance(v, str) and pd.isna(v) else v for v in row])
    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL
    for col_idx, column in enumerate(df.columns, 1):
        width = max([len(str(column))] + [len(str(v)) for v in df[column]]) + 2
        ws.column_dimensions[ws.cell(row=1, column=col_idx).column_letter].width = width


def generate_shipment_export(
    shipments: list[Shipment],
    warehouses: list[dict],
    timestamp: Optional[datetime] = None
) -> ShipmentExport:
    """
    Generate ShipmentExport with the shipment and remaining inventory.

    Args:
        shipments: Result of compute_cheapest_shipment
        warehouses: Warehouses the shipment was computed from
        timestamp: Used in the filename (defaults to now)

    Returns:
        ShipmentExport with Excel bytes and summary numbers
    """
    wb = Workbook()
    ws_shipment = wb.active
    ws_shipment.title = "Shipment"
    _write_sheet(ws_shipment, shipment_to_dataframe(shipments))

    ws_remaining = wb.create_sheet("Remaining")
    _write_sheet(ws_remaining, remaining_inventory(warehouses, shipments))

    output = io.BytesIO()
    wb.save(output)

    plan = ShipmentPlan(shipments=shipments)
    timestamp = timestamp or datetime.now()
    return ShipmentExport(
        filename=f"shipment_{timestamp.strftime('%Y%m%d_%H%M%S')}.xlsx",
        data=output.getvalue(),
        warehouse_count=plan.warehouse_count,
        total_quantity=plan.total_quantity,
    )

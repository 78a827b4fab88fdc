"""Excel/CSV loading utilities.

This module provides functions for loading order and inventory tables and
turning them into the plain mappings the allocator works on.
It is UI-agnostic and can be used by both Streamlit and CLI applications.
"""

import numbers
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd

from .config import (
    ITEM_COLUMN,
    QUANTITY_COLUMN,
    MAX_HEADER_SEARCH_ROWS,
)


def find_header_row(file: BinaryIO, max_rows: int = MAX_HEADER_SEARCH_ROWS) -> tuple[int | None, str | None]:
    """Automatically find the header row by searching for the item column.

    Args:
        file: File-like object (uploaded file or opened file)
        max_rows: Maximum rows to search

    Returns:
        Tuple of (header_row_index, error_message)
        If found: (row_index, None)
        If not found: (None, error_message)
    """
    try:
        # Read first max_rows without header
        preview_df = pd.read_excel(file, header=None, nrows=max_rows)

        for idx, row in preview_df.iterrows():
            row_values = [str(v).strip() for v in row.values if pd.notna(v)]
            if ITEM_COLUMN in row_values:
                # Reset file pointer for subsequent reads
                file.seek(0)
                return int(idx), None

        file.seek(0)
        return None, f"Header row with '{ITEM_COLUMN}' not found in first {max_rows} rows"

    except Exception as e:
        file.seek(0)
        return None, f"Error reading file: {e}"


def load_excel_with_header(
    file: BinaryIO,
    max_header_search_rows: int = MAX_HEADER_SEARCH_ROWS
) -> tuple[pd.DataFrame | None, int | None, str | None]:
    """Load Excel file with automatic header detection.

    Args:
        file: File-like object (uploaded file or opened file)
        max_header_search_rows: Maximum rows to search for header

    Returns:
        Tuple of (DataFrame, header_row_index, error_message)
        If successful: (df, header_row, None)
        If error: (None, None, error_message)
    """
    header_row, error = find_header_row(file, max_header_search_rows)

    if error:
        return None, None, error

    try:
        df = pd.read_excel(file, header=header_row)
        df.columns = [str(c).strip() for c in df.columns]
        file.seek(0)
        return df, header_row, None
    except Exception as e:
        file.seek(0)
        return None, None, f"Error reading file: {e}"


def load_table(
    file: Union[str, Path, BinaryIO],
    filename: str | None = None
) -> tuple[pd.DataFrame | None, str | None]:
    """Load an order or inventory table from CSV or Excel.

    Args:
        file: Path or file-like object
        filename: Name used to pick the format when file is file-like

    Returns:
        Tuple of (DataFrame, error_message)
    """
    if isinstance(file, (str, Path)):
        filename = str(file)
        try:
            with open(file, "rb") as f:
                return load_table(f, filename)
        except OSError as e:
            return None, f"Error reading file: {e}"

    name = (filename or getattr(file, "name", "") or "").lower()
    if name.endswith(".csv"):
        try:
            df = pd.read_csv(file)
            df.columns = [str(c).strip() for c in df.columns]
            return df, None
        except Exception as e:
            return None, f"Error reading file: {e}"

    df, _, error = load_excel_with_header(file)
    return df, error


def validate_required_columns(
    df: pd.DataFrame,
    required_columns: list[str]
) -> tuple[bool, list[str]]:
    """Validate that DataFrame has all required columns.

    Args:
        df: DataFrame to validate
        required_columns: List of required column names

    Returns:
        Tuple of (is_valid, list_of_missing_columns)
    """
    missing = [col for col in required_columns if col not in df.columns]
    return len(missing) == 0, missing


def get_quantity_value(val):
    """Convert a cell value to a quantity.

    Blank cells become None. Whole numbers become int. Anything else is
    returned as-is so that validation can reject it.
    """
    if val is None:
        return None
    if isinstance(val, str):
        if val.strip() == "":
            return None
        return val
    if pd.isna(val):
        return None
    if isinstance(val, numbers.Real) and not isinstance(val, bool) and float(val).is_integer():
        return int(val)
    return val


def _get_item_name(val) -> str | None:
    """Item name from a cell, stripped but with its casing untouched."""
    if val is None or (not isinstance(val, str) and pd.isna(val)):
        return None
    name = str(val).strip()
    return name or None


def order_from_dataframe(df: pd.DataFrame) -> dict:
    """
    Build an order mapping from a long-format table.

    Expects ITEM_COLUMN and QUANTITY_COLUMN. Rows without an item name are
    skipped; a blank quantity means the item is not requested (0). Repeated
    items are summed when both quantities are numbers.
    """
    order: dict = {}
    for _, row in df.iterrows():
        item = _get_item_name(row.get(ITEM_COLUMN))
        if item is None:
            continue

        quantity = get_quantity_value(row.get(QUANTITY_COLUMN))
        if quantity is None:
            quantity = 0

        if item in order and isinstance(order[item], int) and isinstance(quantity, int):
            order[item] += quantity
        else:
            order[item] = quantity
    return order


def warehouses_from_dataframe(df: pd.DataFrame) -> list[dict]:
    """
    Build the warehouse list from a wide-format inventory table.

    Every column except ITEM_COLUMN is a warehouse; column order is the
    warehouse priority. Blank cells are left out of that warehouse's
    inventory.
    """
    warehouse_columns = [c for c in df.columns if c != ITEM_COLUMN]
    warehouses = [{"name": str(col), "inventory": {}} for col in warehouse_columns]

    for _, row in df.iterrows():
        item = _get_item_name(row.get(ITEM_COLUMN))
        if item is None:
            continue
        for warehouse, col in zip(warehouses, warehouse_columns):
            quantity = get_quantity_value(row.get(col))
            if quantity is not None:
                warehouse["inventory"][item] = quantity

    return warehouses

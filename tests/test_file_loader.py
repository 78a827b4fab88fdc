"""Tests for loading order and inventory tables."""

import io

import numpy as np
import pandas as pd
import pytest
from openpyxl import Workbook

from core.file_loader import (
    find_header_row,
    load_excel_with_header,
    load_table,
    validate_required_columns,
    get_quantity_value,
    order_from_dataframe,
    warehouses_from_dataframe,
)
from tests.conftest import create_order_df, create_inventory_df


def make_excel(rows: list[list], leading_rows: int = 0) -> io.BytesIO:
    """Build an in-memory workbook, optionally with title rows above the header."""
    wb = Workbook()
    ws = wb.active
    for i in range(leading_rows):
        ws.append([f"Report line {i + 1}"])
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer


class TestGetQuantityValue:
    """Cell value conversion."""

    @pytest.mark.parametrize("value, expected", [
        (5, 5),
        (5.0, 5),
        (np.int64(3), 3),
        (np.float64(2.0), 2),
        (0, 0),
    ])
    def test_whole_numbers_become_int(self, value, expected):
        result = get_quantity_value(value)

        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize("value", [None, np.nan, "", "   "])
    def test_blank_cells_become_none(self, value):
        assert get_quantity_value(value) is None

    @pytest.mark.parametrize("value", ["five", 2.5, -1.5])
    def test_other_values_pass_through(self, value):
        assert get_quantity_value(value) == value


class TestOrderFromDataFrame:
    """Long-format order tables."""

    def test_basic_order(self):
        df = create_order_df([("apple", 5), ("banana", 3)])

        assert order_from_dataframe(df) == {"apple": 5, "banana": 3}

    def test_blank_quantity_means_not_requested(self):
        df = create_order_df([("apple", 5), ("banana", None)])

        assert order_from_dataframe(df) == {"apple": 5, "banana": 0}

    def test_rows_without_item_skipped(self):
        df = create_order_df([("apple", 5), (None, 3), ("  ", 2)])

        assert order_from_dataframe(df) == {"apple": 5}

    def test_item_names_not_recased(self):
        """Casing is left for validation to reject."""
        df = create_order_df([(" Apple ", 5)])

        assert order_from_dataframe(df) == {"Apple": 5}

    def test_repeated_items_summed(self):
        df = create_order_df([("apple", 5), ("apple", 2)])

        assert order_from_dataframe(df) == {"apple": 7}

    def test_text_quantity_kept_for_validation(self):
        df = create_order_df([("apple", "five")])

        assert order_from_dataframe(df) == {"apple": "five"}


class TestWarehousesFromDataFrame:
    """Wide-format inventory tables."""

    def test_columns_become_warehouses_in_order(self):
        df = create_inventory_df({
            "owd": {"apple": 5, "orange": 10},
            "dm": {"banana": 5, "orange": 10},
        })

        warehouses = warehouses_from_dataframe(df)

        assert warehouses == [
            {"name": "owd", "inventory": {"apple": 5, "orange": 10}},
            {"name": "dm", "inventory": {"orange": 10, "banana": 5}},
        ]

    def test_blank_cells_left_out(self):
        df = pd.DataFrame({"item": ["apple", "banana"], "owd": [None, 3]})

        assert warehouses_from_dataframe(df) == [{"name": "owd", "inventory": {"banana": 3}}]

    def test_zero_kept(self):
        df = pd.DataFrame({"item": ["apple"], "owd": [0]})

        assert warehouses_from_dataframe(df) == [{"name": "owd", "inventory": {"apple": 0}}]

    def test_warehouse_with_no_stock_has_empty_inventory(self):
        df = pd.DataFrame({"item": ["apple"], "owd": [2], "dm": [None]})

        warehouses = warehouses_from_dataframe(df)

        assert warehouses[1] == {"name": "dm", "inventory": {}}


class TestExcelLoading:
    """Header detection and table loading."""

    def test_find_header_row_after_title_rows(self):
        file = make_excel([["item", "quantity"], ["apple", 5]], leading_rows=3)

        header_row, error = find_header_row(file)

        assert error is None
        assert header_row == 3

    def test_find_header_row_missing(self):
        file = make_excel([["name", "qty"], ["apple", 5]])

        header_row, error = find_header_row(file)

        assert header_row is None
        assert "item" in error

    def test_load_excel_with_header(self):
        file = make_excel([["item", "quantity"], ["apple", 5], ["banana", 3]], leading_rows=2)

        df, header_row, error = load_excel_with_header(file)

        assert error is None
        assert header_row == 2
        assert list(df.columns) == ["item", "quantity"]
        assert order_from_dataframe(df) == {"apple": 5, "banana": 3}

    def test_load_table_csv(self):
        file = io.BytesIO(b"item,owd,dm\napple,5,\nbanana,,3\n")

        df, error = load_table(file, "inventory.csv")

        assert error is None
        assert warehouses_from_dataframe(df) == [
            {"name": "owd", "inventory": {"apple": 5}},
            {"name": "dm", "inventory": {"banana": 3}},
        ]

    def test_load_table_from_path(self, tmp_path):
        path = tmp_path / "order.csv"
        path.write_text("item,quantity\napple,2\n", encoding="utf-8")

        df, error = load_table(path)

        assert error is None
        assert order_from_dataframe(df) == {"apple": 2}

    def test_load_table_missing_file(self, tmp_path):
        df, error = load_table(tmp_path / "missing.xlsx")

        assert df is None
        assert error.startswith("Error reading file")


class TestValidateRequiredColumns:

    def test_all_present(self):
        df = create_order_df([("apple", 1)])

        assert validate_required_columns(df, ["item", "quantity"]) == (True, [])

    def test_missing_columns(self):
        df = pd.DataFrame({"item": ["apple"]})

        assert validate_required_columns(df, ["item", "quantity"]) == (False, ["quantity"])

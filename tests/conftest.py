"""Shared fixtures for inventory allocator tests."""

import pytest
import pandas as pd

from core.allocator import InventoryAllocator
from core.models import AllocationConfig
from core.spelling import WordListDictionary

# Item names the test dictionary accepts
FRUIT_WORDS = [
    "apple",
    "banana",
    "orange",
    "peach",
    "blueberry",
    "pear",
    "cherry",
    "pineapple",
    "watermelon",
    "raspberry",
    "plum",
    "melon",
    "kiwi",
    "grape",
    "strawberry",
]


@pytest.fixture
def dictionary():
    """In-memory dictionary with the fruit names used in tests."""
    return WordListDictionary(FRUIT_WORDS)


@pytest.fixture
def allocator(dictionary):
    """Allocator backed by the fruit dictionary."""
    return InventoryAllocator(dictionary=dictionary)


@pytest.fixture
def config():
    """Standard AllocationConfig for tests (no priority, no exclusions)."""
    return AllocationConfig()


def create_warehouse(name: str, **inventory) -> dict:
    """Helper to create a warehouse entry."""
    return {"name": name, "inventory": dict(inventory)}


def create_order_df(rows: list[tuple]) -> pd.DataFrame:
    """Create an order DataFrame from (item, quantity) tuples."""
    return pd.DataFrame(rows, columns=["item", "quantity"])


def create_inventory_df(stock: dict[str, dict[str, int]]) -> pd.DataFrame:
    """Create a wide inventory DataFrame.

    Args:
        stock: {warehouse_name: {item: quantity}}, warehouses in priority order

    Returns:
        DataFrame with an item column and one column per warehouse;
        items missing from a warehouse are blank (NaN)
    """
    items = []
    for inventory in stock.values():
        for item in inventory:
            if item not in items:
                items.append(item)

    data = {"item": items}
    for warehouse, inventory in stock.items():
        data[warehouse] = [inventory.get(item) for item in items]
    return pd.DataFrame(data)

"""Session state initialization and management.

This module provides functions for initializing and managing Streamlit session state.
"""

import streamlit as st

from core.config import (
    DEFAULT_WAREHOUSE_PRIORITY,
    DEFAULT_EXCLUDED_WAREHOUSES,
    DEFAULT_DICTIONARY_LANGUAGE,
)
from core.models import AllocationConfig, merge_warehouse_priority


def init_session_state():
    """Initialize all session state variables with defaults."""
    # Allocation configuration
    if "warehouse_priority" not in st.session_state:
        st.session_state.warehouse_priority = DEFAULT_WAREHOUSE_PRIORITY.copy()
    if "excluded_warehouses" not in st.session_state:
        st.session_state.excluded_warehouses = DEFAULT_EXCLUDED_WAREHOUSES.copy()
    if "dictionary_language" not in st.session_state:
        st.session_state.dictionary_language = DEFAULT_DICTIONARY_LANGUAGE

    # Last computed plan and its export
    if "shipment_plan" not in st.session_state:
        st.session_state.shipment_plan = None
    if "shipment_export" not in st.session_state:
        st.session_state.shipment_export = None


def get_config() -> AllocationConfig:
    """Create config from current session state."""
    return AllocationConfig(
        warehouse_priority=st.session_state.warehouse_priority.copy(),
        excluded_warehouses=st.session_state.excluded_warehouses.copy(),
        dictionary_language=st.session_state.dictionary_language,
    )


def apply_config(config: AllocationConfig):
    """Load an imported config into session state."""
    st.session_state.warehouse_priority = list(config.warehouse_priority)
    st.session_state.excluded_warehouses = list(config.excluded_warehouses)
    st.session_state.dictionary_language = config.dictionary_language


def sync_warehouses(warehouse_names: list[str]):
    """Add warehouses of a newly loaded inventory file to the priority list."""
    st.session_state.warehouse_priority = merge_warehouse_priority(
        st.session_state.warehouse_priority, warehouse_names
    )


def move_warehouse_up(idx: int):
    """Move a warehouse up in priority.

    Args:
        idx: Index of warehouse to move up
    """
    if idx > 0:
        warehouses = st.session_state.warehouse_priority
        warehouses[idx], warehouses[idx - 1] = warehouses[idx - 1], warehouses[idx]
        st.session_state.warehouse_priority = warehouses


def move_warehouse_down(idx: int):
    """Move a warehouse down in priority.

    Args:
        idx: Index of warehouse to move down
    """
    warehouses = st.session_state.warehouse_priority
    if idx < len(warehouses) - 1:
        warehouses[idx], warehouses[idx + 1] = warehouses[idx + 1], warehouses[idx]
        st.session_state.warehouse_priority = warehouses

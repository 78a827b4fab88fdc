"""UI module for Streamlit components.

This package contains all Streamlit-specific UI components.
The components are separated from business logic (in core/) to allow:
- Testing of business logic without Streamlit
- The command-line script to share the same core
"""

from .session_state import (
    init_session_state,
    get_config,
    apply_config,
    sync_warehouses,
    move_warehouse_up,
    move_warehouse_down,
)
from .preview import render_preview, render_shortfall
from .results import render_results

__all__ = [
    # Session state
    "init_session_state",
    "get_config",
    "apply_config",
    "sync_warehouses",
    "move_warehouse_up",
    "move_warehouse_down",
    # Preview
    "render_preview",
    "render_shortfall",
    # Results
    "render_results",
]

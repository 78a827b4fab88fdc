"""Shipment preview UI components.

This module provides Streamlit components for rendering a computed shipment.
"""

import streamlit as st
import pandas as pd

from core.models import ShipmentPlan


def render_shortfall(plan: ShipmentPlan):
    """Explain why an order cannot be shipped."""
    st.warning("The order cannot be fully shipped from the combined inventory. Nothing is shipped.")

    if not plan.shortfalls:
        return

    df = pd.DataFrame([
        {
            "Item": a.item,
            "Requested": a.requested,
            "Available": a.available,
            "Missing": a.shortfall,
        }
        for a in plan.shortfalls
    ])
    st.dataframe(df, hide_index=True)


def render_preview(plan: ShipmentPlan):
    """Render the shipment summary and per-warehouse breakdown.

    Args:
        plan: Computed shipment plan
    """
    if plan.is_empty:
        if plan.availability:
            render_shortfall(plan)
        else:
            st.info("The order requests nothing (all quantities are 0).")
        return

    col1, col2, col3 = st.columns(3)
    col1.metric("Warehouses Used", plan.warehouse_count)
    col2.metric("Items", len(plan.quantity_by_item()))
    col3.metric("Total Units", plan.total_quantity)

    for position, entry in enumerate(plan.shipments, 1):
        for warehouse, items in entry.items():
            with st.expander(
                f"{position}. {warehouse} ({sum(items.values())} units)",
                expanded=True
            ):
                for item, quantity in items.items():
                    st.markdown(f"  └─ **{item}**: {quantity}")

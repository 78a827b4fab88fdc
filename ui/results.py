"""Results rendering UI components.

This module provides Streamlit components for downloading a shipment.
"""

import streamlit as st

from core.models import ShipmentExport


def render_results(export: ShipmentExport):
    """Render the download section for the shipment workbook.

    Args:
        export: Generated shipment workbook
    """
    st.success(
        f"Shipment from **{export.warehouse_count}** warehouse(s), "
        f"**{export.total_quantity}** units"
    )

    st.download_button(
        label="Download Shipment Excel",
        data=export.data,
        file_name=export.filename,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        type="primary",
        key="download_shipment",
    )

    st.caption(
        "The 'Remaining' sheet holds the inventory left after this shipment. "
        "Use it as the inventory file for the next order."
    )

"""
Inventory Allocator Streamlit App

A user-friendly web interface for shipping an order from the fewest warehouses.
"""

import json

import streamlit as st

from core import (
    AllocationConfig,
    AllocationInputError,
    InventoryAllocator,
    PySpellCheckerDictionary,
    generate_shipment_export,
    load_table,
    order_from_dataframe,
    validate_required_columns,
    warehouses_from_dataframe,
)
from core.config import (
    INVENTORY_REQUIRED_COLUMNS,
    ITEM_COLUMN,
    ORDER_REQUIRED_COLUMNS,
    QUANTITY_COLUMN,
)
from ui import (
    init_session_state,
    get_config,
    apply_config,
    sync_warehouses,
    move_warehouse_up,
    move_warehouse_down,
    render_preview,
    render_results,
)

# Page config
st.set_page_config(
    page_title="Inventory Allocator",
    page_icon="📦",
    layout="wide",
)

init_session_state()


@st.cache_resource
def get_dictionary(language: str) -> PySpellCheckerDictionary:
    """Load the spelling dictionary once per language."""
    return PySpellCheckerDictionary(language=language)


def load_uploaded_table(uploaded_file, required_columns: list[str], label: str):
    """Load an uploaded table and report problems in the UI."""
    df, error = load_table(uploaded_file, uploaded_file.name)
    if error:
        st.error(error)
        return None

    is_valid, missing = validate_required_columns(df, required_columns)
    if not is_valid:
        for col in missing:
            st.error(f"{label}: column '{col}' not found")
        return None

    st.success(f"{label} loaded: {len(df)} rows")
    return df


# Main UI
st.title("📦 Inventory Allocator")
st.markdown("Ship an order from as few warehouses as possible")

st.subheader("Compute Shipment")
st.markdown(f"""
- **Order file**: columns `{ITEM_COLUMN}` and `{QUANTITY_COLUMN}`
- **Inventory file**: column `{ITEM_COLUMN}` plus one column per warehouse
""")

col_order, col_inventory = st.columns(2)
order_file = col_order.file_uploader("Upload Order", type=["xlsx", "csv"], key="order_file")
inventory_file = col_inventory.file_uploader("Upload Inventory", type=["xlsx", "csv"], key="inventory_file")

order = None
warehouses = None
if order_file and inventory_file:
    order_df = load_uploaded_table(order_file, ORDER_REQUIRED_COLUMNS, "Order")
    inventory_df = load_uploaded_table(inventory_file, INVENTORY_REQUIRED_COLUMNS, "Inventory")

    if order_df is not None and inventory_df is not None:
        order = order_from_dataframe(order_df)
        warehouses = warehouses_from_dataframe(inventory_df)
        # Before the sidebar renders, so new warehouses show up right away
        sync_warehouses([w["name"] for w in warehouses])

# Sidebar for configuration
with st.sidebar:
    st.header("⚙️ Configuration")

    # Warehouse priority editor
    st.subheader("Priority Order")
    st.caption("Warehouses at the top are used first")

    if not st.session_state.warehouse_priority:
        st.info("Upload an inventory file to list its warehouses.")

    for idx, warehouse in enumerate(st.session_state.warehouse_priority):
        col1, col2, col3, col4 = st.columns([1, 6, 1, 1])

        col1.write(f"**{idx + 1}.**")
        col2.write(warehouse[:30] + "..." if len(warehouse) > 30 else warehouse)

        if idx > 0:
            col3.button("↑", key=f"up_{idx}", on_click=move_warehouse_up, args=(idx,))
        else:
            col3.write("")

        if idx < len(st.session_state.warehouse_priority) - 1:
            col4.button("↓", key=f"down_{idx}", on_click=move_warehouse_down, args=(idx,))
        else:
            col4.write("")

    st.divider()

    # Exclusion editor
    st.subheader("Excluded Warehouses")
    st.caption("These warehouses ship nothing")

    new_excluded = []
    for warehouse in st.session_state.warehouse_priority:
        is_excluded = warehouse in st.session_state.excluded_warehouses
        if st.checkbox(warehouse[:40], value=is_excluded, key=f"exclude_{warehouse}"):
            new_excluded.append(warehouse)
    st.session_state.excluded_warehouses = new_excluded

    st.divider()

    # Config import/export
    st.subheader("Settings File")
    st.download_button(
        label="Export Settings",
        data=json.dumps(get_config().to_dict(), indent=2, ensure_ascii=False),
        file_name="allocator_settings.json",
        mime="application/json",
    )
    settings_file = st.file_uploader("Import Settings", type=["json"], key="settings_file")
    if settings_file and st.button("Apply Settings"):
        try:
            apply_config(AllocationConfig.from_dict(json.load(settings_file)))
            st.rerun()
        except (ValueError, AttributeError) as e:
            st.error(f"Invalid settings file: {e}")

# Main content area
if order is not None and warehouses is not None:
    if st.button("Compute Shipment", type="primary"):
        config = get_config()
        allocator = InventoryAllocator(
            dictionary=get_dictionary(config.dictionary_language),
            config=config,
        )
        try:
            with st.spinner("Computing shipment..."):
                plan = allocator.compute_plan(order, warehouses)
            st.session_state.shipment_plan = plan
            st.session_state.shipment_export = (
                None if plan.is_empty
                else generate_shipment_export(plan.shipments, config.apply_to(warehouses))
            )
        except AllocationInputError as e:
            st.session_state.shipment_plan = None
            st.session_state.shipment_export = None
            st.error(str(e))

    if st.session_state.shipment_plan is not None:
        st.divider()
        st.subheader("Shipment")
        render_preview(st.session_state.shipment_plan)

    if st.session_state.shipment_export is not None:
        st.divider()
        st.subheader("Download")
        render_results(st.session_state.shipment_export)

# Footer
st.divider()
st.caption("Inventory Allocator v1.0")

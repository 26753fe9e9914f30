"""Landing dashboard for the hospitality ERP."""

from __future__ import annotations

import streamlit as st

from hospitality import utils
from hospitality.export import export_workbook
from hospitality.workspace import get_metrics, get_workspace, reset_workspace

utils.page_setup("🍽️ Hospitality ERP")
st.caption("Welcome to your Hospitality ERP system overview")

st.markdown(
    """
    <style>
      .metric-card {background:#ffffff;border-radius:16px;padding:1.25rem;box-shadow:0 6px 14px rgba(0,0,0,0.08);text-align:center;}
      .metric-card h4 {margin:0;font-size:0.95rem;color:#6c757d;text-transform:uppercase;letter-spacing:0.06em;}
      .metric-card span {display:block;font-size:2rem;font-weight:700;color:#0f9b8e;margin-top:0.35rem;}
      .metric-card small {display:block;color:#6c757d;margin-top:0.25rem;}
      @media (max-width:768px){
        .metric-card span {font-size:1.5rem;}
      }
    </style>
    """,
    unsafe_allow_html=True,
)

workspace = get_workspace()
utils.show_notifications(workspace.notifier)

metrics = get_metrics(workspace)
metric_cards = [
    ("Total Items", metrics["total_items"], "in inventory"),
    ("Low Stock Items", metrics["low_stock_items"], "items need attention"),
    ("Pending Orders", metrics["pending_orders"], f"{metrics['urgent_orders']} urgent"),
    ("Recipes", metrics["recipes"], f"{metrics['suppliers']} suppliers on file"),
]
for col, (label, value, subtitle) in zip(st.columns(len(metric_cards)), metric_cards):
    with col:
        st.markdown(
            f"<div class='metric-card'><h4>{label}</h4><span>{value}</span><small>{subtitle}</small></div>",
            unsafe_allow_html=True,
        )

st.markdown("### Quick actions")

tiles = [
    ("📦", "Inventory", "Track stock levels and expiry", "pages/1_📦_Inventory.py"),
    ("👨‍🍳", "Recipes", "Manage recipes and ingredient usage", "pages/2_👨‍🍳_Recipes.py"),
    ("🧾", "Procurement", "Submit and track purchase requests", "pages/3_🧾_Procurement.py"),
    ("✅", "Admin", "Approve or reject pending orders", "pages/4_✅_Admin.py"),
    ("🚚", "Suppliers", "Supplier contacts and categories", "pages/5_🚚_Suppliers.py"),
]

for i in range(0, len(tiles), 2):
    cols = st.columns(2)
    for col, tile in zip(cols, tiles[i : i + 2]):
        emoji, title, subtitle, target = tile
        with col:
            if st.button(f"{emoji} {title}", key=f"tile_{title}", use_container_width=True):
                st.switch_page(target)
            st.caption(subtitle)

st.divider()
attention = workspace.inventory.needing_attention()
if attention:
    st.markdown("#### Items needing attention")
    st.dataframe(
        utils.records_frame(attention, {"item": "Item", "quantity": "Quantity", "unit": "Unit", "status": "Status"}),
        use_container_width=True,
        hide_index=True,
    )

st.markdown("#### Export")
st.caption("Download every table of this session as a single XLSX file.")
file_name, workbook_bytes = export_workbook(workspace)
st.download_button(
    "⬇️ Download workbook",
    data=workbook_bytes,
    file_name=file_name,
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)

if st.button("↺ Reset session data", help="Discard changes and reload the sample records"):
    reset_workspace()
    st.rerun()

from __future__ import annotations

"""Multi-sheet Excel snapshot of the current session's records."""

from datetime import datetime
from io import BytesIO
from typing import Callable, Dict, Optional, Tuple

import pandas as pd

from .utils import TZ, records_frame
from .workspace import Workspace

INVENTORY_SHEET = {
    "id": "ID",
    "item": "Item",
    "quantity": "Quantity",
    "unit": "Unit",
    "expiry": "Expiry Date",
    "location": "Location",
    "status": "Status",
}
ORDER_SHEET = {
    "id": "Order ID",
    "item_name": "Item",
    "quantity": "Quantity",
    "unit": "Unit",
    "supplier": "Supplier",
    "priority": "Priority",
    "status": "Status",
    "date_requested": "Date Requested",
    "requested_by": "Requested By",
    "notes": "Notes",
    "rejection_reason": "Rejection Reason",
}
RECIPE_SHEET = {
    "id": "ID",
    "name": "Recipe",
    "category": "Category",
    "servings": "Servings",
    "description": "Description",
}
SUPPLIER_SHEET = {
    "id": "ID",
    "name": "Supplier",
    "contact_person": "Contact Person",
    "email": "Email",
    "phone": "Phone",
    "address": "Address",
    "category": "Category",
    "notes": "Notes",
}


def _sheet(writer: pd.ExcelWriter, name: str, df: pd.DataFrame) -> None:
    """Write a DataFrame to the workbook with frozen headers and auto-filter."""
    df.to_excel(writer, sheet_name=name, index=False)
    worksheet = writer.sheets[name]
    worksheet.freeze_panes(1, 0)
    worksheet.autofilter(0, 0, max(0, len(df)), max(0, len(df.columns) - 1))


def recipe_lines_frame(workspace: Workspace) -> pd.DataFrame:
    rows = [
        {
            "Recipe ID": recipe.id,
            "Recipe": recipe.name,
            "Line": line,
            "Ingredient": ingredient.item,
            "Quantity": ingredient.quantity,
            "Unit": ingredient.unit,
        }
        for recipe in workspace.recipes.records
        for line, ingredient in enumerate(recipe.ingredients, start=1)
    ]
    return pd.DataFrame(rows, columns=["Recipe ID", "Recipe", "Line", "Ingredient", "Quantity", "Unit"])


def workspace_frames(workspace: Workspace) -> Dict[str, pd.DataFrame]:
    """Sheet name -> table for every record kind, in workbook order."""

    return {
        "Inventory": records_frame(workspace.inventory.records, INVENTORY_SHEET),
        "Procurement Orders": records_frame(workspace.orders.records, ORDER_SHEET),
        "Recipes": records_frame(workspace.recipes.records, RECIPE_SHEET),
        "Recipe Lines": recipe_lines_frame(workspace),
        "Suppliers": records_frame(workspace.suppliers.records, SUPPLIER_SHEET),
    }


def export_workbook(
    workspace: Workspace,
    *,
    now: Optional[Callable[[], datetime]] = None,
) -> Tuple[str, bytes]:
    """Build the export workbook in-memory and return the filename + bytes."""
    timestamp = (now() if now else datetime.now(tz=TZ)).strftime("%Y%m%d_%H%M%S")
    filename = f"Hospitality_ERP_{timestamp}.xlsx"

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="xlsxwriter") as writer:
        for name, frame in workspace_frames(workspace).items():
            _sheet(writer, name, frame)

    buffer.seek(0)
    return filename, buffer.getvalue()


__all__ = ["export_workbook", "recipe_lines_frame", "workspace_frames"]

"""Centralised constants shared across the hospitality dashboard."""

from __future__ import annotations

from typing import Final


__all__ = [
    "ALL",
    "IN_STOCK",
    "LOW_STOCK",
    "OUT_OF_STOCK",
    "STOCK_STATUSES",
    "LOW_STOCK_THRESHOLD",
    "PENDING",
    "APPROVED",
    "REJECTED",
    "ORDER_STATUSES",
    "PRIORITIES",
    "DEFAULT_PRIORITY",
    "URGENT",
    "DEFAULT_SUPPLIERS",
    "SUPPLIER_CATEGORIES",
    "INVENTORY_SEARCH_FIELDS",
    "ORDER_SEARCH_FIELDS",
    "RECIPE_SEARCH_FIELDS",
    "SUPPLIER_SEARCH_FIELDS",
]


# Sentinel value for a categorical filter that is switched off.
ALL: Final[str] = "all"

# -- Inventory -------------------------------------------------------------

IN_STOCK: Final[str] = "In Stock"
LOW_STOCK: Final[str] = "Low Stock"
OUT_OF_STOCK: Final[str] = "Out of Stock"

STOCK_STATUSES: Final[tuple[str, ...]] = (IN_STOCK, LOW_STOCK, OUT_OF_STOCK)

# Quantities strictly above this are "In Stock".
LOW_STOCK_THRESHOLD: Final[int] = 20

# -- Procurement -----------------------------------------------------------

PENDING: Final[str] = "Pending"
APPROVED: Final[str] = "Approved"
REJECTED: Final[str] = "Rejected"

ORDER_STATUSES: Final[tuple[str, ...]] = (PENDING, APPROVED, REJECTED)

URGENT: Final[str] = "Urgent"
PRIORITIES: Final[tuple[str, ...]] = ("Low", "Medium", "High", URGENT)
DEFAULT_PRIORITY: Final[str] = "Medium"

# -- Suppliers -------------------------------------------------------------

DEFAULT_SUPPLIERS: Final[list[str]] = [
    "Ocean Fresh Supplies",
    "Green Valley Farms",
    "Premium Wine Co.",
    "City Meat Market",
    "Dairy Fresh Inc.",
]

SUPPLIER_CATEGORIES: Final[list[str]] = [
    "Seafood",
    "Vegetables & Fruits",
    "Meat & Poultry",
    "Dairy Products",
    "Beverages",
    "Dry Goods",
    "Spices & Seasonings",
    "Cleaning Supplies",
    "Equipment & Tools",
]

# -- Free-text search fields per record kind -------------------------------

INVENTORY_SEARCH_FIELDS: Final[tuple[str, ...]] = ("item", "location")
ORDER_SEARCH_FIELDS: Final[tuple[str, ...]] = ("item_name", "supplier", "requested_by")
RECIPE_SEARCH_FIELDS: Final[tuple[str, ...]] = ("name", "category")
SUPPLIER_SEARCH_FIELDS: Final[tuple[str, ...]] = ("name", "contact_person", "category", "email")

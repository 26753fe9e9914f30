"""Inventory records, stock status and stock adjustments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Mapping, Optional

from .constants import (
    IN_STOCK,
    INVENTORY_SEARCH_FIELDS,
    LOW_STOCK,
    LOW_STOCK_THRESHOLD,
    OUT_OF_STOCK,
)
from .store import RecordManager
from .utils import Number, parse_amount
from .validation import ValidationError, require_number

logger = logging.getLogger(__name__)

ADD = "add"
REMOVE = "remove"


def derive_status(quantity: Number) -> str:
    if quantity > LOW_STOCK_THRESHOLD:
        return IN_STOCK
    if quantity > 0:
        return LOW_STOCK
    return OUT_OF_STOCK


def adjusted_quantity(quantity: Number, delta: Number) -> Number:
    """Apply ``delta`` to ``quantity``, clamping at zero."""

    return max(0, quantity + delta)


@dataclass(frozen=True)
class InventoryItem:
    id: str
    item: str
    quantity: Number
    unit: str
    expiry: str = ""
    location: str = ""

    @property
    def status(self) -> str:
        return derive_status(self.quantity)

    @property
    def needs_attention(self) -> bool:
        return self.status != IN_STOCK


class InventoryManager(RecordManager[InventoryItem]):
    record_type = InventoryItem
    label = "Item"
    required_fields = ("item", "quantity", "unit")
    search_fields = INVENTORY_SEARCH_FIELDS
    draft_defaults: ClassVar[Mapping[str, Any]] = {
        "item": "",
        "quantity": 0,
        "unit": "",
        "expiry": "",
        "location": "",
    }

    added_message = "Item added to inventory successfully."
    deleted_message = "Item deleted from inventory."

    def validate(self, values: Mapping[str, Any]) -> None:
        super().validate(values)
        require_number(values.get("quantity"), "quantity", minimum=0)

    def adjust_stock(self, item_id: str, amount: Any, direction: str = ADD) -> Optional[InventoryItem]:
        """Add or remove ``amount`` units; absent or non-numeric input is ignored.

        Returns the updated item, or ``None`` when nothing changed.
        """

        if direction not in (ADD, REMOVE):
            raise ValidationError(f"Unknown stock adjustment direction: {direction!r}")
        parsed = parse_amount(amount)
        if parsed is None:
            return None
        item = self.store.get(item_id)
        if item is None:
            return None

        delta = parsed if direction == ADD else -parsed
        updated = self.store.replace(replace(item, quantity=adjusted_quantity(item.quantity, delta)))
        logger.info("Adjusted %s by %s: %s -> %s", item_id, delta, item.quantity, updated.quantity)
        self.notifier.success(f"Stock {'added' if delta > 0 else 'reduced'} successfully.")
        return updated

    def needing_attention(self) -> list[InventoryItem]:
        return [item for item in self.store if item.needs_attention]


SAMPLE_INVENTORY = (
    InventoryItem("1", "Tomatoes", 50, "kg", "2024-01-15", "Cold Storage A"),
    InventoryItem("2", "Chicken Breast", 25, "kg", "2024-01-10", "Freezer B"),
    InventoryItem("3", "Olive Oil", 5, "liters", "2025-06-30", "Pantry"),
    InventoryItem("4", "Rice", 100, "kg", "2024-12-31", "Dry Storage"),
)


__all__ = [
    "ADD",
    "REMOVE",
    "InventoryItem",
    "InventoryManager",
    "SAMPLE_INVENTORY",
    "adjusted_quantity",
    "derive_status",
]

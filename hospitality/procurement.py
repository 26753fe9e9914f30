"""Procurement orders: submission, review and the approve/reject workflow.

Orders start as ``Pending``. An admin either approves them or rejects them
with a reason; both outcomes are terminal. The rejection dialog (which order
is targeted and the reason typed so far) lives in :class:`RejectionDialog`,
beside the store rather than on the order itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar, Dict, Iterable, Mapping, Optional

from .constants import (
    APPROVED,
    DEFAULT_PRIORITY,
    DEFAULT_SUPPLIERS,
    ORDER_SEARCH_FIELDS,
    PENDING,
    PRIORITIES,
    REJECTED,
    URGENT,
)
from .notifications import DESTRUCTIVE, Notifier
from .search import distinct_values
from .store import IdFactory, RecordManager, new_id
from .utils import Number, iso_today
from .validation import ValidationError, require_number

logger = logging.getLogger(__name__)

Clock = Callable[[], str]


@dataclass(frozen=True)
class ProcurementOrder:
    id: str
    item_name: str
    quantity: Number
    unit: str
    supplier: str
    priority: str = DEFAULT_PRIORITY
    status: str = PENDING
    date_requested: str = ""
    notes: str = ""
    requested_by: Optional[str] = None
    rejection_reason: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.status == PENDING


@dataclass
class RejectionDialog:
    order_id: Optional[str] = None
    reason: str = ""

    @property
    def is_open(self) -> bool:
        return self.order_id is not None

    def open(self, order_id: str) -> None:
        self.order_id = order_id
        self.reason = ""

    def close(self) -> None:
        self.order_id = None
        self.reason = ""


class OrderManager(RecordManager[ProcurementOrder]):
    record_type = ProcurementOrder
    label = "Order"
    required_fields = ("item_name", "quantity", "unit", "supplier")
    search_fields = ORDER_SEARCH_FIELDS
    draft_defaults: ClassVar[Mapping[str, Any]] = {
        "item_name": "",
        "quantity": 0,
        "unit": "",
        "supplier": "",
        "priority": DEFAULT_PRIORITY,
        "notes": "",
        "requested_by": "",
    }

    added_message = "Procurement order submitted successfully."

    def __init__(
        self,
        records: Iterable[ProcurementOrder] = (),
        *,
        id_factory: IdFactory = new_id,
        notifier: Optional[Notifier] = None,
        today: Clock = iso_today,
    ) -> None:
        super().__init__(records, id_factory=id_factory, notifier=notifier)
        self._today = today
        self.rejection = RejectionDialog()

    # ------------------------------------------------------------------
    # Submission and editing
    def validate(self, values: Mapping[str, Any]) -> None:
        super().validate(values)
        require_number(values.get("quantity"), "quantity", minimum=0)
        if values.get("priority") not in PRIORITIES:
            raise ValidationError(f"Priority must be one of: {', '.join(PRIORITIES)}.")

    def clean(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        cleaned = super().clean(values)
        requested_by = str(cleaned.get("requested_by") or "").strip()
        cleaned["requested_by"] = requested_by or None
        return cleaned

    def build(self, record_id: str, values: Mapping[str, Any]) -> ProcurementOrder:
        return ProcurementOrder(id=record_id, status=PENDING, date_requested=self._today(), **values)

    def submit(self, values: Optional[Mapping[str, Any]] = None) -> ProcurementOrder:
        return self.add(values)

    def start_edit(self, record_id: str) -> ProcurementOrder:
        order = self.store.get(record_id)
        if order is not None and not order.is_pending:
            raise ValidationError(f"Order {record_id} is {order.status.lower()} and can no longer be edited.")
        return super().start_edit(record_id)

    def update(self, values: Optional[Mapping[str, Any]] = None) -> ProcurementOrder:
        order = self.store.get(self.draft.editing_id) if self.draft.editing else None
        if order is not None and not order.is_pending:
            self.draft.reset()
            raise ValidationError(f"Order {order.id} is {order.status.lower()} and can no longer be edited.")
        return super().update(values)

    # ------------------------------------------------------------------
    # Review workflow
    def _pending_order(self, order_id: str) -> ProcurementOrder:
        order = self.store.get(order_id)
        if order is None:
            raise ValidationError(f"Procurement order {order_id} does not exist.")
        if not order.is_pending:
            raise ValidationError(f"Procurement order {order_id} has already been {order.status.lower()}.")
        return order

    def approve(self, order_id: str) -> ProcurementOrder:
        order = self._pending_order(order_id)
        approved = self.store.replace(replace(order, status=APPROVED, rejection_reason=None))
        logger.info("Approved order %s", order_id)
        self.notifier.notify("Order Approved", f"Procurement order {order_id} has been approved.")
        return approved

    def reject(self, order_id: str, reason: Optional[str] = None) -> ProcurementOrder:
        """Reject a pending order; ``reason`` defaults to the dialog's text."""

        if reason is None:
            reason = self.rejection.reason
        if not isinstance(reason, str) or not reason.strip():
            raise ValidationError("Please provide a reason for rejection.")
        order = self._pending_order(order_id)
        rejected = self.store.replace(replace(order, status=REJECTED, rejection_reason=reason))
        logger.info("Rejected order %s: %s", order_id, reason)
        if self.rejection.order_id == order_id:
            self.rejection.close()
        self.notifier.notify(
            "Order Rejected",
            f"Procurement order {order_id} has been rejected.",
            DESTRUCTIVE,
        )
        return rejected

    def confirm_rejection(self) -> ProcurementOrder:
        if not self.rejection.is_open:
            raise ValidationError("Select an order to reject first.")
        return self.reject(self.rejection.order_id, self.rejection.reason)

    # ------------------------------------------------------------------
    # Views
    def pending_orders(self) -> list[ProcurementOrder]:
        return [order for order in self.store if order.is_pending]

    def processed_orders(self) -> list[ProcurementOrder]:
        return [order for order in self.store if not order.is_pending]

    def stats(self) -> Dict[str, int]:
        orders = self.store.records
        return {
            "pending": sum(1 for order in orders if order.status == PENDING),
            "approved": sum(1 for order in orders if order.status == APPROVED),
            "rejected": sum(1 for order in orders if order.status == REJECTED),
            "urgent_pending": sum(1 for order in orders if order.priority == URGENT and order.is_pending),
        }


def supplier_choices(*supplier_sources: Iterable[Any]) -> list[str]:
    """Supplier names offered on the order form: defaults plus any known supplier records."""

    records = [record for source in supplier_sources for record in source]
    return distinct_values(records, "name", defaults=DEFAULT_SUPPLIERS)


SAMPLE_ORDERS = (
    ProcurementOrder(
        "1", "Fresh Salmon", 20, "kg", "Ocean Fresh Supplies", "High", PENDING,
        "2024-01-08", "Need for weekend special menu", "Chef Manager",
    ),
    ProcurementOrder(
        "2", "Organic Vegetables", 50, "kg", "Green Valley Farms", "Medium", APPROVED,
        "2024-01-07", "Weekly vegetable order", "Kitchen Staff",
    ),
    ProcurementOrder(
        "3", "Wine Bottles", 24, "bottles", "Premium Wine Co.", "Low", REJECTED,
        "2024-01-06", "For wine tasting event", "Event Manager",
        "Budget constraints for this quarter",
    ),
    ProcurementOrder(
        "4", "Premium Beef", 15, "kg", "City Meat Market", URGENT, PENDING,
        "2024-01-09", "Urgent requirement for VIP dinner", "Head Chef",
    ),
)


__all__ = [
    "Clock",
    "OrderManager",
    "ProcurementOrder",
    "RejectionDialog",
    "SAMPLE_ORDERS",
    "supplier_choices",
]

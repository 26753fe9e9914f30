from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from .constants import SUPPLIER_CATEGORIES, SUPPLIER_SEARCH_FIELDS
from .search import distinct_values
from .store import RecordManager


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str
    contact_person: str
    email: str
    phone: str
    address: str = ""
    category: str = ""
    notes: str = ""


class SupplierManager(RecordManager[Supplier]):
    record_type = Supplier
    label = "Supplier"
    required_fields = ("name", "contact_person", "email", "phone")
    search_fields = SUPPLIER_SEARCH_FIELDS
    draft_defaults: ClassVar[Mapping[str, Any]] = {
        "name": "",
        "contact_person": "",
        "email": "",
        "phone": "",
        "address": "",
        "category": "",
        "notes": "",
    }

    def categories(self) -> list[str]:
        return distinct_values(self.store, "category", defaults=SUPPLIER_CATEGORIES)


SAMPLE_SUPPLIERS = (
    Supplier(
        "1", "Ocean Fresh Supplies", "John Smith", "john@oceanfresh.com", "+1-555-0123",
        "123 Harbor Street, Seafood District, City 12345", "Seafood",
        "Premium quality seafood supplier. Reliable delivery schedule.",
    ),
    Supplier(
        "2", "Green Valley Farms", "Maria Garcia", "maria@greenvalley.com", "+1-555-0456",
        "456 Farm Road, Agricultural Zone, City 67890", "Vegetables & Fruits",
        "Organic certified. Best prices for bulk orders.",
    ),
    Supplier(
        "3", "Premium Wine Co.", "Robert Johnson", "robert@premiumwine.com", "+1-555-0789",
        "789 Wine Street, Downtown, City 11111", "Beverages",
        "Exclusive wine collection. Special event catering available.",
    ),
    Supplier(
        "4", "City Meat Market", "David Brown", "david@citymeat.com", "+1-555-0321",
        "321 Butcher Lane, Market District, City 22222", "Meat & Poultry",
        "Fresh daily cuts. Halal certified options available.",
    ),
)


__all__ = ["SAMPLE_SUPPLIERS", "Supplier", "SupplierManager"]

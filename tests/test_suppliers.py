from __future__ import annotations

import pytest

from hospitality.constants import SUPPLIER_CATEGORIES
from hospitality.suppliers import SAMPLE_SUPPLIERS, Supplier, SupplierManager
from hospitality.validation import ValidationError


NEW_SUPPLIER = {
    "name": "Dairy Fresh Inc.",
    "contact_person": "Priya Patel",
    "email": "priya@dairyfresh.com",
    "phone": "+1-555-0999",
    "category": "Dairy Products",
}


def test_add_supplier():
    manager = SupplierManager(SAMPLE_SUPPLIERS, id_factory=lambda: "abc")
    supplier = manager.add(NEW_SUPPLIER)

    assert supplier == Supplier("abc", address="", notes="", **NEW_SUPPLIER)
    assert manager.records[-1].name == "Dairy Fresh Inc."
    assert manager.notifier.last.message == "Supplier added successfully."


@pytest.mark.parametrize("missing", ["name", "contact_person", "email", "phone"])
def test_add_supplier_requires_contact_fields(missing):
    manager = SupplierManager(SAMPLE_SUPPLIERS)
    with pytest.raises(ValidationError):
        manager.add({**NEW_SUPPLIER, missing: " "})
    assert len(manager) == len(SAMPLE_SUPPLIERS)


def test_update_supplier_revalidates():
    manager = SupplierManager(SAMPLE_SUPPLIERS)
    manager.start_edit("2")
    manager.draft.set(email="")

    with pytest.raises(ValidationError):
        manager.update()
    assert manager.get("2").email == "maria@greenvalley.com"
    assert manager.draft.editing_id == "2"

    manager.draft.set(email="orders@greenvalley.com")
    updated = manager.update()
    assert updated.email == "orders@greenvalley.com"
    assert updated.contact_person == "Maria Garcia"
    assert manager.notifier.last.message == "Supplier updated successfully."


def test_cancel_edit_clears_draft():
    manager = SupplierManager(SAMPLE_SUPPLIERS)
    manager.start_edit("1")
    manager.cancel_edit()

    assert not manager.draft.editing
    assert manager.draft.values["name"] == ""


def test_search_suppliers():
    manager = SupplierManager(SAMPLE_SUPPLIERS)
    assert [s.name for s in manager.search("maria")] == ["Green Valley Farms"]
    assert [s.name for s in manager.search("@citymeat")] == ["City Meat Market"]
    assert [s.name for s in manager.search("", category="beverages")] == ["Premium Wine Co."]
    # address is not a searchable field
    assert manager.search("Harbor") == []


def test_categories_include_defaults_and_custom():
    manager = SupplierManager(SAMPLE_SUPPLIERS)
    manager.add({**NEW_SUPPLIER, "category": "Bakery"})
    categories = manager.categories()

    assert "Bakery" in categories
    assert set(SUPPLIER_CATEGORIES) <= set(categories)

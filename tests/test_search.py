from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hospitality.search import distinct_values, filter_records, is_active_filter, matches_query


@dataclass
class Row:
    name: str
    status: str
    owner: Optional[str] = None


ROWS = [
    Row("Tomatoes", "In Stock", "Ana"),
    Row("Tomato Paste", "Low Stock"),
    Row("Basil", "Low Stock", "Tomas"),
    Row("Rice", "Out of Stock", "Ben"),
]


def test_empty_query_and_all_filter_return_everything_in_order():
    assert filter_records(ROWS, "", ("name",), {"status": "all"}) == ROWS
    assert filter_records(ROWS, "", ("name",), {"status": "ALL"}) == ROWS
    assert filter_records(ROWS) == ROWS


def test_query_is_case_insensitive_substring_over_fields():
    assert filter_records(ROWS, "TOMA", ("name",)) == ROWS[:2]
    assert filter_records(ROWS, "toma", ("name", "owner")) == ROWS[:3]


def test_query_and_filter_combine_with_and():
    result = filter_records(ROWS, "toma", ("name", "owner"), {"status": "low stock"})
    assert result == [ROWS[1], ROWS[2]]


def test_categorical_filter_is_exact_not_substring():
    assert filter_records(ROWS, filters={"status": "Stock"}) == []
    assert filter_records(ROWS, filters={"status": "out of stock"}) == [ROWS[3]]


def test_filtering_is_idempotent():
    once = filter_records(ROWS, "o", ("name", "owner"), {"status": "Low Stock"})
    twice = filter_records(once, "o", ("name", "owner"), {"status": "Low Stock"})
    assert once == twice


def test_none_fields_do_not_match():
    assert not matches_query(ROWS[1], "ana", ("owner",))
    assert matches_query(ROWS[1], "", ("owner",))


def test_inactive_filter_values():
    assert not is_active_filter(None)
    assert not is_active_filter("")
    assert not is_active_filter("All")
    assert is_active_filter("Pending")


def test_distinct_values_dedupes_case_insensitively():
    values = distinct_values(ROWS, "owner", defaults=["ana", "Zoe", " "])
    assert values == ["ana", "Ben", "Tomas", "Zoe"]

from __future__ import annotations

import re
from datetime import date, datetime

import pytest

from hospitality import utils
from hospitality.inventory import SAMPLE_INVENTORY
from hospitality.procurement import SAMPLE_ORDERS


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10", 10),
        (" 2.5 ", 2.5),
        ("-3", -3),
        ("4.0", 4),
        (7, 7),
        (7.0, 7),
        (None, None),
        ("", None),
        ("ten", None),
        ("1e400", None),
        (float("inf"), None),
        (True, None),
    ],
)
def test_parse_amount(raw, expected):
    assert utils.parse_amount(raw) == expected


def test_parse_amount_returns_int_for_whole_numbers():
    assert isinstance(utils.parse_amount("4.0"), int)


def test_safe_parse_date_behaviour():
    assert utils.safe_parse_date("2024-01-08") == date(2024, 1, 8)
    assert utils.safe_parse_date(datetime(2024, 1, 8, 9, 30)) == date(2024, 1, 8)
    assert utils.safe_parse_date("") is None
    assert utils.safe_parse_date("08/01/2024") is None
    assert utils.safe_parse_date(None) is None


def test_iso_today_is_calendar_date():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", utils.iso_today())


def test_records_frame_reads_properties_and_fills_blanks():
    frame = utils.records_frame(SAMPLE_INVENTORY, {"item": "Item", "status": "Status"})
    assert list(frame.columns) == ["Item", "Status"]
    assert frame["Status"].tolist() == ["In Stock", "In Stock", "Low Stock", "In Stock"]

    orders = utils.records_frame(SAMPLE_ORDERS, {"id": "Order ID", "rejection_reason": "Rejection Reason"})
    assert orders["Rejection Reason"].tolist() == ["-", "-", "Budget constraints for this quarter", "-"]


def test_records_frame_empty_keeps_columns():
    frame = utils.records_frame([], {"name": "Supplier", "email": "Email"})
    assert frame.empty
    assert list(frame.columns) == ["Supplier", "Email"]


def test_badge_colours():
    assert utils.badge("Urgent") == ":red[Urgent]"
    assert utils.badge("In Stock") == ":green[In Stock]"
    assert utils.badge("Something else") == ":gray[Something else]"

"""Utility helpers shared across Streamlit pages."""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional, Union

import pandas as pd
import streamlit as st
from zoneinfo import ZoneInfo

from .constants import APPROVED, IN_STOCK, LOW_STOCK, OUT_OF_STOCK, PENDING, REJECTED
from .notifications import DESTRUCTIVE, Notification, Notifier
from .settings import LOG_LEVEL, TZ_NAME

TZ = ZoneInfo(TZ_NAME)
ISO_DATE = "%Y-%m-%d"

Number = Union[int, float]

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def iso_today() -> str:
    return datetime.now(tz=TZ).strftime(ISO_DATE)


def safe_parse_date(value: Any) -> Optional[date]:
    """Parse an ISO calendar date (``2024-01-08``) or return ``None``."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        return None
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def _normalise_number(value: float) -> Number:
    return int(value) if float(value).is_integer() else float(value)


def parse_amount(value: Any) -> Optional[Number]:
    """Parse user input into a finite number, or ``None`` if it is absent or not numeric."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _normalise_number(value) if math.isfinite(value) else None
    string = str(value).strip()
    if not string or not _NUMBER_RE.match(string):
        return None
    return parse_amount(float(string))


def format_quantity(value: Number) -> str:
    return f"{value:g}"


def configure_logging() -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def page_setup(title: str) -> None:
    """Configure Streamlit for a mobile-friendly experience."""

    configure_logging()
    st.set_page_config(
        page_title=f"Hospitality ERP - {title}",
        page_icon="🍽️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.markdown(
        """
        <style>
        .stButton > button,
        .stNumberInput input,
        .stSelectbox div[data-baseweb="select"] > div,
        .stTextInput input {
            border-radius: 10px;
        }

        @media (max-width: 768px) {
            .stButton > button,
            .stNumberInput input,
            .stSelectbox div[data-baseweb="select"] > div,
            .stTextInput input {
                height: 52px;
                font-size: 1.05rem;
            }
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title(title)


def records_frame(records: Iterable[Any], columns: Mapping[str, str]) -> pd.DataFrame:
    """Return a display DataFrame with ``columns`` (attribute -> header) in order.

    Attributes missing from a record (or ``None``) render as ``"-"``. Properties
    such as an inventory item's ``status`` are read like any other field.
    """

    rows = []
    for record in records:
        row = {}
        for attribute, header in columns.items():
            value = getattr(record, attribute, None)
            row[header] = "-" if value is None or value == "" else value
        rows.append(row)
    return pd.DataFrame(rows, columns=list(columns.values()))


def success_toast(message: str) -> None:
    st.success(f"✅ {message}")
    if hasattr(st, "toast"):
        st.toast(f"✅ {message}", icon="✅")


def error_toast(message: str) -> None:
    st.error(f"❌ {message}")
    if hasattr(st, "toast"):
        st.toast(f"❌ {message}", icon="❌")


def show_notification(notification: Notification) -> None:
    text = f"**{notification.title}** · {notification.message}"
    if notification.severity == DESTRUCTIVE:
        error_toast(text)
    else:
        success_toast(text)


def show_notifications(notifier: Notifier) -> None:
    """Render every notification queued since the previous run."""

    for notification in notifier.drain():
        show_notification(notification)


BADGE_COLOURS = {
    IN_STOCK: "green",
    LOW_STOCK: "orange",
    OUT_OF_STOCK: "red",
    APPROVED: "green",
    PENDING: "orange",
    REJECTED: "red",
    "Urgent": "red",
    "High": "orange",
    "Medium": "blue",
    "Low": "gray",
}

_CELL_STYLES = {
    "green": "background-color: #d1f2eb; color: #0e6655;",
    "orange": "background-color: #fdebd0; color: #9c640c;",
    "red": "background-color: #fadbd8; color: #922b21;",
    "blue": "background-color: #d6eaf8; color: #1a5276;",
    "gray": "",
}


def badge(label: str) -> str:
    """Coloured Markdown badge for a status or priority label."""

    return f":{BADGE_COLOURS.get(label, 'gray')}[{label}]"


def style_badges(frame: pd.DataFrame, *columns: str):
    """Colour the given status/priority columns of a display frame."""

    def _cell(value: Any) -> str:
        return _CELL_STYLES[BADGE_COLOURS.get(value, "gray")]

    subset = [column for column in columns if column in frame.columns]
    return frame.style.map(_cell, subset=subset)

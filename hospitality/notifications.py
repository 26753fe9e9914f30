"""Notification sink used by the record managers.

Managers never talk to Streamlit directly. They publish :class:`Notification`
objects to a :class:`Notifier`, which keeps the most recent notifications and a
queue of the ones the page has not shown yet. Pages drain the queue on each run
(see :func:`hospitality.utils.show_notifications`), which keeps toasts alive
across ``st.rerun()``.
"""

from __future__ import annotations

import logging
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Deque, Iterator, Optional

from .validation import ValidationError

logger = logging.getLogger(__name__)

INFO = "info"
DESTRUCTIVE = "destructive"
SEVERITIES = (INFO, DESTRUCTIVE)
HISTORY_LIMIT = 200


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    severity: str = INFO


class Notifier:
    def __init__(
        self,
        sink: Optional[Callable[[Notification], None]] = None,
        *,
        history_limit: int = HISTORY_LIMIT,
    ) -> None:
        self._sink = sink
        self.history: Deque[Notification] = deque(maxlen=history_limit)
        self._pending: list[Notification] = []

    def notify(self, title: str, message: str, severity: str = INFO) -> Notification:
        if severity not in SEVERITIES:
            raise ValueError(f"Unknown notification severity: {severity!r}")
        notification = Notification(title=title, message=message, severity=severity)
        self.history.append(notification)
        self._pending.append(notification)
        logger.debug("%s: %s (%s)", title, message, severity)
        if self._sink is not None:
            self._sink(notification)
        return notification

    def success(self, message: str, *, title: str = "Success") -> Notification:
        return self.notify(title, message, INFO)

    def error(self, message: str, *, title: str = "Error") -> Notification:
        return self.notify(title, message, DESTRUCTIVE)

    def drain(self) -> list[Notification]:
        """Return and forget the notifications not yet shown."""

        pending, self._pending = self._pending, []
        return pending

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None

    @contextmanager
    def guard(self) -> Iterator[None]:
        """Report a :class:`ValidationError` raised in the block as an error notification."""

        try:
            yield
        except ValidationError as exc:
            logger.info("Rejected input: %s", exc)
            self.error(str(exc))


__all__ = ["DESTRUCTIVE", "INFO", "Notification", "Notifier"]

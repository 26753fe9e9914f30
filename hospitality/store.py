"""Generic in-memory record store and the CRUD manager built on top of it.

Every page follows the same shape: an ordered :class:`RecordStore` owned by a
:class:`RecordManager`, plus a :class:`Draft` holding the form values that have
not been committed yet. Entity modules subclass :class:`RecordManager` and fill
in the record type, required fields, search fields and notification wording.
"""

from __future__ import annotations

import copy
import dataclasses
import logging
from typing import Any, Callable, ClassVar, Dict, Generic, Iterable, Iterator, Mapping, Optional, TypeVar
from uuid import uuid4

from .notifications import Notifier
from .search import filter_records
from .validation import ValidationError, require_fields

logger = logging.getLogger(__name__)

T = TypeVar("T")
IdFactory = Callable[[], str]


def new_id() -> str:
    return str(uuid4())


class RecordStore(Generic[T]):
    """Ordered collection of records; insertion order is display order."""

    def __init__(self, records: Iterable[T] = (), *, id_field: str = "id") -> None:
        self.id_field = id_field
        self._records: list[T] = list(records)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return self._index(record_id) is not None

    @property
    def records(self) -> list[T]:
        return list(self._records)

    def _key(self, record: T) -> str:
        return getattr(record, self.id_field)

    def _index(self, record_id: object) -> Optional[int]:
        for index, record in enumerate(self._records):
            if self._key(record) == record_id:
                return index
        return None

    def get(self, record_id: str) -> Optional[T]:
        index = self._index(record_id)
        return None if index is None else self._records[index]

    def append(self, record: T) -> T:
        if self._key(record) in self:
            raise ValueError(f"Duplicate record id {self._key(record)!r}")
        self._records.append(record)
        return record

    def replace(self, record: T) -> T:
        index = self._index(self._key(record))
        if index is None:
            raise KeyError(self._key(record))
        self._records[index] = record
        return record

    def remove(self, record_id: str) -> bool:
        index = self._index(record_id)
        if index is None:
            return False
        del self._records[index]
        return True


class Draft:
    """Ephemeral form state for one record kind, separate from the store."""

    def __init__(self, defaults: Mapping[str, Any]) -> None:
        self._defaults = dict(defaults)
        self.values: Dict[str, Any] = copy.deepcopy(self._defaults)
        self.editing_id: Optional[str] = None

    @property
    def editing(self) -> bool:
        return self.editing_id is not None

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._defaults)

    def set(self, **changes: Any) -> None:
        unknown = set(changes) - set(self._defaults)
        if unknown:
            raise KeyError(f"Unknown draft field(s): {', '.join(sorted(unknown))}")
        self.values.update(changes)

    def load(self, record: Any, record_id: str) -> None:
        self.values = {name: copy.deepcopy(getattr(record, name)) for name in self._defaults}
        self.editing_id = record_id

    def reset(self) -> None:
        self.values = copy.deepcopy(self._defaults)
        self.editing_id = None


class RecordManager(Generic[T]):
    """Add/edit/update/delete/search for one record kind."""

    record_type: ClassVar[type]
    label: ClassVar[str] = "Record"
    id_field: ClassVar[str] = "id"
    required_fields: ClassVar[tuple[str, ...]] = ()
    search_fields: ClassVar[tuple[str, ...]] = ()
    draft_defaults: ClassVar[Mapping[str, Any]] = {}
    required_message: ClassVar[str] = "Please fill in all required fields."

    added_message: ClassVar[str] = "{label} added successfully."
    updated_message: ClassVar[str] = "{label} updated successfully."
    deleted_message: ClassVar[str] = "{label} deleted successfully."

    def __init__(
        self,
        records: Iterable[T] = (),
        *,
        id_factory: IdFactory = new_id,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.store: RecordStore[T] = RecordStore(records, id_field=self.id_field)
        self.draft = Draft(self.draft_defaults)
        self.notifier = notifier if notifier is not None else Notifier()
        self._new_id = id_factory

    # ------------------------------------------------------------------
    # Read side
    def __len__(self) -> int:
        return len(self.store)

    @property
    def records(self) -> list[T]:
        return self.store.records

    def get(self, record_id: str) -> Optional[T]:
        return self.store.get(record_id)

    def search(self, query: str = "", **filters: Optional[str]) -> list[T]:
        return filter_records(self.store, query, self.search_fields, filters)

    # ------------------------------------------------------------------
    # Hooks for entity modules
    def validate(self, values: Mapping[str, Any]) -> None:
        require_fields(values, self.required_fields, message=self.required_message)

    def clean(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return {name: values[name] for name in self.draft.fields if name in values}

    def build(self, record_id: str, values: Mapping[str, Any]) -> T:
        return self.record_type(**{self.id_field: record_id}, **values)

    def merge(self, original: T, values: Mapping[str, Any]) -> T:
        return dataclasses.replace(original, **values)

    def _message(self, template: str) -> str:
        return template.format(label=self.label)

    def _draft_values(self, values: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        merged = dict(self.draft.values)
        if values:
            merged.update(values)
        return merged

    # ------------------------------------------------------------------
    # Write side
    def add(self, values: Optional[Mapping[str, Any]] = None) -> T:
        """Validate the draft (optionally overridden by ``values``) and append it."""

        data = self._draft_values(values)
        self.validate(data)
        record_id = self._new_id()
        while record_id in self.store:
            record_id = self._new_id()
        record = self.store.append(self.build(record_id, self.clean(data)))
        logger.info("Added %s %s", self.label.lower(), record_id)
        self.draft.reset()
        self.notifier.success(self._message(self.added_message))
        return record

    def start_edit(self, record_id: str) -> T:
        record = self.store.get(record_id)
        if record is None:
            raise ValidationError(f"{self.label} {record_id} no longer exists.")
        self.draft.load(record, record_id)
        return record

    def update(self, values: Optional[Mapping[str, Any]] = None) -> T:
        """Validate the draft and replace the record being edited with it."""

        record_id = self.draft.editing_id
        if record_id is None:
            raise ValidationError(f"Select a {self.label.lower()} to edit first.")
        original = self.store.get(record_id)
        if original is None:
            self.draft.reset()
            raise ValidationError(f"{self.label} {record_id} no longer exists.")
        data = self._draft_values(values)
        self.validate(data)
        record = self.store.replace(self.merge(original, self.clean(data)))
        logger.info("Updated %s %s", self.label.lower(), record_id)
        self.draft.reset()
        self.notifier.success(self._message(self.updated_message))
        return record

    def save(self, values: Optional[Mapping[str, Any]] = None) -> T:
        if self.draft.editing:
            return self.update(values)
        return self.add(values)

    def cancel_edit(self) -> None:
        self.draft.reset()

    def delete(self, record_id: str) -> bool:
        """Remove ``record_id``; unknown ids are a silent no-op."""

        if not self.store.remove(record_id):
            return False
        logger.info("Deleted %s %s", self.label.lower(), record_id)
        if self.draft.editing_id == record_id:
            self.draft.reset()
        self.notifier.success(self._message(self.deleted_message))
        return True


__all__ = ["Draft", "IdFactory", "RecordManager", "RecordStore", "new_id"]

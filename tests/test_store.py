from __future__ import annotations

import itertools
from dataclasses import dataclass

import pytest

from hospitality.notifications import DESTRUCTIVE, Notification, Notifier
from hospitality.store import Draft, RecordManager, RecordStore
from hospitality.validation import ValidationError, is_blank, require_number


@dataclass(frozen=True)
class Note:
    key: str
    title: str
    body: str = ""


class NoteManager(RecordManager[Note]):
    record_type = Note
    label = "Note"
    id_field = "key"
    required_fields = ("title",)
    search_fields = ("title", "body")
    draft_defaults = {"title": "", "body": ""}


def _manager() -> NoteManager:
    counter = itertools.count(1)
    return NoteManager(
        [Note("1", "Prep list"), Note("2", "Close out", "Mop the walk-in")],
        id_factory=lambda: str(next(counter)),
    )


def test_store_keeps_insertion_order_and_rejects_duplicate_ids():
    store = RecordStore([Note("a", "First")], id_field="key")
    store.append(Note("b", "Second"))
    assert [note.key for note in store] == ["a", "b"]
    assert "b" in store

    with pytest.raises(ValueError):
        store.append(Note("a", "Again"))
    with pytest.raises(KeyError):
        store.replace(Note("zzz", "Missing"))
    assert store.remove("zzz") is False


def test_generic_manager_skips_taken_ids():
    manager = _manager()
    note = manager.add({"title": "Order ice"})

    assert note.key == "3"
    assert [n.key for n in manager.records] == ["1", "2", "3"]


def test_update_merges_draft_over_original():
    manager = _manager()
    manager.start_edit("2")
    manager.draft.set(title="Close down")
    note = manager.update()

    assert note == Note("2", "Close down", "Mop the walk-in")


def test_update_without_edit_target_fails():
    manager = _manager()
    with pytest.raises(ValidationError):
        manager.update({"title": "Nothing selected"})


def test_update_after_record_deleted_fails_and_clears_draft():
    manager = _manager()
    manager.start_edit("1")
    manager.store.remove("1")

    with pytest.raises(ValidationError):
        manager.update()
    assert not manager.draft.editing


def test_save_dispatches_on_edit_state():
    manager = _manager()
    manager.draft.set(title="New")
    assert manager.save().key == "3"

    manager.start_edit("3")
    manager.draft.set(body="Edited")
    assert manager.save() == Note("3", "New", "Edited")
    assert len(manager) == 3


def test_deleting_edited_record_resets_draft():
    manager = _manager()
    manager.start_edit("1")
    manager.delete("1")
    assert not manager.draft.editing


def test_draft_rejects_unknown_fields():
    draft = Draft({"title": ""})
    with pytest.raises(KeyError):
        draft.set(colour="red")


def test_draft_reset_does_not_share_mutable_defaults():
    draft = Draft({"items": []})
    draft.values["items"].append("x")
    draft.reset()
    assert draft.values == {"items": []}


@pytest.mark.parametrize(
    "value, blank",
    [(None, True), ("", True), ("  ", True), (0, True), (0.0, True), ([], True), ((), True),
     ("x", False), (3, False), (-1, False), ([1], False), (False, False)],
)
def test_is_blank(value, blank):
    assert is_blank(value) is blank


def test_notifier_history_and_drain():
    seen: list[Notification] = []
    notifier = Notifier(sink=seen.append)
    notifier.success("Saved")
    notifier.error("Broken")

    assert [n.severity for n in notifier.drain()] == ["info", DESTRUCTIVE]
    assert notifier.drain() == []
    assert len(notifier.history) == 2
    assert seen == list(notifier.history)

    with pytest.raises(ValueError):
        notifier.notify("Oops", "bad severity", "warning")


def test_notifier_guard_only_catches_validation_errors():
    notifier = Notifier()
    with notifier.guard():
        raise ValidationError("Please provide a reason for rejection.")
    assert notifier.last == Notification("Error", "Please provide a reason for rejection.", DESTRUCTIVE)

    with pytest.raises(RuntimeError):
        with notifier.guard():
            raise RuntimeError("boom")


def test_notifier_history_keeps_only_recent_entries():
    notifier = Notifier(history_limit=3)
    for number in range(5):
        notifier.success(f"Saved {number}")

    assert [n.message for n in notifier.history] == ["Saved 2", "Saved 3", "Saved 4"]
    assert len(notifier.drain()) == 5
    assert notifier.last.message == "Saved 4"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_require_number_refuses_non_finite(value):
    with pytest.raises(ValidationError, match="must be a number"):
        require_number(value, "quantity", minimum=0)

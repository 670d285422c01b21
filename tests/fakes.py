"""In-memory collaborators for link field tests."""

import copy
import itertools
from typing import Any, Callable, Dict, List, Optional, Sequence

from pyqt_linkfield.core.record_types import Link, Record, RecordType, is_entry_link


def link(target_id: str) -> Dict[str, Any]:
    return Link(target_id).to_payload()


def make_record(record_id: str, record_type_id: str = "person", title: Optional[str] = None,
                version: int = 1, published_version: Optional[int] = None,
                archived_version: Optional[int] = None, **fields: Dict[str, Any]) -> Record:
    all_fields = dict(fields)
    if title is not None:
        all_fields["name"] = {"en-US": title}
    return Record(
        id=record_id,
        record_type_id=record_type_id,
        version=version,
        published_version=published_version,
        archived_version=archived_version,
        fields=all_fields,
    )


def _contains_link(value: Any, target_id: str) -> bool:
    if isinstance(value, list):
        return any(_contains_link(v, target_id) for v in value)
    return is_entry_link(value, target_id)


class InMemoryRecordStore:
    """RecordStore over a dict. Every read returns a deep copy."""

    def __init__(self, records: Sequence[Record] = ()):
        self.records: Dict[str, Record] = {r.id: copy.deepcopy(r) for r in records}
        self.get_many_calls: List[List[str]] = []
        self.updates: List[str] = []
        self.fail_get_many = False
        self.fail_queries = False
        self.fail_create = False
        self.fail_update_ids: set = set()
        self._ids = itertools.count(1)

    def get_many(self, ids):
        self.get_many_calls.append(list(ids))
        if self.fail_get_many:
            raise ConnectionError("store unavailable")
        return [copy.deepcopy(self.records[i]) for i in ids if i in self.records]

    def get_one(self, record_id):
        return copy.deepcopy(self.records[record_id])

    def create(self, record_type_id, fields):
        if self.fail_create:
            raise ConnectionError("create rejected")
        record = Record(id=f"new-{next(self._ids)}", record_type_id=record_type_id, version=1,
                        fields=copy.deepcopy(fields))
        self.records[record.id] = record
        return copy.deepcopy(record)

    def update(self, record_id, record):
        if record_id in self.fail_update_ids:
            raise ConnectionError("version conflict")
        stored = copy.deepcopy(record)
        stored.version += 1
        self.records[record_id] = stored
        self.updates.append(record_id)
        return copy.deepcopy(stored)

    def query_by_backlink(self, target_id, parent_type_id, limit):
        if self.fail_queries:
            raise ConnectionError("query failed")
        matches = [
            copy.deepcopy(r) for r in self.records.values()
            if r.record_type_id == parent_type_id
            and any(_contains_link(v, target_id) for locales in r.fields.values() for v in locales.values())
        ]
        return matches[:limit]


class InMemoryTypeRegistry:
    def __init__(self, types: Sequence[RecordType] = ()):
        self.types: Dict[str, RecordType] = {t.id: t for t in types}
        self.get_one_calls: List[str] = []
        self.fail = False

    def get_many(self, ids):
        if self.fail:
            raise ConnectionError("registry unavailable")
        return [self.types[i] for i in ids if i in self.types]

    def list_all(self, limit):
        if self.fail:
            raise ConnectionError("registry unavailable")
        return list(self.types.values())[:limit]

    def get_one(self, record_type_id):
        self.get_one_calls.append(record_type_id)
        if self.fail:
            raise ConnectionError("registry unavailable")
        return self.types[record_type_id]


class FakeFieldHost:
    """Field host whose set_value echoes back to subscribers, like a real host."""

    def __init__(self, value=None, field_id="related", field_type="Array", locale="en-US",
                 validations=(), item_validations=None, record_id="article-1", record_type_id="article"):
        self.field_id = field_id
        self.field_type = field_type
        self.locale = locale
        self.validations = list(validations)
        self.item_validations = item_validations
        self.record_id = record_id
        self.record_type_id = record_type_id
        self._value = copy.deepcopy(value)
        self._listeners: List[Callable] = []
        self.set_value_calls = 0
        self.fail_set_value = False

    @property
    def current_value(self):
        return copy.deepcopy(self._value)

    def set_value(self, value):
        if self.fail_set_value:
            raise ConnectionError("field write failed")
        self.set_value_calls += 1
        self._value = copy.deepcopy(value)
        self._emit()

    def on_value_changed(self, callback):
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def external_change(self, value):
        self._value = copy.deepcopy(value)
        self._emit()

    @property
    def target_ids(self):
        return [entry["sys"]["id"] for entry in (self._value or [])]

    @property
    def listener_count(self):
        return len(self._listeners)

    def _emit(self):
        for listener in list(self._listeners):
            listener(copy.deepcopy(self._value))


class FakeDialogHost:
    def __init__(self, selection=None, answers=(), confirm_error: Optional[Exception] = None):
        self.selection = selection
        self.answers = list(answers)
        self.confirm_error = confirm_error
        self.confirm_calls: List[Dict[str, str]] = []
        self.picker_calls: List[Optional[Sequence[str]]] = []

    def select_multiple(self, allowed_type_ids=None):
        self.picker_calls.append(allowed_type_ids)
        return self.selection

    def confirm(self, title, message, confirm_label, cancel_label):
        self.confirm_calls.append({"title": title, "message": message,
                                   "confirm_label": confirm_label, "cancel_label": cancel_label})
        if self.confirm_error is not None:
            raise self.confirm_error
        return self.answers.pop(0)


class FakeNavigator:
    def __init__(self, fail=False):
        self.opened: List[tuple] = []
        self.fail = fail

    def open_record_editor(self, record_id, inline=True):
        if self.fail:
            raise RuntimeError("navigation blocked")
        self.opened.append((record_id, inline))


class RecordingNotifier:
    def __init__(self):
        self.messages: List[tuple] = []

    def success(self, message):
        self.messages.append(("success", message))

    def warning(self, message):
        self.messages.append(("warning", message))

    def error(self, message):
        self.messages.append(("error", message))

    def of_kind(self, kind):
        return [m for k, m in self.messages if k == kind]

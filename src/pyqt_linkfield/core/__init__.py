"""
Core link field primitives.

Typed records, the reference item store, duplicate detection, and the
small PyQt6 helpers (background tasks, reorderable list) the widgets build on.
"""

from .exceptions import LinkFieldError, RecordShapeError, MoveReferenceError
from .record_types import (
    Link,
    ReferenceItem,
    Record,
    RecordType,
    LinkedFrom,
    EntryStatus,
    is_entry_link,
    links_to_target_ids,
    items_to_field_value,
)
from .reference_item_store import ReferenceItemStore, Edge
from .duplicate_detector import find_duplicate_keys
from .reorderable_list_widget import ReorderableListWidget
from .background_task import BackgroundTask, BackgroundTaskManager

__all__ = [
    "LinkFieldError",
    "RecordShapeError",
    "MoveReferenceError",
    "Link",
    "ReferenceItem",
    "Record",
    "RecordType",
    "LinkedFrom",
    "EntryStatus",
    "is_entry_link",
    "links_to_target_ids",
    "items_to_field_value",
    "ReferenceItemStore",
    "Edge",
    "find_duplicate_keys",
    "ReorderableListWidget",
    "BackgroundTask",
    "BackgroundTaskManager",
]

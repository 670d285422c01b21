"""
Typed records for the link field engine.

Records coming from the store are plain dicts shaped like the content
management API. They are parsed once at the boundary into the dataclasses
below; anything the engine reads is a required attribute, so malformed
payloads fail here instead of deep inside presentation code.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pyqt_linkfield.core.exceptions import RecordShapeError

LINK_TYPE = "Link"
ENTRY_LINK_TYPE = "Entry"


def new_local_key() -> str:
    """Mint a session-unique key for a list entry."""
    return uuid.uuid4().hex


def _require(payload: Mapping[str, Any], *path: str) -> Any:
    """Walk a nested mapping, raising RecordShapeError on a missing step."""
    current: Any = payload
    for step in path:
        if not isinstance(current, Mapping) or step not in current:
            raise RecordShapeError(f"Missing required field '{'.'.join(path)}'")
        current = current[step]
    return current


@dataclass(frozen=True)
class Link:
    """A reference from a field to another entry."""
    target_id: str

    def to_payload(self) -> Dict[str, Any]:
        return {"sys": {"type": LINK_TYPE, "linkType": ENTRY_LINK_TYPE, "id": self.target_id}}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Link":
        if not is_entry_link(payload):
            raise RecordShapeError(f"Not an entry link: {payload!r}")
        return cls(target_id=payload["sys"]["id"])


def is_entry_link(value: Any, target_id: Optional[str] = None) -> bool:
    """Check whether a raw field value is an entry link (optionally to target_id)."""
    if not isinstance(value, Mapping):
        return False
    sys = value.get("sys")
    if not isinstance(sys, Mapping):
        return False
    if sys.get("type") != LINK_TYPE or sys.get("linkType") != ENTRY_LINK_TYPE:
        return False
    if "id" not in sys:
        return False
    return target_id is None or sys["id"] == target_id


@dataclass(frozen=True)
class ReferenceItem:
    """A list entry wrapping one link.

    local_key gives the entry a stable identity across reorders even when the
    same target appears twice. It is never persisted.
    """
    local_key: str
    target_id: str

    @classmethod
    def create(cls, target_id: str) -> "ReferenceItem":
        return cls(local_key=new_local_key(), target_id=target_id)

    def to_link(self) -> Link:
        return Link(self.target_id)


class EntryStatus(Enum):
    """Lifecycle status derived from version counters."""
    DRAFT = "draft"
    PUBLISHED = "published"
    CHANGED = "changed"
    ARCHIVED = "archived"


@dataclass
class Record:
    """An entry as fetched from the record store.

    Attributes:
        id: Entry identifier
        record_type_id: Content type identifier
        version: Current version counter
        published_version: Version at last publish, if ever published
        archived_version: Version at archive time, if archived
        fields: Field id -> locale -> raw value
    """
    id: str
    record_type_id: str
    version: int
    published_version: Optional[int] = None
    archived_version: Optional[int] = None
    fields: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Record":
        sys = _require(payload, "sys")
        return cls(
            id=_require(payload, "sys", "id"),
            record_type_id=_require(payload, "sys", "contentType", "sys", "id"),
            version=_require(payload, "sys", "version"),
            published_version=sys.get("publishedVersion"),
            archived_version=sys.get("archivedVersion"),
            fields={k: dict(v) for k, v in (payload.get("fields") or {}).items()},
        )


@dataclass(frozen=True)
class RecordType:
    """Content type descriptor: enough to title an entry and list creatable types."""
    id: str
    name: str
    display_field_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RecordType":
        return cls(
            id=_require(payload, "sys", "id"),
            name=_require(payload, "name"),
            display_field_id=payload.get("displayField"),
        )


@dataclass(frozen=True)
class LinkedFrom:
    """Where a candidate is already linked: parent entry, field and locale."""
    record: Record
    field_id: str
    locale: str


def links_to_target_ids(value: Optional[List[Mapping[str, Any]]]) -> List[str]:
    """Convert a field value (list of link payloads or None) to target ids."""
    return [Link.from_payload(entry).target_id for entry in (value or [])]


def items_to_field_value(items: List[ReferenceItem]) -> List[Dict[str, Any]]:
    """Convert list entries to the field's wire representation."""
    return [item.to_link().to_payload() for item in items]

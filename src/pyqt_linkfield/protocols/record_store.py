"""Record store and record type registry protocols.

Applications wrap their content management client in objects satisfying these
protocols and either pass them to LinkFieldController directly or register
them as process-wide defaults.

Example:
    class ClientRecordStore:
        def __init__(self, client):
            self._client = client

        def get_many(self, ids):
            result = self._client.entry.get_many(query={"sys.id[in]": ",".join(ids)})
            return [Record.from_payload(item) for item in result["items"]]
        ...

    register_record_store(ClientRecordStore(client))
"""

from typing import Protocol, Optional, Any, Dict, List, Sequence

from pyqt_linkfield.core.record_types import Record, RecordType


class RecordStore(Protocol):
    """Entry access used by the link field engine."""

    def get_many(self, ids: Sequence[str]) -> List[Record]:
        """Bulk lookup. Missing ids are simply absent from the result."""
        ...

    def get_one(self, record_id: str) -> Record:
        """Fetch the latest version of one entry."""
        ...

    def create(self, record_type_id: str, fields: Dict[str, Any]) -> Record:
        """Create an entry of the given type."""
        ...

    def update(self, record_id: str, record: Record) -> Record:
        """Write back a full entry."""
        ...

    def query_by_backlink(self, target_id: str, parent_type_id: str, limit: int) -> List[Record]:
        """Entries of parent_type_id referencing target_id in any field."""
        ...


class RecordTypeRegistry(Protocol):
    """Content type access used for titles and the create menu."""

    def get_many(self, ids: Sequence[str]) -> List[RecordType]:
        ...

    def list_all(self, limit: int) -> List[RecordType]:
        ...

    def get_one(self, record_type_id: str) -> RecordType:
        ...


_record_store: Optional[RecordStore] = None
_record_type_registry: Optional[RecordTypeRegistry] = None


def register_record_store(store: RecordStore) -> None:
    """Register a global record store."""
    global _record_store
    _record_store = store


def get_record_store() -> Optional[RecordStore]:
    """Get the registered record store."""
    return _record_store


def register_record_type_registry(registry: RecordTypeRegistry) -> None:
    """Register a global record type registry."""
    global _record_type_registry
    _record_type_registry = registry


def get_record_type_registry() -> Optional[RecordTypeRegistry]:
    """Get the registered record type registry."""
    return _record_type_registry

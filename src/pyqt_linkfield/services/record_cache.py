"""
Read-through cache of entries and content types.

Populated in batches from the record store. A failed batch leaves everything
that was already cached in place: a stale title is better than a blank list.
"""

import logging
from typing import Dict, Iterable, Optional

from pyqt_linkfield.core.record_types import Record, RecordType
from pyqt_linkfield.protocols.record_store import RecordStore, RecordTypeRegistry

logger = logging.getLogger(__name__)


class RecordCache:
    """
    Entry and content type cache keyed by id.

    fetch_batch() never raises. Failures are logged and is_loading is cleared
    either way, since the flag only drives placeholder text.
    """

    def __init__(self, record_store: RecordStore, type_registry: RecordTypeRegistry):
        self._record_store = record_store
        self._type_registry = type_registry
        self._records: Dict[str, Record] = {}
        self._types: Dict[str, RecordType] = {}
        self.is_loading = False

    def get_record(self, record_id: str) -> Optional[Record]:
        return self._records.get(record_id)

    def get_type(self, record_type_id: str) -> Optional[RecordType]:
        return self._types.get(record_type_id)

    def mark_loading(self) -> None:
        """Show placeholders as loading before a fetch that runs elsewhere has started."""
        self.is_loading = True

    def fetch_batch(self, target_ids: Iterable[str]) -> bool:
        """
        Fetch entries for target_ids and the content types they use.

        Args:
            target_ids: Entry ids to look up (duplicates are collapsed)

        Returns:
            True if the lookups succeeded (or there was nothing to fetch)
        """
        ids = list(dict.fromkeys(target_ids))
        if not ids:
            return True

        self.is_loading = True
        try:
            fetched = self._record_store.get_many(ids)
            records = {record.id: record for record in fetched}
            # Requested ids the store no longer returns are gone, not stale
            requested = set(ids)
            kept = {key: value for key, value in self._records.items() if key not in requested}
            self._records = {**kept, **records}

            type_ids = list(dict.fromkeys(record.record_type_id for record in fetched))
            if type_ids:
                types = self._type_registry.get_many(type_ids)
                self._types = {**self._types, **{t.id: t for t in types}}

            logger.debug(f"Fetched {len(records)}/{len(ids)} entries, {len(type_ids)} content type(s)")
            return True
        except Exception as e:
            logger.error(f"Error fetching entries {ids}: {e}")
            return False
        finally:
            self.is_loading = False

    def fetch_type(self, record_type_id: str) -> RecordType:
        """Return a cached content type, fetching it on demand. May raise."""
        cached = self._types.get(record_type_id)
        if cached is not None:
            return cached
        record_type = self._type_registry.get_one(record_type_id)
        self._types = {**self._types, record_type.id: record_type}
        return record_type

    def put_record(self, record: Record) -> None:
        """Store a record obtained outside fetch_batch (e.g. a picker selection)."""
        self._records = {**self._records, record.id: record}

"""Human-readable title and lifecycle status for cached entries."""

import logging
from typing import Any, Optional

from pyqt_linkfield.core.record_types import EntryStatus, Record, RecordType
from pyqt_linkfield.protocols.link_field_config import get_link_field_config
from pyqt_linkfield.services.record_cache import RecordCache

logger = logging.getLogger(__name__)


def display_value(record: Record, record_type: Optional[RecordType], locale: str) -> Optional[str]:
    """Pure function: display field value in locale, else first locale value, else None."""
    if record_type is None or not record_type.display_field_id:
        return None
    localized = record.fields.get(record_type.display_field_id)
    if not localized:
        return None
    value: Any = localized.get(locale)
    if not value:
        value = next(iter(localized.values()), None)
    return str(value) if value else None


def status_of(record: Record) -> EntryStatus:
    """
    Derive entry status from version counters.

    Publishing bumps the version once, so an untouched published entry sits at
    published_version + 1 and anything above that has unpublished edits.
    """
    if record.archived_version:
        return EntryStatus.ARCHIVED
    if record.published_version and record.version == record.published_version + 1:
        return EntryStatus.PUBLISHED
    if record.published_version and record.version > record.published_version + 1:
        return EntryStatus.CHANGED
    return EntryStatus.DRAFT


class TitleStatusResolver:
    """Resolves titles through the cache, fetching unknown content types on demand."""

    def __init__(self, cache: RecordCache, locale: str):
        self._cache = cache
        self._locale = locale

    def title_of(self, record: Record) -> str:
        """Title of record. Never raises; falls back to the untitled label."""
        untitled = get_link_field_config().untitled_label
        try:
            record_type = self._cache.fetch_type(record.record_type_id)
            return display_value(record, record_type, self._locale) or untitled
        except Exception as e:
            logger.debug(f"Title resolution failed for {record.id}: {e}")
            return untitled

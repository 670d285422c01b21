"""Duplicate reference detection."""

from typing import Iterable, Set

from pyqt_linkfield.core.record_types import ReferenceItem


def find_duplicate_keys(items: Iterable[ReferenceItem]) -> Set[str]:
    """
    Pure function: local keys of entries whose target already appeared earlier.

    The first occurrence of a repeated target is never flagged, only the second
    and later ones.
    """
    seen: Set[str] = set()
    duplicates: Set[str] = set()
    for item in items:
        if item.target_id in seen:
            duplicates.add(item.local_key)
        else:
            seen.add(item.target_id)
    return duplicates

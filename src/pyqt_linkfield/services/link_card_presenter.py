"""
Card view models for the link list.

Rebuilt from scratch on every change: the collection is small, and deriving
everything from the store and cache avoids stale derived state.
"""

from dataclasses import dataclass
from typing import List

from pyqt_linkfield.core.duplicate_detector import find_duplicate_keys
from pyqt_linkfield.core.record_types import EntryStatus, ReferenceItem
from pyqt_linkfield.protocols.link_field_config import get_link_field_config
from pyqt_linkfield.services.record_cache import RecordCache
from pyqt_linkfield.services.title_status_resolver import display_value, status_of


@dataclass(frozen=True)
class LinkCard:
    """Everything a list row needs to render one reference."""
    local_key: str
    target_id: str
    index: int
    title: str
    type_label: str
    status: EntryStatus
    is_duplicate: bool
    can_move_to_top: bool
    can_move_to_bottom: bool


def build_cards(items: List[ReferenceItem], cache: RecordCache, locale: str) -> List[LinkCard]:
    """
    Pure function of the collection and cache contents.

    Title precedence for an item:
        record and type cached -> display value or untitled label
        record cached only     -> untitled label
        nothing cached         -> loading label while fetching, else not-found label
    """
    config = get_link_field_config()
    duplicates = find_duplicate_keys(items)
    last = len(items) - 1

    cards = []
    for index, item in enumerate(items):
        record = cache.get_record(item.target_id)
        record_type = cache.get_type(record.record_type_id) if record else None

        if record is not None:
            title = display_value(record, record_type, locale) or config.untitled_label
        elif cache.is_loading:
            title = config.loading_label
        else:
            title = config.not_found_label

        cards.append(LinkCard(
            local_key=item.local_key,
            target_id=item.target_id,
            index=index,
            title=title,
            type_label=record_type.name if record_type else config.default_type_label,
            status=status_of(record) if record else EntryStatus.DRAFT,
            is_duplicate=item.local_key in duplicates,
            can_move_to_top=index > 0,
            can_move_to_bottom=index < last,
        ))
    return cards

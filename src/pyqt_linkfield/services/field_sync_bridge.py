"""
Two-way bridge between the reference item store and the field value.

Outbound, every store mutation is written to the field right away. Inbound,
any value change notification (including the echo of our own write)
replaces the whole collection. The field value is the source of truth, so
an external change always wins over a local mutation still in flight.
"""

import logging
from typing import Callable, List, Optional

from pyqt_linkfield.core.record_types import ReferenceItem, items_to_field_value, links_to_target_ids
from pyqt_linkfield.core.reference_item_store import ReferenceItemStore
from pyqt_linkfield.protocols.field_host import FieldHost, FieldValue

logger = logging.getLogger(__name__)


class FieldSyncBridge:
    """Connects one ReferenceItemStore to one FieldHost."""

    def __init__(
        self,
        store: ReferenceItemStore,
        field_host: FieldHost,
        on_replaced: Optional[Callable[[List[ReferenceItem]], None]] = None,
    ):
        self._store = store
        self._field_host = field_host
        self._on_replaced = on_replaced
        self._detach: Optional[Callable[[], None]] = None

    @property
    def is_attached(self) -> bool:
        return self._detach is not None

    def load_initial(self) -> List[ReferenceItem]:
        """Populate the store from the field's current value."""
        return self._apply(self._field_host.current_value)

    def attach(self) -> None:
        """Start listening for value changes."""
        if self._detach is None:
            self._detach = self._field_host.on_value_changed(self._on_value_changed)

    def detach(self) -> None:
        if self._detach is not None:
            self._detach()
            self._detach = None

    def push(self, items: Optional[List[ReferenceItem]] = None) -> None:
        """Write the store contents (or the given items) to the field. May raise."""
        if items is None:
            items = self._store.items
        value = items_to_field_value(items)
        logger.debug(f"Pushing {len(value)} link(s) to field {self._field_host.field_id}")
        self._field_host.set_value(value)

    def _on_value_changed(self, value: FieldValue) -> None:
        self._apply(value)

    def _apply(self, value: FieldValue) -> List[ReferenceItem]:
        items = self._store.replace_all(links_to_target_ids(value))
        if self._on_replaced:
            self._on_replaced(items)
        return items

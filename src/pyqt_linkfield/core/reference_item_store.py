"""
Ordered store of reference items backing one link field.

Every operation is synchronous over in-memory state. The store never talks to
the field itself; callers push the new contents through FieldSyncBridge right
after each mutation.
"""

import logging
from enum import Enum
from typing import Iterable, List

from pyqt_linkfield.core.record_types import ReferenceItem

logger = logging.getLogger(__name__)


class Edge(Enum):
    """Target edge for move_to_edge."""
    START = "start"
    END = "end"


class ReferenceItemStore:
    """
    Ordered collection of ReferenceItem.

    Usage:
        store = ReferenceItemStore()
        store.replace_all(["a", "b"])      # external value change
        store.append(["c"])                # user added an entry
        store.move_to_edge(2, Edge.START)  # "Move to top"
        store.reorder(0, 1)                # drag and drop
    """

    def __init__(self, items: Iterable[ReferenceItem] = ()):
        self._items: List[ReferenceItem] = list(items)

    @property
    def items(self) -> List[ReferenceItem]:
        """Copy of the current collection."""
        return list(self._items)

    @property
    def target_ids(self) -> List[str]:
        return [item.target_id for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def append(self, target_ids: Iterable[str]) -> List[ReferenceItem]:
        """Append new entries for target_ids. Returns the created items."""
        new_items = [ReferenceItem.create(target_id) for target_id in target_ids]
        self._items.extend(new_items)
        logger.debug(f"Appended {len(new_items)} item(s), collection size {len(self._items)}")
        return new_items

    def remove_by_key(self, local_key: str) -> bool:
        """Remove the entry with local_key. Returns False if it is not present."""
        remaining = [item for item in self._items if item.local_key != local_key]
        if len(remaining) == len(self._items):
            logger.debug(f"remove_by_key: no item with key {local_key}")
            return False
        self._items = remaining
        return True

    def move_to_edge(self, index: int, edge: Edge) -> bool:
        """Move the entry at index to the start or end, keeping the others in order."""
        if not 0 <= index < len(self._items):
            logger.debug(f"move_to_edge: index {index} out of range")
            return False
        moved = self._items.pop(index)
        if edge is Edge.START:
            self._items.insert(0, moved)
        else:
            self._items.append(moved)
        return True

    def reorder(self, from_index: int, to_index: int) -> bool:
        """Remove the entry at from_index and insert it at to_index."""
        size = len(self._items)
        if not (0 <= from_index < size and 0 <= to_index < size):
            logger.debug(f"reorder: {from_index} -> {to_index} out of range for size {size}")
            return False
        moved = self._items.pop(from_index)
        self._items.insert(to_index, moved)
        return True

    def replace_all(self, target_ids: Iterable[str]) -> List[ReferenceItem]:
        """Replace the whole collection, minting fresh local keys for every target."""
        self._items = [ReferenceItem.create(target_id) for target_id in target_ids]
        logger.debug(f"Replaced collection with {len(self._items)} item(s)")
        return self.items

    def snapshot(self) -> List[ReferenceItem]:
        return list(self._items)

    def restore(self, items: Iterable[ReferenceItem]) -> None:
        """Put back a snapshot taken before a mutation whose push failed."""
        self._items = list(items)

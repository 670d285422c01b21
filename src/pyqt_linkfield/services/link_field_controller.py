"""
Link field controller.

Owns the store, cache and services for one field and turns user actions into
store mutations that are pushed to the field immediately. Qt-free: widgets
subscribe with add_listener() and may supply a fetch runner that moves batch
fetches off the GUI thread.
"""

import logging
from typing import Callable, Iterable, List, Optional

from pyqt_linkfield.core.record_types import RecordType, ReferenceItem
from pyqt_linkfield.core.reference_item_store import Edge, ReferenceItemStore
from pyqt_linkfield.protocols.dialog_host import DialogHost, Navigator, Notifier
from pyqt_linkfield.protocols.field_host import FieldHost
from pyqt_linkfield.protocols.link_field_config import get_link_field_config
from pyqt_linkfield.protocols.record_store import (
    RecordStore,
    RecordTypeRegistry,
    get_record_store,
    get_record_type_registry,
)
from pyqt_linkfield.services.allowed_types_service import allowed_type_ids, load_allowed_types
from pyqt_linkfield.services.conflict_resolver import ConflictResolver, ResolutionResult
from pyqt_linkfield.services.field_sync_bridge import FieldSyncBridge
from pyqt_linkfield.services.link_card_presenter import LinkCard, build_cards
from pyqt_linkfield.services.record_cache import RecordCache
from pyqt_linkfield.services.refresh_controller import NavigationRefreshController
from pyqt_linkfield.services.title_status_resolver import TitleStatusResolver

logger = logging.getLogger(__name__)

FetchRunner = Callable[[List[str]], None]


class LinkFieldController:
    """
    Engine for one multi-reference field.

    Usage:
        controller = LinkFieldController(field_host, dialogs, navigator, notifier,
                                         record_store=store, type_registry=registry)
        controller.add_listener(widget.refresh_cards)
        controller.start()          # load value, subscribe, fetch entries

        controller.add_existing()   # picker + conflict resolution
        controller.reorder(0, 2)    # drag and drop
        controller.stop()
    """

    def __init__(
        self,
        field_host: FieldHost,
        dialogs: DialogHost,
        navigator: Navigator,
        notifier: Notifier,
        record_store: Optional[RecordStore] = None,
        type_registry: Optional[RecordTypeRegistry] = None,
        fetch_runner: Optional[FetchRunner] = None,
    ):
        record_store = record_store or get_record_store()
        type_registry = type_registry or get_record_type_registry()
        if record_store is None:
            raise RuntimeError("No record store available. Pass one or call register_record_store(...).")
        if type_registry is None:
            raise RuntimeError("No record type registry available. Pass one or call register_record_type_registry(...).")

        self.field_host = field_host
        self.dialogs = dialogs
        self.navigator = navigator
        self.notifier = notifier
        self.record_store = record_store
        self.type_registry = type_registry

        self.store = ReferenceItemStore()
        self.cache = RecordCache(record_store, type_registry)
        self.titles = TitleStatusResolver(self.cache, field_host.locale)
        self.conflicts = ConflictResolver(record_store, field_host, self.titles, dialogs, notifier)
        self.bridge = FieldSyncBridge(self.store, field_host, on_replaced=self._on_collection_replaced)
        self.navigation = NavigationRefreshController(self.refresh)

        self.allowed_types: List[RecordType] = []
        self._fetch_runner: FetchRunner = fetch_runner or self._fetch_now
        self._listeners: List[Callable[[], None]] = []

    # ========== LIFECYCLE ==========

    def start(self) -> None:
        """Load the current value, subscribe to changes and load allowed types."""
        self.bridge.load_initial()
        self.bridge.attach()
        self.allowed_types = load_allowed_types(self.field_host, self.type_registry)
        self._notify()

    def stop(self) -> None:
        self.bridge.detach()

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_fetch_runner(self, runner: Optional[FetchRunner]) -> None:
        self._fetch_runner = runner or self._fetch_now

    def notify_changed(self) -> None:
        """Tell listeners to re-render, e.g. after a background fetch finished."""
        self._notify()

    # ========== DERIVED STATE ==========

    @property
    def items(self) -> List[ReferenceItem]:
        return self.store.items

    @property
    def is_loading(self) -> bool:
        return self.cache.is_loading

    def cards(self) -> List[LinkCard]:
        return build_cards(self.store.items, self.cache, self.field_host.locale)

    # ========== FETCHING ==========

    def refresh(self) -> None:
        """Re-fetch every entry currently referenced."""
        self._fetch(self.store.target_ids)

    def _fetch(self, target_ids: Iterable[str]) -> None:
        ids = list(dict.fromkeys(target_ids))
        if not ids:
            return
        self.cache.mark_loading()
        self._notify()
        self._fetch_runner(ids)

    def _fetch_now(self, ids: List[str]) -> None:
        self.cache.fetch_batch(ids)
        self._notify()

    def _on_collection_replaced(self, items: List[ReferenceItem]) -> None:
        self._notify()
        self._fetch(item.target_id for item in items)

    # ========== MUTATIONS ==========

    def _commit(self, mutate: Callable[[], bool]) -> bool:
        """
        Apply a store mutation and push it to the field.

        Raises whatever the push raised, after restoring the collection.
        """
        snapshot = self.store.snapshot()
        if not mutate():
            return False
        try:
            self.bridge.push(self.store.items)
        except Exception:
            self.store.restore(snapshot)
            self._notify()
            raise
        self._notify()
        return True

    def _commit_or_notify(self, mutate: Callable[[], bool], action: str) -> bool:
        try:
            return self._commit(mutate)
        except Exception as e:
            logger.error(f"Error applying {action}: {e}")
            self.notifier.error("Could not update the field. Please try again.")
            return False

    def remove(self, local_key: str) -> bool:
        return self._commit_or_notify(lambda: self.store.remove_by_key(local_key), "remove")

    def move_to_edge(self, index: int, edge: Edge) -> bool:
        return self._commit_or_notify(lambda: self.store.move_to_edge(index, edge), f"move to {edge.value}")

    def move_to_top(self, index: int) -> bool:
        return self.move_to_edge(index, Edge.START)

    def move_to_bottom(self, index: int) -> bool:
        return self.move_to_edge(index, Edge.END)

    def reorder(self, from_index: int, to_index: int) -> bool:
        return self._commit_or_notify(lambda: self.store.reorder(from_index, to_index), "reorder")

    # ========== USER ACTIONS ==========

    def add_existing(self) -> Optional[ResolutionResult]:
        """
        Pick existing entries and add them, resolving cross-parent conflicts.

        Returns:
            The resolution result, or None if the picker was cancelled or the
            add failed
        """
        try:
            selected = self.dialogs.select_multiple(allowed_type_ids(self.field_host))
            if not selected:
                return None

            result = self.conflicts.resolve(selected, self.store.target_ids)
            if not result.to_add:
                return result

            for record in result.to_add:
                self.cache.put_record(record)
            self._commit(lambda: bool(self.store.append(record.id for record in result.to_add)))

            if len(result.to_add) < result.selected_count and result.move_requests == 0:
                self.notifier.success(f"Added {len(result.to_add)} entries. Duplicates were skipped.")
            return result
        except Exception:
            logger.exception("Error adding existing entries")
            self.notifier.error("Could not add entries. Check the log for details.")
            return None

    def create_new(self, record_type_id: str) -> Optional[str]:
        """
        Create an empty entry of record_type_id, link it and open its editor.

        Returns:
            The new entry id, or None if creation failed
        """
        try:
            record = self.record_store.create(record_type_id, {})
            self.cache.put_record(record)
            self._commit(lambda: bool(self.store.append([record.id])))

            self.navigation.mark_navigating()
            self.navigator.open_record_editor(record.id, inline=get_link_field_config().open_editor_inline)
            return record.id
        except Exception as e:
            logger.error(f"Error creating entry of type {record_type_id}: {e}")
            self.notifier.error("Could not create entry. Check the log for details.")
            return None

    def edit(self, target_id: str) -> None:
        """Open the editor of a linked entry; its changes are picked up on return."""
        try:
            self.navigation.mark_navigating()
            self.navigator.open_record_editor(target_id, inline=get_link_field_config().open_editor_inline)
        except Exception as e:
            logger.error(f"Error opening entry {target_id}: {e}")

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

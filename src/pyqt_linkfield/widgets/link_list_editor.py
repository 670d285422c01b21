"""
Link List Editor Widget for PyQt6.

Displays the referenced entries of one multi-reference field as a
drag-reorderable list of cards with an "Add content" menu. All state lives in
LinkFieldController; this widget renders its cards and forwards user actions.
"""

import logging
from typing import List, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel,
    QListWidgetItem, QMenu
)
from PyQt6.QtCore import Qt, QPoint, QEvent

from pyqt_linkfield.core import BackgroundTaskManager, ReorderableListWidget
from pyqt_linkfield.services.link_card_presenter import LinkCard
from pyqt_linkfield.services.link_field_controller import LinkFieldController
from pyqt_linkfield.theming import ColorScheme
from pyqt_linkfield.widgets.link_card_delegate import CARD_ROLE, LinkCardDelegate

logger = logging.getLogger(__name__)

LOCAL_KEY_ROLE = Qt.ItemDataRole.UserRole
TARGET_ID_ROLE = Qt.ItemDataRole.UserRole + 1

ADD_EXISTING_TEXT = "Add existing content"
CREATE_SECTION_TEXT = "Create new entry"
NO_TYPES_TEXT = "No allowed content types found"


class LinkListEditorWidget(QWidget):
    """
    Card list editor for a link field.

    Double-click or Enter on a card opens the linked entry; the context menu
    offers Remove / Move to top / Move to bottom. Returning to the widget
    after opening an entry (pointer enter or its window being activated)
    re-fetches the entries once.
    """

    def __init__(self, controller: LinkFieldController, color_scheme: Optional[ColorScheme] = None,
                 fetch_in_background: bool = True, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.color_scheme = color_scheme or ColorScheme()
        self._task_manager = BackgroundTaskManager()
        self._cards: List[LinkCard] = []

        if fetch_in_background:
            self.controller.set_fetch_runner(self._run_fetch)

        self.setup_ui()
        self._setup_connections()
        self.controller.add_listener(self.refresh_cards)
        self.refresh_cards()

    def setup_ui(self):
        """Setup the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        cs = self.color_scheme
        self.item_list = ReorderableListWidget()
        self.item_list.setStyleSheet(f"""
            QListWidget {{
                background-color: {cs.to_hex(cs.panel_bg)};
                border: none;
            }}
        """)
        self.item_list.setItemDelegate(LinkCardDelegate(cs, self.item_list))
        self.item_list.setMouseTracking(True)
        layout.addWidget(self.item_list)

        footer = QHBoxLayout()
        footer.addStretch()
        self.add_button = QPushButton("Add content")
        self.add_menu = QMenu(self.add_button)
        self.add_button.setMenu(self.add_menu)
        footer.addWidget(self.add_button)
        footer.addStretch()
        layout.addLayout(footer)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(f"color: {cs.to_hex(cs.text_secondary)}; font-size: 11px;")
        layout.addWidget(self.status_label)

    def _setup_connections(self):
        # Queued: the re-render clears the list, which must not happen inside dropEvent
        self.item_list.items_reordered.connect(self.controller.reorder, Qt.ConnectionType.QueuedConnection)
        self.item_list.itemActivated.connect(self._on_item_activated)
        self.item_list.customContextMenuRequested.connect(self._show_card_menu)

    # ========== RENDERING ==========

    def refresh_cards(self):
        """Rebuild the list and the add menu from the controller."""
        self._cards = self.controller.cards()

        self.item_list.clear()
        for card in self._cards:
            list_item = QListWidgetItem(f"{card.title}\n{card.type_label} · {card.status.value}")
            list_item.setData(LOCAL_KEY_ROLE, card.local_key)
            list_item.setData(TARGET_ID_ROLE, card.target_id)
            list_item.setData(CARD_ROLE, card)
            if card.is_duplicate:
                list_item.setToolTip("This entry is already linked above.")
            else:
                list_item.setToolTip(f"Status: {card.status.value}")
            self.item_list.addItem(list_item)

        self._rebuild_add_menu()

    def _rebuild_add_menu(self):
        self.add_menu.clear()
        add_existing = self.add_menu.addAction(ADD_EXISTING_TEXT)
        add_existing.triggered.connect(lambda checked=False: self.controller.add_existing())
        self.add_menu.addSeparator()
        self.add_menu.addSection(CREATE_SECTION_TEXT)

        if not self.controller.allowed_types:
            placeholder = self.add_menu.addAction(NO_TYPES_TEXT)
            placeholder.setEnabled(False)
            return

        for record_type in self.controller.allowed_types:
            action = self.add_menu.addAction(record_type.name)
            action.triggered.connect(
                lambda checked=False, type_id=record_type.id: self.controller.create_new(type_id)
            )

    def build_card_menu(self, card: LinkCard) -> QMenu:
        """Context menu for one card; move actions only where they would move it."""
        menu = QMenu(self)
        remove = menu.addAction("Remove")
        remove.triggered.connect(lambda checked=False: self.controller.remove(card.local_key))

        if card.can_move_to_top or card.can_move_to_bottom:
            menu.addSeparator()
        if card.can_move_to_top:
            top = menu.addAction("Move to top")
            top.triggered.connect(lambda checked=False: self.controller.move_to_top(card.index))
        if card.can_move_to_bottom:
            bottom = menu.addAction("Move to bottom")
            bottom.triggered.connect(lambda checked=False: self.controller.move_to_bottom(card.index))
        return menu

    def _show_card_menu(self, pos: QPoint):
        list_item = self.item_list.itemAt(pos)
        if list_item is None:
            return
        row = self.item_list.row(list_item)
        if not 0 <= row < len(self._cards):
            return
        menu = self.build_card_menu(self._cards[row])
        menu.exec(self.item_list.viewport().mapToGlobal(pos))

    # ========== EVENTS ==========

    def _on_item_activated(self, list_item: QListWidgetItem):
        target_id = list_item.data(TARGET_ID_ROLE)
        if target_id:
            self.controller.edit(target_id)

    def changeEvent(self, event) -> None:
        """Window re-activation, e.g. closing an in-app entry editor, is the fallback signal."""
        if event.type() == QEvent.Type.ActivationChange and self.isActiveWindow():
            self.controller.navigation.on_window_focus()
        super().changeEvent(event)

    def enterEvent(self, event) -> None:
        """Pointer re-entry is the reliable 'user is back' signal."""
        self.controller.navigation.on_pointer_enter()
        super().enterEvent(event)

    def _run_fetch(self, ids: List[str]):
        self._task_manager.run(
            target=self.controller.cache.fetch_batch,
            args=(ids,),
            on_success=lambda _ok: self.controller.notify_changed(),
            on_error=lambda e: logger.error(f"Background fetch failed: {e}"),
        )

    def closeEvent(self, event):
        self._task_manager.cleanup()
        self.controller.remove_listener(self.refresh_cards)
        self.controller.stop()
        super().closeEvent(event)

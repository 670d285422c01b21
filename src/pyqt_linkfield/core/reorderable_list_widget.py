"""
Drag-and-drop reorderable QListWidget for link cards.

The widget only reports the move; the owner applies it to the store, pushes
the field value and re-renders from the store.
"""

from PyQt6.QtWidgets import QListWidget
from PyQt6.QtCore import pyqtSignal, Qt


class ReorderableListWidget(QListWidget):
    """QListWidget that emits items_reordered(from_index, to_index) after a drop."""

    items_reordered = pyqtSignal(int, int)  # from_index, to_index

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setDragDropMode(QListWidget.DragDropMode.InternalMove)
        self.setDefaultDropAction(Qt.DropAction.MoveAction)
        self.setSelectionMode(QListWidget.SelectionMode.SingleSelection)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)

        # Cards carry a title line and a type/status line
        self.setWordWrap(True)
        self.setTextElideMode(Qt.TextElideMode.ElideNone)

    def dropEvent(self, event):
        """Handle drop event and emit signal with indices."""
        source_items = self.selectedItems()
        if not source_items:
            super().dropEvent(event)
            return

        source_index = self.row(source_items[0])
        super().dropEvent(event)
        target_index = self.row(source_items[0])

        # A drop outside the list or onto the same slot is not a move
        if source_index != target_index:
            self.items_reordered.emit(source_index, target_index)

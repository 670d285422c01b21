"""Qt implementations of the dialog and notifier protocols."""

import logging
from typing import Callable, List, Optional, Sequence

from PyQt6.QtWidgets import QLabel, QMessageBox, QWidget

from pyqt_linkfield.core.record_types import Record
from pyqt_linkfield.theming import ColorScheme

logger = logging.getLogger(__name__)

EntryPicker = Callable[[Optional[Sequence[str]]], Optional[List[Record]]]


class QtDialogHost:
    """
    DialogHost backed by QMessageBox for confirmations.

    The entry picker is application specific (it needs a search UI over the
    record store), so it is passed in as a callable.
    """

    def __init__(self, picker: EntryPicker, parent: Optional[QWidget] = None):
        self._picker = picker
        self._parent = parent

    def select_multiple(self, allowed_type_ids: Optional[Sequence[str]] = None) -> Optional[List[Record]]:
        return self._picker(allowed_type_ids)

    def confirm(self, title: str, message: str, confirm_label: str, cancel_label: str) -> bool:
        box = QMessageBox(self._parent)
        box.setIcon(QMessageBox.Icon.Question)
        box.setWindowTitle(title)
        box.setText(message)
        confirm_button = box.addButton(confirm_label, QMessageBox.ButtonRole.AcceptRole)
        box.addButton(cancel_label, QMessageBox.ButtonRole.RejectRole)
        box.setDefaultButton(confirm_button)
        box.exec()
        return box.clickedButton() is confirm_button


class QtNotifier:
    """Notifier that shows the latest notice in a status label."""

    def __init__(self, label: QLabel, color_scheme: Optional[ColorScheme] = None):
        self._label = label
        self._color_scheme = color_scheme or ColorScheme()

    def success(self, message: str) -> None:
        self._show(message, self._color_scheme.status_published)
        logger.info(message)

    def warning(self, message: str) -> None:
        self._show(message, self._color_scheme.status_draft)
        logger.warning(message)

    def error(self, message: str) -> None:
        self._show(message, self._color_scheme.duplicate_border)
        logger.error(message)

    def _show(self, message: str, color) -> None:
        self._label.setStyleSheet(f"color: {self._color_scheme.to_hex(color)};")
        self._label.setText(message)

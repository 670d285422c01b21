"""
PyQt6 widgets for editing link fields.
"""

from .link_list_editor import LinkListEditorWidget
from .link_card_delegate import LinkCardDelegate
from .qt_hosts import QtDialogHost, QtNotifier

__all__ = [
    "LinkListEditorWidget",
    "LinkCardDelegate",
    "QtDialogHost",
    "QtNotifier",
]

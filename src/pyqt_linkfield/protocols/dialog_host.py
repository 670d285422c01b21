"""Dialog, navigator and notifier protocols."""

from typing import Protocol, Optional, List, Sequence

from pyqt_linkfield.core.record_types import Record


class DialogHost(Protocol):
    """Entry picker and confirmation dialogs."""

    def select_multiple(self, allowed_type_ids: Optional[Sequence[str]] = None) -> Optional[List[Record]]:
        """Show the entry picker. Returns None if the user cancelled."""
        ...

    def confirm(self, title: str, message: str, confirm_label: str, cancel_label: str) -> bool:
        """Show a modal confirmation. True means the confirm button was chosen."""
        ...


class Navigator(Protocol):
    """Opens the full editor for a linked record."""

    def open_record_editor(self, record_id: str, inline: bool = True) -> None:
        ...


class Notifier(Protocol):
    """User-visible, non-blocking notices."""

    def success(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

"""
Resync after the user returns from editing a linked entry.

Opening an entry editor sends the user away from this field; whatever they
changed there (title, publish state) is invisible here until entries are
fetched again. Two signals mean "the user is back": the pointer entering the
editor widget, and the window regaining focus. Focus is unreliable when the
editor is embedded, so pointer entry is the primary signal. Whichever fires
first consumes the flag, so one navigation causes one refresh.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class NavigationRefreshController:
    """Single-flight refresh guard around navigation to a linked entry."""

    def __init__(self, refresh: Callable[[], None]):
        self._refresh = refresh
        self._navigating = False

    @property
    def is_navigating(self) -> bool:
        return self._navigating

    def mark_navigating(self) -> None:
        """Call immediately before opening a linked entry's editor."""
        self._navigating = True

    def on_pointer_enter(self) -> bool:
        return self._consume("pointer enter")

    def on_window_focus(self) -> bool:
        return self._consume("window focus")

    def _consume(self, source: str) -> bool:
        if not self._navigating:
            return False
        self._navigating = False
        logger.debug(f"Returned from navigation ({source}), refreshing entries")
        self._refresh()
        return True

"""
Color scheme for the link list editor.

Semantic color names for cards, duplicate highlighting and entry status
badges, with dark (default) and light variants.
"""

from dataclasses import dataclass
from typing import Tuple

from PyQt6.QtGui import QColor

from pyqt_linkfield.core.record_types import EntryStatus


@dataclass
class ColorScheme:
    """
    Semantic colors for the link list editor.

    Duplicate colors mark the second and later cards pointing at the same
    entry; status colors follow the usual content platform convention
    (draft amber, published green, changed blue, archived grey).
    """

    # ========== BASE UI COLORS ==========

    panel_bg: Tuple[int, int, int] = (30, 30, 30)        # #1e1e1e - List background
    card_bg: Tuple[int, int, int] = (43, 43, 43)         # #2b2b2b - Card background
    border_color: Tuple[int, int, int] = (85, 85, 85)    # #555555 - Card border
    border_hover: Tuple[int, int, int] = (77, 171, 247)  # #4dabf7 - Hovered/dragged card

    # ========== TEXT COLORS ==========

    text_primary: Tuple[int, int, int] = (255, 255, 255)   # #ffffff - Entry title
    text_secondary: Tuple[int, int, int] = (204, 204, 204) # #cccccc - Type label

    # ========== SELECTION ==========

    selection_bg: Tuple[int, int, int] = (0, 120, 212)     # #0078d4
    selection_text: Tuple[int, int, int] = (255, 255, 255) # #ffffff

    # ========== DUPLICATE HIGHLIGHT ==========

    duplicate_border: Tuple[int, int, int] = (218, 62, 62) # #da3e3e
    duplicate_bg: Tuple[int, int, int] = (74, 32, 32)      # #4a2020

    # ========== ENTRY STATUS ==========

    status_draft: Tuple[int, int, int] = (255, 170, 0)      # #ffaa00
    status_published: Tuple[int, int, int] = (0, 200, 90)   # #00c85a
    status_changed: Tuple[int, int, int] = (0, 170, 255)    # #00aaff
    status_archived: Tuple[int, int, int] = (140, 140, 140) # #8c8c8c

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    def status_color(self, status: EntryStatus) -> Tuple[int, int, int]:
        """Resolve an entry status to its badge color."""
        return {
            EntryStatus.DRAFT: self.status_draft,
            EntryStatus.PUBLISHED: self.status_published,
            EntryStatus.CHANGED: self.status_changed,
            EntryStatus.ARCHIVED: self.status_archived,
        }[status]

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """Light variant matching a white host page."""
        return cls(
            panel_bg=(255, 255, 255),
            card_bg=(255, 255, 255),
            border_color=(207, 217, 224),       # #cfd9e0
            text_primary=(0, 0, 0),
            text_secondary=(80, 80, 80),
            selection_bg=(0, 120, 215),
            duplicate_bg=(255, 245, 245),       # #fff5f5
            status_draft=(200, 100, 0),
            status_published=(0, 130, 60),
            status_changed=(0, 100, 200),
            status_archived=(110, 110, 110),
        )

"""
Item delegate that paints link cards.

The list stylesheet only styles the panel; every card surface (background,
border, status swatch, text) is painted here from the LinkCard stored on the
item, so duplicate highlighting cannot be overridden by ::item rules.
"""

from PyQt6.QtWidgets import QStyledItemDelegate, QStyleOptionViewItem, QStyle
from PyQt6.QtGui import QPainter, QPen, QFontMetrics
from PyQt6.QtCore import Qt, QRect, QSize

from pyqt_linkfield.theming import ColorScheme

# Item data role holding the LinkCard for a row (must match the editor)
CARD_ROLE = Qt.ItemDataRole.UserRole + 2

CARD_SPACING = 8       # Gap below each card
CARD_PADDING = 8       # Inner padding
CARD_RADIUS = 6
SWATCH_SIZE = 10       # Status swatch edge length


class LinkCardDelegate(QStyledItemDelegate):
    """Paints one card per row: surface, border, status swatch, title and type line."""

    def __init__(self, color_scheme: ColorScheme, parent=None):
        super().__init__(parent)
        self.color_scheme = color_scheme

    def card_rect(self, option_rect: QRect) -> QRect:
        """Card surface inside a row, leaving CARD_SPACING below it."""
        return option_rect.adjusted(0, 0, -1, -CARD_SPACING - 1)

    def paint(self, painter: QPainter, option: QStyleOptionViewItem, index) -> None:
        card = index.data(CARD_ROLE)
        if card is None:
            super().paint(painter, option, index)
            return

        cs = self.color_scheme
        rect = self.card_rect(option.rect)
        is_selected = bool(option.state & QStyle.StateFlag.State_Selected)
        is_hovered = bool(option.state & QStyle.StateFlag.State_MouseOver)

        if card.is_duplicate:
            background, border = cs.duplicate_bg, cs.duplicate_border
        else:
            background, border = cs.card_bg, cs.border_color
        if is_selected:
            border = cs.selection_bg
        elif is_hovered and not card.is_duplicate:
            border = cs.border_hover

        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(QPen(cs.to_qcolor(border), 2 if is_selected else 1))
        painter.setBrush(cs.to_qcolor(background))
        painter.drawRoundedRect(rect, CARD_RADIUS, CARD_RADIUS)

        fm = QFontMetrics(option.font)
        x = rect.left() + CARD_PADDING
        y = rect.top() + CARD_PADDING

        # Status swatch, vertically centered on the title line
        swatch_top = y + (fm.height() - SWATCH_SIZE) // 2
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(cs.to_qcolor(cs.status_color(card.status)))
        painter.drawEllipse(x, swatch_top, SWATCH_SIZE, SWATCH_SIZE)

        text_left = x + SWATCH_SIZE + CARD_PADDING
        text_width = max(0, rect.right() - CARD_PADDING - text_left)
        painter.setFont(option.font)

        painter.setPen(cs.to_qcolor(cs.text_primary))
        title = fm.elidedText(card.title, Qt.TextElideMode.ElideRight, text_width)
        painter.drawText(text_left, y + fm.ascent(), title)

        painter.setPen(cs.to_qcolor(cs.text_secondary))
        subtitle = fm.elidedText(f"{card.type_label} · {card.status.value}", Qt.TextElideMode.ElideRight, text_width)
        painter.drawText(text_left, y + fm.height() + fm.ascent(), subtitle)

        painter.restore()

    def sizeHint(self, option: QStyleOptionViewItem, index) -> QSize:
        if index.data(CARD_ROLE) is None:
            return super().sizeHint(option, index)
        fm = QFontMetrics(option.font)
        height = 2 * fm.height() + 2 * CARD_PADDING + CARD_SPACING
        return QSize(option.rect.width(), height)

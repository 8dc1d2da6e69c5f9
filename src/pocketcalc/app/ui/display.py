from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont, QFontMetrics
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget

from pocketcalc.config import DISPLAY_FONT_SIZE


class DisplayLabel(QLabel):
    """Right-aligned read-only display. Shrinks its font for long numbers."""

    MIN_FONT_SIZE = 12

    def __init__(self, text: str = "0", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("display")
        self.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Fixed)
        self.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.setMinimumHeight(DISPLAY_FONT_SIZE * 2)
        self.set_display_text(text)

    @Slot(str)
    def set_display_text(self, text: str) -> None:
        self.setText(text)
        self._fit_font()

    def resizeEvent(self, event):
        self._fit_font()
        super().resizeEvent(event)

    def _fit_font(self) -> None:
        font = QFont(self.font())
        available = max(self.width() - 16, 1)

        size = DISPLAY_FONT_SIZE
        while size > self.MIN_FONT_SIZE:
            font.setPointSize(size)
            if QFontMetrics(font).horizontalAdvance(self.text()) <= available:
                break
            size -= 2

        font.setPointSize(max(size, self.MIN_FONT_SIZE))
        self.setFont(font)

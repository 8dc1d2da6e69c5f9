"""
Main Application Window
=======================
The calculator window: display on top, keypad below.

Why is this file needed?
------------------------
1. Layout: It organizes the display and the button grid.
2. Routing: Button clicks and key presses both end up in `Store.handle_input`,
   so the window is the only place that knows about both input sources.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QByteArray, QSettings
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import QFrame, QMainWindow, QVBoxLayout, QWidget

from pocketcalc.app.state import Store
from pocketcalc.app.ui.display import DisplayLabel
from pocketcalc.app.ui.keymap import input_for_key
from pocketcalc.app.ui.keypad import Keypad
from pocketcalc.config import VISIBLE_APP_NAME, WINDOW_SIZE
from pocketcalc.model.engine import InputKind

logger = logging.getLogger(__name__)

GEOMETRY_KEY = "ui/geometry"


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store: Store = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(8, 8, 8, 8)
        v.setSpacing(4)

        self.display = DisplayLabel(self.store.display_text(), central)
        v.addWidget(self.display, 0)

        separator = QFrame(central)
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setFrameShadow(QFrame.Shadow.Sunken)
        v.addWidget(separator, 0)

        self.keypad = Keypad(central)
        v.addWidget(self.keypad, 1)

        self.setCentralWidget(central)

        # --- SIGNAL CONNECTIONS ---
        self.keypad.input_requested.connect(self.dispatch)
        self.store.display_changed.connect(self.display.set_display_text)
        self.store.operation_changed.connect(self.keypad.set_pending_operation)

        self._restore_geometry()

    def dispatch(self, kind: InputKind, payload: object = None) -> None:
        """Forward one input event to the store."""
        self.store.handle_input(kind, payload)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        bound = input_for_key(event.key())
        if bound is None:
            super().keyPressEvent(event)
            return
        kind, payload = bound
        self.dispatch(kind, payload)
        event.accept()

    def closeEvent(self, event: QCloseEvent) -> None:
        QSettings().setValue(GEOMETRY_KEY, self.saveGeometry())
        super().closeEvent(event)

    def _restore_geometry(self) -> None:
        geometry = QSettings().value(GEOMETRY_KEY)
        if isinstance(geometry, QByteArray) and not geometry.isEmpty():
            if not self.restoreGeometry(geometry):
                logger.debug("Stored window geometry could not be restored.")

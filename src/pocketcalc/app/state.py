from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from pocketcalc.model.engine import CalculatorEngine, DisplayListener, InputKind, Operation

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store. Owns the engine and re-emits its changes as signals.

    Listeners already set on an injected engine keep being called; the store
    calls them before emitting its own signal.

    `error_occurred` is a store-level hook: the window shows the error token
    through `display_changed`, so nothing in the UI needs to connect to it.
    """
    display_changed = Signal(str)
    operation_changed = Signal(str)
    error_occurred = Signal(str)

    def __init__(self, engine: CalculatorEngine | None = None) -> None:
        super().__init__()
        self.engine = engine or CalculatorEngine()
        self._prev_display_listener: DisplayListener | None = self.engine.display_listener
        self._prev_error_listener: DisplayListener | None = self.engine.error_listener
        self.engine.set_display_listener(self._on_engine_display)
        self.engine.set_error_listener(self._on_engine_error)
        self._last_operation: Operation | None = self.engine.pending_operation

    def display_text(self) -> str:
        return self.engine.display_text

    def pending_symbol(self) -> str:
        """Symbol of the pending operation, or "" if there is none."""
        op = self.engine.pending_operation
        return op.value if op is not None else ""

    def handle_input(self, kind: InputKind, payload: object = None) -> str:
        """Dispatch one input event to the engine. Returns the new display text."""
        logger.debug(f"Input: {kind.name} {payload!r}")
        text = self.engine.handle_input(kind, payload)

        if self.engine.pending_operation != self._last_operation:
            self._last_operation = self.engine.pending_operation
            self.operation_changed.emit(self.pending_symbol())

        return text

    def _on_engine_display(self, text: str) -> None:
        if self._prev_display_listener is not None:
            self._prev_display_listener(text)
        self.display_changed.emit(text)

    def _on_engine_error(self, token: str) -> None:
        if self._prev_error_listener is not None:
            self._prev_error_listener(token)
        logger.warning(f"Calculation failed, engine reset (display '{token}').")
        self.error_occurred.emit(token)

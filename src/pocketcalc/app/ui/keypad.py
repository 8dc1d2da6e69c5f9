"""
Keypad Widget
=============
The button grid. Every button maps to exactly one (InputKind, payload) pair;
pressing it emits `input_requested` instead of calling the engine directly.

Layout (4 columns):
    C  ±  %  /
    7  8  9  *
    4  5  6  -
    1  2  3  +
    0  .  =
"""
from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from pocketcalc.config import BUTTON_MIN_HEIGHT
from pocketcalc.model.engine import InputKind, Operation


@dataclass(frozen=True)
class KeySpec:
    label: str
    kind: InputKind
    payload: object = None
    row: int = 0
    column: int = 0
    column_span: int = 1


def _digit(d: str, row: int, column: int, column_span: int = 1) -> KeySpec:
    return KeySpec(d, InputKind.DIGIT, d, row, column, column_span)


def _operation(op: Operation, row: int) -> KeySpec:
    return KeySpec(op.value, InputKind.OPERATION, op, row, 3)


KEYPAD_LAYOUT: list[KeySpec] = [
    KeySpec("C", InputKind.CLEAR, row=0, column=0),
    KeySpec("±", InputKind.NEGATE, row=0, column=1),
    KeySpec("%", InputKind.PERCENT, row=0, column=2),
    _operation(Operation.DIVIDE, 0),

    _digit("7", 1, 0), _digit("8", 1, 1), _digit("9", 1, 2),
    _operation(Operation.MULTIPLY, 1),

    _digit("4", 2, 0), _digit("5", 2, 1), _digit("6", 2, 2),
    _operation(Operation.SUBTRACT, 2),

    _digit("1", 3, 0), _digit("2", 3, 1), _digit("3", 3, 2),
    _operation(Operation.ADD, 3),

    _digit("0", 4, 0),
    KeySpec(".", InputKind.DECIMAL_POINT, row=4, column=1),
    KeySpec("=", InputKind.EQUALS, row=4, column=2, column_span=2),
]


class Keypad(QWidget):
    """Button grid. Operator buttons are highlighted while their operation is pending."""
    input_requested = Signal(object, object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.buttons: dict[str, QPushButton] = {}
        self.operation_buttons: dict[str, QPushButton] = {}

        grid = QGridLayout(self)
        grid.setContentsMargins(4, 4, 4, 4)
        grid.setSpacing(4)

        for spec in KEYPAD_LAYOUT:
            btn = self._make_button(spec)
            grid.addWidget(btn, spec.row, spec.column, 1, spec.column_span)
            self.buttons[spec.label] = btn
            if spec.kind is InputKind.OPERATION:
                self.operation_buttons[spec.payload.value] = btn

    def _make_button(self, spec: KeySpec) -> QPushButton:
        btn = QPushButton(spec.label, self)
        btn.setMinimumHeight(BUTTON_MIN_HEIGHT)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        # Keyboard input is handled by the main window
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        btn.setProperty("kind", spec.kind.value)
        btn.clicked.connect(lambda *_, s=spec: self.input_requested.emit(s.kind, s.payload))
        return btn

    @Slot(str)
    def set_pending_operation(self, symbol: str) -> None:
        """Highlight the button of the pending operation ("" clears the highlight)."""
        for op_symbol, btn in self.operation_buttons.items():
            btn.setProperty("pending", op_symbol == symbol)
            # Dynamic properties only restyle after a re-polish
            btn.style().unpolish(btn)
            btn.style().polish(btn)

"""
Keyboard Mapping
Translates Qt key codes into calculator input events.
"""
from __future__ import annotations

from typing import Optional, Tuple

from PySide6.QtCore import Qt

from pocketcalc.model.engine import InputKind, Operation

KeyInput = Tuple[InputKind, object]

_DIGIT_KEYS: dict[Qt.Key, str] = {
    Qt.Key.Key_0: "0", Qt.Key.Key_1: "1", Qt.Key.Key_2: "2", Qt.Key.Key_3: "3", Qt.Key.Key_4: "4",
    Qt.Key.Key_5: "5", Qt.Key.Key_6: "6", Qt.Key.Key_7: "7", Qt.Key.Key_8: "8", Qt.Key.Key_9: "9",
}

_BINDINGS: dict[Qt.Key, KeyInput] = {
    **{key: (InputKind.DIGIT, digit) for key, digit in _DIGIT_KEYS.items()},
    # Decimal comma keyboards
    Qt.Key.Key_Period: (InputKind.DECIMAL_POINT, None),
    Qt.Key.Key_Comma: (InputKind.DECIMAL_POINT, None),
    Qt.Key.Key_Plus: (InputKind.OPERATION, Operation.ADD),
    Qt.Key.Key_Minus: (InputKind.OPERATION, Operation.SUBTRACT),
    Qt.Key.Key_Asterisk: (InputKind.OPERATION, Operation.MULTIPLY),
    Qt.Key.Key_Slash: (InputKind.OPERATION, Operation.DIVIDE),
    Qt.Key.Key_Return: (InputKind.EQUALS, None),
    Qt.Key.Key_Enter: (InputKind.EQUALS, None),
    Qt.Key.Key_Equal: (InputKind.EQUALS, None),
    Qt.Key.Key_Escape: (InputKind.CLEAR, None),
    Qt.Key.Key_Backspace: (InputKind.BACKSPACE, None),
    Qt.Key.Key_Percent: (InputKind.PERCENT, None),
}


# Keyed by plain int so lookups work with the int returned by QKeyEvent.key()
KEY_BINDINGS: dict[int, KeyInput] = {int(key): event for key, event in _BINDINGS.items()}


def input_for_key(key: int) -> Optional[KeyInput]:
    """Look up the input event bound to a key. None for unbound keys."""
    return KEY_BINDINGS.get(int(key))

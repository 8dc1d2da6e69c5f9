"""
Calculator Engine (Input State Machine)
=======================================
This module holds the calculator's only real logic: turning a stream of
button/key presses into the text shown on the display.

Why is this file needed?
------------------------
1. Decoupling: The engine knows nothing about Qt. The GUI forwards input
   events and re-renders whatever the engine reports as the display text.
2. Testability: Every behaviour is reachable through `handle_input`, so the
   whole state machine can be driven without a window.

States:
    AwaitingFirstDigit: the next digit starts a new number.
    Accumulating: digits are appended to the visible number.

Classes:
    Operation: The four binary operations.
    InputKind: The kinds of input event understood by `handle_input`.
    EngineState: Immutable snapshot of the engine fields.
    CalculatorEngine: The state machine itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import math
from typing import Callable, Optional, Union

from pocketcalc.config import ERROR_TOKEN
from pocketcalc.model.formatting import format_number, parse_number

logger = logging.getLogger(__name__)

DisplayListener = Callable[[str], None]

INITIAL_DISPLAY = "0"
DECIMAL_POINT = "."
EXPONENT = "e"


class Operation(str, Enum):
    """Binary operations. The value is the symbol on the button."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: Union[str, Operation]) -> Operation:
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown operation '{symbol}'.") from None

    def apply(self, left: float, right: float) -> float:
        """Raises ZeroDivisionError for DIVIDE with right == 0."""
        if self is Operation.ADD:
            return left + right
        if self is Operation.SUBTRACT:
            return left - right
        if self is Operation.MULTIPLY:
            return left * right
        return left / right


class InputKind(Enum):
    DIGIT = "digit"
    DECIMAL_POINT = "decimal_point"
    OPERATION = "operation"
    EQUALS = "equals"
    CLEAR = "clear"
    NEGATE = "negate"
    PERCENT = "percent"
    BACKSPACE = "backspace"


@dataclass(frozen=True)
class EngineState:
    display_text: str = INITIAL_DISPLAY
    accumulator: float = 0.0
    pending_operation: Optional[Operation] = None
    awaiting_first_digit: bool = True


class CalculatorEngine:
    """
    Interprets calculator input events and maintains the display text.

    Args:
        on_display_changed: Called with the new text every time it changes.
        on_error: Called with the error token when a calculation fails.
        error_token: Text shown after a division by zero.
    """

    def __init__(
            self,
            on_display_changed: Optional[DisplayListener] = None,
            on_error: Optional[DisplayListener] = None,
            error_token: str = ERROR_TOKEN,
    ) -> None:
        self._listener: Optional[DisplayListener] = on_display_changed
        self._error_listener: Optional[DisplayListener] = on_error
        self.error_token: str = error_token

        self._display_text: str = INITIAL_DISPLAY
        self._accumulator: float = 0.0
        self._pending_operation: Optional[Operation] = None
        self._awaiting_first_digit: bool = True

    # --- ACCESSORS ---
    @property
    def display_text(self) -> str:
        return self._display_text

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def pending_operation(self) -> Optional[Operation]:
        return self._pending_operation

    @property
    def awaiting_first_digit(self) -> bool:
        return self._awaiting_first_digit

    @property
    def is_error(self) -> bool:
        return self._display_text == self.error_token

    def snapshot(self) -> EngineState:
        return EngineState(
            display_text=self._display_text,
            accumulator=self._accumulator,
            pending_operation=self._pending_operation,
            awaiting_first_digit=self._awaiting_first_digit,
        )

    @property
    def display_listener(self) -> Optional[DisplayListener]:
        return self._listener

    @property
    def error_listener(self) -> Optional[DisplayListener]:
        return self._error_listener

    def set_display_listener(self, listener: Optional[DisplayListener]) -> None:
        self._listener = listener

    def set_error_listener(self, listener: Optional[DisplayListener]) -> None:
        self._error_listener = listener

    # --- DISPATCH ---
    def handle_input(self, kind: InputKind, payload: object = None) -> str:
        """
        Single entry point for all input events.

        Args:
            kind: What was pressed.
            payload: The digit character for DIGIT, the Operation (or its
                symbol) for OPERATION. Ignored for every other kind.

        Returns:
            The display text after the event was processed.
        """
        if kind is InputKind.DIGIT:
            self.input_digit(payload)
        elif kind is InputKind.DECIMAL_POINT:
            self.input_decimal_point()
        elif kind is InputKind.OPERATION:
            self.select_operation(payload)
        elif kind is InputKind.EQUALS:
            self.evaluate()
        elif kind is InputKind.CLEAR:
            self.clear()
        elif kind is InputKind.NEGATE:
            self.negate()
        elif kind is InputKind.PERCENT:
            self.percent()
        elif kind is InputKind.BACKSPACE:
            self.backspace()
        else:
            raise ValueError(f"Unsupported input kind: {kind!r}")
        return self._display_text

    # --- OPERATIONS ---
    def input_digit(self, digit: object) -> None:
        if not (isinstance(digit, str) and len(digit) == 1 and digit in "0123456789"):
            raise ValueError(f"Expected a single digit '0'-'9', got {digit!r}.")

        if self._starts_new_number():
            self._awaiting_first_digit = False
            self._set_display(digit)
        elif self._display_text == INITIAL_DISPLAY:
            self._set_display(digit)
        elif self._display_text == "-" + INITIAL_DISPLAY:
            self._set_display("-" + digit)
        else:
            self._append(digit)

    def input_decimal_point(self) -> None:
        if self._starts_new_number():
            self._awaiting_first_digit = False
            self._set_display(INITIAL_DISPLAY + DECIMAL_POINT)
            return
        # A second point in the same number is ignored
        if DECIMAL_POINT not in self._display_text:
            self._append(DECIMAL_POINT)

    def select_operation(self, operation: Union[Operation, str]) -> None:
        op = Operation.from_symbol(operation)

        if self._pending_operation is not None:
            self.evaluate()
            if self.is_error:
                return

        self._accumulator = self._operand()
        self._pending_operation = op
        self._awaiting_first_digit = True

    def evaluate(self) -> None:
        right = self._operand()
        op = self._pending_operation

        if op is None:
            self._set_display(format_number(right))
            self._awaiting_first_digit = True
            return

        try:
            result = op.apply(self._accumulator, right)
        except ZeroDivisionError:
            logger.debug(f"Division by zero: {self._accumulator!r} / {right!r}")
            self._enter_error_state()
            return

        if not math.isfinite(result):
            logger.debug(f"Non-finite result of {self._accumulator!r} {op.value} {right!r}")
            self._enter_error_state()
            return

        self._set_display(format_number(result))
        self._pending_operation = None
        self._awaiting_first_digit = True

    def clear(self) -> None:
        self._reset_fields()
        self._set_display(INITIAL_DISPLAY)

    def negate(self) -> None:
        value = parse_number(self._display_text)
        if value is None:
            return
        self._set_display(format_number(-value))

    def percent(self) -> None:
        value = parse_number(self._display_text)
        if value is None:
            return
        self._set_display(format_number(value / 100))

    def backspace(self) -> None:
        if self.is_error:
            self._set_display(INITIAL_DISPLAY)
            return

        remaining = self._display_text[:-1]
        # "-" or "1e+" left over from a longer number are not numbers
        if not remaining or parse_number(remaining) is None:
            remaining = INITIAL_DISPLAY
        self._set_display(remaining)

    # --- HELPERS ---
    def _starts_new_number(self) -> bool:
        """
        True if typed input replaces the display instead of extending it.

        Exponent text ("1e-06" from percent, "1e+16" from a result) is not
        editable: appending to it would change the exponent or stop parsing.
        """
        return self._awaiting_first_digit or EXPONENT in self._display_text.lower()

    def _append(self, char: str) -> None:
        """Append to the display unless the result would stop being a finite number."""
        candidate = self._display_text + char
        if parse_number(candidate) is None:
            logger.debug(f"Ignored '{char}': '{candidate}' is out of range.")
            return
        self._set_display(candidate)

    def _operand(self) -> float:
        """Current display as a number. The error token counts as zero."""
        value = parse_number(self._display_text)
        return 0.0 if value is None else value

    def _reset_fields(self) -> None:
        self._accumulator = 0.0
        self._pending_operation = None
        self._awaiting_first_digit = True

    def _enter_error_state(self) -> None:
        self._reset_fields()
        self._set_display(self.error_token)
        if self._error_listener is not None:
            self._error_listener(self.error_token)

    def _set_display(self, text: str) -> None:
        if text == self._display_text:
            return
        self._display_text = text
        if self._listener is not None:
            self._listener(text)

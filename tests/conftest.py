import logging

import pytest
from PySide6.QtCore import QCoreApplication

from pocketcalc.model.engine import CalculatorEngine, InputKind

# Symbols accepted by press(): digits, ".", "+-*/", "=", "C", "±", "%", "<" (backspace)
_SYMBOL_INPUTS = {
    ".": (InputKind.DECIMAL_POINT, None),
    "=": (InputKind.EQUALS, None),
    "C": (InputKind.CLEAR, None),
    "±": (InputKind.NEGATE, None),
    "%": (InputKind.PERCENT, None),
    "<": (InputKind.BACKSPACE, None),
}


def _press(target, *keys: str) -> str:
    """Feed button symbols to an engine or a store. Returns the final display."""
    text = target.display_text
    for key in keys:
        if key.isdigit():
            text = target.handle_input(InputKind.DIGIT, key)
        elif key in "+-*/":
            text = target.handle_input(InputKind.OPERATION, key)
        else:
            kind, payload = _SYMBOL_INPUTS[key]
            text = target.handle_input(kind, payload)
    return text


@pytest.fixture
def press():
    return _press


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture(scope="session")
def qapp():
    """A core application (no display needed) for QObject signal tests."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def clean_pocketcalc_logger():
    logger = logging.getLogger("pocketcalc")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)

import logging

import pytest

from pocketcalc.app.state import Store
from pocketcalc.config import ERROR_TOKEN
from pocketcalc.model.engine import CalculatorEngine, InputKind


@pytest.fixture
def store(qapp):
    return Store()


def test_store_owns_fresh_engine(store):
    assert isinstance(store.engine, CalculatorEngine)
    assert store.display_text() == "0"
    assert store.pending_symbol() == ""


def test_display_changed_emitted(store, press):
    seen = []
    store.display_changed.connect(seen.append)
    press(store, "4", "2", "/", "6", "=")
    assert seen == ["4", "42", "6", "7"]
    assert store.display_text() == "7"


def test_operation_changed_emitted(store, press):
    seen = []
    store.operation_changed.connect(seen.append)
    press(store, "2", "+", "3", "*", "4", "=")
    # "+" then chaining replaces it with "*", "=" clears it
    assert seen == ["+", "*", ""]


def test_operation_changed_not_repeated_for_same_operation(store, press):
    seen = []
    store.operation_changed.connect(seen.append)
    press(store, "2", "+", "+")
    assert seen == ["+"]


def test_error_occurred_emitted_and_logged(store, press, caplog):
    errors = []
    store.error_occurred.connect(errors.append)
    with caplog.at_level(logging.WARNING, logger="pocketcalc"):
        assert press(store, "5", "/", "0", "=") == ERROR_TOKEN
    assert errors == [ERROR_TOKEN]
    assert any(r.name == "pocketcalc.app.state" and r.levelno == logging.WARNING for r in caplog.records)


def test_handle_input_returns_display(store):
    assert store.handle_input(InputKind.DIGIT, "9") == "9"
    assert store.handle_input(InputKind.NEGATE) == "-9"


def test_store_wraps_given_engine(qapp):
    engine = CalculatorEngine(error_token="E")
    store = Store(engine)
    store.handle_input(InputKind.DIGIT, "1")
    store.handle_input(InputKind.OPERATION, "/")
    store.handle_input(InputKind.DIGIT, "0")
    assert store.handle_input(InputKind.EQUALS) == "E"
    assert engine.is_error


def test_store_keeps_listeners_of_given_engine(qapp, press):
    engine_seen, engine_errors, store_seen = [], [], []
    engine = CalculatorEngine(on_display_changed=engine_seen.append, on_error=engine_errors.append)
    store = Store(engine)
    store.display_changed.connect(store_seen.append)

    press(store, "8", "/", "0", "=")

    assert engine_seen == store_seen == ["8", "0", ERROR_TOKEN]
    assert engine_errors == [ERROR_TOKEN]

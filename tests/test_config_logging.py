import logging
import os

from PySide6.QtCore import QtMsgType

from pocketcalc import config
from pocketcalc.app.application import load_stylesheet
from pocketcalc.logging_config import qt_message_handler, setup_logging


# --- Config ---

def test_log_level_default(monkeypatch):
    monkeypatch.delenv("POCKETCALC_LOG_LEVEL", raising=False)
    assert config.get_log_level() == logging.WARNING


def test_log_level_from_name(monkeypatch):
    monkeypatch.setenv("POCKETCALC_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG


def test_log_level_from_number(monkeypatch):
    monkeypatch.setenv("POCKETCALC_LOG_LEVEL", "20")
    assert config.get_log_level() == logging.INFO


def test_log_level_unknown_name_falls_back(monkeypatch):
    monkeypatch.setenv("POCKETCALC_LOG_LEVEL", "chatty")
    assert config.get_log_level(default=logging.ERROR) == logging.ERROR


def test_log_file(monkeypatch):
    monkeypatch.delenv("POCKETCALC_LOG_FILE", raising=False)
    assert config.get_log_file() is None
    monkeypatch.setenv("POCKETCALC_LOG_FILE", "calc.log")
    assert config.get_log_file() == "calc.log"


def test_resource_path_under_pyinstaller(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, "_MEIPASS", str(tmp_path), raising=False)
    assert config.get_resource_path("assets") == os.path.join(str(tmp_path), "assets")


def test_stylesheet_asset_is_shipped():
    assert os.path.exists(config.STYLESHEET_PATH)
    assert "QPushButton" in load_stylesheet()


def test_missing_stylesheet(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="pocketcalc"):
        assert load_stylesheet(str(tmp_path / "missing.qss")) is None
    assert "Stylesheet not found" in caplog.text


# --- Logging ---

def test_setup_logging_console_and_file(tmp_path, clean_pocketcalc_logger):
    log_file = tmp_path / "calc.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger is clean_pocketcalc_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("pocketcalc.model.engine").debug("engine message")
    for handler in logger.handlers:
        handler.flush()
    assert "engine message" in log_file.read_text(encoding="utf-8")


def test_setup_logging_does_not_stack_handlers(clean_pocketcalc_logger):
    setup_logging(level=logging.INFO)
    setup_logging(level=logging.INFO)
    assert len(clean_pocketcalc_logger.handlers) == 1


def test_qt_messages_are_forwarded(caplog):
    with caplog.at_level(logging.DEBUG, logger="pocketcalc"):
        qt_message_handler(QtMsgType.QtWarningMsg, None, "QFont: bad size")
        qt_message_handler(QtMsgType.QtDebugMsg, None, "polish")
    records = [(r.name, r.levelno, r.getMessage()) for r in caplog.records]
    assert ("pocketcalc.qt", logging.WARNING, "QFont: bad size") in records
    assert ("pocketcalc.qt", logging.DEBUG, "polish") in records

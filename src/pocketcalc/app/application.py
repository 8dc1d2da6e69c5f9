from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import logging
import os
import sys
from typing import Optional

from pocketcalc.config import APP_ID, ORG_ID, STYLESHEET_PATH, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def load_stylesheet(path: str = STYLESHEET_PATH) -> Optional[str]:
    """Read the Qt stylesheet. Returns None if the asset is missing."""
    if not os.path.exists(path):
        logger.warning(f"Stylesheet not found at {path}, using the default style.")
        return None
    with open(path, encoding="utf-8") as f:
        return f.read()


def create_app(argv: Optional[list[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv if argv is None else argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    stylesheet = load_stylesheet()
    if stylesheet:
        app.setStyleSheet(stylesheet)

    return app

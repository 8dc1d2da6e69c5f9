"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps window metrics, the error text and asset paths in one
   place instead of scattering literals through the widgets.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the stylesheet) when the app is frozen into an .exe.
3. Environment: Logging can be tuned without code changes through the
   POCKETCALC_LOG_LEVEL and POCKETCALC_LOG_FILE environment variables.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    STYLESHEET_PATH (str): Absolute path to the Qt stylesheet.
    ERROR_TOKEN (str): Display text shown after a division by zero.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Tuple


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/pocketcalc/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_log_level(default: int = logging.WARNING) -> int:
    """Reads POCKETCALC_LOG_LEVEL ("DEBUG", "INFO", ... or a number)."""
    raw = os.environ.get("POCKETCALC_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def get_log_file() -> Optional[str]:
    return os.environ.get("POCKETCALC_LOG_FILE") or None


# Application identity (used by QSettings)
ORG_ID = "pocketcalc"
APP_ID = "pocketcalc"
VISIBLE_APP_NAME = "Calculadora"

# Engine
ERROR_TOKEN = "Erro"

# Window & display
WINDOW_SIZE: Tuple[int, int] = (320, 460)
DISPLAY_FONT_SIZE: int = 32
BUTTON_MIN_HEIGHT: int = 56

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "calculator.qss")

"""
Application Initialization
==========================
This module wires the calculator together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the calculator state (Store, which owns the engine).
2. Instantiates the Main Window (View).
3. Passes the Store into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

from pocketcalc.app.application import create_app
from pocketcalc.app.state import Store
from pocketcalc.app.ui.main_window import MainWindow
from pocketcalc.config import get_log_file, get_log_level
from pocketcalc.logging_config import install_qt_message_handler, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # POCKETCALC_LOG_LEVEL=DEBUG shows every input event
    setup_logging(level=get_log_level(), log_file=get_log_file())
    install_qt_message_handler()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the calculator state
    store = Store()

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()
    logger.info("Calculator window shown.")

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

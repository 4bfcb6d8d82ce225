"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from dictionary_plus.config import create_default_config
from dictionary_plus.gui.main_window import MainWindow
from dictionary_plus.gui.utils import QtScheduler, create_search_controller, create_settings


def main():
    """Launch the Dictionary Plus GUI application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Dictionary+")
    app.setOrganizationName("DictionaryPlus")

    config = create_default_config()
    settings = create_settings(config)

    # The scheduler lives on the GUI thread; every controller callback runs there
    scheduler = QtScheduler(app)
    controller = create_search_controller(config, settings, scheduler)

    window = MainWindow(controller, settings)
    window.show()

    exit_code = app.exec()
    scheduler.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

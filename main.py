"""
Snooker Scoreboard - Desktop Scoring for Snooker Frames

Entry point for the application.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from config import init_config, APP_NAME, APP_AUTHOR, APP_VERSION


def main() -> int:
    """Main entry point for the Snooker Scoreboard."""
    # Initialize configuration, directories and logging
    init_config()
    logging.getLogger(__name__).info("Starting %s %s", APP_NAME, APP_VERSION)

    # High DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_AUTHOR)

    # Base stylesheet
    from gui.styles.theme import app_stylesheet
    app.setStyleSheet(app_stylesheet())

    # Create and show main window
    from app import SnookerScoreboardApp
    scoreboard_app = SnookerScoreboardApp()
    scoreboard_app.show()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

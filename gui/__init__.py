"""
Snooker Scoreboard GUI

PySide6 user interface components.
"""

from gui.main_window import MainWindow
from gui.help_view import HelpWindow

__all__ = [
    "MainWindow",
    "HelpWindow",
]

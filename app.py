"""
Snooker Scoreboard Application Controller

Top-level controller that wires together all application components.
"""

import logging

from PySide6.QtCore import QObject

from services.event_bus import EventBus
from services.settings import SettingsStore
from engine.frame import FrameEngine

logger = logging.getLogger(__name__)


class SnookerScoreboardApp(QObject):
    """
    Top-level application controller.
    Wires together all application components.
    """

    def __init__(self, settings: SettingsStore = None):
        super().__init__()

        # Core services
        self.event_bus = EventBus()
        self.settings = settings or SettingsStore()

        # One engine per session; frames are started and reset on it
        preferences = self.settings.preferences
        self.engine = FrameEngine(
            foul_award_policy=preferences.foul_award_policy,
            enforce_rules=preferences.enforce_rules,
        )
        self.event_bus.connect_engine(self.engine)

        # Create main window
        from gui.main_window import MainWindow
        self.main_window = MainWindow(self.engine, self.event_bus, self.settings)

        self.event_bus.frame_ended.connect(self._on_frame_ended)

    def show(self) -> None:
        """Show the main application window."""
        self.main_window.show()

    def _on_frame_ended(self, standings: list) -> None:
        if standings:
            logger.info(
                "Frame over: %s",
                ", ".join(f"{p.name} {p.score}" for p in standings),
            )

    def export_scoresheet(self, filepath: str, format: str = "pdf") -> bool:
        """
        Export the current frame as a scoresheet.

        Args:
            filepath: Output file path
            format: "pdf" or "csv"

        Returns:
            True if export successful
        """
        from services.export import FrameExporter, build_frame_data

        if not self.engine.action_history:
            return False

        frame_data = build_frame_data(self.engine)
        exporter = FrameExporter()

        if format == "pdf":
            return exporter.export_pdf(frame_data, filepath)
        elif format == "csv":
            return exporter.export_csv(frame_data, filepath)

        return False

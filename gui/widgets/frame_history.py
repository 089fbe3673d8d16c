"""
Frame History Dialog

Displays every pot and foul recorded in the current frame.
"""

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QListWidget, QListWidgetItem, QFrame, QWidget
)
from PySide6.QtCore import Qt

from config import UI_SETTINGS
from engine.frame import FrameEngine
from gui.styles import theme
from models.action import PotAction, ScoreAction


class FrameHistoryDialog(QDialog):
    """Numbered log of the frame's actions, oldest first."""

    def __init__(self, engine: FrameEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.setWindowTitle("Game History")
        self.setMinimumSize(UI_SETTINGS.history_min_width, UI_SETTINGS.history_min_height)
        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        title = QLabel("Game History")
        title.setStyleSheet(f"font-size: {theme.FONT_SIZE_TITLE}pt; font-weight: bold;")
        layout.addWidget(title)

        self.list = QListWidget()
        layout.addWidget(self.list)

        self.placeholder = QLabel("No entries yet.")
        self.placeholder.setStyleSheet(f"color: {theme.TEXT_MUTED};")
        self.placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.placeholder)

        close = QPushButton("Close")
        close.clicked.connect(self.accept)
        layout.addWidget(close, alignment=Qt.AlignmentFlag.AlignRight)

    def _create_row(self, number: int, action: ScoreAction) -> QWidget:
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(4, 2, 4, 2)

        index = QLabel(f"{number}.")
        index.setStyleSheet(f"color: {theme.TEXT_SECONDARY};")
        layout.addWidget(index)

        if isinstance(action.kind, PotAction):
            dot = QFrame()
            dot.setStyleSheet(theme.ball_dot_style(action.kind.ball_color))
            layout.addWidget(dot)

        layout.addWidget(QLabel(self.engine.describe_action(action)))
        layout.addStretch()
        return row

    def refresh(self) -> None:
        """Reload the list from the engine's history."""
        self.list.clear()
        history = self.engine.action_history
        for number, action in enumerate(history, start=1):
            row = self._create_row(number, action)
            item = QListWidgetItem(self.list)
            item.setSizeHint(row.sizeHint())
            self.list.setItemWidget(item, row)

        self.list.setVisible(bool(history))
        self.placeholder.setVisible(not history)

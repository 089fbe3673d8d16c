"""
Final Score Dialog

Shown when a frame ends: standings with crowns for the top three.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame
)
from PySide6.QtCore import Qt, Signal

from gui.styles import theme
from models.player import Player


def crown_color(position: int) -> Optional[str]:
    """Crown color for a finishing position (0-based), None past third."""
    if 0 <= position < len(theme.CROWN_COLORS):
        return theme.CROWN_COLORS[position]
    return None


class FinalScoreDialog(QDialog):
    """
    Final standings.

    Signals:
        new_frame_requested: Emitted when the operator starts a new frame
    """

    new_frame_requested = Signal()

    def __init__(self, standings: list[Player], parent=None):
        super().__init__(parent)
        self.setWindowTitle("Final Score")
        self.setMinimumSize(360, 300)
        self._build_ui(standings)

    def _build_ui(self, standings: list[Player]) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(theme.SPACING_LG)

        title = QLabel("Final Score")
        title.setStyleSheet(f"font-size: {theme.FONT_SIZE_TITLE}pt; font-weight: bold;")
        layout.addWidget(title)

        for position, player in enumerate(standings):
            row = QFrame()
            row_layout = QHBoxLayout(row)
            color = crown_color(position)
            if color:
                crown = QLabel("♛")
                crown.setStyleSheet(f"color: {color}; font-size: 16pt;")
                row_layout.addWidget(crown)
            row_layout.addWidget(QLabel(player.name))
            row_layout.addStretch()
            score = QLabel(str(player.score))
            score.setStyleSheet("font-weight: bold;")
            row_layout.addWidget(score)
            layout.addWidget(row)

        layout.addStretch()

        btn_new = QPushButton("Start New Game")
        btn_new.clicked.connect(self._on_new_frame)
        layout.addWidget(btn_new, alignment=Qt.AlignmentFlag.AlignRight)

    def _on_new_frame(self) -> None:
        self.new_frame_requested.emit()
        self.accept()

"""
Player Setup Card

Add players before a frame starts.
"""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton
)
from PySide6.QtCore import Slot
from pydantic import ValidationError

from config import FRAME_SETTINGS
from engine.frame import FrameEngine, FrameState
from gui.styles import theme
from models.schemas import PlayerCreate


class PlayerSetupWidget(QWidget):
    """Name entry for building the roster."""

    def __init__(self, engine: FrameEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self._build_ui()
        self.update_state(engine.get_state())

    def _build_ui(self) -> None:
        """Build the add-players UI."""
        self.setStyleSheet(
            f"PlayerSetupWidget {{ background-color: {theme.SURFACE_CARD}; "
            f"border-radius: {theme.RADIUS_MD}px; }}"
        )
        layout = QVBoxLayout(self)
        layout.setSpacing(theme.SPACING_MD)

        title = QLabel("Add Players")
        title.setStyleSheet(f"font-size: {theme.FONT_SIZE_LG}pt; font-weight: bold;")
        layout.addWidget(title)

        row = QHBoxLayout()
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Player name")
        self.name_input.setMaxLength(FRAME_SETTINGS.max_name_length)
        self.name_input.returnPressed.connect(self._add_player)
        self.name_input.textChanged.connect(self._on_text_changed)
        row.addWidget(self.name_input)

        self.btn_add = QPushButton("Add")
        self.btn_add.setEnabled(False)
        self.btn_add.clicked.connect(self._add_player)
        row.addWidget(self.btn_add)
        layout.addLayout(row)

        self.hint_label = QLabel(
            f"Add at least {FRAME_SETTINGS.min_players} players to start."
        )
        self.hint_label.setStyleSheet(
            f"font-size: {theme.FONT_SIZE_SM}pt; color: {theme.WARNING};"
        )
        layout.addWidget(self.hint_label)

    def _on_text_changed(self, text: str) -> None:
        self.btn_add.setEnabled(bool(text.strip()))

    def _add_player(self) -> None:
        try:
            player = PlayerCreate(name=self.name_input.text())
        except ValidationError:
            return
        self.engine.add_player(player.name)
        self.name_input.clear()

    @Slot(object)
    def update_state(self, state: FrameState) -> None:
        self.hint_label.setVisible(not self.engine.has_enough_players)

"""
Scoreboard Widget

Player list showing scores, the player at the table and the leader.
"""

from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame, QPushButton, QScrollArea
)
from PySide6.QtCore import Slot

from engine.frame import FrameEngine, FrameState
from gui.icons import icon_remove
from gui.styles import theme
from models.player import Player


class ScoreboardWidget(QWidget):
    """
    Player list showing:
    - Player names and scores
    - Current player highlight
    - Crown for the leader
    - Highest break and foul count
    - Remove buttons before the frame starts
    """

    def __init__(self, engine: FrameEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self._build_ui()
        self.update_state(engine.get_state())

    def _build_ui(self) -> None:
        """Build the scoreboard UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(theme.SPACING_SM)

        title = QLabel("Players")
        title.setStyleSheet(f"font-size: {theme.FONT_SIZE_LG}pt; font-weight: bold;")
        layout.addWidget(title)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setMinimumHeight(240)
        container = QWidget()
        self.rows_layout = QVBoxLayout(container)
        self.rows_layout.setSpacing(4)
        self.rows_layout.addStretch()
        scroll.setWidget(container)
        layout.addWidget(scroll)

        self.empty_label = QLabel("No players yet.")
        self.empty_label.setStyleSheet(f"color: {theme.TEXT_MUTED};")
        layout.addWidget(self.empty_label)

    def _clear_rows(self) -> None:
        while self.rows_layout.count() > 1:
            item = self.rows_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

    def _create_row(self, player: Player, index: int, state: FrameState) -> QFrame:
        """Create one player row."""
        frame = QFrame()
        is_current = state.game_started and index == state.current_player_index
        background = theme.SURFACE_ELEVATED if is_current else "transparent"
        border = theme.PRIMARY_BAIZE if is_current else theme.BORDER_SUBTLE
        frame.setStyleSheet(
            f"QFrame {{ background-color: {background}; border: 1px solid {border}; "
            f"border-radius: {theme.RADIUS_SM}px; }}"
        )

        layout = QHBoxLayout(frame)
        layout.setContentsMargins(10, 6, 10, 6)

        details = QVBoxLayout()
        name = QLabel(player.name)
        name.setStyleSheet("font-weight: bold; border: none;")
        details.addWidget(name)

        if state.game_started or state.game_over:
            stats = QLabel(
                f"Break {state.current_breaks.get(player.id, 0)} | "
                f"High {state.highest_breaks.get(player.id, 0)} | "
                f"Fouls {state.foul_counts.get(player.id, 0)}"
            )
            stats.setStyleSheet(f"font-size: {theme.FONT_SIZE_SM}pt; "
                                f"color: {theme.TEXT_SECONDARY}; border: none;")
            details.addWidget(stats)
        layout.addLayout(details)
        layout.addStretch()

        if not state.game_started:
            remove = QPushButton()
            remove.setIcon(icon_remove())
            remove.setFlat(True)
            remove.setToolTip(f"Remove {player.name}")
            remove.clicked.connect(lambda _=False, pid=player.id: self.engine.remove_player(pid))
            layout.addWidget(remove)

        if self.engine.is_leading(player.id):
            crown = QLabel("♛")
            crown.setStyleSheet(f"color: {theme.PRIMARY_GOLD}; font-size: 16pt; border: none;")
            layout.addWidget(crown)

        score = QLabel(str(player.score))
        score.setStyleSheet(
            f"font-size: {theme.FONT_SIZE_TITLE}pt; font-weight: 600; "
            f"color: {theme.TEXT_SECONDARY}; border: none;"
        )
        layout.addWidget(score)

        return frame

    @Slot(object)
    def update_state(self, state: FrameState) -> None:
        """Rebuild the rows from a FrameState."""
        self._clear_rows()
        for index, player in enumerate(state.players):
            self.rows_layout.insertWidget(index, self._create_row(player, index, state))
        self.empty_label.setVisible(not state.players)

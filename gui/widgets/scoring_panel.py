"""
Live Scoring Panel

The primary card during a frame. Pot and foul buttons are enabled only
when the FrameEngine reports them as usable.

Keyboard shortcuts:
- 1..7: Pot Red..Black
- F: Foul (4 points)
- Return: End turn
- Ctrl+Z: Undo last pot or foul
"""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QFrame
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QKeySequence, QShortcut

from engine.frame import FrameEngine, FrameState
from engine.rules import SnookerRules
from gui.icons import icon_end_turn, icon_foul
from gui.styles import theme
from models.ball import ScoreOption


class ScoreButton(QPushButton):
    """A pot or foul button with colored ball dots and the point value."""

    def __init__(self, option: ScoreOption, label: str, parent=None):
        super().__init__(parent)
        self.option = option

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(4)
        for color in option.colors:
            dot = QFrame()
            dot.setStyleSheet(theme.ball_dot_style(color))
            layout.addWidget(dot)

        self.label = QLabel(label)
        layout.addWidget(self.label)
        layout.addStretch()

        points = f"+{option.points}" if option.points > 0 else str(option.points)
        value = QLabel(points)
        value.setStyleSheet(f"color: {theme.TEXT_SECONDARY};")
        layout.addWidget(value)

        self.setMinimumSize(130, 34)

    def set_label(self, text: str) -> None:
        self.label.setText(text)


class ScoringPanel(QWidget):
    """
    Score entry card with pot buttons, foul buttons and turn controls.

    Every click forwards straight to the FrameEngine; the panel refreshes
    its enabled states from each published FrameState.
    """

    def __init__(self, engine: FrameEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.pot_buttons: list[ScoreButton] = []
        self.foul_buttons: list[ScoreButton] = []

        self._build_ui()
        self._setup_shortcuts()
        self.update_state(engine.get_state())

    def _build_ui(self) -> None:
        """Build the score entry UI."""
        self.setStyleSheet(
            f"ScoringPanel {{ background-color: {theme.SURFACE_CARD}; "
            f"border-radius: {theme.RADIUS_MD}px; }}"
        )
        layout = QVBoxLayout(self)
        layout.setSpacing(theme.SPACING_MD)

        title = QLabel("Enter Score")
        title.setStyleSheet(f"font-size: {theme.FONT_SIZE_LG}pt; font-weight: bold;")
        layout.addWidget(title)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(f"color: {theme.TEXT_SECONDARY};")
        layout.addWidget(self.status_label)

        layout.addWidget(self._section_label("Pot"))
        pot_grid = QGridLayout()
        pot_grid.setSpacing(theme.SPACING_MD)
        for i, option in enumerate(SnookerRules.POT_OPTIONS):
            button = ScoreButton(option, option.name)
            button.clicked.connect(lambda _=False, o=option: self._apply_pot(o))
            pot_grid.addWidget(button, i // 2, i % 2)
            self.pot_buttons.append(button)
        layout.addLayout(pot_grid)

        layout.addWidget(self._section_label("Foul"))
        foul_grid = QGridLayout()
        foul_grid.setSpacing(theme.SPACING_MD)
        for i, option in enumerate(SnookerRules.FOUL_OPTIONS):
            button = ScoreButton(option, option.name)
            button.clicked.connect(lambda _=False, o=option: self.engine.apply_foul(o.points))
            foul_grid.addWidget(button, i // 2, i % 2)
            self.foul_buttons.append(button)
        layout.addLayout(foul_grid)

        # Rule-enforcement extras
        extras = QHBoxLayout()

        self.btn_free_ball = QPushButton("Free Ball")
        self.btn_free_ball.setToolTip("Nominate the ball on after a foul")
        self.btn_free_ball.clicked.connect(self.engine.apply_free_ball)
        extras.addWidget(self.btn_free_ball)

        self.btn_replay = QPushButton("Play Again")
        self.btn_replay.setToolTip("Make the offender play again")
        self.btn_replay.clicked.connect(self.engine.replay_previous_turn)
        extras.addWidget(self.btn_replay)

        self.btn_off_table = QPushButton("Ball Off Table")
        self.btn_off_table.setIcon(icon_foul())
        self.btn_off_table.setToolTip("The ball on left the table: foul")
        self.btn_off_table.clicked.connect(self.engine.apply_off_table_foul)
        extras.addWidget(self.btn_off_table)

        layout.addLayout(extras)

        self.btn_end_turn = QPushButton("End Turn")
        self.btn_end_turn.setIcon(icon_end_turn())
        self.btn_end_turn.setStyleSheet(
            f"background-color: {theme.PRIMARY_BAIZE}; font-size: 14px; padding: 10px 24px;"
        )
        self.btn_end_turn.clicked.connect(self.engine.advance_turn)
        layout.addWidget(self.btn_end_turn, alignment=Qt.AlignmentFlag.AlignCenter)

    def _section_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(f"color: {theme.TEXT_SECONDARY};")
        return label

    def _setup_shortcuts(self) -> None:
        """Set up keyboard shortcuts for fast score entry."""
        for i, button in enumerate(self.pot_buttons, start=1):
            QShortcut(QKeySequence(str(i)), self).activated.connect(button.click)

        QShortcut(QKeySequence("F"), self).activated.connect(self.foul_buttons[0].click)
        QShortcut(QKeySequence(Qt.Key.Key_Return), self).activated.connect(
            self.btn_end_turn.click
        )

    def _apply_pot(self, option: ScoreOption) -> None:
        self.engine.apply_pot(option.name, option.points, option.colors[0])

    def _is_pot_disabled(self, option: ScoreOption, state: FrameState) -> bool:
        if not state.game_started or state.game_over:
            return True
        if not self.engine.enforce_rules:
            return False
        return option.name not in state.allowed_pot_names

    def _is_foul_disabled(self, option: ScoreOption, state: FrameState) -> bool:
        if not state.game_started or state.game_over:
            return True
        if not self.engine.enforce_rules:
            return False
        ball_name = SnookerRules.foul_ball_name(option)
        if ball_name is None:
            return False
        return not self.engine.is_color_on_table(ball_name)

    def _status_text(self, state: FrameState) -> str:
        player = state.current_player
        if player is None or not state.game_started:
            return ""
        text = f"At the table: {player.name}"
        if state.respotted_black_active:
            text += " | respotted black"
        elif self.engine.enforce_rules:
            ball_on = self.engine.current_ball_on
            text += f" | on: {ball_on.name if ball_on else 'any color'}"
        return text

    @Slot(object)
    def update_state(self, state: FrameState) -> None:
        """Refresh button states from a FrameState."""
        for button in self.pot_buttons:
            button.setEnabled(not self._is_pot_disabled(button.option, state))
            if self.engine.enforce_rules and button.option.name == SnookerRules.RED:
                button.set_label(f"Red ({state.reds_remaining} left)")
            else:
                button.set_label(button.option.name)

        for button in self.foul_buttons:
            button.setEnabled(not self._is_foul_disabled(button.option, state))

        enforce = self.engine.enforce_rules
        self.btn_free_ball.setVisible(enforce)
        self.btn_off_table.setVisible(enforce)
        self.btn_free_ball.setEnabled(self.engine.can_use_free_ball)
        self.btn_replay.setEnabled(self.engine.can_use_replay)
        self.btn_off_table.setEnabled(self.engine.can_use_off_table_foul)
        self.btn_end_turn.setEnabled(state.game_started and bool(state.players))

        self.status_label.setText(self._status_text(state))

"""
Main Window - Scoreboard Console

The operator's control panel for a snooker frame. The player list sits
on the left; the right side switches between player setup and score
entry depending on the frame phase.
"""

from PySide6.QtWidgets import (
    QMainWindow, QStackedWidget, QToolBar, QStatusBar, QWidget,
    QHBoxLayout, QLabel, QMessageBox, QFileDialog
)
from PySide6.QtCore import Qt, QSize, Slot
from PySide6.QtGui import QAction, QActionGroup, QKeySequence

from config import APP_NAME, PATHS, UI_SETTINGS
from engine.frame import FrameEngine, FrameState
from gui.icons import (
    icon_start, icon_reset, icon_undo, icon_history, icon_export, icon_size_normal
)
from models.foul import FoulAwardPolicy
from services.event_bus import EventBus
from services.export import FrameExporter, build_frame_data
from services.settings import SettingsStore


class MainWindow(QMainWindow):
    """
    Primary scoreboard console.

    Provides:
    - Start Frame / New Frame / Undo / History / Export toolbar
    - Game menu with the foul award policy and rule enforcement
    - Help menu with the rules reference
    """

    def __init__(self, engine: FrameEngine, event_bus: EventBus, settings: SettingsStore):
        super().__init__()
        self.engine = engine
        self.event_bus = event_bus
        self.settings = settings
        self.final_score_dialog = None
        self.help_window = None

        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(UI_SETTINGS.min_width, UI_SETTINGS.min_height)

        from gui.widgets.scoreboard import ScoreboardWidget
        from gui.widgets.player_setup import PlayerSetupWidget
        from gui.widgets.scoring_panel import ScoringPanel

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(24)

        self.scoreboard = ScoreboardWidget(engine)
        self.scoreboard.setMinimumWidth(260)
        layout.addWidget(self.scoreboard, stretch=1)

        self.stack = QStackedWidget()
        self.stack.setMinimumWidth(280)
        self.player_setup = PlayerSetupWidget(engine)
        self.scoring_panel = ScoringPanel(engine)
        self.stack.addWidget(self.player_setup)     # index 0
        self.stack.addWidget(self.scoring_panel)    # index 1
        layout.addWidget(self.stack, stretch=1, alignment=Qt.AlignmentFlag.AlignVCenter)

        self.setCentralWidget(central)

        self._build_toolbar()
        self._build_menus()
        self._build_statusbar()
        self._connect_signals()
        self._on_state_changed(engine.get_state())

    def _build_toolbar(self) -> None:
        """Build the frame toolbar."""
        tb = QToolBar("Frame")
        tb.setObjectName("frame_toolbar")
        tb.setMovable(False)
        tb.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        tb.setIconSize(QSize(icon_size_normal(), icon_size_normal()))
        self.addToolBar(tb)

        self.action_start = QAction(icon_start(), "Start Game", self)
        self.action_start.triggered.connect(lambda: self.engine.start())
        tb.addAction(self.action_start)

        self.action_reset = QAction(icon_reset(), "New Game", self)
        self.action_reset.setShortcut(QKeySequence("Ctrl+N"))
        self.action_reset.triggered.connect(self.engine.reset)
        tb.addAction(self.action_reset)

        self.action_undo = QAction(icon_undo(), "Undo", self)
        self.action_undo.setShortcut(QKeySequence.StandardKey.Undo)
        self.action_undo.triggered.connect(self.engine.undo_last_action)
        tb.addAction(self.action_undo)

        self.action_history = QAction(icon_history(), "History", self)
        self.action_history.triggered.connect(self._show_history)
        tb.addAction(self.action_history)

        self.action_export = QAction(icon_export(), "Export", self)
        self.action_export.setShortcut(QKeySequence("Ctrl+E"))
        self.action_export.triggered.connect(self._export_frame)
        tb.addAction(self.action_export)

    def _build_menus(self) -> None:
        """Build the Game and Help menus."""
        game_menu = self.menuBar().addMenu("Game")
        game_menu.addSection("Foul Points Awarded To")

        self.policy_group = QActionGroup(self)
        self.policy_group.setExclusive(True)
        self.policy_actions: dict[FoulAwardPolicy, QAction] = {}
        for policy in FoulAwardPolicy:
            action = QAction(policy.title, self)
            action.setCheckable(True)
            action.setChecked(policy == self.settings.preferences.foul_award_policy)
            action.triggered.connect(lambda _=False, p=policy: self._set_preference(foul_award_policy=p))
            self.policy_group.addAction(action)
            game_menu.addAction(action)
            self.policy_actions[policy] = action

        game_menu.addSeparator()
        self.action_enforce = QAction("Enforce Snooker Rules", self)
        self.action_enforce.setCheckable(True)
        self.action_enforce.setChecked(self.settings.preferences.enforce_rules)
        self.action_enforce.toggled.connect(lambda on: self._set_preference(enforce_rules=on))
        game_menu.addAction(self.action_enforce)

        game_menu.addSeparator()
        self.action_concede = QAction("End Frame", self)
        self.action_concede.triggered.connect(self.engine.end)
        game_menu.addAction(self.action_concede)

        help_menu = self.menuBar().addMenu("Help")
        action_rules = QAction("Snooker Rules", self)
        action_rules.setShortcut(QKeySequence.StandardKey.HelpContents)
        action_rules.triggered.connect(self._show_help)
        help_menu.addAction(action_rules)

    def _build_statusbar(self) -> None:
        """Build the status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready. Add players to begin")

        self.status_frame = QLabel("No frame in progress")
        self.status_bar.addPermanentWidget(self.status_frame)

    def _connect_signals(self) -> None:
        """Connect event bus signals."""
        self.event_bus.state_changed.connect(self._on_state_changed)
        self.event_bus.state_changed.connect(self.scoreboard.update_state)
        self.event_bus.state_changed.connect(self.player_setup.update_state)
        self.event_bus.state_changed.connect(self.scoring_panel.update_state)
        self.event_bus.frame_ended.connect(self._on_frame_ended)
        self.event_bus.respotted_black_started.connect(self._on_respotted_black)
        self.event_bus.system_message.connect(self._on_system_message)

    def _set_preference(self, **changes) -> None:
        try:
            preferences = self.settings.update(engine=self.engine, **changes)
        except RuntimeError as e:
            self.event_bus.emit_message("warning", str(e))
            return
        self.event_bus.preferences_changed.emit(preferences)
        self.event_bus.state_changed.emit(self.engine.get_state())

    @Slot(object)
    def _on_state_changed(self, state: FrameState) -> None:
        """Enable toolbar and menu actions for the current phase."""
        self.stack.setCurrentIndex(1 if state.game_started else 0)

        self.action_start.setEnabled(not state.game_started and self.engine.has_enough_players)
        self.action_reset.setEnabled(state.game_started or bool(state.players))
        self.action_undo.setEnabled(state.history_length > 0 and (state.game_started or state.game_over))
        self.action_export.setEnabled(state.history_length > 0)
        self.action_concede.setEnabled(state.game_started)

        # Preferences are locked while a frame is in progress
        for action in self.policy_actions.values():
            action.setEnabled(not state.game_started)
        self.action_enforce.setEnabled(not state.game_started)

        player = state.current_player
        if state.game_started and player is not None:
            self.status_frame.setText(f"{player.name} at the table")
        elif state.game_over:
            self.status_frame.setText("Frame over")
        else:
            self.status_frame.setText("No frame in progress")

    @Slot(list)
    def _on_frame_ended(self, standings: list) -> None:
        from gui.widgets.final_score import FinalScoreDialog

        self.final_score_dialog = FinalScoreDialog(standings, self)
        self.final_score_dialog.new_frame_requested.connect(self.engine.reset)
        self.final_score_dialog.open()

    @Slot()
    def _on_respotted_black(self) -> None:
        self.status_bar.showMessage("Scores tied, black respotted", 5000)

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Display system message in status bar."""
        self.status_bar.showMessage(f"[{level.upper()}] {message}", 5000)

    def _show_history(self) -> None:
        from gui.widgets.frame_history import FrameHistoryDialog

        FrameHistoryDialog(self.engine, self).exec()

    def _show_help(self) -> None:
        from gui.help_view import HelpWindow

        if self.help_window is None:
            self.help_window = HelpWindow(self)
        self.help_window.show()
        self.help_window.raise_()

    def _export_frame(self) -> None:
        """Export the frame as a PDF scoresheet or CSV."""
        PATHS.exports.mkdir(parents=True, exist_ok=True)
        filepath, selected = QFileDialog.getSaveFileName(
            self,
            "Export Frame",
            str(PATHS.exports / "frame.pdf"),
            "PDF Scoresheet (*.pdf);;CSV Data (*.csv)",
        )
        if not filepath:
            return

        exporter = FrameExporter()
        frame_data = build_frame_data(self.engine)
        if filepath.lower().endswith(".csv") or selected.startswith("CSV"):
            ok = exporter.export_csv(frame_data, filepath)
        else:
            ok = exporter.export_pdf(frame_data, filepath)

        if ok:
            self.event_bus.emit_message("info", f"Frame exported to {filepath}")
        else:
            self.event_bus.emit_message("error", "Export failed, see the log for details")

    def closeEvent(self, event) -> None:
        """Handle window close."""
        if self.engine.game_started:
            reply = QMessageBox.question(
                self,
                "Frame in Progress",
                "A frame is currently in progress. Are you sure you want to exit?",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
                QMessageBox.StandardButton.No
            )
            if reply == QMessageBox.StandardButton.No:
                event.ignore()
                return

        event.accept()

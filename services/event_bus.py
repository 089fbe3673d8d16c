"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
enabling loose coupling between the frame engine, GUI and services.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for the Snooker Scoreboard.

    The EventBus acts as a mediator between all application components:
    - FrameEngine emits scoring events
    - GUI components listen and update displays
    - SettingsStore announces preference changes

    Usage:
        # In the application controller
        engine.ball_potted.connect(self.event_bus.ball_potted.emit)

        # In a widget
        self.event_bus.state_changed.connect(self._on_state_changed)
    """

    # ============ Frame Lifecycle ============
    frame_started = Signal()
    frame_reset = Signal()
    frame_ended = Signal(list)          # final standings
    phase_changed = Signal(str)         # FramePhase value
    respotted_black_started = Signal()

    # ============ Scoring Events ============
    state_changed = Signal(object)      # FrameState dataclass
    ball_potted = Signal(dict)          # {player_id, player_name, ball_name, points, current_break}
    foul_committed = Signal(dict)       # {player_id, player_name, points, policy, awarded_to}
    turn_advanced = Signal(int)         # new current player index
    action_undone = Signal(dict)        # Action that was undone

    # ============ Preferences ============
    preferences_changed = Signal(object)    # Preferences model

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("info", "Frame exported")

    def __init__(self):
        super().__init__()

    def connect_engine(self, engine) -> None:
        """Forward every FrameEngine signal through the bus."""
        engine.frame_started.connect(self.frame_started.emit)
        engine.frame_reset.connect(self.frame_reset.emit)
        engine.frame_ended.connect(self.frame_ended.emit)
        engine.phase_changed.connect(self.phase_changed.emit)
        engine.respotted_black_started.connect(self.respotted_black_started.emit)
        engine.state_changed.connect(self.state_changed.emit)
        engine.ball_potted.connect(self.ball_potted.emit)
        engine.foul_committed.connect(self.foul_committed.emit)
        engine.turn_advanced.connect(self.turn_advanced.emit)
        engine.action_undone.connect(self.action_undone.emit)

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)

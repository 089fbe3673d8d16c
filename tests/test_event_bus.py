"""
Unit tests for the EventBus.
"""

from engine.frame import FrameEngine
from services.event_bus import EventBus


class TestEventBus:
    """Tests for forwarding engine signals."""

    def setup_method(self):
        self.bus = EventBus()
        self.engine = FrameEngine()
        self.bus.connect_engine(self.engine)
        self.engine.add_player("Alice")
        self.engine.add_player("Bob")

    def test_engine_signals_are_forwarded(self):
        phases = []
        fouls = []
        self.bus.phase_changed.connect(lambda p: phases.append(p))
        self.bus.foul_committed.connect(lambda d: fouls.append(d))

        self.engine.start()
        self.engine.apply_foul(-4)

        assert phases == ["in_progress"]
        assert fouls[0]["player_name"] == "Alice"

    def test_frame_end_is_forwarded(self):
        standings = []
        self.bus.frame_ended.connect(lambda s: standings.append(s))
        self.engine.enforce_rules = True

        self.engine.start(short_game=True)
        self.engine.apply_pot("Black", 7)

        assert [p.name for p in standings[0]] == ["Alice", "Bob"]

    def test_emit_message(self):
        messages = []
        self.bus.system_message.connect(lambda level, msg: messages.append((level, msg)))

        self.bus.emit_message("info", "Frame exported")

        assert messages == [("info", "Frame exported")]

"""
Unit tests for the FrameEngine.

Tests cover the frame lifecycle, pots, fouls, break tracking, the
respotted black, rule enforcement extras and undo.
"""

import uuid

import pytest

from engine.frame import FrameEngine, FramePhase
from models.ball import PotRequirement, RequirementKind
from models.foul import FoulAwardPolicy


def make_engine(*names, **kwargs) -> FrameEngine:
    engine = FrameEngine(**kwargs)
    for name in names or ("Alice", "Bob"):
        engine.add_player(name)
    return engine


def scores(engine: FrameEngine) -> list[int]:
    return [p.score for p in engine.players]


class TestRoster:
    """Tests for adding and removing players."""

    def setup_method(self):
        self.engine = FrameEngine()

    def test_add_player_trims_name(self):
        """Names should be stored without surrounding whitespace."""
        player = self.engine.add_player("  Alice  ")

        assert player.name == "Alice"
        assert player.score == 0
        assert self.engine.players == (player,)

    def test_blank_name_is_ignored(self):
        """A blank name should not add a player."""
        assert self.engine.add_player("   ") is None
        assert self.engine.players == ()

    def test_remove_player_by_id(self):
        """Removing a player should drop them from the turn order."""
        alice = self.engine.add_player("Alice")
        bob = self.engine.add_player("Bob")

        self.engine.remove_player(alice.id)

        assert self.engine.players == (bob,)

    def test_remove_unknown_id_is_ignored(self):
        """Unknown ids should leave the roster unchanged."""
        self.engine.add_player("Alice")
        self.engine.remove_player(uuid.uuid4())

        assert len(self.engine.players) == 1

    def test_remove_players_at_indices(self):
        """Positional removal should remove exactly the listed players."""
        for name in ("Alice", "Bob", "Cara", "Dan"):
            self.engine.add_player(name)

        self.engine.remove_players_at([3, 1, 7])

        assert [p.name for p in self.engine.players] == ["Alice", "Cara"]

    def test_removing_last_seat_clamps_current_index(self):
        """The current index should stay valid when the roster shrinks."""
        engine = make_engine("Alice", "Bob", "Cara")
        engine.start()
        engine.advance_turn()
        engine.advance_turn()
        assert engine.current_player_index == 2

        engine.remove_player(engine.players[2].id)

        assert engine.current_player_index == 1
        assert engine.current_player.name == "Bob"

    def test_player_name_for_unknown_id(self):
        """Unknown ids should be reported as Unknown."""
        assert self.engine.player_name(uuid.uuid4()) == "Unknown"


class TestLifecycle:
    """Tests for start, reset and end."""

    def test_start_requires_two_players(self):
        """A frame should not start with a single player."""
        engine = make_engine("Alice")
        engine.start()

        assert engine.phase == FramePhase.NOT_STARTED
        assert not engine.game_started

    def test_start_initializes_frame(self):
        """Starting should set up a full rack with a red on."""
        engine = make_engine()
        engine.start()

        assert engine.phase == FramePhase.IN_PROGRESS
        assert engine.reds_remaining == 15
        assert engine.pot_requirement == PotRequirement.red()
        assert engine.current_player_index == 0
        assert engine.action_history == ()

    def test_short_game_starts_on_the_black(self):
        """A short game should start with only the black left."""
        engine = make_engine()
        engine.start(short_game=True)

        assert engine.reds_remaining == 0
        assert engine.pot_requirement == PotRequirement.color_sequence(5)

    def test_reset_keeps_roster_and_clears_scores(self):
        """Reset should keep the players but clear the frame."""
        engine = make_engine()
        engine.start()
        engine.apply_pot("Red", 1)
        engine.apply_foul(-4)

        engine.reset()

        assert engine.phase == FramePhase.NOT_STARTED
        assert [p.name for p in engine.players] == ["Alice", "Bob"]
        assert scores(engine) == [0, 0]
        assert engine.action_history == ()
        assert engine.reds_remaining == 15
        assert all(engine.foul_count(p.id) == 0 for p in engine.players)

    def test_end_concedes_frame(self):
        """End should finish the frame without changing scores."""
        engine = make_engine()
        engine.start()
        engine.apply_pot("Red", 1)
        ended = []
        engine.frame_ended.connect(lambda standings: ended.append(standings))

        engine.end()

        assert engine.phase == FramePhase.ENDED
        assert engine.game_over
        assert not engine.game_started
        assert scores(engine) == [1, 0]
        assert [p.name for p in ended[0]] == ["Alice", "Bob"]

    def test_end_before_start_is_ignored(self):
        """End should do nothing when no frame is running."""
        engine = make_engine()
        engine.end()

        assert engine.phase == FramePhase.NOT_STARTED


    def test_undo_after_concession_reverts_last_pot(self):
        """A concession is not recorded, so undo also takes back the last pot."""
        engine = make_engine()
        engine.start()
        engine.apply_pot("Red", 1)
        engine.apply_pot("Blue", 5)
        engine.end()

        engine.undo_last_action()

        assert engine.phase == FramePhase.IN_PROGRESS
        assert scores(engine) == [1, 0]
        assert len(engine.action_history) == 1


class TestPots:
    """Tests for potting without rule enforcement."""

    def setup_method(self):
        self.engine = make_engine()
        self.engine.start()
        self.alice, self.bob = self.engine.players

    def test_pot_credits_current_player_and_keeps_turn(self):
        """Potting should score for the player at the table without passing the turn."""
        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Black", 7)

        assert scores(self.engine) == [8, 0]
        assert self.engine.current_player_index == 0
        assert self.engine.turn_has_action

    def test_pot_tracks_breaks(self):
        """Current and highest breaks should follow consecutive pots."""
        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Pink", 6)

        assert self.engine.current_break(self.alice.id) == 7
        assert self.engine.highest_break(self.alice.id) == 7

    def test_end_turn_zeroes_break_but_keeps_highest(self):
        """Ending a visit should reset the current break only."""
        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Blue", 5)
        self.engine.advance_turn()

        assert self.engine.current_player_index == 1
        assert self.engine.current_break(self.alice.id) == 0
        assert self.engine.highest_break(self.alice.id) == 6
        assert not self.engine.foul_carryover_active

    def test_red_pot_advances_order(self):
        """A red should leave a color on and one fewer red."""
        self.engine.apply_pot("Red", 1)

        assert self.engine.reds_remaining == 14
        assert self.engine.pot_requirement.kind == RequirementKind.COLOR

    def test_pot_uses_ball_color_by_default(self):
        """The history entry should carry the ball's display color."""
        self.engine.apply_pot("Green", 3)

        action = self.engine.action_history[-1]
        assert action.kind.ball_color == "#2E7D32"
        assert action.kind.ball_name == "Green"

    def test_pot_before_start_is_ignored(self):
        """Pots outside a running frame should change nothing."""
        engine = make_engine()
        states = []
        engine.state_changed.connect(lambda s: states.append(s))

        engine.apply_pot("Red", 1)

        assert scores(engine) == [0, 0]
        assert engine.action_history == ()
        assert states == []

    def test_ball_potted_signal(self):
        """Potting should announce the pot with the running break."""
        potted = []
        self.engine.ball_potted.connect(lambda d: potted.append(d))

        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Black", 7)

        assert potted[-1]["ball_name"] == "Black"
        assert potted[-1]["player_name"] == "Alice"
        assert potted[-1]["current_break"] == 8


    def test_unenforced_sequence_never_ends_frame(self):
        """Without enforcement, pots after the reds keep the frame open."""
        engine = make_engine()
        engine.start(short_game=True)
        ended = []
        engine.frame_ended.connect(lambda s: ended.append(s))

        engine.apply_pot("Red", 1)
        engine.apply_pot("Black", 7)

        assert engine.phase == FramePhase.IN_PROGRESS
        assert not engine.respotted_black_active
        assert engine.pot_requirement == PotRequirement.color_sequence(7)
        assert scores(engine) == [8, 0]
        assert ended == []

    def test_unenforced_tie_does_not_respot_black(self):
        """A level score after the black only respots it under enforcement."""
        engine = make_engine()
        engine.start(short_game=True)
        engine.apply_foul(-7)
        engine.advance_turn()

        engine.apply_pot("Black", 7)

        assert scores(engine) == [7, 7]
        assert engine.phase == FramePhase.IN_PROGRESS
        assert not engine.respotted_black_active


class TestFouls:
    """Tests for fouls and the award policies."""

    def test_next_player_receives_foul_points(self):
        """Under NEXT_PLAYER only the following player gains the penalty."""
        engine = make_engine("Alice", "Bob", "Cara")
        engine.start()

        engine.apply_foul(-5)

        assert scores(engine) == [0, 5, 0]
        assert engine.current_player_index == 1
        assert engine.foul_carryover_active
        assert engine.foul_count(engine.players[0].id) == 1

    def test_next_player_wraps_around(self):
        """A foul by the last seat should award the first seat."""
        engine = make_engine()
        engine.start()
        engine.advance_turn()

        engine.apply_foul(-4)

        assert scores(engine) == [4, 0]
        assert engine.current_player_index == 0

    def test_all_players_receive_foul_points(self):
        """Under ALL_PLAYERS everybody, offender included, gains the penalty."""
        engine = make_engine("Alice", "Bob", "Cara",
                             foul_award_policy=FoulAwardPolicy.ALL_PLAYERS)
        engine.start()

        engine.apply_foul(-7)

        assert scores(engine) == [7, 7, 7]
        assert engine.action_history[-1].points == 7

    def test_foul_zeroes_break_but_keeps_highest(self):
        """A foul should end the offender's break."""
        engine = make_engine()
        engine.start()
        alice = engine.players[0]
        engine.apply_pot("Red", 1)
        engine.apply_pot("Black", 7)

        engine.apply_foul(-4)

        assert engine.current_break(alice.id) == 0
        assert engine.highest_break(alice.id) == 8

    def test_foul_signal_lists_recipients(self):
        """The foul announcement should name who received the points."""
        engine = make_engine()
        engine.start()
        fouls = []
        engine.foul_committed.connect(lambda d: fouls.append(d))

        engine.apply_foul(-6)

        assert fouls[0]["points"] == 6
        assert fouls[0]["awarded_to"] == [engine.players[1].id]
        assert fouls[0]["policy"] == "next_player"


class TestRuleEnforcement:
    """Tests for the legal potting order."""

    def setup_method(self):
        self.engine = make_engine(enforce_rules=True)
        self.engine.start()

    def test_only_red_is_on_at_start(self):
        """A frame should open on a red."""
        assert self.engine.allowed_pot_names == frozenset({"Red"})

    def test_illegal_pot_is_ignored(self):
        """Potting a color while a red is on should change nothing."""
        self.engine.apply_pot("Yellow", 2)

        assert scores(self.engine) == [0, 0]
        assert self.engine.action_history == ()

    def test_any_color_after_red(self):
        """Every color should be on after a red."""
        self.engine.apply_pot("Red", 1)

        assert self.engine.allowed_pot_names == frozenset(
            {"Yellow", "Green", "Brown", "Blue", "Pink", "Black"}
        )
        self.engine.apply_pot("Red", 1)
        assert self.engine.reds_remaining == 14

    def test_new_visit_opens_on_red(self):
        """Ending a visit while a color is on should put a red back on."""
        self.engine.apply_pot("Red", 1)
        self.engine.advance_turn()

        assert self.engine.pot_requirement == PotRequirement.red()

    def test_allowed_set_empty_without_enforcement(self):
        """Without enforcement no legal set is published."""
        engine = make_engine()
        engine.start()

        assert engine.allowed_pot_names == frozenset()
        assert engine.get_state().allowed_pot_names == frozenset()

    def test_clearance_follows_color_sequence(self):
        """After the last red the colors must go down in order."""
        for _ in range(14):
            self.engine.apply_pot("Red", 1)
            self.engine.apply_pot("Black", 7)
        self.engine.apply_pot("Red", 1)

        assert self.engine.reds_remaining == 0
        assert self.engine.allowed_pot_names == frozenset({"Yellow"})
        assert self.engine.is_color_on_table("Black")

        for name, value in (("Yellow", 2), ("Green", 3), ("Brown", 4),
                            ("Blue", 5), ("Pink", 6)):
            self.engine.apply_pot(name, value)
            assert not self.engine.is_color_on_table(name)

        assert self.engine.allowed_pot_names == frozenset({"Black"})
        self.engine.apply_pot("Black", 7)

        assert self.engine.phase == FramePhase.ENDED
        assert scores(self.engine) == [140, 0]
        assert self.engine.highest_break(self.engine.players[0].id) == 140


class TestRespottedBlack:
    """Tests for the tie-break after the final black."""

    def setup_method(self):
        self.engine = make_engine(enforce_rules=True)
        self.engine.start(short_game=True)
        self.respots = []
        self.ended = []
        self.engine.respotted_black_started.connect(lambda: self.respots.append(True))
        self.engine.frame_ended.connect(lambda s: self.ended.append(s))

    def _tie_on_the_black(self):
        # Alice fouls (Bob 7), Bob misses, Alice pots the black: 7-7
        self.engine.apply_foul(-7)
        self.engine.advance_turn()
        self.engine.apply_pot("Black", 7)

    def test_final_black_ends_frame_without_tie(self):
        """The final black should end the frame when someone leads."""
        self.engine.apply_pot("Black", 7)

        assert self.engine.phase == FramePhase.ENDED
        assert self.respots == []
        assert [p.name for p in self.ended[0]] == ["Alice", "Bob"]

    def test_tie_respots_black(self):
        """A tie after the final black should respot it."""
        self._tie_on_the_black()

        assert scores(self.engine) == [7, 7]
        assert self.engine.phase == FramePhase.RESPOTTED_BLACK
        assert self.engine.respotted_black_active
        assert self.engine.pot_requirement == PotRequirement.color_sequence(5)
        assert self.respots == [True]
        assert self.ended == []

    def test_respotted_black_pot_ends_frame(self):
        """Potting the respotted black should end the frame."""
        self._tie_on_the_black()
        self.engine.apply_pot("Black", 7)

        assert self.engine.phase == FramePhase.ENDED
        assert self.engine.final_standings[0].name == "Alice"
        assert len(self.ended) == 1

    def test_only_black_allowed_during_respot(self):
        """Only the black is on during the tie-break."""
        self._tie_on_the_black()

        assert self.engine.allowed_pot_names == frozenset({"Black"})
        assert self.engine.is_color_on_table("Black")
        assert not self.engine.is_color_on_table("Pink")

    def test_undo_after_frame_end_resumes_frame(self):
        """Undoing the deciding pot should bring the frame back."""
        self._tie_on_the_black()
        self.engine.apply_pot("Black", 7)

        self.engine.undo_last_action()

        assert self.engine.phase == FramePhase.IN_PROGRESS
        assert self.engine.game_started
        assert not self.engine.game_over
        assert not self.engine.respotted_black_active
        assert scores(self.engine) == [7, 7]
        assert self.engine.pot_requirement == PotRequirement.color_sequence(5)


    def test_off_table_respotted_black_ends_frame_when_not_level(self):
        """Losing the respotted black hands the frame to the opponent."""
        self._tie_on_the_black()

        self.engine.apply_off_table_foul()

        assert scores(self.engine) == [7, 14]
        assert self.engine.phase == FramePhase.ENDED
        assert self.ended[0][0].name == "Bob"

    def test_off_table_respotted_black_level_respots_again(self):
        """When every player gains the penalty the scores stay level."""
        engine = make_engine(enforce_rules=True,
                             foul_award_policy=FoulAwardPolicy.ALL_PLAYERS)
        engine.start(short_game=True)
        respots = []
        engine.respotted_black_started.connect(lambda: respots.append(True))
        engine.apply_foul(-7)

        engine.apply_off_table_foul()
        assert scores(engine) == [14, 14]
        assert engine.phase == FramePhase.RESPOTTED_BLACK

        engine.apply_off_table_foul()

        assert scores(engine) == [21, 21]
        assert engine.phase == FramePhase.RESPOTTED_BLACK
        assert engine.pot_requirement == PotRequirement.color_sequence(5)
        assert len(respots) == 2

    def test_deciding_pot_is_announced_before_frame_end(self):
        """Listeners see the final pot before the frame ends."""
        events = []
        self.engine.ball_potted.connect(lambda d: events.append(("potted", d["ball_name"])))
        self.engine.frame_ended.connect(lambda s: events.append(("ended", s[0].name)))

        self.engine.apply_pot("Black", 7)

        assert events == [("potted", "Black"), ("ended", "Alice")]


class TestLeaders:
    """Tests for leading and standings queries."""

    def test_nobody_leads_before_start(self):
        engine = make_engine()
        assert not engine.is_leading(engine.players[0].id)

    def test_leader_and_tie(self):
        """The top positive score leads; equal tops are a tie."""
        engine = make_engine()
        engine.start()
        alice, bob = engine.players

        assert not engine.is_leading(alice.id)

        engine.apply_pot("Red", 1)
        assert engine.is_leading(alice.id)
        assert not engine.is_leading(bob.id)
        assert not engine.is_tie_for_lead

        engine.apply_foul(-1)
        assert engine.is_tie_for_lead
        assert engine.leading_score == 1

    def test_standings_break_ties_by_name(self):
        """Equal scores should be ordered by name."""
        engine = make_engine("Zed", "Amy")
        engine.start()

        assert [p.name for p in engine.final_standings] == ["Amy", "Zed"]


class TestFreeBallAndReplay:
    """Tests for the free ball, replay and off-table extensions."""

    def setup_method(self):
        self.engine = make_engine(enforce_rules=True)
        self.engine.start()
        self.alice, self.bob = self.engine.players

    def test_free_ball_needs_a_foul(self):
        """No free ball without a carried-over foul."""
        assert not self.engine.can_use_free_ball
        assert self.engine.free_ball_option is None

    def test_free_ball_counts_as_red(self):
        """With reds left, a free ball scores as a red and leaves a color on."""
        self.engine.apply_foul(-4)

        option = self.engine.free_ball_option
        assert option.name == "Red"
        assert option.counts_as_red

        self.engine.apply_free_ball()

        assert scores(self.engine) == [0, 5]
        assert self.engine.reds_remaining == 15
        assert self.engine.pot_requirement.kind == RequirementKind.COLOR
        assert not self.engine.can_use_free_ball

    def test_free_ball_unavailable_without_enforcement(self):
        """Free balls belong to rule enforcement only."""
        engine = make_engine()
        engine.start()
        engine.apply_foul(-4)

        assert not engine.can_use_free_ball
        engine.apply_free_ball()
        assert scores(engine) == [0, 4]

    def test_free_ball_on_final_black_ends_frame(self):
        """A free ball on the last black follows the normal sequence rule."""
        engine = make_engine(enforce_rules=True)
        engine.start(short_game=True)
        engine.apply_foul(-4)

        engine.apply_free_ball()

        assert scores(engine) == [0, 11]
        assert engine.phase == FramePhase.ENDED

    def test_replay_returns_table_to_offender(self):
        """Play again should seat the offender without scoring."""
        self.engine.apply_foul(-4)
        assert self.engine.can_use_replay

        self.engine.replay_previous_turn()

        assert self.engine.current_player_index == 0
        assert not self.engine.foul_carryover_active
        assert scores(self.engine) == [0, 4]
        assert len(self.engine.action_history) == 1

    def test_replay_not_available_after_pot(self):
        """Once the visit has an action the replay is gone."""
        self.engine.apply_foul(-4)
        self.engine.apply_pot("Red", 1)

        assert not self.engine.can_use_replay
        self.engine.replay_previous_turn()
        assert self.engine.current_player_index == 1

    def test_off_table_red_is_foul_and_removes_red(self):
        """A red forced off the table costs four and leaves the table."""
        self.engine.apply_off_table_foul()

        assert self.engine.reds_remaining == 14
        assert self.engine.pot_requirement == PotRequirement.red()
        assert scores(self.engine) == [0, 4]
        assert self.engine.current_player_index == 1
        assert self.engine.foul_count(self.alice.id) == 1

    def test_off_table_foul_undo_restores_position(self):
        """Undoing an off-table foul should put the ball and turn back."""
        self.engine.apply_off_table_foul()

        self.engine.undo_last_action()

        assert self.engine.reds_remaining == 15
        assert self.engine.pot_requirement == PotRequirement.red()
        assert self.engine.current_player_index == 0
        assert scores(self.engine) == [0, 0]
        assert self.engine.foul_count(self.alice.id) == 0

    def test_off_table_needs_a_single_ball_on(self):
        """With a choice of colors on there is no definite ball to lose."""
        self.engine.apply_pot("Red", 1)

        assert not self.engine.can_use_off_table_foul
        self.engine.apply_off_table_foul()
        assert len(self.engine.action_history) == 1

    def test_off_table_final_black(self):
        """Losing the final black costs seven and completes the colors."""
        engine = make_engine(enforce_rules=True)
        engine.start(short_game=True)

        engine.apply_off_table_foul()

        assert scores(engine) == [0, 7]
        assert engine.phase == FramePhase.ENDED

        engine.undo_last_action()
        assert engine.phase == FramePhase.IN_PROGRESS
        assert engine.pot_requirement == PotRequirement.color_sequence(5)
        assert engine.current_player_index == 0
        assert scores(engine) == [0, 0]


class TestUndo:
    """Tests for the undo history."""

    def setup_method(self):
        self.engine = make_engine("Alice", "Bob", "Cara")
        self.engine.start()

    def test_undo_empty_history_returns_none(self):
        assert self.engine.undo_last_action() is None

    def test_undo_pot(self):
        """Undoing a pot should restore score, break and table."""
        alice = self.engine.players[0]
        self.engine.apply_pot("Red", 1)

        action = self.engine.undo_last_action()

        assert action.kind.ball_name == "Red"
        assert scores(self.engine) == [0, 0, 0]
        assert self.engine.current_break(alice.id) == 0
        assert self.engine.highest_break(alice.id) == 0
        assert self.engine.reds_remaining == 15
        assert self.engine.pot_requirement == PotRequirement.red()

    def test_undo_foul_restores_turn_and_break(self):
        """Undoing a foul should seat the offender with their break back."""
        alice = self.engine.players[0]
        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Blue", 5)
        self.engine.apply_foul(-5)

        self.engine.undo_last_action()

        assert self.engine.current_player_index == 0
        assert self.engine.current_break(alice.id) == 6
        assert self.engine.foul_count(alice.id) == 0
        assert scores(self.engine) == [6, 0, 0]
        assert not self.engine.foul_carryover_active

    def test_undo_all_players_foul(self):
        """Every recipient of an ALL_PLAYERS award should be reversed."""
        self.engine.foul_award_policy = FoulAwardPolicy.ALL_PLAYERS
        self.engine.apply_foul(-4)

        self.engine.undo_last_action()

        assert scores(self.engine) == [0, 0, 0]

    def test_undo_unwinds_whole_history(self):
        """Undoing every action should return to the opening position."""
        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Black", 7)
        self.engine.advance_turn()
        self.engine.apply_foul(-4)
        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Pink", 6)

        undone = []
        while self.engine.undo_last_action() is not None:
            undone.append(True)

        assert len(undone) == 5
        assert self.engine.action_history == ()
        assert scores(self.engine) == [0, 0, 0]
        assert self.engine.reds_remaining == 15
        assert self.engine.pot_requirement == PotRequirement.red()
        assert all(self.engine.highest_break(p.id) == 0 for p in self.engine.players)

    def test_undo_restores_highest_break(self):
        """A highest break raised by the undone pot should drop back."""
        alice = self.engine.players[0]
        self.engine.apply_pot("Red", 1)
        self.engine.advance_turn()
        self.engine.advance_turn()
        self.engine.advance_turn()
        self.engine.apply_pot("Red", 1)
        self.engine.apply_pot("Black", 7)

        self.engine.undo_last_action()

        assert self.engine.highest_break(alice.id) == 1
        assert self.engine.current_break(alice.id) == 1

    def test_undo_emits_signal(self):
        """Undo should announce the reversed action."""
        undone = []
        self.engine.action_undone.connect(lambda d: undone.append(d))
        self.engine.apply_foul(-6)

        self.engine.undo_last_action()

        assert undone[0]["is_foul"]
        assert undone[0]["points"] == 6
        assert undone[0]["player_name"] == "Alice"

    def test_describe_action(self):
        """History lines should read naturally."""
        self.engine.apply_pot("Blue", 5)
        self.engine.apply_foul(-4)

        pot, foul = self.engine.action_history
        assert self.engine.describe_action(pot) == "Alice potted Blue for 5 points"
        assert self.engine.describe_action(foul) == "Alice fouled for 4 points"


class TestStateSnapshot:
    """Tests for the published FrameState."""

    def test_state_is_emitted_after_changes(self):
        engine = make_engine()
        states = []
        engine.state_changed.connect(lambda s: states.append(s))

        engine.start()
        engine.apply_pot("Red", 1)

        assert states[-1].players[0].score == 1
        assert states[-1].history_length == 1
        assert states[-1].current_player.name == "Alice"

    def test_snapshot_is_read_only(self):
        engine = make_engine()
        engine.start()
        state = engine.get_state()

        with pytest.raises(TypeError):
            state.foul_counts[engine.players[0].id] = 5

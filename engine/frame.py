"""
Frame Engine - Core game logic for a snooker frame.

The FrameEngine runs independently of the GUI and encapsulates every
snooker scoring rule: potting order, foul awards, break tracking, the
respotted-black tie-break and a single-step undo history.

Every operation is permissive: an intent that is not allowed in the
current state is ignored (no state change, nothing recorded, no signal).
The GUI is expected to disable controls using the query methods below.
"""

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from config import FRAME_SETTINGS
from engine.rules import SnookerRules
from models.action import ScoreAction, PotAction, FoulAction
from models.ball import PotRequirement, BallOnInfo, FreeBallOption
from models.foul import FoulAwardPolicy
from models.player import Player

logger = logging.getLogger(__name__)


class FramePhase(Enum):
    """State machine states for the frame lifecycle."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    RESPOTTED_BLACK = "respotted_black"
    ENDED = "ended"


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class FrameState:
    """
    Immutable snapshot of the published frame state.
    Emitted after every change for GUI updates.
    """
    players: tuple[Player, ...] = ()
    current_player_index: int = 0
    reds_remaining: int = FRAME_SETTINGS.reds_per_frame
    pot_requirement: PotRequirement = PotRequirement.red()
    phase: FramePhase = FramePhase.NOT_STARTED
    game_started: bool = False
    game_over: bool = False
    respotted_black_active: bool = False
    foul_carryover_active: bool = False
    turn_has_action: bool = False
    foul_counts: Mapping[uuid.UUID, int] = field(default_factory=_empty_mapping)
    current_breaks: Mapping[uuid.UUID, int] = field(default_factory=_empty_mapping)
    highest_breaks: Mapping[uuid.UUID, int] = field(default_factory=_empty_mapping)
    allowed_pot_names: frozenset[str] = frozenset()
    history_length: int = 0

    @property
    def current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_player_index]


class FrameEngine(QObject):
    """
    Core scoring logic for a snooker frame.
    Emits Qt Signals so GUI layers can react without polling.

    Two configuration values are set by the surrounding application:
    ``foul_award_policy`` and ``enforce_rules``. Both should only change
    while no frame is in progress; the engine does not enforce that.
    """

    # Signals
    state_changed = Signal(object)          # FrameState
    phase_changed = Signal(str)             # FramePhase value
    frame_started = Signal()
    frame_reset = Signal()
    frame_ended = Signal(list)              # final standings (list[Player])
    respotted_black_started = Signal()
    ball_potted = Signal(dict)              # pot details
    foul_committed = Signal(dict)           # foul details
    turn_advanced = Signal(int)             # new current player index
    action_undone = Signal(dict)            # action that was undone

    def __init__(self, foul_award_policy: FoulAwardPolicy = FoulAwardPolicy.NEXT_PLAYER,
                 enforce_rules: bool = False):
        """
        Initialize the frame engine.

        Args:
            foul_award_policy: Who receives foul points
            enforce_rules: Whether the official potting order is enforced
        """
        super().__init__()
        self.foul_award_policy = foul_award_policy
        self.enforce_rules = enforce_rules
        self._players: list[Player] = []
        self._reset_state()

    def _reset_state(self) -> None:
        """Reset all per-frame state, keeping the roster."""
        self._game_started = False
        self._game_over = False
        self._respotted_black_active = False
        self._foul_carryover_active = False
        self._turn_has_action = False
        self._current_player_index = 0
        self._history: list[ScoreAction] = []
        self._foul_counts: dict[uuid.UUID, int] = {p.id: 0 for p in self._players}
        self._current_breaks: dict[uuid.UUID, int] = {p.id: 0 for p in self._players}
        self._highest_breaks: dict[uuid.UUID, int] = {p.id: 0 for p in self._players}
        self._reds_remaining = FRAME_SETTINGS.reds_per_frame
        self._pot_requirement = PotRequirement.red()
        self._players = [p.with_score(0) for p in self._players]

    # ============ Roster ============

    def add_player(self, name: str) -> Optional[Player]:
        """
        Add a player to the end of the turn order.

        Returns:
            The new Player, or None if the name was blank
        """
        trimmed = name.strip()
        if not trimmed:
            return None

        player = Player(name=trimmed)
        self._players.append(player)
        self._foul_counts[player.id] = 0
        self._current_breaks[player.id] = 0
        self._highest_breaks[player.id] = 0
        logger.info("Player added: %s", trimmed)
        self._emit_state()
        return player

    def remove_player(self, player_id: uuid.UUID) -> None:
        """Remove a player by id. Unknown ids are ignored."""
        index = self._index_of(player_id)
        if index is None:
            return

        removed = self._players.pop(index)
        self._foul_counts.pop(player_id, None)
        self._current_breaks.pop(player_id, None)
        self._highest_breaks.pop(player_id, None)
        self._clamp_current_index()
        logger.info("Player removed: %s", removed.name)
        self._emit_state()

    def remove_players_at(self, indices: Iterable[int]) -> None:
        """Remove the players at the given list positions."""
        ids = [self._players[i].id for i in sorted(set(indices))
               if 0 <= i < len(self._players)]
        for player_id in ids:
            self.remove_player(player_id)

    # ============ Lifecycle ============

    def start(self, short_game: bool = False) -> None:
        """
        Start a new frame (NOT_STARTED -> IN_PROGRESS).

        Args:
            short_game: Start with the reds cleared and only the black left,
                        for demonstrations and quick checks
        """
        if not self.has_enough_players:
            logger.debug("Start ignored: %d player(s)", len(self._players))
            return

        self._reset_state()
        self._game_started = True
        if short_game:
            self._reds_remaining = 0
            self._pot_requirement = PotRequirement.color_sequence(SnookerRules.BLACK_INDEX)

        logger.info("Frame started with %d players", len(self._players))
        self.frame_started.emit()
        self._emit_phase()
        self._emit_state()

    def reset(self) -> None:
        """Return to NOT_STARTED from any phase, keeping the roster."""
        self._reset_state()
        logger.info("Frame reset")
        self.frame_reset.emit()
        self._emit_phase()
        self._emit_state()

    def end(self) -> None:
        """
        Concede the frame (IN_PROGRESS -> ENDED). Scores are unchanged.

        The concession itself is not recorded: a following undo resumes the
        frame and also reverts the last pot or foul.
        """
        if not self._game_started:
            return

        self._finish_frame()
        self._emit_state()

    # ============ Scoring ============

    def apply_pot(self, ball_name: str, points: int, color: Optional[str] = None) -> None:
        """
        Credit a potted ball to the player at the table.

        The turn does not advance. Under rule enforcement an illegal ball
        is ignored.

        Args:
            ball_name: Name of the potted ball ("Red", "Yellow", ...)
            points: Points scored
            color: Display color for the history log, defaults to the ball's color
        """
        if not self._can_play():
            return
        if self.enforce_rules and ball_name not in self.allowed_pot_names:
            logger.debug("Illegal pot ignored: %s (requirement %s)",
                         ball_name, self._pot_requirement)
            return

        ball_color = color if color is not None else SnookerRules.color_for(ball_name)
        action = self._credit_pot(ball_name, ball_color, points)
        self.ball_potted.emit(self._describe_pot(action))
        self._advance_order_after_pot(ball_name)
        self._emit_state()

    def apply_free_ball(self) -> None:
        """Take a free ball: score the on ball's value as a pot."""
        if not self._can_play():
            return
        option = self.free_ball_option
        if option is None:
            return

        action = self._credit_pot(option.name, option.color, option.points)
        self.ball_potted.emit(self._describe_pot(action))
        if option.counts_as_red and self._reds_remaining > 0:
            self._pot_requirement = PotRequirement.color()
        else:
            self._advance_order_after_pot(option.name)
        self._emit_state()

    def apply_foul(self, points: int) -> None:
        """
        Penalize the player at the table and pass the turn.

        Args:
            points: Foul value, usually given as a negative number; the
                    absolute value is awarded according to the policy
        """
        if not self._can_play():
            return

        self._commit_foul(abs(points), self._position())
        self._emit_state()

    def apply_off_table_foul(self) -> None:
        """
        The on ball left the table illegally.

        The potting order advances as if the ball had been potted, without
        pot points, then a foul worth max(4, ball value) is applied.
        """
        if not self.can_use_off_table_foul:
            return
        ball_on = self.current_ball_on
        position = self._position()

        finished_colors = False
        if self._reds_remaining > 0 and ball_on.name == SnookerRules.RED:
            self._reds_remaining = max(self._reds_remaining - 1, 0)
            if self._reds_remaining == 0:
                self._pot_requirement = PotRequirement.color_sequence(0)
            else:
                self._pot_requirement = PotRequirement.red()
        elif self._reds_remaining == 0 and self._pot_requirement.is_sequence:
            next_index = self._pot_requirement.index + 1
            self._pot_requirement = PotRequirement.color_sequence(next_index)
            finished_colors = SnookerRules.is_sequence_complete(next_index)

        self._commit_foul(SnookerRules.off_table_foul_value(ball_on.points), position)

        if finished_colors:
            self._colors_complete()
        self._emit_state()

    def advance_turn(self) -> None:
        """End the current visit without penalty."""
        if not self._can_play():
            return
        self._advance_turn(carry_foul=False)
        self._emit_state()

    def replay_previous_turn(self) -> None:
        """After a foul, hand the table back to the offender. No scoring."""
        if not self.can_use_replay:
            return

        count = len(self._players)
        self._current_player_index = (self._current_player_index - 1 + count) % count
        self._foul_carryover_active = False
        self._turn_has_action = False
        self.turn_advanced.emit(self._current_player_index)
        self._emit_state()

    def undo_last_action(self) -> Optional[ScoreAction]:
        """
        Undo the last recorded pot or foul.

        An ``end()`` concession is not an action: undo after a concession
        resumes the frame and removes the last pot or foul as well.

        Returns:
            The undone ScoreAction, or None if the history is empty
        """
        if not self._history:
            return None

        action = self._history.pop()
        for player_id, delta in action.score_deltas.items():
            index = self._index_of(player_id)
            if index is not None:
                player = self._players[index]
                self._players[index] = player.with_score(player.score - delta)

        for player_id, delta in action.foul_deltas.items():
            if player_id in self._foul_counts:
                self._foul_counts[player_id] -= delta
        for player_id, value in action.previous_current_breaks.items():
            if player_id in self._current_breaks:
                self._current_breaks[player_id] = value
        for player_id, value in action.previous_highest_breaks.items():
            if player_id in self._highest_breaks:
                self._highest_breaks[player_id] = value

        previous_phase = self.phase
        self._current_player_index = min(action.previous_current_index,
                                         max(len(self._players) - 1, 0))
        self._reds_remaining = action.previous_reds_remaining
        self._pot_requirement = action.previous_requirement
        self._game_started = True
        self._game_over = False
        self._respotted_black_active = False
        self._foul_carryover_active = False
        self._turn_has_action = False

        logger.debug("Undid %s by %s", type(action.kind).__name__,
                     self.player_name(action.player_id))
        self.action_undone.emit({
            "player_id": action.player_id,
            "player_name": self.player_name(action.player_id),
            "is_foul": action.is_foul,
            "points": action.points,
        })
        if self.phase != previous_phase:
            self._emit_phase()
        self._emit_state()
        return action

    # ============ Internal Transitions ============

    def _can_play(self) -> bool:
        return self._game_started and not self._game_over and bool(self._players)

    def _position(self) -> tuple[int, int, PotRequirement]:
        """Turn and table position captured before a transition."""
        return self._current_player_index, self._reds_remaining, self._pot_requirement

    def _credit_pot(self, ball_name: str, ball_color: str, points: int) -> ScoreAction:
        """Score a pot for the current player and record it."""
        self._turn_has_action = True
        self._foul_carryover_active = False

        index = self._current_player_index
        player = self._players[index]
        self._players[index] = player.with_score(player.score + points)

        previous_break = self._current_breaks.get(player.id, 0)
        previous_highest = self._highest_breaks.get(player.id, 0)
        new_break = previous_break + points
        self._current_breaks[player.id] = new_break
        if new_break > previous_highest:
            self._highest_breaks[player.id] = new_break

        action = ScoreAction(
            kind=PotAction(player.id, ball_name, ball_color, points),
            score_deltas={player.id: points},
            foul_deltas={},
            previous_current_index=index,
            previous_reds_remaining=self._reds_remaining,
            previous_requirement=self._pot_requirement,
            previous_current_breaks={player.id: previous_break},
            previous_highest_breaks={player.id: previous_highest},
        )
        self._history.append(action)
        return action

    def _commit_foul(self, penalty: int, position: tuple[int, int, PotRequirement]) -> None:
        """Award a foul against the current player, record it and pass the turn."""
        previous_index, previous_reds, previous_requirement = position
        offender = self._players[self._current_player_index]

        self._foul_counts[offender.id] = self._foul_counts.get(offender.id, 0) + 1
        previous_break = self._current_breaks.get(offender.id, 0)
        previous_highest = self._highest_breaks.get(offender.id, 0)
        self._current_breaks[offender.id] = 0

        if self.foul_award_policy == FoulAwardPolicy.ALL_PLAYERS:
            targets = list(range(len(self._players)))
        else:
            targets = [(self._current_player_index + 1) % len(self._players)]

        score_deltas = {}
        for index in targets:
            player = self._players[index]
            self._players[index] = player.with_score(player.score + penalty)
            score_deltas[player.id] = penalty

        self._history.append(ScoreAction(
            kind=FoulAction(offender.id, penalty),
            score_deltas=score_deltas,
            foul_deltas={offender.id: 1},
            previous_current_index=previous_index,
            previous_reds_remaining=previous_reds,
            previous_requirement=previous_requirement,
            previous_current_breaks={offender.id: previous_break},
            previous_highest_breaks={offender.id: previous_highest},
        ))

        self.foul_committed.emit({
            "player_id": offender.id,
            "player_name": offender.name,
            "points": penalty,
            "policy": self.foul_award_policy.value,
            "awarded_to": [self._players[i].id for i in targets],
        })
        self._advance_turn(carry_foul=True)

    def _advance_turn(self, carry_foul: bool) -> None:
        """Close the current visit and seat the next player."""
        if not self._can_play():
            return

        current_id = self._players[self._current_player_index].id
        self._current_breaks[current_id] = 0
        self._current_player_index = (self._current_player_index + 1) % len(self._players)
        if self.enforce_rules and self._reds_remaining > 0 and not self._respotted_black_active:
            self._pot_requirement = PotRequirement.red()
        self._foul_carryover_active = carry_foul
        self._turn_has_action = False
        self.turn_advanced.emit(self._current_player_index)

    def _advance_order_after_pot(self, ball_name: str) -> None:
        """Move the potting order on after ``ball_name`` was potted."""
        if self._respotted_black_active and ball_name == SnookerRules.BLACK:
            self._finish_frame()
            return

        reds, requirement, complete = SnookerRules.requirement_after_pot(
            self._reds_remaining, self._pot_requirement, ball_name
        )
        self._reds_remaining = reds
        self._pot_requirement = requirement
        # Without enforcement the sequence index runs on and the frame stays open
        if complete and self.enforce_rules:
            self._colors_complete()

    def _colors_complete(self) -> None:
        """The black has gone: respot it on a tie, otherwise end the frame."""
        if self.is_tie_for_lead:
            already_respotted = self._respotted_black_active
            self._respotted_black_active = True
            self._pot_requirement = PotRequirement.color_sequence(SnookerRules.BLACK_INDEX)
            logger.info("Scores tied after the final black, black respotted")
            self.respotted_black_started.emit()
            if not already_respotted:
                self._emit_phase()
        else:
            self._finish_frame()

    def _finish_frame(self) -> None:
        """Mark the frame as ended and announce the standings."""
        self._game_started = False
        self._game_over = True
        self._respotted_black_active = False
        self._foul_carryover_active = False
        self._turn_has_action = False

        standings = self.final_standings
        logger.info("Frame ended: %s",
                    ", ".join(f"{p.name} {p.score}" for p in standings))
        self._emit_phase()
        self.frame_ended.emit(standings)

    def _index_of(self, player_id: uuid.UUID) -> Optional[int]:
        for index, player in enumerate(self._players):
            if player.id == player_id:
                return index
        return None

    def _clamp_current_index(self) -> None:
        if self._current_player_index >= len(self._players):
            self._current_player_index = max(len(self._players) - 1, 0)

    def _describe_pot(self, action: ScoreAction) -> dict:
        return {
            "player_id": action.player_id,
            "player_name": self.player_name(action.player_id),
            "ball_name": action.kind.ball_name,
            "points": action.points,
            "current_break": self._current_breaks.get(action.player_id, 0),
        }

    def _emit_phase(self) -> None:
        self.phase_changed.emit(self.phase.value)

    def _emit_state(self) -> None:
        self.state_changed.emit(self.get_state())

    # ============ Query Methods ============

    def get_state(self) -> FrameState:
        """Get the current frame state snapshot."""
        return FrameState(
            players=tuple(self._players),
            current_player_index=self._current_player_index,
            reds_remaining=self._reds_remaining,
            pot_requirement=self._pot_requirement,
            phase=self.phase,
            game_started=self._game_started,
            game_over=self._game_over,
            respotted_black_active=self._respotted_black_active,
            foul_carryover_active=self._foul_carryover_active,
            turn_has_action=self._turn_has_action,
            foul_counts=MappingProxyType(dict(self._foul_counts)),
            current_breaks=MappingProxyType(dict(self._current_breaks)),
            highest_breaks=MappingProxyType(dict(self._highest_breaks)),
            allowed_pot_names=self.allowed_pot_names,
            history_length=len(self._history),
        )

    @property
    def phase(self) -> FramePhase:
        """Current phase of the frame."""
        if self._game_over:
            return FramePhase.ENDED
        if not self._game_started:
            return FramePhase.NOT_STARTED
        if self._respotted_black_active:
            return FramePhase.RESPOTTED_BLACK
        return FramePhase.IN_PROGRESS

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def current_player_index(self) -> int:
        return self._current_player_index

    @property
    def current_player(self) -> Optional[Player]:
        if not self._players:
            return None
        return self._players[self._current_player_index]

    @property
    def reds_remaining(self) -> int:
        return self._reds_remaining

    @property
    def pot_requirement(self) -> PotRequirement:
        return self._pot_requirement

    @property
    def game_started(self) -> bool:
        return self._game_started

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def respotted_black_active(self) -> bool:
        return self._respotted_black_active

    @property
    def foul_carryover_active(self) -> bool:
        return self._foul_carryover_active

    @property
    def turn_has_action(self) -> bool:
        return self._turn_has_action

    @property
    def action_history(self) -> tuple[ScoreAction, ...]:
        """Recorded actions, oldest first."""
        return tuple(self._history)

    @property
    def has_enough_players(self) -> bool:
        return len(self._players) >= FRAME_SETTINGS.min_players

    @property
    def leading_score(self) -> Optional[int]:
        if not self._players:
            return None
        return max(p.score for p in self._players)

    @property
    def is_tie_for_lead(self) -> bool:
        """More than one player shares the top score."""
        top = self.leading_score
        if top is None:
            return False
        return sum(1 for p in self._players if p.score == top) > 1

    def is_leading(self, player_id: uuid.UUID) -> bool:
        """Whether a player holds the (positive) top score in an active frame."""
        top = self.leading_score
        if not self._game_started or top is None or top <= 0:
            return False
        index = self._index_of(player_id)
        return index is not None and self._players[index].score == top

    @property
    def final_standings(self) -> list[Player]:
        """Players ordered by score (highest first), then by name."""
        return sorted(self._players, key=lambda p: (-p.score, p.name))

    def player_name(self, player_id: uuid.UUID) -> str:
        index = self._index_of(player_id)
        if index is None:
            return "Unknown"
        return self._players[index].name

    def foul_count(self, player_id: uuid.UUID) -> int:
        return self._foul_counts.get(player_id, 0)

    def current_break(self, player_id: uuid.UUID) -> int:
        return self._current_breaks.get(player_id, 0)

    def highest_break(self, player_id: uuid.UUID) -> int:
        return self._highest_breaks.get(player_id, 0)

    @property
    def allowed_pot_names(self) -> frozenset[str]:
        """Balls that may be potted next; empty when rules are not enforced."""
        if not self.enforce_rules:
            return frozenset()
        return SnookerRules.allowed_pot_names(
            self._reds_remaining, self._pot_requirement, self._respotted_black_active
        )

    def is_color_on_table(self, name: str) -> bool:
        """Whether a ball could still become on later in the frame."""
        return name in SnookerRules.colors_on_table(
            self._reds_remaining, self._pot_requirement, self._respotted_black_active
        )

    @property
    def current_ball_on(self) -> Optional[BallOnInfo]:
        """The single definite ball on, or None when a choice of colors is on."""
        return SnookerRules.ball_on(
            self._reds_remaining, self._pot_requirement, self._respotted_black_active
        )

    @property
    def can_use_free_ball(self) -> bool:
        return (
            self.enforce_rules
            and self._foul_carryover_active
            and not self._turn_has_action
            and self.current_ball_on is not None
        )

    @property
    def can_use_replay(self) -> bool:
        return (
            self._foul_carryover_active
            and not self._turn_has_action
            and self._can_play()
        )

    @property
    def can_use_off_table_foul(self) -> bool:
        if not self._can_play() or not self.enforce_rules:
            return False
        ball_on = self.current_ball_on
        return ball_on is not None and ball_on.off_table_removes_ball

    @property
    def free_ball_option(self) -> Optional[FreeBallOption]:
        """The free ball on offer, or None when one cannot be taken."""
        if not self._can_play() or not self.can_use_free_ball:
            return None
        ball_on = self.current_ball_on
        return FreeBallOption(
            name=ball_on.name,
            points=ball_on.points,
            color=ball_on.color,
            counts_as_red=self._reds_remaining > 0,
        )

    def describe_action(self, action: ScoreAction) -> str:
        """One-line description of a history entry."""
        name = self.player_name(action.player_id)
        if isinstance(action.kind, PotAction):
            return f"{name} potted {action.kind.ball_name} for {action.points} points"
        return f"{name} fouled for {action.points} points"

"""
Reversible score actions for the undo history.

Each ScoreAction is a frozen snapshot of one transition: the deltas it
applied and the values it overwrote. Subtracting the deltas and restoring
the previous values inverts the transition exactly.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping, Union

from models.ball import PotRequirement


@dataclass(frozen=True)
class PotAction:
    """A ball potted (or a free ball taken) by the player at the table."""
    player_id: uuid.UUID
    ball_name: str
    ball_color: str
    points: int


@dataclass(frozen=True)
class FoulAction:
    """A foul committed by the player at the table."""
    player_id: uuid.UUID
    points: int


ScoreActionKind = Union[PotAction, FoulAction]


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, eq=False)
class ScoreAction:
    """Record of a single scoring transition for undo functionality."""
    kind: ScoreActionKind
    score_deltas: Mapping[uuid.UUID, int]
    foul_deltas: Mapping[uuid.UUID, int]
    previous_current_index: int
    previous_reds_remaining: int
    previous_requirement: PotRequirement
    previous_current_breaks: Mapping[uuid.UUID, int]
    previous_highest_breaks: Mapping[uuid.UUID, int]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        # Copy every mapping so later engine mutations never alias a record
        for name in ("score_deltas", "foul_deltas",
                     "previous_current_breaks", "previous_highest_breaks"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    @property
    def player_id(self) -> uuid.UUID:
        """The player who potted or fouled."""
        return self.kind.player_id

    @property
    def points(self) -> int:
        return self.kind.points

    @property
    def is_foul(self) -> bool:
        return isinstance(self.kind, FoulAction)

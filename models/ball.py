"""
Ball and potting-order models.

PotRequirement describes which category of ball is currently "on".
BallOnInfo and FreeBallOption describe a single definite ball that the
player at the table may play.
"""

import enum
from dataclasses import dataclass


class RequirementKind(enum.Enum):
    """Category of ball that must be potted next."""
    RED = "red"
    COLOR = "color"
    COLOR_SEQUENCE = "color_sequence"


@dataclass(frozen=True)
class PotRequirement:
    """
    What ball category is legally on.

    RED and COLOR ignore ``index``. COLOR_SEQUENCE uses it to select the
    mandatory color from the fixed clearance order once the reds are gone;
    an index past the last color means the sequence is complete.
    """
    kind: RequirementKind
    index: int = 0

    @classmethod
    def red(cls) -> "PotRequirement":
        return cls(RequirementKind.RED)

    @classmethod
    def color(cls) -> "PotRequirement":
        return cls(RequirementKind.COLOR)

    @classmethod
    def color_sequence(cls, index: int) -> "PotRequirement":
        return cls(RequirementKind.COLOR_SEQUENCE, index)

    @property
    def is_sequence(self) -> bool:
        return self.kind == RequirementKind.COLOR_SEQUENCE

    def __str__(self) -> str:
        if self.is_sequence:
            return f"color_sequence({self.index})"
        return self.kind.value


@dataclass(frozen=True)
class BallOnInfo:
    """The single definite ball currently on."""
    name: str
    points: int
    color: str
    off_table_removes_ball: bool = True


@dataclass(frozen=True)
class FreeBallOption:
    """A free ball the fouled-against player may nominate."""
    name: str
    points: int
    color: str
    counts_as_red: bool


@dataclass(frozen=True)
class ScoreOption:
    """A scoring button offered to the operator (pot or foul)."""
    name: str
    points: int
    colors: tuple[str, ...]

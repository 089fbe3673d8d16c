"""
Rules - Snooker rule tables and potting-order logic.

Pure functions over (reds remaining, pot requirement, respotted black).
The FrameEngine owns the state; these helpers only derive from it.
"""

from typing import Optional

from config import FRAME_SETTINGS
from models.ball import (
    PotRequirement, RequirementKind, BallOnInfo, ScoreOption
)


class SnookerRules:
    """
    Static snooker rule tables and derivations.

    Ball names are the plain strings shown on the scoring buttons
    ("Red", "Yellow", ... "Black").
    """

    RED = "Red"
    BLACK = "Black"

    # Clearance order once the reds are gone
    COLOR_SEQUENCE = ("Yellow", "Green", "Brown", "Blue", "Pink", "Black")
    BLACK_INDEX = 5

    BALL_VALUES = {
        "Red": 1,
        "Yellow": 2,
        "Green": 3,
        "Brown": 4,
        "Blue": 5,
        "Pink": 6,
        "Black": 7,
    }

    BALL_COLORS = {
        "Red": "#D32F2F",
        "Yellow": "#FDD835",
        "Green": "#2E7D32",
        "Brown": "#795548",
        "Blue": "#1E88E5",
        "Pink": "#FF73B3",
        "Black": "#000000",
    }

    UNKNOWN_COLOR = "#9E9E9E"
    CUE_COLOR = "#FFFFFF"

    FOUL_PREFIX = "Foul on "

    POT_OPTIONS = (
        ScoreOption("Red", 1, (BALL_COLORS["Red"],)),
        ScoreOption("Yellow", 2, (BALL_COLORS["Yellow"],)),
        ScoreOption("Green", 3, (BALL_COLORS["Green"],)),
        ScoreOption("Brown", 4, (BALL_COLORS["Brown"],)),
        ScoreOption("Blue", 5, (BALL_COLORS["Blue"],)),
        ScoreOption("Pink", 6, (BALL_COLORS["Pink"],)),
        ScoreOption("Black", 7, (BALL_COLORS["Black"],)),
    )

    FOUL_OPTIONS = (
        ScoreOption("Foul", -4, (CUE_COLOR, BALL_COLORS["Red"], BALL_COLORS["Yellow"],
                                 BALL_COLORS["Green"], BALL_COLORS["Brown"])),
        ScoreOption("Foul on Blue", -5, (BALL_COLORS["Blue"],)),
        ScoreOption("Foul on Pink", -6, (BALL_COLORS["Pink"],)),
        ScoreOption("Foul on Black", -7, (BALL_COLORS["Black"],)),
    )

    # ============ Tables ============

    @classmethod
    def value_for(cls, name: str) -> int:
        """Point value of a ball, 0 for unknown names."""
        return cls.BALL_VALUES.get(name, 0)

    @classmethod
    def color_for(cls, name: str) -> str:
        """Display color of a ball as a hex string."""
        return cls.BALL_COLORS.get(name, cls.UNKNOWN_COLOR)

    @classmethod
    def foul_ball_name(cls, option: ScoreOption) -> Optional[str]:
        """The ball a foul-on-color option refers to, or None for a plain foul."""
        if option.name.startswith(cls.FOUL_PREFIX):
            return option.name[len(cls.FOUL_PREFIX):]
        return None

    @classmethod
    def is_sequence_complete(cls, index: int) -> bool:
        return index >= len(cls.COLOR_SEQUENCE)

    @staticmethod
    def off_table_foul_value(ball_points: int) -> int:
        """Penalty for forcing the on ball off the table."""
        return max(FRAME_SETTINGS.min_foul_value, ball_points)

    # ============ Legal Order ============

    @classmethod
    def allowed_pot_names(cls, reds_remaining: int, requirement: PotRequirement,
                          respotted_black: bool) -> frozenset[str]:
        """
        Names of the balls that may legally be potted next.

        Returns:
            {Black} during a respotted black, {Red} when a red is on,
            every color when a color is on, the single sequence color
            once the reds are gone, or an empty set when the sequence
            is complete.
        """
        if respotted_black:
            return frozenset({cls.BLACK})

        if reds_remaining > 0:
            if requirement.kind == RequirementKind.RED:
                return frozenset({cls.RED})
            return frozenset(cls.COLOR_SEQUENCE)

        if requirement.kind == RequirementKind.COLOR_SEQUENCE:
            if 0 <= requirement.index < len(cls.COLOR_SEQUENCE):
                return frozenset({cls.COLOR_SEQUENCE[requirement.index]})
            return frozenset()
        if requirement.kind == RequirementKind.RED:
            return frozenset()
        return frozenset(cls.COLOR_SEQUENCE)

    @classmethod
    def colors_on_table(cls, reds_remaining: int, requirement: PotRequirement,
                        respotted_black: bool) -> frozenset[str]:
        """Names of the balls still on the table (could become on later)."""
        if respotted_black:
            return frozenset({cls.BLACK})

        if reds_remaining > 0:
            return frozenset(cls.COLOR_SEQUENCE + (cls.RED,))

        if requirement.kind == RequirementKind.COLOR_SEQUENCE:
            if 0 <= requirement.index < len(cls.COLOR_SEQUENCE):
                return frozenset(cls.COLOR_SEQUENCE[requirement.index:])
            return frozenset()
        return frozenset(cls.COLOR_SEQUENCE)

    @classmethod
    def ball_on(cls, reds_remaining: int, requirement: PotRequirement,
                respotted_black: bool) -> Optional[BallOnInfo]:
        """The single definite ball on, or None when a choice of colors is on."""
        if respotted_black:
            return cls._ball_info(cls.BLACK)

        if reds_remaining > 0:
            if requirement.kind == RequirementKind.RED:
                return cls._ball_info(cls.RED)
            return None

        if requirement.kind == RequirementKind.COLOR_SEQUENCE:
            if 0 <= requirement.index < len(cls.COLOR_SEQUENCE):
                return cls._ball_info(cls.COLOR_SEQUENCE[requirement.index])
        return None

    @classmethod
    def _ball_info(cls, name: str) -> BallOnInfo:
        return BallOnInfo(
            name=name,
            points=cls.value_for(name),
            color=cls.color_for(name),
            off_table_removes_ball=True,
        )

    @classmethod
    def requirement_after_pot(cls, reds_remaining: int, requirement: PotRequirement,
                              ball_name: str) -> tuple[int, PotRequirement, bool]:
        """
        Advance the potting order after ``ball_name`` leaves the table.

        Args:
            reds_remaining: Reds on the table before the pot
            requirement: Requirement before the pot
            ball_name: The ball that was potted

        Returns:
            Tuple of (reds remaining, new requirement, colors complete)
        """
        if reds_remaining > 0:
            if ball_name == cls.RED:
                reds = max(reds_remaining - 1, 0)
                if reds == 0:
                    return reds, PotRequirement.color_sequence(0), False
                return reds, PotRequirement.color(), False
            return reds_remaining, PotRequirement.red(), False

        if requirement.kind == RequirementKind.COLOR_SEQUENCE:
            next_index = requirement.index + 1
            return (
                reds_remaining,
                PotRequirement.color_sequence(next_index),
                cls.is_sequence_complete(next_index),
            )

        return reds_remaining, PotRequirement.color_sequence(0), False

"""
Unit tests for the SnookerRules tables and potting-order helpers.
"""

import pytest

from engine.rules import SnookerRules
from models.ball import PotRequirement, RequirementKind


class TestBallTables:
    """Tests for ball values, colors and option tables."""

    @pytest.mark.parametrize("name,value", [
        ("Red", 1), ("Yellow", 2), ("Green", 3), ("Brown", 4),
        ("Blue", 5), ("Pink", 6), ("Black", 7),
    ])
    def test_ball_values(self, name, value):
        assert SnookerRules.value_for(name) == value

    def test_unknown_ball(self):
        """Unknown names score nothing and show the neutral color."""
        assert SnookerRules.value_for("Purple") == 0
        assert SnookerRules.color_for("Purple") == SnookerRules.UNKNOWN_COLOR

    def test_pot_options_follow_ball_values(self):
        for option in SnookerRules.POT_OPTIONS:
            assert option.points == SnookerRules.value_for(option.name)
            assert option.colors == (SnookerRules.color_for(option.name),)

    def test_foul_options(self):
        """Foul buttons run from four to seven points."""
        assert [o.points for o in SnookerRules.FOUL_OPTIONS] == [-4, -5, -6, -7]
        assert len(SnookerRules.FOUL_OPTIONS[0].colors) == 5

    def test_foul_ball_name(self):
        plain, blue = SnookerRules.FOUL_OPTIONS[0], SnookerRules.FOUL_OPTIONS[1]

        assert SnookerRules.foul_ball_name(plain) is None
        assert SnookerRules.foul_ball_name(blue) == "Blue"

    @pytest.mark.parametrize("points,expected", [(1, 4), (4, 4), (6, 6), (7, 7)])
    def test_off_table_foul_value(self, points, expected):
        """The off-table penalty is at least four."""
        assert SnookerRules.off_table_foul_value(points) == expected


class TestAllowedPots:
    """Tests for the legal pot set."""

    def test_red_on(self):
        allowed = SnookerRules.allowed_pot_names(15, PotRequirement.red(), False)
        assert allowed == frozenset({"Red"})

    def test_color_on_with_reds_left(self):
        allowed = SnookerRules.allowed_pot_names(10, PotRequirement.color(), False)
        assert allowed == frozenset(SnookerRules.COLOR_SEQUENCE)

    def test_sequence_color_only(self):
        allowed = SnookerRules.allowed_pot_names(0, PotRequirement.color_sequence(2), False)
        assert allowed == frozenset({"Brown"})

    def test_sequence_complete_allows_nothing(self):
        allowed = SnookerRules.allowed_pot_names(0, PotRequirement.color_sequence(6), False)
        assert allowed == frozenset()

    def test_respotted_black_only(self):
        allowed = SnookerRules.allowed_pot_names(0, PotRequirement.color_sequence(5), True)
        assert allowed == frozenset({"Black"})


class TestColorsOnTable:
    """Tests for the balls still able to come on."""

    def test_reds_left_everything_on_table(self):
        on_table = SnookerRules.colors_on_table(3, PotRequirement.red(), False)
        assert on_table == frozenset(SnookerRules.COLOR_SEQUENCE + ("Red",))

    def test_sequence_suffix(self):
        on_table = SnookerRules.colors_on_table(0, PotRequirement.color_sequence(4), False)
        assert on_table == frozenset({"Pink", "Black"})

    def test_respotted_black(self):
        on_table = SnookerRules.colors_on_table(0, PotRequirement.color_sequence(5), True)
        assert on_table == frozenset({"Black"})


class TestBallOn:
    """Tests for the single definite ball on."""

    def test_red_is_on(self):
        info = SnookerRules.ball_on(15, PotRequirement.red(), False)
        assert info.name == "Red"
        assert info.points == 1

    def test_choice_of_colors_has_no_single_ball(self):
        assert SnookerRules.ball_on(15, PotRequirement.color(), False) is None

    def test_sequence_ball(self):
        info = SnookerRules.ball_on(0, PotRequirement.color_sequence(3), False)
        assert info.name == "Blue"
        assert info.color == SnookerRules.BALL_COLORS["Blue"]

    def test_complete_sequence_has_no_ball(self):
        assert SnookerRules.ball_on(0, PotRequirement.color_sequence(6), False) is None


class TestRequirementAfterPot:
    """Tests for advancing the potting order."""

    def test_red_leaves_color_on(self):
        reds, req, complete = SnookerRules.requirement_after_pot(15, PotRequirement.red(), "Red")

        assert reds == 14
        assert req.kind == RequirementKind.COLOR
        assert not complete

    def test_last_red_starts_sequence(self):
        reds, req, _ = SnookerRules.requirement_after_pot(1, PotRequirement.red(), "Red")

        assert reds == 0
        assert req == PotRequirement.color_sequence(0)

    def test_color_with_reds_left_puts_red_on(self):
        reds, req, _ = SnookerRules.requirement_after_pot(9, PotRequirement.color(), "Pink")

        assert reds == 9
        assert req == PotRequirement.red()

    def test_sequence_advances(self):
        _, req, complete = SnookerRules.requirement_after_pot(
            0, PotRequirement.color_sequence(0), "Yellow"
        )

        assert req == PotRequirement.color_sequence(1)
        assert not complete

    def test_final_black_completes_sequence(self):
        _, req, complete = SnookerRules.requirement_after_pot(
            0, PotRequirement.color_sequence(5), "Black"
        )

        assert req == PotRequirement.color_sequence(6)
        assert complete

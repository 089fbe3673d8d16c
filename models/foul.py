"""
Foul award policy for snooker frames.
"""

import enum


class FoulAwardPolicy(enum.Enum):
    """Who receives the penalty points when a player fouls."""
    NEXT_PLAYER = "next_player"
    ALL_PLAYERS = "all_players"

    @property
    def title(self) -> str:
        """Human-readable label for menus."""
        titles = {
            FoulAwardPolicy.NEXT_PLAYER: "Next Player",
            FoulAwardPolicy.ALL_PLAYERS: "All Players",
        }
        return titles[self]

"""
Player model for snooker frame participants.
"""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Player:
    """
    A player seated at the table.

    Players are immutable snapshots; the FrameEngine replaces a player
    record whenever the score changes, so a published tuple of players
    never changes underneath a reader.
    """
    name: str
    score: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __repr__(self) -> str:
        return f"<Player(id={self.id}, name='{self.name}', score={self.score})>"

    def with_score(self, score: int) -> "Player":
        """Return a copy of this player carrying a different score."""
        return Player(name=self.name, score=score, id=self.id)

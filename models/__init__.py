"""
Snooker Scoreboard Models

Plain data records shared by the engine, services and GUI.
"""

from models.player import Player
from models.ball import (
    PotRequirement, RequirementKind, BallOnInfo, FreeBallOption, ScoreOption
)
from models.action import ScoreAction, ScoreActionKind, PotAction, FoulAction
from models.foul import FoulAwardPolicy
from models.schemas import PlayerCreate, Preferences

__all__ = [
    "Player",
    "PotRequirement",
    "RequirementKind",
    "BallOnInfo",
    "FreeBallOption",
    "ScoreOption",
    "ScoreAction",
    "ScoreActionKind",
    "PotAction",
    "FoulAction",
    "FoulAwardPolicy",
    "PlayerCreate",
    "Preferences",
]

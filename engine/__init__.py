"""
Snooker Scoreboard Game Engine

Core frame logic for the snooker scoring system.
This module contains no widget dependencies.
"""

from engine.frame import FrameEngine, FrameState, FramePhase
from engine.rules import SnookerRules

__all__ = [
    "FrameEngine",
    "FrameState",
    "FramePhase",
    "SnookerRules",
]

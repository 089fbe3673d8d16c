"""
Snooker Scoreboard GUI Widgets

Reusable widget components for the scoreboard console.
"""

from gui.widgets.scoreboard import ScoreboardWidget
from gui.widgets.scoring_panel import ScoreButton, ScoringPanel
from gui.widgets.player_setup import PlayerSetupWidget
from gui.widgets.frame_history import FrameHistoryDialog
from gui.widgets.final_score import FinalScoreDialog, crown_color

__all__ = [
    "ScoreboardWidget",
    "ScoreButton",
    "ScoringPanel",
    "PlayerSetupWidget",
    "FrameHistoryDialog",
    "FinalScoreDialog",
    "crown_color",
]

"""
Help Window

Quick reference for the snooker rules the scoreboard follows.
"""

from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QScrollArea, QWidget

from config import FRAME_SETTINGS, UI_SETTINGS
from engine.rules import SnookerRules
from gui.styles import theme


RULE_SECTIONS = (
    ("Standard Rules (Simplified)", (
        "A frame starts with 15 reds and six colors.",
        "You must pot a red first, then a color, alternating while reds remain.",
        "After the last red is potted, colors are potted in order: {sequence}.",
        "If scores are tied after the final black, the black is respotted and play continues.",
    )),
    ("Fouls and Snookers", (
        "A foul scores at least {min_foul} points, or the value of the ball involved, "
        "whichever is higher (up to {max_foul}).",
        "Common fouls: hitting the wrong ball first, potting the cue ball, "
        "or failing to hit any ball.",
        "Being snookered means the cue ball cannot see the full target ball on any direct line.",
        "If snookered and you miss the target ball, a miss may be called and the "
        "foul points still apply before a replay.",
        "In the Game menu, you can choose who receives foul points "
        "(next player or all players).",
    )),
    ("Glossary", (
        "Free ball: awarded after a foul when you are snookered; any ball can be "
        "nominated as a red.",
        "Call: to nominate the intended ball, pocket, or shot outcome, depending on house rules.",
    )),
)


class HelpWindow(QDialog):
    """Snooker rules quick reference."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Snooker Rules")
        self.setMinimumSize(UI_SETTINGS.help_min_width, UI_SETTINGS.help_min_height)
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout(self)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        outer.addWidget(scroll)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setSpacing(theme.SPACING_MD)

        title = QLabel("Snooker Rules (Quick Reference)")
        title.setStyleSheet(f"font-size: {theme.FONT_SIZE_TITLE}pt; font-weight: bold;")
        layout.addWidget(title)

        sequence = ", ".join(SnookerRules.COLOR_SEQUENCE)
        for heading, lines in RULE_SECTIONS:
            header = QLabel(heading)
            header.setStyleSheet(f"font-size: {theme.FONT_SIZE_LG}pt; font-weight: bold;")
            layout.addWidget(header)
            for line in lines:
                text = line.format(
                    sequence=sequence,
                    min_foul=FRAME_SETTINGS.min_foul_value,
                    max_foul=FRAME_SETTINGS.max_foul_value,
                )
                label = QLabel(f"• {text}")
                label.setWordWrap(True)
                layout.addWidget(label)

        layout.addStretch()
        scroll.setWidget(content)

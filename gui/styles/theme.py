"""
Snooker Scoreboard theme: colors, spacing, and typography constants.

Dark UI with baize-green accents.
"""

# Primary, table inspired
PRIMARY_BAIZE = "#1B6B3A"        # Accent, current player highlight
PRIMARY_BAIZE_BRIGHT = "#2E8B57"  # Hover
PRIMARY_GOLD = "#E8B923"         # Crown, leading player

# Surfaces
SURFACE_MAIN = "#16161F"
SURFACE_CARD = "#1C1C28"
SURFACE_ELEVATED = "#222230"

# Borders
BORDER_SUBTLE = "#2A2A38"
BORDER_DEFAULT = "#3A3A4C"

# Text hierarchy
TEXT_PRIMARY = "#F0F0F5"
TEXT_SECONDARY = "#A8A8B8"
TEXT_MUTED = "#6A6A7A"

# Semantic
WARNING = "#FFB74D"

# Podium crowns on the final score sheet
CROWN_COLORS = ("#E8B923", "#9E9E9E", "#8D6E63")

# Spacing scale (px)
SPACING_SM = 8
SPACING_MD = 12
SPACING_LG = 16

# Border radius (px)
RADIUS_SM = 6
RADIUS_MD = 10

# Font sizes (pt)
FONT_SIZE_SM = 9
FONT_SIZE_BASE = 10
FONT_SIZE_LG = 13
FONT_SIZE_TITLE = 18

# Ball dots
BALL_DOT_SIZE = 12


def ball_dot_style(color: str) -> str:
    """Stylesheet for a small round ball marker."""
    radius = BALL_DOT_SIZE // 2
    return (
        f"background-color: {color}; border: 1px solid {BORDER_DEFAULT}; "
        f"border-radius: {radius}px; min-width: {BALL_DOT_SIZE}px; "
        f"max-width: {BALL_DOT_SIZE}px; min-height: {BALL_DOT_SIZE}px; "
        f"max-height: {BALL_DOT_SIZE}px;"
    )


def app_stylesheet() -> str:
    """Application-wide base stylesheet."""
    return f"""
        QMainWindow, QDialog {{
            background-color: {SURFACE_MAIN};
            color: {TEXT_PRIMARY};
        }}
        QLabel {{
            color: {TEXT_PRIMARY};
            font-size: {FONT_SIZE_BASE}pt;
        }}
        QPushButton {{
            background-color: {SURFACE_ELEVATED};
            color: {TEXT_PRIMARY};
            border: 1px solid {BORDER_DEFAULT};
            border-radius: {RADIUS_SM}px;
            padding: 6px 12px;
        }}
        QPushButton:hover {{
            background-color: {PRIMARY_BAIZE_BRIGHT};
        }}
        QPushButton:disabled {{
            color: {TEXT_MUTED};
            border-color: {BORDER_SUBTLE};
        }}
        QLineEdit, QListWidget {{
            background-color: {SURFACE_CARD};
            color: {TEXT_PRIMARY};
            border: 1px solid {BORDER_SUBTLE};
            border-radius: {RADIUS_SM}px;
            padding: 4px;
        }}
    """

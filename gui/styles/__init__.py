"""Theme constants for the Snooker Scoreboard GUI."""

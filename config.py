"""
Snooker Scoreboard Configuration

Centralized settings, paths, and constants for the application.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "SnookerScoreboard"
APP_AUTHOR = "SnookerScoreboard"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory (stores exports)
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def settings(self) -> Path:
        return self.config_dir / "settings.json"

    @property
    def exports(self) -> Path:
        return self.data_dir / "exports"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "snooker_scoreboard.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.config_dir, self.log_dir, self.exports]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class FrameSettings:
    """Frame rule constants."""
    # Reds racked at the start of a frame
    reds_per_frame: int = 15

    # Players needed before a frame can start
    min_players: int = 2

    # Smallest penalty a foul can carry
    min_foul_value: int = 4

    # Largest penalty on the foul buttons (foul on black)
    max_foul_value: int = 7

    # Longest accepted player name
    max_name_length: int = 60


@dataclass(frozen=True)
class LogSettings:
    """Logging settings."""
    level: int = logging.INFO
    max_bytes: int = 1_000_000
    backup_count: int = 3
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Minimum window size
    min_width: int = 800
    min_height: int = 500

    # Dialog sizes
    history_min_width: int = 380
    history_min_height: int = 320
    help_min_width: int = 520
    help_min_height: int = 420


# Singleton instances
PATHS = Paths()
FRAME_SETTINGS = FrameSettings()
LOG_SETTINGS = LogSettings()
UI_SETTINGS = UISettings()


def init_logging() -> None:
    """Send log records to a rotating file in the log directory and to stderr."""
    root = logging.getLogger()
    root.setLevel(LOG_SETTINGS.level)
    formatter = logging.Formatter(LOG_SETTINGS.format)

    file_handler = RotatingFileHandler(
        PATHS.log_file,
        maxBytes=LOG_SETTINGS.max_bytes,
        backupCount=LOG_SETTINGS.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)


def init_config() -> None:
    """Initialize configuration, create required directories and start logging."""
    PATHS.ensure_directories()
    init_logging()

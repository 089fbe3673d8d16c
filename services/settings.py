"""
Preferences Store

Loads and saves the user's Preferences as JSON in the config directory
and hands them to the FrameEngine as plain configuration values.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from config import PATHS
from models.schemas import Preferences

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Persistent user preferences.

    A missing settings file gives the defaults; a corrupt one is logged
    and replaced by the defaults on the next save.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path or PATHS.settings
        self._preferences = self._load()

    @property
    def preferences(self) -> Preferences:
        return self._preferences

    def _load(self) -> Preferences:
        """Read preferences from disk."""
        if not self.path.exists():
            return Preferences()

        try:
            return Preferences.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return Preferences()

    def save(self) -> None:
        """Write preferences to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self._preferences.model_dump_json(indent=2), encoding="utf-8")

    def update(self, engine=None, **changes) -> Preferences:
        """
        Change one or more preferences, save them and apply them.

        Args:
            engine: FrameEngine to receive the new values (optional)
            **changes: Preference fields to change

        Returns:
            The updated Preferences

        Raises:
            RuntimeError: If a frame is in progress on ``engine``
            ValidationError: If a value is not valid for its field
        """
        if engine is not None and engine.game_started:
            raise RuntimeError("Cannot change preferences while a frame is in progress")

        self._preferences = Preferences.model_validate(
            {**self._preferences.model_dump(), **changes}
        )
        self.save()
        logger.info("Preferences updated: %s", self._preferences.model_dump(mode="json"))

        if engine is not None:
            self.apply_to(engine)
        return self._preferences

    def apply_to(self, engine) -> None:
        """Push the current preferences into a FrameEngine."""
        engine.foul_award_policy = self._preferences.foul_award_policy
        engine.enforce_rules = self._preferences.enforce_rules

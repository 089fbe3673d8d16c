"""
Pydantic schemas for data validation.
"""

from pydantic import BaseModel, Field, field_validator

from config import FRAME_SETTINGS
from models.foul import FoulAwardPolicy


# ============ Player Schemas ============

class PlayerCreate(BaseModel):
    """Schema for adding a player to the roster."""
    name: str = Field(..., min_length=1, max_length=FRAME_SETTINGS.max_name_length)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


# ============ Preference Schemas ============

class Preferences(BaseModel):
    """
    User preferences delivered to the FrameEngine as configuration.

    Stored as JSON in the user config directory.
    """
    foul_award_policy: FoulAwardPolicy = FoulAwardPolicy.NEXT_PLAYER
    enforce_rules: bool = False

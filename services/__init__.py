"""
Snooker Scoreboard Services

Application services for event handling, preferences and export.
"""

from services.event_bus import EventBus
from services.settings import SettingsStore
from services.export import FrameExporter, build_frame_data

__all__ = ["EventBus", "SettingsStore", "FrameExporter", "build_frame_data"]

"""
App icons using Qt standard pixmaps and theme icons.

Uses QStyle.StandardPixmap for cross-platform consistency; falls back to
QIcon.fromTheme() where available (e.g. Linux) for a more native look.
"""

from PySide6.QtWidgets import QApplication, QStyle
from PySide6.QtGui import QIcon


def _style():
    app = QApplication.instance()
    return app.style() if app else None


def _standard_icon(pixmap: QStyle.StandardPixmap, theme_name: str) -> QIcon:
    style = _style()
    if style:
        return style.standardIcon(pixmap)
    icon = QIcon.fromTheme(theme_name)
    return icon if not icon.isNull() else QIcon()


def icon_start() -> QIcon:
    """Start Frame."""
    return _standard_icon(QStyle.StandardPixmap.SP_MediaPlay, "media-playback-start")


def icon_reset() -> QIcon:
    """New Frame (discards the current one)."""
    return _standard_icon(QStyle.StandardPixmap.SP_BrowserStop, "process-stop")


def icon_undo() -> QIcon:
    """Undo last pot or foul."""
    return _standard_icon(QStyle.StandardPixmap.SP_ArrowBack, "edit-undo")


def icon_history() -> QIcon:
    """Frame history."""
    return _standard_icon(QStyle.StandardPixmap.SP_FileDialogDetailedView, "document-open-recent")


def icon_export() -> QIcon:
    """Export scoresheet."""
    return _standard_icon(QStyle.StandardPixmap.SP_DialogSaveButton, "document-save")


def icon_foul() -> QIcon:
    """Warning/foul icon."""
    return _standard_icon(QStyle.StandardPixmap.SP_MessageBoxWarning, "dialog-warning")


def icon_end_turn() -> QIcon:
    """End Turn."""
    return _standard_icon(QStyle.StandardPixmap.SP_MediaSkipForward, "media-skip-forward")


def icon_remove() -> QIcon:
    """Remove a player from the roster."""
    return _standard_icon(QStyle.StandardPixmap.SP_TrashIcon, "user-trash")


def icon_size_normal() -> int:
    """Recommended icon size for toolbar/action buttons (px)."""
    return 20

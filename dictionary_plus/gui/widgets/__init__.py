"""Custom widgets for the Dictionary Plus GUI."""

from .settings_dialog import SettingsDialog

__all__ = ["SettingsDialog"]

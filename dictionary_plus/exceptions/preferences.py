"""Preference storage exceptions."""

from .base import DictionaryPlusException


class PreferenceStoreError(DictionaryPlusException):
    """Raised when preferences cannot be written to disk."""

    pass

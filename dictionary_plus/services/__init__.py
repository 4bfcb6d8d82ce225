"""Service layer for Dictionary Plus."""

from .app_settings import AppSettings
from .dictionary_client import DictionaryClient
from .preference_store import InMemoryPreferenceStore, JsonPreferenceStore
from .suggestion_client import SuggestionClient

__all__ = [
    "AppSettings",
    "DictionaryClient",
    "SuggestionClient",
    "InMemoryPreferenceStore",
    "JsonPreferenceStore",
]

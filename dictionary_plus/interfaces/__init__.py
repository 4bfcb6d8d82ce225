"""Interface protocols for Dictionary Plus."""

from .lookup_clients import DictionaryLookup, SuggestionLookup
from .preference_store import PreferenceStore
from .scheduler import Cancellable, Scheduler

__all__ = [
    "DictionaryLookup",
    "SuggestionLookup",
    "PreferenceStore",
    "Cancellable",
    "Scheduler",
]

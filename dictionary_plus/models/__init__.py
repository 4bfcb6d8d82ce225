"""Data models for Dictionary Plus."""

from .dictionary_item import DictionaryItem
from .entry import Definition, LookupResult, Meaning
from .search_state import ErrorInfo, ErrorKind, SearchPhase, SearchState

__all__ = [
    "Definition",
    "Meaning",
    "LookupResult",
    "DictionaryItem",
    "SearchPhase",
    "SearchState",
    "ErrorKind",
    "ErrorInfo",
]

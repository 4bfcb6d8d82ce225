"""Data models for the search session state."""

from dataclasses import dataclass
from enum import Enum

from .dictionary_item import DictionaryItem
from .entry import LookupResult


class SearchPhase(Enum):
    """Where the search session currently is."""

    IDLE = "idle"
    SUGGESTING = "suggesting"  # Debounce pending or suggestion fetch in flight
    LOADING = "loading"  # Primary lookup in flight
    SUCCESS = "success"
    ERROR = "error"


class ErrorKind(Enum):
    """Category of a failed lookup."""

    INVALID_REQUEST = "invalid_request"
    REQUEST_FAILED = "request_failed"
    EMPTY_RESULTS = "empty_results"


@dataclass(frozen=True)
class ErrorInfo:
    """A failed lookup as shown to the user."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class SearchState:
    """Immutable snapshot of a search session.

    The controller hands a fresh snapshot to its subscribers after every
    change; the presentation layer renders it and never mutates it.
    """

    query: str = ""
    phase: SearchPhase = SearchPhase.IDLE
    result: LookupResult | None = None
    error: ErrorInfo | None = None
    suggestions: tuple[str, ...] = ()
    visible_suggestions: tuple[str, ...] = ()
    active_dictionary: DictionaryItem | None = None
    enabled_dictionaries: tuple[DictionaryItem, ...] = ()
    show_description: bool = False

    @property
    def is_loading(self) -> bool:
        """Check if a lookup is in flight."""
        return self.phase is SearchPhase.LOADING

    @property
    def has_result(self) -> bool:
        """Check if a result should be displayed."""
        return self.result is not None and self.phase is not SearchPhase.ERROR

"""Orchestrator for live suggestions and dictionary lookups."""

from __future__ import annotations

import logging
from collections.abc import Callable

from dictionary_plus.config import DictionaryPlusConfig
from dictionary_plus.exceptions import (
    DictionaryAPIError,
    EmptyResultsError,
    InvalidRequestError,
)
from dictionary_plus.interfaces import (
    Cancellable,
    DictionaryLookup,
    Scheduler,
    SuggestionLookup,
)
from dictionary_plus.models import (
    DictionaryItem,
    ErrorInfo,
    ErrorKind,
    LookupResult,
    SearchPhase,
    SearchState,
)
from dictionary_plus.services.app_settings import AppSettings

logger = logging.getLogger(__name__)

StateListener = Callable[[SearchState], None]


class SearchController:
    """Drive one search session from user events to visible state.

    Two families of background work are coordinated here:

    - Suggestions: every query change cancels the pending debounce timer or
      fetch and clears the visible list at once. A fetch is only issued once
      the query has been stable for ``config.suggestion_debounce``.
    - Lookups: each submit supersedes the previous one (last submit wins).

    Each family has a generation counter. Work captures the generation it
    was started under and re-checks it before touching state, so outcomes
    of superseded work are dropped even when cancellation came too late to
    stop the request itself. All methods and callbacks run on the thread
    that owns the session, so no locking is needed.
    """

    def __init__(
        self,
        config: DictionaryPlusConfig,
        dictionary_client: DictionaryLookup,
        suggestion_client: SuggestionLookup,
        settings: AppSettings,
        scheduler: Scheduler,
    ):
        """Initialize the search controller.

        Args:
            config: Configuration (debounce, limits, stagger delay)
            dictionary_client: Backend for primary lookups
            suggestion_client: Backend for live suggestions
            settings: User preferences
            scheduler: Timer and background task runner
        """
        self.config = config
        self.dictionary_client = dictionary_client
        self.suggestion_client = suggestion_client
        self.settings = settings
        self.scheduler = scheduler

        self._query = ""
        self._phase = SearchPhase.IDLE
        self._result: LookupResult | None = None
        self._error: ErrorInfo | None = None
        self._suggestions: list[str] = []
        self._show_description = False
        self._enabled_dictionaries = tuple(settings.enabled_items())
        self._active_dictionary: DictionaryItem | None = (
            self._enabled_dictionaries[0] if self._enabled_dictionaries else None
        )

        self._suggestion_generation = 0
        self._lookup_generation = 0
        self._suggestion_handle: Cancellable | None = None
        self._lookup_handle: Cancellable | None = None
        self._reveal_handle: Cancellable | None = None

        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> SearchState:
        """Snapshot of the current session state."""
        return SearchState(
            query=self._query,
            phase=self._phase,
            result=self._result,
            error=self._error,
            suggestions=tuple(self._suggestions),
            visible_suggestions=tuple(self._suggestions[: self.config.suggestion_display_limit]),
            active_dictionary=self._active_dictionary,
            enabled_dictionaries=self._enabled_dictionaries,
            show_description=self._show_description,
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with a new snapshot after every change.

        Args:
            listener: Callable receiving a SearchState

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    # ------------------------------------------------------------------
    # User events
    # ------------------------------------------------------------------

    def set_query(self, text: str) -> None:
        """Handle a change of the search text.

        Args:
            text: Full, untrimmed text of the search field
        """
        if text == self._query:
            return

        self._query = text
        self._cancel_suggestions()

        trimmed = text.strip()
        wants_suggestions = (
            len(trimmed) >= self.config.suggestion_min_length and self.settings.enable_suggestions
        )

        # A lookup in flight keeps owning the phase
        if self._phase is not SearchPhase.LOADING:
            self._phase = SearchPhase.SUGGESTING if wants_suggestions else SearchPhase.IDLE

        if wants_suggestions:
            generation = self._suggestion_generation
            self._suggestion_handle = self.scheduler.call_later(
                self.config.suggestion_debounce,
                lambda: self._on_debounce_elapsed(generation, trimmed),
            )

        self._notify()

    def submit(self) -> None:
        """Start a lookup for the current query (ignored if it is blank)."""
        query = self._query.strip()
        if not query:
            return

        self._cancel_suggestions()
        self._cancel_lookup()

        self._result = None
        self._error = None
        self._show_description = False
        self._phase = SearchPhase.LOADING

        if self._active_dictionary is None:
            self._active_dictionary = DictionaryItem.default()
        dictionary = self._active_dictionary
        generation = self._lookup_generation

        logger.info(f"Looking up '{query}' in {dictionary.display_name}")
        self._notify()

        self._lookup_handle = self.scheduler.run_in_background(
            lambda: self.dictionary_client.fetch_entry(query, dictionary.language_code),
            lambda result: self._on_lookup_succeeded(generation, result),
            lambda error: self._on_lookup_failed(generation, error),
        )

    def select_suggestion(self, word: str) -> None:
        """Replace the query with a suggestion and submit it.

        Args:
            word: The chosen suggestion
        """
        self._query = word
        self._cancel_suggestions()
        if word.strip():
            self.submit()
        else:
            self._notify()

    def select_dictionary(self, item: DictionaryItem | None) -> None:
        """Change the dictionary used by the next lookup."""
        if item == self._active_dictionary:
            return
        self._active_dictionary = item
        self._notify()

    def refresh_preferences(self) -> None:
        """Re-read preferences after the user changed them."""
        self._enabled_dictionaries = tuple(self.settings.enabled_items())
        if self._active_dictionary not in self._enabled_dictionaries:
            self._active_dictionary = (
                self._enabled_dictionaries[0] if self._enabled_dictionaries else None
            )

        if not self.settings.enable_suggestions:
            self._cancel_suggestions()
            if self._phase is SearchPhase.SUGGESTING:
                self._phase = SearchPhase.IDLE

        self._notify()

    def shutdown(self) -> None:
        """Cancel all pending work; later completions are ignored."""
        self._cancel_suggestions()
        self._cancel_lookup()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Suggestion pipeline
    # ------------------------------------------------------------------

    def _cancel_suggestions(self) -> None:
        self._suggestion_generation += 1
        if self._suggestion_handle is not None:
            self._suggestion_handle.cancel()
            self._suggestion_handle = None
        self._suggestions = []

    def _on_debounce_elapsed(self, generation: int, prefix: str) -> None:
        if generation != self._suggestion_generation:
            return

        self._suggestion_handle = self.scheduler.run_in_background(
            lambda: self.suggestion_client.fetch_suggestions(
                prefix, limit=self.config.suggestion_fetch_limit
            ),
            lambda words: self._on_suggestions_ready(generation, words),
            lambda error: self._on_suggestions_failed(generation, error),
        )

    def _on_suggestions_ready(self, generation: int, words: list[str]) -> None:
        if generation != self._suggestion_generation:
            logger.debug("Discarding stale suggestions")
            return

        self._suggestion_handle = None
        self._suggestions = list(words)
        if self._phase is SearchPhase.SUGGESTING:
            self._phase = SearchPhase.IDLE
        self._notify()

    def _on_suggestions_failed(self, generation: int, error: Exception) -> None:
        if generation != self._suggestion_generation:
            return

        logger.debug(f"Suggestion fetch failed: {error}")
        self._suggestion_handle = None
        self._suggestions = []
        if self._phase is SearchPhase.SUGGESTING:
            self._phase = SearchPhase.IDLE
        self._notify()

    # ------------------------------------------------------------------
    # Lookup pipeline
    # ------------------------------------------------------------------

    def _cancel_lookup(self) -> None:
        self._lookup_generation += 1
        for handle in (self._lookup_handle, self._reveal_handle):
            if handle is not None:
                handle.cancel()
        self._lookup_handle = None
        self._reveal_handle = None

    def _on_lookup_succeeded(self, generation: int, result: LookupResult) -> None:
        if generation != self._lookup_generation:
            logger.debug(f"Discarding stale result for '{result.word}'")
            return

        self._lookup_handle = None
        self._result = result
        self._error = None
        self._phase = SearchPhase.SUCCESS

        if self.config.description_stagger > 0:
            self._reveal_handle = self.scheduler.call_later(
                self.config.description_stagger,
                lambda: self._on_reveal_description(generation),
            )
        else:
            self._show_description = True

        self._notify()

    def _on_reveal_description(self, generation: int) -> None:
        if generation != self._lookup_generation:
            return

        self._reveal_handle = None
        self._show_description = True
        self._notify()

    def _on_lookup_failed(self, generation: int, error: Exception) -> None:
        if generation != self._lookup_generation:
            logger.debug(f"Discarding stale lookup error: {error}")
            return

        self._lookup_handle = None
        self._result = None
        self._error = self.describe_error(error)
        self._phase = SearchPhase.ERROR

        if self._error.kind is ErrorKind.REQUEST_FAILED:
            logger.warning(f"Lookup failed: {error}")
        else:
            logger.info(f"Lookup failed: {error}")

        self._notify()

    @staticmethod
    def describe_error(error: Exception) -> ErrorInfo:
        """Map a lookup failure to the message shown to the user.

        Args:
            error: Exception raised by the dictionary client

        Returns:
            ErrorInfo with the error kind and a short message
        """
        if isinstance(error, EmptyResultsError):
            kind = ErrorKind.EMPTY_RESULTS
        elif isinstance(error, InvalidRequestError):
            kind = ErrorKind.INVALID_REQUEST
        else:
            kind = ErrorKind.REQUEST_FAILED

        if isinstance(error, DictionaryAPIError):
            message = error.user_message
        else:
            message = DictionaryAPIError.user_message
        return ErrorInfo(kind=kind, message=message)

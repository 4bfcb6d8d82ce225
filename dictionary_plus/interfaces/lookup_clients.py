"""Protocols for the remote lookup clients."""

from typing import Protocol

from dictionary_plus.models import LookupResult


class DictionaryLookup(Protocol):
    """Interface for a dictionary backend that resolves one word to an entry."""

    def fetch_entry(self, word: str, language_code: str = "en") -> LookupResult:
        """Look up a single word.

        Args:
            word: Trimmed, non-empty word to look up
            language_code: Language of the dictionary to search

        Returns:
            The first entry returned by the service

        Raises:
            InvalidRequestError: If no request can be built from the inputs
            RequestFailedError: On transport failure or unexpected status
            EmptyResultsError: If the service has no entry for the word
        """
        ...


class SuggestionLookup(Protocol):
    """Interface for a word-completion backend.

    Implementations never raise; any failure yields an empty list.
    """

    def fetch_suggestions(self, prefix: str, limit: int = 10) -> list[str]:
        """Return up to ``limit`` candidate words in server relevance order."""
        ...

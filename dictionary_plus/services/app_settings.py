"""User preferences backed by a preference store."""

import logging
from collections.abc import Iterable

from dictionary_plus.interfaces import PreferenceStore
from dictionary_plus.models import DictionaryItem

logger = logging.getLogger(__name__)

ENABLE_SUGGESTIONS_KEY = "settings.enableSuggestions"
ENABLED_DICTIONARIES_KEY = "settings.enabledDictionaries"


class AppSettings:
    """The two user preferences: suggestions toggle and enabled dictionaries.

    Values are read once at construction and written through to the store
    on every change. On first run the defaults are seeded into the store.
    Dictionaries are persisted by stable code; legacy display-name entries
    are migrated on load.
    """

    def __init__(self, store: PreferenceStore):
        """Load preferences from a store.

        Args:
            store: Durable key-value store
        """
        self._store = store

        saved_enable = store.get_bool(ENABLE_SUGGESTIONS_KEY)
        self._enable_suggestions = True if saved_enable is None else saved_enable

        saved_dictionaries = store.get_string_set(ENABLED_DICTIONARIES_KEY)
        if saved_dictionaries is None:
            self._enabled = set(DictionaryItem.default_enabled())
            self._persist_dictionaries(self._enabled)
        else:
            self._enabled = self._parse_identifiers(saved_dictionaries)
            if {item.code for item in self._enabled} != saved_dictionaries:
                self._persist_dictionaries(self._enabled)

    @property
    def enable_suggestions(self) -> bool:
        """Whether live search suggestions are fetched."""
        return self._enable_suggestions

    @enable_suggestions.setter
    def enable_suggestions(self, value: bool) -> None:
        value = bool(value)
        self._store.set_bool(ENABLE_SUGGESTIONS_KEY, value)
        self._enable_suggestions = value

    @property
    def enabled_dictionaries(self) -> frozenset[DictionaryItem]:
        """Dictionaries shown in the sidebar."""
        return frozenset(self._enabled)

    @enabled_dictionaries.setter
    def enabled_dictionaries(self, items: Iterable[DictionaryItem]) -> None:
        enabled = set(items)
        self._persist_dictionaries(enabled)
        self._enabled = enabled

    def is_dictionary_enabled(self, item: DictionaryItem) -> bool:
        return item in self._enabled

    def set_dictionary_enabled(self, item: DictionaryItem, enabled: bool) -> None:
        """Enable or disable one dictionary."""
        updated = set(self._enabled)
        if enabled:
            updated.add(item)
        else:
            updated.discard(item)
        self._persist_dictionaries(updated)
        self._enabled = updated

    def enabled_items(self) -> list[DictionaryItem]:
        """Enabled dictionaries in declaration order."""
        return [item for item in DictionaryItem if item in self._enabled]

    def _persist_dictionaries(self, items: set[DictionaryItem]) -> None:
        self._store.set_string_set(ENABLED_DICTIONARIES_KEY, {item.code for item in items})

    @staticmethod
    def _parse_identifiers(identifiers: set[str]) -> set[DictionaryItem]:
        items = set()
        for identifier in identifiers:
            item = DictionaryItem.from_identifier(identifier)
            if item is None:
                logger.warning(f"Ignoring unknown dictionary in preferences: {identifier!r}")
                continue
            items.add(item)
        return items

"""Factory for creating the services behind the search window."""

import logging

from dictionary_plus.config import DictionaryPlusConfig
from dictionary_plus.exceptions import PreferenceStoreError
from dictionary_plus.interfaces import Scheduler
from dictionary_plus.orchestration import SearchController
from dictionary_plus.services import (
    AppSettings,
    DictionaryClient,
    InMemoryPreferenceStore,
    JsonPreferenceStore,
    SuggestionClient,
)

logger = logging.getLogger(__name__)


def create_settings(config: DictionaryPlusConfig) -> AppSettings:
    """Load user preferences from the configured file.

    Falls back to an in-memory store (defaults, nothing saved) when the
    preferences file cannot be written.

    Args:
        config: Application configuration

    Returns:
        AppSettings backed by the preferences file
    """
    store = JsonPreferenceStore(config.preferences_path)
    try:
        return AppSettings(store)
    except PreferenceStoreError as e:
        logger.warning(f"Could not save preferences, changes will not persist: {e}")
        return AppSettings(InMemoryPreferenceStore())


def create_search_controller(
    config: DictionaryPlusConfig, settings: AppSettings, scheduler: Scheduler
) -> SearchController:
    """Create a SearchController with both remote clients.

    Args:
        config: Application configuration
        settings: User preferences
        scheduler: Timer and background task runner

    Returns:
        Configured SearchController instance
    """
    return SearchController(
        config=config,
        dictionary_client=DictionaryClient(config),
        suggestion_client=SuggestionClient(config),
        settings=settings,
        scheduler=scheduler,
    )

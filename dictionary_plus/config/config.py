"""Configuration classes for Dictionary Plus."""

from dataclasses import dataclass, field
from pathlib import Path

from dictionary_plus import __version__


@dataclass(frozen=True)
class DictionaryPlusConfig:
    """Immutable configuration for lookups and the live search pipeline.

    All configuration is frozen (immutable) so it can be shared freely
    between the GUI thread and background workers.
    """

    # Remote services
    dictionary_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries"
    suggestion_api_url: str = "https://api.datamuse.com/sug"
    request_timeout: float = 10.0  # Seconds before a request is abandoned
    user_agent: str = f"DictionaryPlus/{__version__}"

    # Live suggestion settings
    suggestion_debounce: float = 0.2  # Seconds the query must be stable before fetching
    suggestion_min_length: int = 2  # Shorter trimmed queries never fetch suggestions
    suggestion_fetch_limit: int = 10  # Passed to the suggestion service as "max"
    suggestion_display_limit: int = 8  # How many suggestions the UI shows

    # Result presentation
    description_stagger: float = 0.15  # Seconds between header and meanings reveal

    # Preferences
    preferences_path: Path = field(
        default_factory=lambda: Path.home() / ".dictionary_plus" / "preferences.json"
    )

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.preferences_path, str):
            object.__setattr__(self, "preferences_path", Path(self.preferences_path))

"""Preference store implementations."""

import json
import logging
from pathlib import Path
from typing import Any

from dictionary_plus.exceptions import PreferenceStoreError

logger = logging.getLogger(__name__)


class InMemoryPreferenceStore:
    """Preference store kept in a dict (testing and ephemeral sessions).

    Implements PreferenceStore protocol.
    """

    def __init__(self, values: dict[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def get_bool(self, key: str) -> bool | None:
        value = self._values.get(key)
        return value if isinstance(value, bool) else None

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)

    def get_string_set(self, key: str) -> set[str] | None:
        value = self._values.get(key)
        return set(value) if isinstance(value, (set, frozenset)) else None

    def set_string_set(self, key: str, value: set[str]) -> None:
        self._values[key] = frozenset(value)


class JsonPreferenceStore:
    """Preference store persisted to a JSON file.

    Every write is flushed to disk immediately. String sets are stored as
    sorted JSON arrays. A missing file means "first run"; an unreadable one
    is logged and treated the same way.

    Implements PreferenceStore protocol.
    """

    def __init__(self, path: Path):
        """Initialize the store and load any existing preferences.

        Args:
            path: Location of the JSON file
        """
        self.path = path
        self._values: dict[str, Any] = self._load()

    def get_bool(self, key: str) -> bool | None:
        value = self._values.get(key)
        return value if isinstance(value, bool) else None

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)
        self.flush()

    def get_string_set(self, key: str) -> set[str] | None:
        value = self._values.get(key)
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            return None
        return set(value)

    def set_string_set(self, key: str, value: set[str]) -> None:
        self._values[key] = sorted(set(value))
        self.flush()

    def flush(self) -> None:
        """Write all preferences to disk.

        Raises:
            PreferenceStoreError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise PreferenceStoreError(f"Cannot write preferences to {self.path}: {e}") from e

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Invalid preferences file, using defaults: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Invalid preferences file {self.path}, using defaults")
            return {}
        return data

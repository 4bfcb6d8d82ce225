"""Protocol for durable key-value preference storage."""

from typing import Protocol


class PreferenceStore(Protocol):
    """Interface for the store behind user preferences.

    Getters return None for keys that were never written (or hold a value
    of another type), which lets callers tell "first run" apart from a
    stored value.
    """

    def get_bool(self, key: str) -> bool | None:
        """Read a boolean preference."""
        ...

    def set_bool(self, key: str, value: bool) -> None:
        """Write a boolean preference."""
        ...

    def get_string_set(self, key: str) -> set[str] | None:
        """Read a set-of-strings preference."""
        ...

    def set_string_set(self, key: str, value: set[str]) -> None:
        """Write a set-of-strings preference."""
        ...

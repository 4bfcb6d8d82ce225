"""Supported dictionary variants."""

from enum import Enum


class DictionaryItem(Enum):
    """A dictionary the user can search in.

    Each member carries a stable ``code`` (the persisted identifier), the
    ``display_name`` shown in the UI, and the ``language_code`` used in the
    lookup URL. Older preference files stored the display name, so
    ``from_identifier`` accepts either form.
    """

    ENGLISH_THESAURUS = ("english_thesaurus", "English Thesaurus", "en")
    SWEDISH = ("swedish", "Swedish", "sv")
    SWEDISH_ENGLISH = ("swedish_english", "Swedish – English", "en")  # Service is not bilingual
    ENGLISH = ("english", "English", "en")
    FRENCH = ("french", "French", "fr")
    GERMAN = ("german", "German", "de")
    SPANISH = ("spanish", "Spanish", "es")
    ITALIAN = ("italian", "Italian", "it")
    PORTUGUESE = ("portuguese", "Portuguese", "pt")
    DUTCH = ("dutch", "Dutch", "nl")

    def __init__(self, code: str, display_name: str, language_code: str):
        self.code = code
        self.display_name = display_name
        self.language_code = language_code

    @classmethod
    def from_identifier(cls, identifier: str) -> "DictionaryItem | None":
        """Find a member by stable code or legacy display name.

        Args:
            identifier: Stored identifier

        Returns:
            Matching member, or None if the identifier is unknown
        """
        for item in cls:
            if identifier in (item.code, item.display_name):
                return item
        return None

    @classmethod
    def default(cls) -> "DictionaryItem":
        """Dictionary used when nothing is selected."""
        return cls.ENGLISH

    @classmethod
    def default_enabled(cls) -> list["DictionaryItem"]:
        """Dictionaries enabled on first run."""
        return [cls.ENGLISH, cls.ENGLISH_THESAURUS, cls.SWEDISH, cls.FRENCH]

    def __str__(self) -> str:
        return self.display_name

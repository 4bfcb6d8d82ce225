"""Data models for dictionary entries."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Definition:
    """A single definition within a meaning."""

    text: str
    example: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Definition":
        """Build from one item of a meaning's "definitions" array.

        Raises:
            KeyError: If the "definition" field is missing
            TypeError: If the item is not an object or the text is not a string
        """
        _require_object(data, "definition")
        text = data["definition"]
        if not isinstance(text, str):
            raise TypeError(f"definition must be a string, got {type(text).__name__}")
        example = data.get("example")
        return cls(text=text, example=example if isinstance(example, str) else None)


@dataclass(frozen=True)
class Meaning:
    """Definitions grouped under one part of speech."""

    part_of_speech: str | None
    definitions: list[Definition] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Meaning":
        """Build from one item of an entry's "meanings" array.

        Raises:
            TypeError: If the item or its "definitions" field has the wrong shape
        """
        _require_object(data, "meaning")
        part_of_speech = data.get("partOfSpeech")
        return cls(
            part_of_speech=part_of_speech if isinstance(part_of_speech, str) else None,
            definitions=[Definition.from_api(d) for d in _object_list(data.get("definitions"))],
            synonyms=_string_list(data.get("synonyms")),
            antonyms=_string_list(data.get("antonyms")),
        )


@dataclass(frozen=True)
class LookupResult:
    """A structured dictionary entry for one word."""

    word: str
    phonetic: str | None = None
    meanings: list[Meaning] = field(default_factory=list)
    source_urls: list[str] = field(default_factory=list)

    @property
    def primary_definition(self) -> str | None:
        """First non-empty leading definition across meanings, in order."""
        for meaning in self.meanings:
            if meaning.definitions and meaning.definitions[0].text:
                return meaning.definitions[0].text
        return None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "LookupResult":
        """Build from one entry of the dictionary service's response array.

        Args:
            data: Decoded JSON object for a single entry

        Returns:
            LookupResult for the entry

        Raises:
            KeyError: If a required field is missing
            TypeError: If a field has the wrong shape
        """
        _require_object(data, "entry")
        word = data["word"]
        if not isinstance(word, str):
            raise TypeError(f"word must be a string, got {type(word).__name__}")

        phonetic = data.get("phonetic")
        if not isinstance(phonetic, str) or not phonetic:
            # Fall back to the first transcription in "phonetics"
            phonetic = next(
                (
                    p["text"]
                    for p in data.get("phonetics") or []
                    if isinstance(p, dict) and isinstance(p.get("text"), str) and p["text"]
                ),
                None,
            )

        return cls(
            word=word,
            phonetic=phonetic,
            meanings=[Meaning.from_api(m) for m in _object_list(data.get("meanings"))],
            source_urls=_string_list(data.get("sourceUrls")),
        )

    def __str__(self) -> str:
        return f"{self.word}: {self.primary_definition or 'No definition'}"


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _require_object(data: Any, name: str) -> None:
    if not isinstance(data, dict):
        raise TypeError(f"{name} must be an object, got {type(data).__name__}")


def _object_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected an array, got {type(value).__name__}")
    return value

"""Record types and errors shared by the dictionary extractors and service."""

from dataclasses import dataclass
from typing import Any


class DictionaryError(Exception):
    """Base class for dictionary lookup failures."""


class InvalidEntryError(DictionaryError):
    """The requested entry is empty or malformed."""


class WordNotFoundError(DictionaryError):
    """The upstream page has no entry for the word."""

    def __init__(self, message: str = "Word not found") -> None:
        super().__init__(message)


class FetchError(DictionaryError):
    """Network failure or timeout while fetching an upstream page."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass(frozen=True)
class VerbForm:
    """One cell of an inflection table, e.g. ("past tense", "ran")."""

    id: int
    type: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "text": self.text}


@dataclass(frozen=True)
class Pronunciation:
    part_of_speech: str
    region: str  # "BrE", "NAmE", ...
    audio_url: str  # Absolute URL, or "" when the page has no audio
    transcription: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "pos": self.part_of_speech,
            "lang": self.region,
            "url": self.audio_url,
            "pron": self.transcription,
        }


@dataclass(frozen=True)
class Example:
    id: int
    text: str
    translation: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "translation": self.translation}


@dataclass(frozen=True)
class Definition:
    id: int
    part_of_speech: str
    source_id: str
    text: str
    translation: str = ""  # English-only source, never translated
    examples: tuple[Example, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "pos": self.part_of_speech,
            "source": self.source_id,
            "text": self.text,
            "translation": self.translation,
            "example": [example.to_dict() for example in self.examples],
        }


@dataclass(frozen=True)
class DictionaryRecord:
    """Normalized dictionary entry returned to callers and stored in the cache.

    All ``id`` fields are positions within their containing tuple, not
    stable identifiers across lookups.
    """

    word: str
    parts_of_speech: tuple[str, ...] = ()
    verb_forms: tuple[VerbForm, ...] = ()
    pronunciations: tuple[Pronunciation, ...] = ()
    definitions: tuple[Definition, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the public JSON shape."""
        return {
            "word": self.word,
            "pos": list(self.parts_of_speech),
            "verbs": [verb.to_dict() for verb in self.verb_forms],
            "pronunciation": [p.to_dict() for p in self.pronunciations],
            "definition": [d.to_dict() for d in self.definitions],
        }

"""Data models for words returned by the Datamuse API."""

from dataclasses import dataclass
from typing import Any

from nerdbook.exceptions import DecodeError


@dataclass(frozen=True)
class WordRecord:
    """A single word from a ``/words`` response with its optional metadata."""

    text: str
    syllable_count: int | None = None  # "numSyllables", requested with md=s
    frequency: float | None = None  # Occurrences per million words, requested with md=f
    definitions: tuple[str, ...] | None = None  # "<pos>\t<gloss>" strings, requested with md=d

    @classmethod
    def from_json(cls, data: Any) -> "WordRecord":
        """Build a record from one element of a ``/words`` response.

        Args:
            data: Decoded JSON element

        Returns:
            WordRecord with absent metadata left as None

        Raises:
            DecodeError: If the element does not have the expected shape
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

        text = data.get("word")
        if not isinstance(text, str):
            raise DecodeError("Word entry is missing a string 'word' field")

        syllables = data.get("numSyllables")
        if syllables is not None and (isinstance(syllables, bool) or not isinstance(syllables, int)):
            raise DecodeError(f"Invalid numSyllables for '{text}': {syllables!r}")

        frequency = data.get("frequency")
        if frequency is not None:
            if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
                raise DecodeError(f"Invalid frequency for '{text}': {frequency!r}")
            frequency = float(frequency)

        defs = data.get("defs")
        if defs is not None:
            if not isinstance(defs, list) or not all(isinstance(d, str) for d in defs):
                raise DecodeError(f"Invalid defs for '{text}'")
            defs = tuple(defs)

        return cls(text=text, syllable_count=syllables, frequency=frequency, definitions=defs)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class SuggestionEntry:
    """A single autocomplete suggestion from a ``/sug`` response."""

    text: str

    @classmethod
    def from_json(cls, data: Any) -> "SuggestionEntry":
        """Build a suggestion from one element of a ``/sug`` response.

        Raises:
            DecodeError: If the element has no string 'word' field
        """
        if not isinstance(data, dict) or not isinstance(data.get("word"), str):
            raise DecodeError("Suggestion entry is missing a string 'word' field")
        return cls(text=data["word"])

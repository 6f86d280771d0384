"""Data models: input modes, selectable lists and dictionary entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, TypeVar

from thesaurust.errors import JsonReadError

T = TypeVar("T")


class InputMode(Enum):
    """What the keyboard currently controls."""

    NORMAL = auto()
    INSERT = auto()
    SELECT_PART_OF_SPEECH = auto()
    SELECT_DEFINITION = auto()


@dataclass
class StatefulList(Generic[T]):
    """A list of items with an optional, wrapping selection."""

    items: list[T] = field(default_factory=list)
    selected: int | None = None

    @classmethod
    def with_items(cls, items) -> StatefulList[T]:
        return cls(items=list(items))

    def down(self) -> None:
        """Move the selection one item down, wrapping to the top."""
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def up(self) -> None:
        """Move the selection one item up, wrapping to the bottom."""
        if self.selected is None or not self.items:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.items) - 1
        else:
            self.selected -= 1


def _require_object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise JsonReadError(f"expected an object for {what}")
    return data


def _optional(data: dict, key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise JsonReadError(f"invalid type for field `{key}`")
    return value


def _optional_list(data: dict, key: str) -> list | None:
    return _optional(data, key, list)


@dataclass
class Definition:
    """One definition of a word, with an optional example and synonyms."""

    definition: str | None = None
    example: str | None = None
    synonyms: list[str] | None = None

    @classmethod
    def from_json(cls, data) -> Definition:
        obj = _require_object(data, "definition")
        synonyms = _optional_list(obj, "synonyms")
        if synonyms is not None and not all(isinstance(s, str) for s in synonyms):
            raise JsonReadError("invalid type for field `synonyms`")
        return cls(
            definition=_optional(obj, "definition", str),
            example=_optional(obj, "example", str),
            synonyms=synonyms,
        )


@dataclass
class Meaning:
    """The definitions of a word for one part of speech."""

    part_of_speech: str | None = None
    definitions: list[Definition] | None = None

    @classmethod
    def from_json(cls, data) -> Meaning:
        obj = _require_object(data, "meaning")
        definitions = _optional_list(obj, "definitions")
        return cls(
            part_of_speech=_optional(obj, "partOfSpeech", str),
            definitions=(
                None
                if definitions is None
                else [Definition.from_json(d) for d in definitions]
            ),
        )


@dataclass
class Thesaurus:
    """A dictionary entry: a word and its meanings."""

    word: str | None = None
    meanings: list[Meaning] | None = None

    @classmethod
    def from_json(cls, data) -> Thesaurus:
        obj = _require_object(data, "entry")
        meanings = _optional_list(obj, "meanings")
        return cls(
            word=_optional(obj, "word", str),
            meanings=(
                None if meanings is None else [Meaning.from_json(m) for m in meanings]
            ),
        )

    def meanings_at(self, index: int) -> tuple[str, list[Definition]]:
        """Return the part of speech and definitions of the meaning at ``index``.

        Missing data yields an empty part of speech and no definitions; an
        index past the end raises IndexError.
        """
        if self.meanings is None:
            return "", []
        meaning = self.meanings[index]
        if meaning.part_of_speech is not None and meaning.definitions is not None:
            return meaning.part_of_speech, list(meaning.definitions)
        return "", []


@dataclass
class SearchResults:
    """A corrected spelling for a searched word."""

    spelling_fix: str
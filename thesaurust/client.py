"""Clients for the dictionary and spelling-suggestion web services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from thesaurust.errors import (
    BadStatusError,
    HttpRequestError,
    JsonReadError,
    NoSuggestionError,
    WordNotFoundError,
)
from thesaurust.models import Thesaurus

SUGGEST_DOMAIN = "https://api.datamuse.com"
DICTIONARY_DOMAIN = "https://api.dictionaryapi.dev"


@dataclass
class Suggestion:
    """One spelling suggestion with its score."""

    word: str | None = None
    score: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Suggestion:
        """Build a suggestion from a decoded JSON object."""
        if not isinstance(data, dict):
            raise JsonReadError(f"expected an object for a suggestion, got {data!r}")
        word = data.get("word")
        score = data.get("score")
        if word is not None and not isinstance(word, str):
            raise JsonReadError(f"invalid word in suggestion: {word!r}")
        if score is not None and (isinstance(score, bool) or not isinstance(score, int)):
            raise JsonReadError(f"invalid score in suggestion: {score!r}")
        return cls(word=word, score=score)


def _get_json(url: str, **kwargs: Any) -> Any:
    try:
        response = requests.get(url, **kwargs)
    except requests.RequestException as exc:
        raise HttpRequestError(str(exc)) from exc
    if not response.ok:
        raise BadStatusError(response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise HttpRequestError(f"error decoding response body: {exc}") from exc


def _expect_list(payload: Any, what: str) -> list[Any]:
    if not isinstance(payload, list):
        raise JsonReadError(f"expected a list of {what}, got {type(payload).__name__}")
    return payload


def look_up_handler(word: str, url: str) -> list[Thesaurus]:
    """Fetch the dictionary entries for a word from the service at url."""
    payload = _get_json(f"{url}/api/v2/entries/en/{word}")
    return [Thesaurus.from_json(item) for item in _expect_list(payload, "entries")]


def suggest_handler(word: str, url: str) -> list[Suggestion]:
    """Fetch spelling suggestions for a word from the service at url."""
    payload = _get_json(f"{url}/sug", params={"s": word})
    return [Suggestion.from_json(item) for item in _expect_list(payload, "suggestions")]


def look_up(word: str) -> list[Thesaurus]:
    """Look a word up in the dictionary service."""
    return look_up_handler(word, DICTIONARY_DOMAIN)


def suggest(word: str) -> list[Suggestion]:
    """Ask the suggestion service for words spelled like this one."""
    return suggest_handler(word, SUGGEST_DOMAIN)


def spellcheck(word: str) -> str:
    """Return the closest correctly spelled word, which is the first suggestion."""
    suggestions = suggest(word)
    if not suggestions:
        raise NoSuggestionError()
    best = suggestions[0].word
    if best is None:
        raise WordNotFoundError()
    return best
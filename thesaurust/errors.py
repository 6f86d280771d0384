"""Errors raised while looking words up and driving the interface."""

from __future__ import annotations

from http import HTTPStatus


class ThesaurustError(Exception):
    """Base class for every error the application raises."""


class HttpRequestError(ThesaurustError):
    """A request to a remote service could not be completed."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"http request failed: {cause}")
        self.cause = cause


class JsonReadError(ThesaurustError):
    """A response body did not have the expected JSON shape."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"failed to read json: {cause}")
        self.cause = cause


def _describe_status(status: int) -> str:
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return str(status)


class BadStatusError(ThesaurustError):
    """A remote service answered with a non-success status code."""

    def __init__(self, status: int) -> None:
        super().__init__(f"unexpected status code: {_describe_status(status)}")
        self.status = status


class TerminalError(ThesaurustError):
    """The terminal could not be set up, drawn on or restored."""

    def __init__(self, cause: object) -> None:
        super().__init__(str(cause))
        self.cause = cause


class NoSuggestionError(ThesaurustError):
    """The spelling service returned no suggestions at all."""

    def __init__(self) -> None:
        super().__init__("no suggestions found")


class WordNotFoundError(ThesaurustError):
    """The best suggestion carried no word."""

    def __init__(self) -> None:
        super().__init__("word does not exist")
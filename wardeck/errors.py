"""Error taxonomy shared by the deck codec and the report writer."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ErrorKind",
    "DeckError",
    "SourceUnavailable",
    "MalformedInput",
    "EmptyDeck",
    "SinkUnavailable",
]


class ErrorKind(str, Enum):
    """Failure categories reported to callers."""

    SOURCE_UNAVAILABLE = "source_unavailable"
    MALFORMED_INPUT = "malformed_input"
    EMPTY_DECK = "empty_deck"
    SINK_UNAVAILABLE = "sink_unavailable"


class DeckError(RuntimeError):
    """Base class for every failure raised while loading or writing decks."""

    kind: ErrorKind


class SourceUnavailable(DeckError):
    """Raised when a deck or report source cannot be opened or read."""

    kind = ErrorKind.SOURCE_UNAVAILABLE

    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Failed to open input: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path


class MalformedInput(DeckError):
    """Raised when any line of a source violates the expected grammar."""

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, reason: str, *, line_number: int | None = None, line: str | None = None) -> None:
        message = f"Malformed input: {reason}"
        if line_number is not None and line is not None:
            message += f" (line {line_number}: {line!r})"
        elif line_number is not None:
            message += f" (line {line_number})"
        super().__init__(message)
        self.reason = reason
        self.line_number = line_number
        self.line = line


class EmptyDeck(DeckError):
    """Raised when a source parses cleanly but contains no cards."""

    kind = ErrorKind.EMPTY_DECK

    def __init__(self, source: str = "deck") -> None:
        super().__init__(f"Empty or invalid deck: {source}")
        self.source = source


class SinkUnavailable(DeckError):
    """Raised when an output destination cannot be opened for writing."""

    kind = ErrorKind.SINK_UNAVAILABLE

    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Failed to open output: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path

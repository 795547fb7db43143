"""Reader and writer for the line-oriented deck format.

Each non-blank line holds one card, either ``<Suit>,<Rank>`` with a rank
written in ASCII digits from 1 to 13 or ``Joker,<Color>``. Lines and fields are stripped of
surrounding whitespace before they are interpreted, so ``"Hearts, 5\\r"``
is accepted and whitespace-only lines are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Iterable

from .cards import MAX_RANK, MIN_RANK, Card, JokerCard, make_card
from .deck import Deck
from .errors import DeckError, EmptyDeck, MalformedInput, SinkUnavailable, SourceUnavailable
from .logging_utils import get_logger

__all__ = [
    "DeckFormat",
    "DEFAULT_FORMAT",
    "DeckLoad",
    "parse_line",
    "parse_deck",
    "loads_deck",
    "read_deck",
    "load_deck",
    "dumps_deck",
    "write_deck",
]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DeckFormat:
    """Textual conventions of a deck file."""

    joker_tag: str = "Joker"
    separator: str = ","
    encoding: str = "utf-8"


DEFAULT_FORMAT: Final[DeckFormat] = DeckFormat()


def parse_line(line: str, fmt: DeckFormat = DEFAULT_FORMAT) -> Card:
    """Parse a single non-blank deck line into a card."""

    text = line.strip()
    head, sep, rest = text.partition(fmt.separator)
    if not sep:
        raise MalformedInput("missing separator")
    head = head.strip()
    rest = rest.strip()
    if not head or not rest:
        raise MalformedInput("empty field")

    if head == fmt.joker_tag:
        return JokerCard(rest)

    # ASCII digits only: int() would also take "+5", "1_0" and non-ASCII digits.
    if not (rest.isascii() and rest.isdigit()):
        raise MalformedInput(f"rank {rest!r} is not an integer")
    rank = int(rest)
    if not MIN_RANK <= rank <= MAX_RANK:
        raise MalformedInput(f"rank {rank} outside [{MIN_RANK}, {MAX_RANK}]")
    try:
        return make_card(head, rank)
    except ValueError as exc:
        raise MalformedInput(str(exc)) from exc


def parse_deck(lines: Iterable[str], fmt: DeckFormat = DEFAULT_FORMAT, *, source: str = "deck") -> Deck:
    """Build a deck from ``lines`` in order, failing on the first bad line."""

    deck = Deck()
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            deck.append(parse_line(line, fmt))
        except MalformedInput as exc:
            logger.debug("rejected line %d of %s: %s", line_number, source, exc.reason)
            raise MalformedInput(exc.reason, line_number=line_number, line=line.rstrip("\r\n")) from exc
        except ValueError as exc:
            raise MalformedInput(str(exc), line_number=line_number, line=line.rstrip("\r\n")) from exc
    if deck.size() == 0:
        raise EmptyDeck(source)
    return deck


def loads_deck(text: str, fmt: DeckFormat = DEFAULT_FORMAT) -> Deck:
    """Parse a deck from an in-memory string."""

    return parse_deck(text.splitlines(), fmt, source="<string>")


def read_deck(path: str | Path, fmt: DeckFormat = DEFAULT_FORMAT) -> Deck:
    """Load the deck stored at ``path``."""

    try:
        with open(path, encoding=fmt.encoding) as handle:
            deck = parse_deck(handle, fmt, source=str(path))
    except OSError as exc:
        raise SourceUnavailable(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise MalformedInput(f"undecodable bytes in {path}") from exc
    logger.info("loaded %d card(s) from %s", deck.size(), path)
    return deck


@dataclass(frozen=True, slots=True)
class DeckLoad:
    """Outcome of :func:`load_deck`: exactly one of ``deck`` or ``error``."""

    deck: Deck | None = None
    error: DeckError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Deck:
        """Return the deck, raising the recorded error if the load failed."""

        if self.error is not None:
            raise self.error
        assert self.deck is not None
        return self.deck


def load_deck(path: str | Path, fmt: DeckFormat = DEFAULT_FORMAT) -> DeckLoad:
    """Load ``path`` and report failures as a value instead of raising."""

    try:
        return DeckLoad(deck=read_deck(path, fmt))
    except DeckError as exc:
        return DeckLoad(error=exc)


def dumps_deck(deck: Iterable[Card]) -> str:
    """Render ``deck`` in the deck file format, one card per line."""

    return "".join(f"{card.render()}\n" for card in deck)


def write_deck(deck: Iterable[Card], path: str | Path, fmt: DeckFormat = DEFAULT_FORMAT) -> None:
    """Write ``deck`` to ``path``, replacing any existing content."""

    text = dumps_deck(deck)
    try:
        with open(path, "w", encoding=fmt.encoding, newline="\n") as handle:
            handle.write(text)
    except OSError as exc:
        raise SinkUnavailable(str(path), exc.strerror or str(exc)) from exc
    logger.info("wrote deck to %s", path)

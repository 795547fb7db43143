"""Card variants and value ordering for War decks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Final

__all__ = [
    "Suit",
    "PlayingCard",
    "FaceCard",
    "JokerCard",
    "Card",
    "CARD_TYPES",
    "JOKER_VALUE",
    "MIN_RANK",
    "MAX_RANK",
    "make_card",
]

MIN_RANK: Final[int] = 1
MAX_PIP_RANK: Final[int] = 10
MAX_RANK: Final[int] = 13
JOKER_VALUE: Final[int] = 14

_FACE_NAMES: Final[dict[int, str]] = {11: "Jack", 12: "Queen", 13: "King"}
_RANK_LABELS: Final[dict[int, str]] = {1: "A", 11: "J", 12: "Q", 13: "K"}


class Suit(str, Enum):
    """Enumeration of the four suits accepted in a deck file."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    @classmethod
    def parse(cls, text: str) -> "Suit":
        """Return the suit named by ``text`` (case-insensitive)."""

        if isinstance(text, Suit):
            return text
        wanted = text.strip().lower()
        for suit in cls:
            if suit.value.lower() == wanted:
                return suit
        raise ValueError(f"unknown suit '{text}'")

    @property
    def symbol(self) -> str:
        return self.value[0]


def _check_rank(rank: int, low: int, high: int, kind: str) -> None:
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise ValueError(f"{kind} rank must be an integer, got {rank!r}")
    if not low <= rank <= high:
        raise ValueError(f"{kind} rank {rank} outside [{low}, {high}]")


class _ValueOrdered(ABC):
    """Shared comparison behaviour: cards compare by ``value`` only.

    Suit and kind never break ties, so a King of Hearts equals a King of
    Spades and a Joker equals any other Joker.
    """

    __slots__ = ()

    value: int

    @abstractmethod
    def render(self) -> str:
        """Return the deck-file form of the card."""

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ValueOrdered):
            return NotImplemented
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, _ValueOrdered):
            return NotImplemented
        return self.value != other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _ValueOrdered):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _ValueOrdered):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _ValueOrdered):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _ValueOrdered):
            return NotImplemented
        return self.value >= other.value

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True, slots=True, eq=False)
class PlayingCard(_ValueOrdered):
    """Numbered card, Ace (1) through Ten."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit.parse(self.suit))
        _check_rank(self.rank, MIN_RANK, MAX_PIP_RANK, "playing card")

    @property
    def value(self) -> int:
        return self.rank

    def render(self) -> str:
        return f"{self.suit.value},{self.rank}"

    def label(self) -> str:
        """Short display label, e.g. ``AH`` or ``10S``."""

        return f"{_RANK_LABELS.get(self.rank, str(self.rank))}{self.suit.symbol}"


@dataclass(frozen=True, slots=True, eq=False)
class FaceCard(_ValueOrdered):
    """Jack (11), Queen (12) or King (13)."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit.parse(self.suit))
        _check_rank(self.rank, MAX_PIP_RANK + 1, MAX_RANK, "face card")

    @property
    def value(self) -> int:
        return self.rank

    @property
    def name(self) -> str:
        return _FACE_NAMES[self.rank]

    def render(self) -> str:
        return f"{self.suit.value},{self.rank}"

    def label(self) -> str:
        return f"{_RANK_LABELS[self.rank]}{self.suit.symbol}"


@dataclass(frozen=True, slots=True, eq=False)
class JokerCard(_ValueOrdered):
    """Joker identified by a free-form label such as ``Red``.

    Jokers are worth ``JOKER_VALUE`` and therefore beat every numbered card.
    """

    color: str

    def __post_init__(self) -> None:
        if not isinstance(self.color, str) or not self.color:
            raise ValueError("joker color must be a non-empty string")

    @property
    def value(self) -> int:
        return JOKER_VALUE

    def render(self) -> str:
        return f"Joker,{self.color}"

    def label(self) -> str:
        return f"Joker({self.color})"


Card = PlayingCard | FaceCard | JokerCard
CARD_TYPES: Final[tuple[type, ...]] = (PlayingCard, FaceCard, JokerCard)


def make_card(suit: Suit | str, rank: int) -> PlayingCard | FaceCard:
    """Build the numbered or face card matching ``rank``."""

    if isinstance(rank, int) and not isinstance(rank, bool) and rank > MAX_PIP_RANK:
        return FaceCard(suit, rank)
    return PlayingCard(suit, rank)

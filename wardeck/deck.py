"""Ordered deck container used as each player's draw pile."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from .cards import CARD_TYPES, Card

__all__ = ["Deck"]


@dataclass(slots=True)
class Deck:
    """Mutable sequence of cards; position 0 is the top of the pile."""

    cards: deque[Card] = field(default_factory=deque)

    def __post_init__(self) -> None:
        initial = self.cards
        self.cards = deque()
        self.extend(initial)

    def append(self, card: Card) -> None:
        """Place ``card`` at the bottom of the deck."""

        if not isinstance(card, CARD_TYPES):
            raise TypeError(f"expected a card, got {type(card).__name__}")
        self.cards.append(card)

    add_to_bottom = append

    def add_to_top(self, card: Card) -> None:
        if not isinstance(card, CARD_TYPES):
            raise TypeError(f"expected a card, got {type(card).__name__}")
        self.cards.appendleft(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Append ``cards`` to the bottom, preserving their order."""

        for card in cards:
            self.append(card)

    def draw(self) -> Card:
        """Remove and return the top card."""

        if not self.cards:
            raise IndexError("draw from an empty deck")
        return self.cards.popleft()

    def peek(self) -> Card:
        if not self.cards:
            raise IndexError("peek at an empty deck")
        return self.cards[0]

    def size(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def render(self, separator: str = " ") -> str:
        """Return every card's textual form, top to bottom."""

        return separator.join(card.render() for card in self.cards)

    def __str__(self) -> str:
        return self.render()

    def shuffle(self, rng: np.random.Generator) -> None:
        """Reorder the deck using a permutation drawn from ``rng``."""

        order = rng.permutation(len(self.cards))
        current = list(self.cards)
        self.cards = deque(current[int(idx)] for idx in order)

    def deal(self, players: int = 2) -> list["Deck"]:
        """Deal every card round-robin into ``players`` new decks.

        The first card goes to the first hand. This deck is left empty.
        """

        if players < 1:
            raise ValueError("players must be positive")
        hands = [Deck() for _ in range(players)]
        idx = 0
        while self.cards:
            hands[idx % players].append(self.cards.popleft())
            idx += 1
        return hands

"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich import box
from rich.table import Table

from ..cards import Card, FaceCard, JokerCard, Suit
from ..deck import Deck

_SUIT_STYLES = {
    Suit.HEARTS: ("♥", "red"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.CLUBS: ("♣", "green"),
    Suit.SPADES: ("♠", "cyan"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if isinstance(card, JokerCard):
        return f"[bold yellow]{card.label()}[/bold yellow]"
    symbol, color = _SUIT_STYLES[card.suit]
    return f"[{color}]{card.label()[:-1]}{symbol}[/{color}]"


def card_kind(card: Card) -> str:
    if isinstance(card, JokerCard):
        return "Joker"
    if isinstance(card, FaceCard):
        return card.name
    return "Ace" if card.rank == 1 else "Pip"


def format_hand(deck: Deck) -> str:
    if deck.is_empty:
        return "(empty)"
    return " ".join(format_card(card) for card in deck)


def deck_table(deck: Deck, title: str = "Deck") -> Table:
    """Return a table listing ``deck`` from top to bottom."""

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Kind", justify="left")
    table.add_column("Card", justify="left")
    table.add_column("Value", justify="right")
    for position, card in enumerate(deck, start=1):
        table.add_row(str(position), card_kind(card), format_card(card), str(card.value))
    return table

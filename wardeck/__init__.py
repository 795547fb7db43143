"""Top-level package for the War deck toolkit."""

from . import cards, codec, deck, errors, report

__all__ = [
    "cards",
    "codec",
    "deck",
    "errors",
    "report",
]

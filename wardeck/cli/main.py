"""Typer entry-point wiring for the wardeck CLI."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import numpy as np
import typer
from rich.console import Console

from ..codec import load_deck
from ..deck import Deck
from ..errors import DeckError
from ..logging_utils import LOG_LEVEL, get_logger, setup_logging
from ..report import ReportWriter
from .render import deck_table, format_hand

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _fail(error: DeckError) -> NoReturn:
    err_console.print(f"Error: {error}", style="bold red", markup=False)
    raise typer.Exit(code=1)


def _load_or_exit(path: Path) -> Deck:
    result = load_deck(path)
    if result.error is not None:
        _fail(result.error)
    return result.unwrap()


@app.callback()
def configure(
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
) -> None:
    """Load, inspect and deal War decks."""

    setup_logging(log_level)


@app.command()
def show(deck_path: Path = typer.Argument(..., help="Deck file, one card per line.")) -> None:
    """Print every card of a deck with its value."""

    deck = _load_or_exit(deck_path)
    console.print(deck_table(deck, title=str(deck_path)))
    console.print(f"[cyan]{deck.size()} card(s).[/cyan]")


@app.command()
def validate(deck_path: Path = typer.Argument(..., help="Deck file, one card per line.")) -> None:
    """Check that a deck file loads cleanly."""

    deck = _load_or_exit(deck_path)
    console.print(f"OK: {deck.size()} card(s)", markup=False)


@app.command()
def deal(
    deck_path: Path = typer.Argument(..., help="Deck file, one card per line."),
    output: Path = typer.Argument(..., help="Destination CSV report."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
    shuffle: bool = typer.Option(False, "--shuffle/--no-shuffle", help="Shuffle the deck before dealing."),
) -> None:
    """Deal a deck between Player A and Player B and record the opening round."""

    deck = _load_or_exit(deck_path)
    if shuffle:
        deck.shuffle(np.random.default_rng(seed))
    player_a, player_b = deck.deal(2)
    logger.info("dealt %d/%d card(s)", player_a.size(), player_b.size())

    try:
        with ReportWriter(output) as report:
            report.write_round(0, player_a, player_b)
    except DeckError as exc:
        _fail(exc)

    console.print(f"[bold]Player A[/bold] ({player_a.size()}): {format_hand(player_a)}")
    console.print(f"[bold]Player B[/bold] ({player_b.size()}): {format_hand(player_b)}")
    console.print(f"[cyan]Report written to {output}[/cyan]")


def main() -> None:
    """Entry-point for ``python -m wardeck.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()

"""Typer entry-point wiring for the playing cards CLI."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..deck import Deck
from ..pile import TAUTOLOGY, Invariant, Pile, PileInvariantError
from .render import format_card
from .views import DeckView, PilesView

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DealConfig:
    """Options for dealing a shuffled deck into piles."""

    color: str = "red"
    jokers: bool = False
    piles: int = 2
    seed: int | None = None
    max_size: int | None = None
    face_up: bool = True


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _size_invariant(max_size: int | None) -> Invariant:
    if max_size is None:
        return TAUTOLOGY

    def at_most(cards: Sequence[object]) -> bool:
        return len(cards) <= max_size

    return at_most


def _deal(config: DealConfig) -> list[Pile]:
    """Shuffle a fresh deck and split it into ``config.piles`` piles."""

    rng = random.Random(config.seed)
    deck = Deck(config.color, config.jokers)
    if config.face_up:
        for card in deck:
            card.turn()
    stock = Pile(initial=deck, rng=rng, name="stock")
    stock.shuffle()
    return stock.split(config.piles, invariant=_size_invariant(config.max_size))


@app.command()
def show(
    color: str = typer.Option("red", help="Back color of the deck, also its name."),
    jokers: bool = typer.Option(True, "--jokers/--no-jokers", help="Include the two jokers."),
    face_up: bool = typer.Option(True, "--face-up/--face-down", help="Show faces or backs."),
    verbose: bool = typer.Option(False, "--verbose", help="Log model changes."),
) -> None:
    """Print every card of a deck as Unicode text."""

    _configure_logging(verbose)
    deck = Deck(color, jokers)
    if face_up:
        for card in deck:
            card.turn()
    console.print(DeckView(deck=deck, card_formatter=format_card).render())


@app.command()
def deal(
    color: str = typer.Option("red", help="Back color of the deck, also its name."),
    jokers: bool = typer.Option(False, "--jokers/--no-jokers", help="Include the two jokers."),
    piles: int = typer.Option(2, min=1, help="Number of piles to deal into."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
    max_size: int | None = typer.Option(None, min=0, help="Reject piles holding more than this many cards."),
    face_up: bool = typer.Option(True, "--face-up/--face-down", help="Deal the cards face up."),
    verbose: bool = typer.Option(False, "--verbose", help="Log model changes."),
) -> None:
    """Shuffle a deck and split it into piles."""

    _configure_logging(verbose)
    config = DealConfig(
        color=color,
        jokers=jokers,
        piles=piles,
        seed=seed,
        max_size=max_size,
        face_up=face_up,
    )
    try:
        dealt = _deal(config)
    except PileInvariantError as exc:
        logger.debug("deal rejected: %s", exc)
        console.print(f"[red]Deal rejected:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(PilesView(piles=dealt, card_formatter=format_card).render())


def main() -> None:
    """Entry-point for the ``playing-cards`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()

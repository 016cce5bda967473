"""Composable view primitives for the playing cards CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card, Suit
from ..deck import Deck
from ..pile import Pile


@dataclass(slots=True)
class DeckView:
    """Renderable showing a deck with one row per suit."""

    deck: Deck
    card_formatter: Callable[[Card], str]

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, show_header=False)
        table.add_column("Suit", justify="left", style="bold")
        table.add_column("Cards", justify="left")

        for suit in Suit:
            row = [card for card in self.deck.cards if card.suit is suit]
            table.add_row(suit.value.title(), " ".join(self.card_formatter(card) for card in row))
        jokers = [card for card in self.deck.cards if card.is_joker]
        if jokers:
            table.add_row("Jokers", " ".join(self.card_formatter(card) for card in jokers))

        title = f"{self.deck.name} deck ({len(self.deck)} cards)"
        return Panel(table, title=title, border_style="cyan", padding=(0, 1))


@dataclass(slots=True)
class PilesView:
    """Renderable listing piles side by side in a single table."""

    piles: Sequence[Pile]
    card_formatter: Callable[[Card], str]

    def _pile_markup(self, pile: Pile) -> str:
        if pile.is_empty():
            return "—"
        return " ".join(self.card_formatter(card) for card in pile.each())

    def render(self) -> RenderableType:
        table = Table(box=box.SIMPLE, expand=True)
        table.add_column("Pile", justify="left", style="bold")
        table.add_column("Count", justify="right")
        table.add_column("Cards (bottom to top)", justify="left")

        for idx, pile in enumerate(self.piles):
            label = pile.name or f"P{idx}"
            table.add_row(label, str(pile.count), self._pile_markup(pile))

        return Group(Panel(table, title="Piles", border_style="green", box=box.SQUARE))

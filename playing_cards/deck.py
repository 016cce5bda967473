"""Standard 52-card deck assembly."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, List

from .cards import Card, Color, Rank, Suit

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .pile import Pile

__all__ = ["Deck", "STANDARD_DECK_SIZE"]

STANDARD_DECK_SIZE = 52

logger = logging.getLogger(__name__)


class Deck:
    """A standard 52-card deck, optionally with a black and a red joker.

    The deck's back color is also its name. Cards are created once, in
    canonical order: spades ace to king, then hearts, diamonds and clubs,
    followed by the black joker and the red joker when requested.

    :attr:`cards` is the deck's own list, not a copy. Popping from it removes
    the card from the deck for good.
    """

    def __init__(self, color: str = "red", jokers: bool = False) -> None:
        self._color = color
        self._has_jokers = bool(jokers)
        self._cards: List[Card] = [
            Card(suit, rank, self) for suit in Suit for rank in Rank.standard()
        ]
        if self._has_jokers:
            self._cards.append(Card.joker(Color.BLACK, self))
            self._cards.append(Card.joker(Color.RED, self))
        logger.debug("created %s deck with %d cards", color, len(self._cards))

    @property
    def color(self) -> str:
        """Return the back color of this deck's cards."""

        return self._color

    @property
    def name(self) -> str:
        return self._color

    @property
    def has_jokers(self) -> bool:
        return self._has_jokers

    @property
    def cards(self) -> List[Card]:
        return self._cards

    def add_to_pile(self, pile: Pile) -> Pile:
        """Put every card of this deck on top of ``pile`` in one move."""

        from .pile import Pile  # Local import to avoid cycles

        return pile.merge(Pile(initial=self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self._color!r}, jokers={self._has_jokers})"

"""Ordered card collections guarded by an invariant."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Final, Iterable, Iterator, List, Sequence

from .cards import Card
from .deck import Deck
from .model import Model

EVENT_PILE_ADD: Final[str] = "event:pile:add"
EVENT_PILE_INSERT: Final[str] = "event:pile:insert"
EVENT_PILE_TAKE: Final[str] = "event:pile:take"
EVENT_PILE_PICK: Final[str] = "event:pile:pick"
EVENT_PILE_SHUFFLE: Final[str] = "event:pile:shuffle"
EVENT_PILE_MERGE: Final[str] = "event:pile:merge"
EVENT_PILE_SPLIT: Final[str] = "event:pile:split"

PILE_EVENTS: Final[tuple[str, ...]] = (
    EVENT_PILE_ADD,
    EVENT_PILE_INSERT,
    EVENT_PILE_TAKE,
    EVENT_PILE_PICK,
    EVENT_PILE_SHUFFLE,
    EVENT_PILE_MERGE,
    EVENT_PILE_SPLIT,
)

Invariant = Callable[[Sequence[Card]], bool]

__all__ = [
    "EVENT_PILE_ADD",
    "EVENT_PILE_INSERT",
    "EVENT_PILE_MERGE",
    "EVENT_PILE_PICK",
    "EVENT_PILE_SHUFFLE",
    "EVENT_PILE_SPLIT",
    "EVENT_PILE_TAKE",
    "PILE_EVENTS",
    "TAUTOLOGY",
    "Invariant",
    "Pile",
    "PileError",
    "PileIndexOutOfBoundsError",
    "PileInvariantError",
    "accept_all",
]

logger = logging.getLogger(__name__)


def accept_all(cards: Sequence[Card]) -> bool:
    """Invariant that holds for every sequence of cards."""

    return True


TAUTOLOGY: Final[Invariant] = accept_all


def _check_index_type(operation: str, index: object) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{operation}: index must be an integer, got {index!r}")


class PileError(Exception):
    """Base class for rejected pile operations."""


class PileIndexOutOfBoundsError(PileError, IndexError):
    """Raised when an index does not address a position in the pile."""

    def __init__(self, operation: str, index: int, count: int) -> None:
        super().__init__(f"{operation}: index {index} out of bounds for a pile of {count} card(s)")
        self.operation = operation
        self.index = index
        self.count = count


class PileInvariantError(PileError):
    """Raised when an operation would leave a pile in a state its invariant rejects."""

    def __init__(self, pile: "Pile", operation: str, detail: str = "") -> None:
        message = f"{operation} rejected by the invariant of {pile!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.pile = pile
        self.operation = operation


class Pile(Model):
    """An ordered pile of card references guarded by ``invariant``.

    Every mutation computes the resulting card list from a copy, evaluates the
    invariant against it and only then replaces the pile's cards and publishes
    the operation's event. A rejected mutation raises
    :class:`PileInvariantError` and leaves the pile untouched. The pile does
    not own its cards; the same card may sit in several piles.
    """

    def __init__(
        self,
        invariant: Invariant = TAUTOLOGY,
        initial: Iterable[Card] | Deck = (),
        rng: random.Random | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(PILE_EVENTS)
        self._invariant = invariant
        self._rng = rng if rng is not None else random.Random()
        self._name = name
        cards = list(initial.cards if isinstance(initial, Deck) else initial)
        self._cards: List[Card] = []
        self._require(cards, "create")
        self._cards = cards

    @property
    def invariant(self) -> Invariant:
        return self._invariant

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def count(self) -> int:
        """Return the number of cards in this pile."""

        return len(self._cards)

    @property
    def cards(self) -> List[Card]:
        """Return a copy of the cards, bottom first."""

        return list(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def add(self, card: Card) -> "Pile":
        """Put ``card`` on top of this pile."""

        proposed = self._cards + [card]
        self._require(proposed, "add")
        self._replace(proposed)
        self.publish(EVENT_PILE_ADD, card)
        return self

    def insert(self, card: Card, index: int) -> "Pile":
        """Insert ``card`` at ``index``; ``index == count`` puts it on top."""

        _check_index_type("insert", index)
        if not 0 <= index <= self.count:
            raise PileIndexOutOfBoundsError("insert", index, self.count)
        proposed = list(self._cards)
        proposed.insert(index, card)
        self._require(proposed, "insert")
        self._replace(proposed)
        self.publish(EVENT_PILE_INSERT, card, index)
        return self

    def take(self, index: int | None = None) -> Card:
        """Remove and return the card at ``index``, the top card by default."""

        if index is None:
            index = self.count - 1
        return self._remove("take", EVENT_PILE_TAKE, index)

    def pick(self) -> Card:
        """Remove and return a card chosen uniformly at random."""

        if self.is_empty():
            raise PileIndexOutOfBoundsError("pick", 0, 0)
        return self._remove("pick", EVENT_PILE_PICK, self._rng.randrange(self.count))

    def shuffle(self) -> "Pile":
        """Reorder this pile in a uniformly random permutation."""

        proposed = list(self._cards)
        self._rng.shuffle(proposed)
        self._require(proposed, "shuffle")
        self._replace(proposed)
        self.publish(EVENT_PILE_SHUFFLE)
        return self

    def merge(self, *others: "Pile") -> "Pile":
        """Move the cards of ``others``, in order, on top of this pile.

        This pile must accept the combined cards and every other pile must
        accept becoming empty. Nothing changes unless all of them agree.
        """

        sources = tuple(others)
        if any(other is self for other in sources):
            raise ValueError("cannot merge a pile into itself")
        if len({id(other) for other in sources}) != len(sources):
            raise ValueError("cannot merge the same pile twice")

        proposed = list(self._cards)
        for other in sources:
            proposed.extend(other._cards)
        self._require(proposed, "merge")
        for other in sources:
            other._require([], "merge", "the source pile cannot become empty")

        self._replace(proposed)
        for other in sources:
            other._replace([])
        self.publish(EVENT_PILE_MERGE, self, sources)
        for other in sources:
            other.publish(EVENT_PILE_MERGE, self, sources)
        return self

    def split(self, n: int = 2, invariant: Invariant = TAUTOLOGY) -> List["Pile"]:
        """Deal this pile into ``n`` piles whose sizes differ by at most one.

        Each new pile is dealt its cards one at a time off the top of this
        pile; the first ``count % n`` new piles get one card more than this
        pile keeps. Returns ``[self, *new_piles]``.
        """

        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError("number of piles must be a positive integer")

        size, extra = divmod(self.count, n)
        remainder = list(self._cards)
        portions = [
            [remainder.pop() for _ in range(size + (1 if idx < extra else 0))]
            for idx in range(n - 1)
        ]
        self._require(remainder, "split")
        new_piles = [
            Pile(invariant, portion, rng=random.Random(self._rng.getrandbits(64)))
            for portion in portions
        ]

        self._replace(remainder)
        self.publish(EVENT_PILE_SPLIT, tuple(new_piles))
        return [self, *new_piles]

    def inspect(self, index: int | None = None) -> Card | None:
        """Return the card at ``index`` (top by default) without removing it."""

        if index is None:
            index = self.count - 1
        if 0 <= index < self.count:
            return self._cards[index]
        return None

    def each(self) -> Iterator[Card]:
        """Yield the cards of this pile, bottom first."""

        yield from self._cards

    def for_each(self, callback: Callable[[Card, int], Any]) -> None:
        for index, card in enumerate(self._cards):
            callback(card, index)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return self.each()

    def __repr__(self) -> str:
        label = f"{self._name!r}, " if self._name is not None else ""
        return f"Pile({label}{self.count} card(s))"

    def _remove(self, operation: str, kind: str, index: int) -> Card:
        _check_index_type(operation, index)
        if not 0 <= index < self.count:
            raise PileIndexOutOfBoundsError(operation, index, self.count)
        proposed = list(self._cards)
        card = proposed.pop(index)
        self._require(proposed, operation)
        self._replace(proposed)
        self.publish(kind, card, index)
        return card

    def _require(self, proposed: Sequence[Card], operation: str, detail: str = "") -> None:
        if not self._invariant(tuple(proposed)):
            raise PileInvariantError(self, operation, detail)

    def _replace(self, cards: List[Card]) -> None:
        self._cards = cards
        logger.debug("%r now holds %d card(s)", self, len(cards))

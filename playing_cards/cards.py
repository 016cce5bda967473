"""Card abstractions for the playing cards model."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final, TypeVar

from . import encoding
from .model import Model

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .deck import Deck

EVENT_CARD_TURN: Final[str] = "event:card:turn"

__all__ = [
    "EVENT_CARD_TURN",
    "Card",
    "Color",
    "Rank",
    "Suit",
    "ValidationError",
]


class ValidationError(ValueError):
    """Raised when a card is specified with malformed input."""


class Suit(str, Enum):
    """The four suits, in Unicode block order."""

    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"


class Rank(str, Enum):
    """Ranks in Unicode slot order, including the knight."""

    ACE = "ace"
    TWO = "two"
    THREE = "three"
    FOUR = "four"
    FIVE = "five"
    SIX = "six"
    SEVEN = "seven"
    EIGHT = "eight"
    NINE = "nine"
    TEN = "ten"
    JACK = "jack"
    KNIGHT = "knight"
    QUEEN = "queen"
    KING = "king"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return all ranks in code point slot order."""

        return tuple(cls)

    @classmethod
    def standard(cls) -> tuple["Rank", ...]:
        """Return the thirteen ranks of a standard 52-card deck."""

        return tuple(rank for rank in cls if rank is not cls.KNIGHT)


class Color(str, Enum):
    RED = "red"
    BLACK = "black"


_RED_SUITS: Final[frozenset[Suit]] = frozenset({Suit.HEARTS, Suit.DIAMONDS})
_FACE_RANKS: Final[frozenset[Rank]] = frozenset({Rank.JACK, Rank.KNIGHT, Rank.QUEEN, Rank.KING})

_E = TypeVar("_E", bound=Enum)


def _check(kind: type[_E], value: object) -> _E:
    try:
        return kind(value)
    except ValueError:
        raise ValidationError(f"value {value!r} is not a valid {kind.__name__}") from None


class Card(Model):
    """A playing card that belongs to a deck and can be turned over.

    Suit, rank and color never change after construction; only the face-up
    state does. Jokers are created with :meth:`joker` and have neither suit
    nor rank.
    """

    def __init__(
        self,
        suit: Suit | str,
        rank: Rank | str,
        deck: Deck | None = None,
        face_up: bool = False,
    ) -> None:
        checked_suit = _check(Suit, suit)
        checked_rank = _check(Rank, rank)
        color = Color.RED if checked_suit in _RED_SUITS else Color.BLACK
        self._init_state(checked_suit, checked_rank, color, deck, face_up)

    @classmethod
    def joker(cls, color: Color | str, deck: Deck | None = None, face_up: bool = False) -> "Card":
        """Create a joker of ``color``."""

        checked = _check(Color, color)
        card = cls.__new__(cls)
        card._init_state(None, None, checked, deck, face_up)
        return card

    def _init_state(
        self,
        suit: Suit | None,
        rank: Rank | None,
        color: Color,
        deck: Deck | None,
        face_up: bool,
    ) -> None:
        super().__init__([EVENT_CARD_TURN])
        self._suit = suit
        self._rank = rank
        self._color = color
        self._deck = deck
        self._face_up = bool(face_up)

    @classmethod
    def from_unicode(cls, char: str, deck: Deck | None = None, face_up: bool = False) -> "Card":
        """Create the card whose face is the Unicode character ``char``."""

        if not isinstance(char, str) or len(char) != 1:
            raise ValidationError(f"expected a single Unicode character, got {char!r}")
        try:
            decoded = encoding.decode_code_point(ord(char))
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        if decoded.is_joker:
            return cls.joker(Color(decoded.color), deck, face_up)
        return cls(
            Suit(encoding.SUITS[decoded.suit_idx]),
            Rank(encoding.RANKS[decoded.rank_idx]),
            deck,
            face_up,
        )

    @property
    def suit(self) -> Suit | None:
        return self._suit

    @property
    def rank(self) -> Rank | None:
        return self._rank

    @property
    def color(self) -> Color:
        return self._color

    @property
    def deck(self) -> Deck | None:
        return self._deck

    @property
    def back_color(self) -> str | None:
        """Return the back color of the deck this card belongs to."""

        return None if self._deck is None else self._deck.color

    @property
    def pips(self) -> int:
        """Return the number of pips; 0 for face cards and jokers."""

        if self._rank is None or self._rank in _FACE_RANKS:
            return 0
        return Rank.ordered().index(self._rank) + 1

    @property
    def name(self) -> str:
        if self.is_joker:
            return f"{self._color.value} joker"
        return f"{self._rank.value} of {self._suit.value}"

    @property
    def is_joker(self) -> bool:
        return self._suit is None and self._rank is None

    @property
    def is_red(self) -> bool:
        return self._color is Color.RED

    @property
    def is_black(self) -> bool:
        return self._color is Color.BLACK

    @property
    def is_ace(self) -> bool:
        return self._rank is Rank.ACE

    @property
    def is_jack(self) -> bool:
        return self._rank is Rank.JACK

    @property
    def is_knight(self) -> bool:
        return self._rank is Rank.KNIGHT

    @property
    def is_queen(self) -> bool:
        return self._rank is Rank.QUEEN

    @property
    def is_king(self) -> bool:
        return self._rank is Rank.KING

    @property
    def is_face_card(self) -> bool:
        return self._rank in _FACE_RANKS

    @property
    def is_pips_card(self) -> bool:
        """Return ``True`` for ace through ten."""

        return self.pips > 0

    @property
    def is_spades(self) -> bool:
        return self._suit is Suit.SPADES

    @property
    def is_hearts(self) -> bool:
        return self._suit is Suit.HEARTS

    @property
    def is_diamonds(self) -> bool:
        return self._suit is Suit.DIAMONDS

    @property
    def is_clubs(self) -> bool:
        return self._suit is Suit.CLUBS

    @property
    def is_facing_up(self) -> bool:
        return self._face_up

    @property
    def is_facing_down(self) -> bool:
        return not self._face_up

    def turn(self) -> "Card":
        """Turn this card over and publish :data:`EVENT_CARD_TURN`."""

        self._face_up = not self._face_up
        self.publish(EVENT_CARD_TURN)
        return self

    def to_unicode(self) -> str:
        """Return the Unicode character showing this card's face."""

        if self.is_joker:
            return chr(encoding.encode_joker(self._color.value))
        return chr(
            encoding.encode_standard_card(
                encoding.SUIT_TO_IDX[self._suit.value],
                encoding.RANK_TO_IDX[self._rank.value],
            )
        )

    def to_string(self) -> str:
        """Return the face when facing up, the back of a card otherwise."""

        return self.to_unicode() if self._face_up else encoding.BACK_CHAR

    def equals(self, other: object) -> bool:
        """Compare identity: suit, rank, color and the very same deck."""

        if not isinstance(other, Card):
            return False
        return (
            self._suit is other._suit
            and self._rank is other._rank
            and self._color is other._color
            and self._deck is other._deck
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._suit, self._rank, self._color, id(self._deck)))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        state = "up" if self._face_up else "down"
        return f"Card({self.name}, {state})"

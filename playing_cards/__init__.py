"""Top-level package for the playing cards model."""

from . import cards, deck, encoding, events, model, pile
from .cards import EVENT_CARD_TURN, Card, Color, Rank, Suit, ValidationError
from .deck import Deck
from .events import Observable, UnknownEventError
from .model import EVENT_MODEL_CHANGE, Model
from .pile import TAUTOLOGY, Pile, PileError, PileIndexOutOfBoundsError, PileInvariantError

__all__ = [
    "EVENT_CARD_TURN",
    "EVENT_MODEL_CHANGE",
    "TAUTOLOGY",
    "Card",
    "Color",
    "Deck",
    "Model",
    "Observable",
    "Pile",
    "PileError",
    "PileIndexOutOfBoundsError",
    "PileInvariantError",
    "Rank",
    "Suit",
    "UnknownEventError",
    "ValidationError",
    "cards",
    "deck",
    "encoding",
    "events",
    "model",
    "pile",
]

"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.color import Color, ColorParseError

from .. import encoding
from ..cards import Card

_FALLBACK_BACK_STYLE = "magenta"


def back_style(color: str | None) -> str:
    """Return a Rich style for a deck's back color, or a fallback."""

    if not color:
        return _FALLBACK_BACK_STYLE
    try:
        Color.parse(color.lower())
    except ColorParseError:
        return _FALLBACK_BACK_STYLE
    return color.lower()


def card_glyph(card: Card) -> str:
    """Return the character shown for ``card``."""

    if card.is_facing_up and card.is_joker and card.is_red:
        # The red joker glyph renders poorly in most fonts; draw the black one in red.
        return chr(encoding.BLACK_JOKER_CODE_POINT)
    return card.to_string()


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_facing_down:
        style = back_style(card.back_color)
    else:
        style = "red" if card.is_red else "white"
    return f"[{style}]{card_glyph(card)}[/{style}]"

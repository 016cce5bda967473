"""Unicode code point encoding utilities for playing cards.

Cards live in the Unicode "Playing Cards" block. Each suit owns a block of
sixteen code points: slot 0 is unused (0x1F0A0 is the back of a card), slots
1 to 14 hold ace through king (with the knight in slot 0xC) and slot 0xF
holds a joker in the hearts and diamonds blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

SUITS: Final[list[str]] = ["spades", "hearts", "diamonds", "clubs"]
RANKS: Final[list[str]] = [
    "ace",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "jack",
    "knight",
    "queen",
    "king",
]
SUIT_TO_IDX: Final[dict[str, int]] = {suit: idx for idx, suit in enumerate(SUITS)}
RANK_TO_IDX: Final[dict[str, int]] = {rank: idx for idx, rank in enumerate(RANKS)}

BLOCK_SIZE: Final[int] = 16
BACK_CODE_POINT: Final[int] = 0x1F0A0
BACK_CHAR: Final[str] = chr(BACK_CODE_POINT)
JOKER_SLOT: Final[int] = 0xF
RED_JOKER_CODE_POINT: Final[int] = 0x1F0BF
BLACK_JOKER_CODE_POINT: Final[int] = 0x1F0CF
JOKER_CODE_POINTS: Final[dict[str, int]] = {
    "red": RED_JOKER_CODE_POINT,
    "black": BLACK_JOKER_CODE_POINT,
}

_FIRST_SUIT_BLOCK: Final[int] = BACK_CODE_POINT // BLOCK_SIZE
_JOKER_BLOCKS: Final[dict[int, str]] = {
    code_point // BLOCK_SIZE: color for color, code_point in JOKER_CODE_POINTS.items()
}


@dataclass(frozen=True, slots=True)
class CardDecoding:
    """Typed container describing a decoded card code point."""

    is_joker: bool
    suit_idx: int | None
    rank_idx: int | None
    color: str | None


def encode_standard_card(suit_idx: int, rank_idx: int) -> int:
    """Encode a suit and rank index into a code point."""

    if not 0 <= suit_idx < len(SUITS):
        raise ValueError("suit_idx out of range")
    if not 0 <= rank_idx < len(RANKS):
        raise ValueError("rank_idx out of range")
    return BACK_CODE_POINT + suit_idx * BLOCK_SIZE + rank_idx + 1


def encode_joker(color: str) -> int:
    """Return the code point of the joker with ``color``."""

    try:
        return JOKER_CODE_POINTS[color]
    except KeyError:
        raise ValueError(f"no joker with color '{color}'") from None


def decode_code_point(code_point: int) -> CardDecoding:
    """Decode a code point produced by :func:`encode_standard_card` or :func:`encode_joker`."""

    rank_part = code_point % BLOCK_SIZE
    suit_part = code_point // BLOCK_SIZE

    if rank_part == JOKER_SLOT and suit_part in _JOKER_BLOCKS:
        return CardDecoding(True, None, None, _JOKER_BLOCKS[suit_part])

    suit_idx = suit_part - _FIRST_SUIT_BLOCK
    if 0 < rank_part < JOKER_SLOT and 0 <= suit_idx < len(SUITS):
        return CardDecoding(False, suit_idx, rank_part - 1, None)

    raise ValueError(f"U+{code_point:04X} is not a playing card")


def is_card_code_point(code_point: int) -> bool:
    """Return ``True`` when ``code_point`` decodes to a card face."""

    try:
        decode_code_point(code_point)
    except ValueError:
        return False
    return True

from __future__ import annotations

import pytest

from playing_cards import encoding


def test_encode_standard_card_places_suits_in_unicode_blocks() -> None:
    assert encoding.encode_standard_card(0, 0) == 0x1F0A1  # ace of spades
    assert encoding.encode_standard_card(1, 9) == 0x1F0BA  # ten of hearts
    assert encoding.encode_standard_card(2, 11) == 0x1F0CC  # knight of diamonds
    assert encoding.encode_standard_card(3, 13) == 0x1F0DE  # king of clubs


@pytest.mark.parametrize("suit_idx, rank_idx", [(-1, 0), (4, 0), (0, -1), (0, 14)])
def test_encode_standard_card_validates_indices(suit_idx: int, rank_idx: int) -> None:
    with pytest.raises(ValueError):
        encoding.encode_standard_card(suit_idx, rank_idx)


def test_jokers_sit_outside_the_suit_rank_grid() -> None:
    grid = {
        encoding.encode_standard_card(suit_idx, rank_idx)
        for suit_idx in range(len(encoding.SUITS))
        for rank_idx in range(len(encoding.RANKS))
    }
    assert encoding.encode_joker("red") == 0x1F0BF
    assert encoding.encode_joker("black") == 0x1F0CF
    assert encoding.RED_JOKER_CODE_POINT not in grid
    assert encoding.BLACK_JOKER_CODE_POINT not in grid


def test_encode_joker_rejects_unknown_color() -> None:
    with pytest.raises(ValueError):
        encoding.encode_joker("white")


def test_decode_inverts_every_encoding() -> None:
    for suit_idx in range(len(encoding.SUITS)):
        for rank_idx in range(len(encoding.RANKS)):
            decoded = encoding.decode_code_point(encoding.encode_standard_card(suit_idx, rank_idx))
            assert decoded == encoding.CardDecoding(False, suit_idx, rank_idx, None)
    for color in ("red", "black"):
        decoded = encoding.decode_code_point(encoding.encode_joker(color))
        assert decoded == encoding.CardDecoding(True, None, None, color)


@pytest.mark.parametrize(
    "code_point",
    [
        encoding.BACK_CODE_POINT,
        0x1F0AF,  # rank slot 0xF of the spades block
        0x1F0DF,  # white joker
        0x1F0B0,  # slot 0 of the hearts block
        0x1F0E1,  # trump cards
        ord("A"),
    ],
)
def test_decode_rejects_non_card_code_points(code_point: int) -> None:
    with pytest.raises(ValueError, match=f"U\\+{code_point:04X}"):
        encoding.decode_code_point(code_point)
    assert not encoding.is_card_code_point(code_point)


def test_back_char_is_the_card_back() -> None:
    assert encoding.BACK_CHAR == "\U0001F0A0"

from __future__ import annotations

from typer.testing import CliRunner

from playing_cards.cards import Card, Color, Rank, Suit
from playing_cards.cli.main import DealConfig, _deal, app
from playing_cards.cli.render import back_style, card_glyph, format_card
from playing_cards.deck import Deck
from playing_cards.encoding import BACK_CHAR, BLACK_JOKER_CODE_POINT

runner = CliRunner()


def test_deal_splits_a_shuffled_deck() -> None:
    piles = _deal(DealConfig(piles=4, seed=1234))

    assert len(piles) == 4
    assert [pile.count for pile in piles] == [13, 13, 13, 13]
    assert all(card.is_facing_up for pile in piles for card in pile.each())
    names = {card.name for pile in piles for card in pile.each()}
    assert len(names) == 52


def test_deal_is_reproducible_with_a_seed() -> None:
    first = _deal(DealConfig(piles=2, seed=99, jokers=True))
    second = _deal(DealConfig(piles=2, seed=99, jokers=True))

    assert [[c.name for c in pile.cards] for pile in first] == [
        [c.name for c in pile.cards] for pile in second
    ]


def test_format_card_uses_back_color_when_face_down() -> None:
    card = Card(Suit.HEARTS, Rank.ACE, Deck("blue"))
    assert format_card(card) == f"[blue]{BACK_CHAR}[/blue]"
    card.turn()
    assert format_card(card) == "[red]\U0001F0B1[/red]"


def test_back_style_falls_back_for_unknown_colors() -> None:
    assert back_style("navy_blue") == "navy_blue"
    assert back_style("not a color") == "magenta"
    assert back_style(None) == "magenta"


def test_red_joker_is_drawn_with_the_black_joker_glyph() -> None:
    joker = Card.joker(Color.RED, face_up=True)
    assert card_glyph(joker) == chr(BLACK_JOKER_CODE_POINT)
    assert format_card(joker) == f"[red]{chr(BLACK_JOKER_CODE_POINT)}[/red]"


def test_show_command_prints_every_suit() -> None:
    result = runner.invoke(app, ["show", "--color", "green"])

    assert result.exit_code == 0
    for label in ("Spades", "Hearts", "Diamonds", "Clubs", "Jokers"):
        assert label in result.output
    assert "\U0001F0A1" in result.output


def test_deal_command_renders_piles() -> None:
    result = runner.invoke(app, ["deal", "--piles", "3", "--seed", "7"])

    assert result.exit_code == 0
    assert "stock" in result.output
    assert "P2" in result.output


def test_deal_command_reports_rejected_deal() -> None:
    result = runner.invoke(app, ["deal", "--piles", "2", "--seed", "7", "--max-size", "3"])

    assert result.exit_code == 1
    assert "Deal rejected" in result.output

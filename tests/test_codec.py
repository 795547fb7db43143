from __future__ import annotations

from pathlib import Path

import pytest

from wardeck import codec
from wardeck.cards import FaceCard, JokerCard, PlayingCard, Suit
from wardeck.errors import EmptyDeck, ErrorKind, MalformedInput, SinkUnavailable, SourceUnavailable


def test_parse_example_deck() -> None:
    deck = codec.parse_deck(["Hearts,5", "Joker,Red", "Spades,12"])

    cards = list(deck)
    assert deck.size() == 3
    assert isinstance(cards[0], PlayingCard) and cards[0].suit is Suit.HEARTS and cards[0].rank == 5
    assert isinstance(cards[1], JokerCard) and cards[1].color == "Red"
    assert isinstance(cards[2], FaceCard) and cards[2].suit is Suit.SPADES and cards[2].rank == 12


def test_blank_lines_and_whitespace_are_tolerated() -> None:
    text = "\nHearts,5\r\n   \n  Clubs , 10  \n\nJoker, Big Red\n"
    deck = codec.loads_deck(text)

    assert [card.render() for card in deck] == ["Hearts,5", "Clubs,10", "Joker,Big Red"]


def test_rank_boundary_selects_card_kind() -> None:
    deck = codec.parse_deck(["Diamonds,10", "Diamonds,11"])
    ten, jack = list(deck)
    assert type(ten) is PlayingCard
    assert type(jack) is FaceCard


def test_joker_label_may_contain_separator() -> None:
    card = codec.parse_line("Joker,Red,Large")
    assert isinstance(card, JokerCard)
    assert card.color == "Red,Large"


@pytest.mark.parametrize(
    "line",
    [
        "Hearts",
        ",5",
        "Hearts,",
        "Hearts,Queen",
        "Hearts,0",
        "Hearts,14",
        "Stars,4",
        "Joker,",
        "Hearts,5.5",
        "Hearts,1_0",
        "Hearts,+5",
        "Hearts,-3",
        "Hearts,\u0665",
        "Hearts,\uff15",
    ],
)
def test_malformed_lines_fail_the_whole_parse(line: str) -> None:
    with pytest.raises(MalformedInput) as excinfo:
        codec.parse_deck(["Clubs,2", line, "Clubs,3"])

    assert excinfo.value.kind is ErrorKind.MALFORMED_INPUT
    assert excinfo.value.line_number == 2


def test_only_blank_lines_is_empty_deck() -> None:
    with pytest.raises(EmptyDeck) as excinfo:
        codec.loads_deck("\n\n   \n")
    assert excinfo.value.kind is ErrorKind.EMPTY_DECK


def test_read_deck_from_file(tmp_path: Path) -> None:
    path = tmp_path / "deck.csv"
    path.write_text("Hearts,1\nJoker,Red\n", encoding="utf-8")

    deck = codec.read_deck(path)

    assert [card.value for card in deck] == [1, 14]


def test_read_missing_file_is_source_unavailable(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable) as excinfo:
        codec.read_deck(tmp_path / "missing.csv")
    assert excinfo.value.kind is ErrorKind.SOURCE_UNAVAILABLE


def test_load_deck_returns_result_values(tmp_path: Path) -> None:
    good = tmp_path / "good.csv"
    good.write_text("Spades,13\n", encoding="utf-8")
    bad = tmp_path / "bad.csv"
    bad.write_text("Spades\n", encoding="utf-8")

    loaded = codec.load_deck(good)
    failed = codec.load_deck(bad)
    missing = codec.load_deck(tmp_path / "nope.csv")

    assert loaded.ok and loaded.unwrap().size() == 1
    assert not failed.ok and isinstance(failed.error, MalformedInput)
    assert isinstance(missing.error, SourceUnavailable)
    with pytest.raises(MalformedInput):
        failed.unwrap()


def test_dump_and_parse_round_trip(tmp_path: Path) -> None:
    original = codec.loads_deck("Hearts,5\n\nJoker,Red\nSpades,12\nClubs,1\n")

    path = tmp_path / "out.csv"
    codec.write_deck(original, path)
    restored = codec.read_deck(path)

    assert path.read_text(encoding="utf-8") == "Hearts,5\nJoker,Red\nSpades,12\nClubs,1\n"
    assert [type(card) for card in restored] == [type(card) for card in original]
    assert [card.value for card in restored] == [card.value for card in original]
    assert [card.render() for card in restored] == [card.render() for card in original]


def test_write_deck_to_missing_directory_is_sink_unavailable(tmp_path: Path) -> None:
    deck = codec.loads_deck("Hearts,5\n")
    with pytest.raises(SinkUnavailable):
        codec.write_deck(deck, tmp_path / "missing" / "out.csv")


def test_custom_joker_tag() -> None:
    fmt = codec.DeckFormat(joker_tag="Wild")
    deck = codec.parse_deck(["Wild,Blue", "Hearts,2"], fmt)
    assert isinstance(next(iter(deck)), JokerCard)
    with pytest.raises(MalformedInput):
        codec.parse_deck(["Joker,Red"], fmt)


def test_undecodable_deck_file_is_malformed(tmp_path: Path) -> None:
    path = tmp_path / "binary.csv"
    path.write_bytes(b"\xff\xfe,5\n")

    with pytest.raises(MalformedInput):
        codec.read_deck(path)

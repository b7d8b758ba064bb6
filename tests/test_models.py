"""Tests for the Card value type and result models."""

import pytest

from pontifex.core.errors import DeckIntegrityError
from pontifex.core.models import (
    JOKER_A,
    JOKER_B,
    Card,
    CipherMode,
    CipherResult,
    Joker,
    standard_deck,
)


class TestCard:

    @pytest.mark.parametrize("code,value", [
        ("AC", 1), ("2D", 2), ("9H", 9), ("10S", 10),
        ("JC", 11), ("QD", 12), ("KH", 13),
    ])
    def test_rank_value_ignores_suit(self, code, value):
        assert Card(code).value == value

    def test_jokers_are_worth_53(self):
        assert JOKER_A.value == 53
        assert JOKER_B.value == 53
        assert JOKER_A.is_joker and JOKER_B.is_joker

    def test_rank_and_suit(self):
        card = Card("10H")
        assert card.rank == "10"
        assert card.suit == "H"
        assert not card.is_joker
        assert JOKER_A.rank is None and JOKER_A.suit is None

    def test_equality_is_by_value(self):
        assert Card("QS") == Card("QS")
        assert Card("QS") != Card("QH")
        assert len({Card("QS"), Card("QS")}) == 1
        assert JOKER_A != JOKER_B

    @pytest.mark.parametrize("code", ["", "1C", "11C", "AX", "10", "JOKER_C", "ac", 12])
    def test_unknown_codes_rejected(self, code):
        with pytest.raises(DeckIntegrityError):
            Card(code)

    def test_str_is_code(self):
        assert str(Card("7D")) == "7D"

    def test_joker_steps(self):
        assert Joker.A.steps == 1
        assert Joker.B.steps == 2
        assert Card.joker(Joker.B) == JOKER_B


class TestStandardDeck:

    def test_order(self):
        deck = standard_deck()
        assert len(deck) == 54
        assert deck[0] == Card("AC")
        assert deck[12] == Card("KC")
        assert deck[13] == Card("AD")
        assert deck[51] == Card("KS")
        assert deck[52:] == [JOKER_A, JOKER_B]

    def test_all_distinct(self):
        assert len(set(standard_deck())) == 54

    def test_returns_fresh_list(self):
        first = standard_deck()
        first.pop()
        assert len(standard_deck()) == 54


class TestCipherResult:

    def test_json_dump(self):
        result = CipherResult(
            mode=CipherMode.ENCRYPT,
            input_text="do not",
            normalized_text="DONOT",
            output_text="HAURX",
            keystream=[4, 12, 7, 3, 4],
            rounds=5,
        )
        dumped = result.model_dump(mode="json")
        assert dumped["mode"] == "encrypt"
        assert dumped["keystream"] == [4, 12, 7, 3, 4]
        assert dumped["skipped_rounds"] == 0
        assert result.length == 5

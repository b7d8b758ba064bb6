"""Tests for the deck engine: validation, manipulations and keystream."""

import pytest
from hypothesis import given, settings

from pontifex.core.deck import DeckEngine, validate_deck
from pontifex.core.errors import DeckIntegrityError
from pontifex.core.models import JOKER_A, JOKER_B, Card, Joker, standard_deck

from tests.vectors import PINNED_KEYSTREAM, deck_with, decks


# ── Validation ──────────────────────────────────────────────────────

class TestValidation:

    def test_standard_deck_is_valid(self, standard_cards):
        validate_deck(standard_cards)
        assert len(DeckEngine(standard_cards)) == 54

    def test_missing_joker_b_rejected(self, standard_cards):
        cards = [c for c in standard_cards if c != JOKER_B]
        with pytest.raises(DeckIntegrityError, match="54"):
            DeckEngine(cards)

    def test_duplicate_rejected(self, standard_cards):
        cards = standard_cards[:-1] + [Card("AC")]
        with pytest.raises(DeckIntegrityError, match="Duplicate cards in deck: AC"):
            DeckEngine(cards)

    def test_too_many_cards_rejected(self, standard_cards):
        with pytest.raises(DeckIntegrityError):
            DeckEngine(standard_cards + [Card("AC")])

    def test_accepts_codes(self, standard_cards):
        engine = DeckEngine([c.code for c in standard_cards])
        assert engine.cards == tuple(standard_cards)

    def test_unknown_code_rejected(self, standard_cards):
        codes = [c.code for c in standard_cards]
        codes[0] = "ZZ"
        with pytest.raises(DeckIntegrityError, match="ZZ"):
            DeckEngine(codes)

    def test_integrity_error_is_value_error(self):
        with pytest.raises(ValueError):
            DeckEngine([])

    def test_input_list_not_mutated(self, standard_cards):
        original = list(standard_cards)
        DeckEngine(standard_cards).keystream(5)
        assert standard_cards == original


# ── Move joker ──────────────────────────────────────────────────────

class TestMoveJoker:

    def test_one_step_swaps_with_next_card(self, standard_cards):
        cards = list(standard_cards)
        cards.remove(JOKER_A)
        cards.insert(10, JOKER_A)
        engine = DeckEngine(cards)

        engine.move_joker(Joker.A)

        expected = list(cards)
        expected[10], expected[11] = expected[11], expected[10]
        assert list(engine.cards) == expected

    def test_two_steps(self, standard_cards):
        cards = list(standard_cards)
        cards.remove(JOKER_B)
        cards.insert(5, JOKER_B)
        engine = DeckEngine(cards)

        engine.move_joker(Joker.B)

        assert engine.cards.index(JOKER_B) == 7
        assert engine.cards[5:7] == tuple(cards[6:8])

    def test_second_to_last_wraps_to_top(self, standard_cards):
        engine = DeckEngine(standard_cards)  # JOKER_A at index 52
        engine.move_joker(Joker.A)
        assert engine.cards[0] == JOKER_A
        assert engine.cards[1] == Card("AC")
        assert engine.cards[-1] == JOKER_B

    def test_bottom_joker_b_lands_below_second_card(self, standard_cards):
        engine = DeckEngine(standard_cards)  # JOKER_B at index 53
        engine.move_joker(Joker.B)
        assert engine.cards[:3] == (Card("AC"), Card("2C"), JOKER_B)
        assert engine.cards[-1] == JOKER_A

    def test_bottom_joker_a_lands_below_top_card(self, standard_cards):
        cards = [c for c in standard_cards if c != JOKER_A] + [JOKER_A]
        engine = DeckEngine(cards)
        engine.move_joker(Joker.A)
        assert engine.cards[:2] == (Card("AC"), JOKER_A)

    def test_explicit_steps(self):
        engine = DeckEngine(deck_with([JOKER_A]))
        engine.move_joker(Joker.A, steps=3)
        assert engine.cards.index(JOKER_A) == 3


# ── Triple cut ──────────────────────────────────────────────────────

class TestTripleCut:

    def test_jokers_at_bottom(self, standard_cards):
        engine = DeckEngine(standard_cards)
        engine.triple_cut()
        assert engine.cards[:2] == (JOKER_A, JOKER_B)
        assert list(engine.cards[2:]) == standard_cards[:52]

    def test_segments_swap_around_joker_span(self):
        top = [Card("AC")]
        span = [JOKER_B, Card("2C"), JOKER_A]
        cards = deck_with(top + span)
        engine = DeckEngine(cards)

        engine.triple_cut()

        bottom = cards[4:]
        assert list(engine.cards) == bottom + span + top

    def test_applied_twice_restores_fixture(self):
        cards = deck_with([Card("5H"), Card("6H"), JOKER_A, Card("AC")], last=JOKER_B)
        engine = DeckEngine(cards)

        engine.triple_cut()
        assert engine.cards[0] == JOKER_A
        assert engine.cards[-2:] == (Card("5H"), Card("6H"))

        engine.triple_cut()
        assert list(engine.cards) == cards

    def test_no_outer_cards_is_identity(self):
        cards = [JOKER_A] + [c for c in standard_deck() if not c.is_joker] + [JOKER_B]
        engine = DeckEngine(cards)
        engine.triple_cut()
        assert list(engine.cards) == cards


# ── Count cut ───────────────────────────────────────────────────────

class TestCountCut:

    def test_cuts_by_bottom_value(self):
        cards = deck_with([], last=Card("3C"))
        engine = DeckEngine(cards)

        engine.count_cut()

        assert list(engine.cards) == cards[3:-1] + cards[:3] + [Card("3C")]

    def test_king_cuts_thirteen(self):
        cards = deck_with([], last=Card("KD"))
        engine = DeckEngine(cards)
        engine.count_cut()
        assert engine.cards[-14:-1] == tuple(cards[:13])

    def test_joker_at_bottom_is_identity(self, standard_cards):
        engine = DeckEngine(standard_cards)
        engine.count_cut()
        assert list(engine.cards) == standard_cards

    @given(decks)
    def test_bottom_card_never_moves(self, cards):
        engine = DeckEngine(cards)
        engine.count_cut()
        assert engine.cards[-1] == cards[-1]
        assert sorted(engine.cards, key=str) == sorted(cards, key=str)


# ── Output card ─────────────────────────────────────────────────────

class TestExtractOutput:

    def test_reads_card_at_top_value(self, standard_cards):
        # AC on top -> look one card down -> 2C
        assert DeckEngine(standard_cards).extract_output() == 2

    def test_joker_output_yields_nothing(self):
        engine = DeckEngine(deck_with([Card("2C"), Card("AC"), JOKER_A]))
        assert engine.extract_output() is None

    def test_joker_on_top_reads_last_card(self):
        engine = DeckEngine(deck_with([JOKER_B], last=Card("5H")))
        assert engine.extract_output() == 5

    def test_does_not_change_deck(self, standard_cards):
        engine = DeckEngine(standard_cards)
        engine.extract_output()
        assert list(engine.cards) == standard_cards

    @given(decks)
    @settings(max_examples=50, deadline=None)
    def test_values_stay_in_range(self, cards):
        engine = DeckEngine(cards)
        for _ in range(20):
            value = engine.step()
            if value is not None:
                assert 1 <= value <= 26


# ── Keystream ───────────────────────────────────────────────────────

class TestKeystream:

    def test_pinned_ordered_deck(self):
        engine = DeckEngine.standard()
        assert engine.keystream(10) == PINNED_KEYSTREAM
        assert engine.rounds == 10
        assert engine.skipped_rounds == 0

    def test_first_round_state(self):
        engine = DeckEngine.standard()
        assert engine.step() == 4
        expected = [Card(r + s) for s in "CDHS" for r in
                    ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")]
        assert list(engine.cards) == expected[1:] + [JOKER_A, expected[0], JOKER_B]

    def test_continues_across_calls(self):
        engine = DeckEngine.standard()
        assert engine.keystream(4) + engine.keystream(6) == PINNED_KEYSTREAM

    def test_stream_iterator(self):
        stream = DeckEngine.standard().stream()
        assert [next(stream) for _ in range(10)] == PINNED_KEYSTREAM

    def test_zero_length_leaves_deck_alone(self, standard_cards):
        engine = DeckEngine(standard_cards)
        assert engine.keystream(0) == []
        assert engine.rounds == 0
        assert list(engine.cards) == standard_cards

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError):
            DeckEngine.standard().keystream(-1)

    def test_copy_is_independent(self):
        engine = DeckEngine.standard()
        engine.keystream(3)
        clone = engine.copy()
        assert clone.keystream(7) == engine.keystream(7) == PINNED_KEYSTREAM[3:]

    @given(decks)
    @settings(max_examples=50, deadline=None)
    def test_deterministic_on_copies(self, cards):
        assert DeckEngine(cards).keystream(25) == DeckEngine(cards).keystream(25)

    @given(decks)
    @settings(max_examples=50, deadline=None)
    def test_round_accounting(self, cards):
        engine = DeckEngine(cards)
        values = engine.keystream(30)
        assert len(values) == 30
        assert engine.rounds == 30 + engine.skipped_rounds
        assert len(set(engine.cards)) == 54

"""Shared fixtures for the Pontifex test suite."""

import json

import pytest

from pontifex.core.models import JOKER_B, standard_deck


@pytest.fixture
def standard_cards():
    return standard_deck()


@pytest.fixture
def deck_file(tmp_path):
    path = tmp_path / "deck.json"
    path.write_text(json.dumps([card.code for card in standard_deck()]))
    return path


@pytest.fixture
def short_deck_file(tmp_path):
    """53 entries, JOKER_B missing."""
    path = tmp_path / "short.json"
    codes = [card.code for card in standard_deck() if card != JOKER_B]
    path.write_text(json.dumps(codes))
    return path

"""
Deck File Parser
=================

Reads and writes deck files and produces freshly shuffled decks.

A deck file is a JSON array of card codes, top card first::

    ["AC", "2C", ..., "KS", "JOKER_A", "JOKER_B"]

Supported codes:
    - Ranked cards: rank ``A 2-10 J Q K`` followed by suit ``C D H S``
    - Jokers: ``JOKER_A`` and ``JOKER_B``
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Optional, Sequence

from pontifex.core.deck import validate_deck
from pontifex.core.errors import DeckFileError, DeckIntegrityError
from pontifex.core.models import Card, standard_deck


def parse_deck(data: Any) -> list[Card]:
    """Turn decoded JSON into a validated list of cards.

    Raises:
        DeckIntegrityError: If *data* is not an array of valid card codes
            forming a complete deck.
    """
    if not isinstance(data, list):
        raise DeckIntegrityError(
            f"Deck file must hold a JSON array, got {type(data).__name__}"
        )
    cards = [Card(code) for code in data]
    validate_deck(cards)
    return cards


def load_deck_file(path: str | Path) -> list[Card]:
    """Read the deck stored at *path*.

    Raises:
        DeckFileError: If the file cannot be read or is not valid JSON.
        DeckIntegrityError: If the contents do not form a valid deck.
    """
    deck_path = Path(path)
    try:
        raw = deck_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or exc
        raise DeckFileError(f"Cannot read deck file {deck_path}: {reason}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DeckFileError(f"Deck file {deck_path} is not valid JSON: {exc}") from exc

    return parse_deck(data)


def write_deck_file(path: str | Path, cards: Sequence[Card]) -> Path:
    """Write *cards* to *path* as a JSON array and return the path.

    Raises:
        DeckFileError: If the directory or file cannot be written.
    """
    deck_path = Path(path)
    try:
        deck_path.parent.mkdir(parents=True, exist_ok=True)
        deck_path.write_text(json.dumps([card.code for card in cards]), encoding="utf-8")
    except OSError as exc:
        raise DeckFileError(
            f"Cannot write deck file {deck_path}: {exc.strerror or exc}"
        ) from exc
    return deck_path


def shuffled_deck(rng: Optional[random.Random] = None) -> list[Card]:
    """Return a shuffled standard deck.

    Uses the operating system's CSPRNG unless a seeded *rng* is given.
    """
    cards = standard_deck()
    (rng or random.SystemRandom()).shuffle(cards)
    return cards

"""
Deck Engine
============

The keystream generator of the Solitaire cipher. A :class:`DeckEngine`
owns one ordered 54-card deck and advances it through rounds of four
deterministic manipulations:

1. Move JOKER_A one card down, JOKER_B two cards down (circularly)
2. Triple cut around the two jokers
3. Count cut by the value of the bottom card
4. Read the output card

Each round changes the deck; a round whose output card is a joker yields
no keystream value and the next round simply continues from the new
ordering.

The deck invariant (54 distinct cards, both jokers) is checked once when
the engine is built, so the manipulations can index the deck directly.

References:
    - Schneier, B. (1999). The Solitaire Encryption Algorithm.
      https://www.schneier.com/academic/solitaire/
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Iterator, Optional, Sequence

from pontifex.core.errors import DeckIntegrityError
from pontifex.core.models import (
    ALPHABET_SIZE,
    DECK_SIZE,
    JOKER_A,
    JOKER_B,
    Card,
    Joker,
    standard_deck,
)

logger = logging.getLogger("pontifex.deck")


def validate_deck(cards: Sequence[Card]) -> None:
    """Check the deck invariant.

    Raises:
        DeckIntegrityError: If the deck does not hold exactly 54 distinct
            cards including both jokers.
    """
    if len(cards) != DECK_SIZE:
        raise DeckIntegrityError(
            f"Deck must contain exactly {DECK_SIZE} cards, got {len(cards)}"
        )

    duplicates = sorted(str(card) for card, n in Counter(cards).items() if n > 1)
    if duplicates:
        raise DeckIntegrityError(f"Duplicate cards in deck: {', '.join(duplicates)}")

    missing = [str(j) for j in (JOKER_A, JOKER_B) if j not in cards]
    if missing:
        raise DeckIntegrityError(f"Deck is missing {', '.join(missing)}")


class DeckEngine:
    """Deterministic deck-state machine producing keystream values.

    Usage::

        engine = DeckEngine.standard()
        engine.keystream(5)      # [4, 12, 7, 3, 4]

    Attributes:
        rounds: Rounds executed since construction.
        skipped_rounds: Rounds that yielded no value.
    """

    def __init__(self, cards: Iterable[Card | str]) -> None:
        self._cards: list[Card] = [
            card if isinstance(card, Card) else Card(card) for card in cards
        ]
        validate_deck(self._cards)
        self.rounds = 0
        self.skipped_rounds = 0

    @classmethod
    def standard(cls) -> DeckEngine:
        """Engine over the ordered deck with both jokers at the bottom."""
        return cls(standard_deck())

    # ------------------------------------------------------------------ #
    #  Inspection
    # ------------------------------------------------------------------ #

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the current ordering, top card first."""
        return tuple(self._cards)

    def copy(self) -> DeckEngine:
        """Independent engine starting from the current ordering."""
        return DeckEngine(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"DeckEngine(top={self._cards[0]}, bottom={self._cards[-1]}, rounds={self.rounds})"

    def _index_of(self, card: Card) -> int:
        try:
            return self._cards.index(card)
        except ValueError:
            raise DeckIntegrityError(f"{card} is missing from the deck") from None

    # ------------------------------------------------------------------ #
    #  Manipulations
    # ------------------------------------------------------------------ #

    def move_joker(self, joker: Joker, steps: Optional[int] = None) -> None:
        """Move *joker* down by *steps* cards, wrapping past the bottom.

        The new index is computed on the deck with the joker removed, so a
        joker at the bottom moving one step lands just below the top card.
        """
        if steps is None:
            steps = joker.steps
        card = Card.joker(joker)
        old = self._index_of(card)
        del self._cards[old]
        new = (old + steps) % len(self._cards)
        self._cards.insert(new, card)

    def triple_cut(self) -> None:
        """Swap the cards above the first joker with those below the second."""
        lo, hi = sorted((self._index_of(JOKER_A), self._index_of(JOKER_B)))
        deck = self._cards
        self._cards = deck[hi + 1:] + deck[lo:hi + 1] + deck[:lo]

    def count_cut(self) -> None:
        """Cut as many cards from the top as the bottom card's value and put
        them just above the bottom card."""
        bottom = self._cards[-1]
        count = bottom.value
        if count >= len(self._cards):
            return
        deck = self._cards
        self._cards = deck[count:-1] + deck[:count] + [bottom]

    def extract_output(self) -> Optional[int]:
        """Value of the card the top card points at, or ``None`` for a joker."""
        top_value = self._cards[0].value
        if top_value >= len(self._cards):
            return None
        card = self._cards[top_value]
        if card.is_joker:
            return None
        value = card.value
        # Ranks never exceed 13; kept for value schemes that count suits
        if value > ALPHABET_SIZE:
            value -= ALPHABET_SIZE
        return value

    # ------------------------------------------------------------------ #
    #  Keystream
    # ------------------------------------------------------------------ #

    def step(self) -> Optional[int]:
        """Run one full round and return its output, if any."""
        self.move_joker(Joker.A)
        self.move_joker(Joker.B)
        self.triple_cut()
        self.count_cut()
        value = self.extract_output()
        self.rounds += 1
        if value is None:
            self.skipped_rounds += 1
            logger.debug("Round %d: output card is a joker, skipped", self.rounds)
        return value

    def stream(self) -> Iterator[int]:
        """Yield keystream values indefinitely, advancing the deck."""
        while True:
            value = self.step()
            if value is not None:
                yield value

    def keystream(self, length: int) -> list[int]:
        """Generate exactly *length* keystream values.

        Raises:
            ValueError: If *length* is negative.
        """
        if length < 0:
            raise ValueError(f"Keystream length must be >= 0, got {length}")
        values: list[int] = []
        start = self.rounds
        while len(values) < length:
            value = self.step()
            if value is not None:
                values.append(value)
        logger.debug(
            "Generated %d keystream values in %d rounds",
            length, self.rounds - start,
        )
        return values

"""
Pontifex Core Data Models
==========================

Value types for the deck (:class:`Card`) and pydantic models for the
results the cipher produces.

Cards are written the way they appear in deck files: a rank followed by a
suit letter (``"AC"``, ``"10H"``, ``"KS"``) or one of the two joker
tokens ``"JOKER_A"`` / ``"JOKER_B"``.

References:
    - Schneier, B. (1999). The Solitaire Encryption Algorithm.
      https://www.schneier.com/academic/solitaire/
    - Stephenson, N. (1999). Cryptonomicon. Avon Books. (Appendix.)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from pontifex.core.errors import DeckIntegrityError


# ===================================================================== #
#  Card constants
# ===================================================================== #

RANKS: tuple[str, ...] = (
    "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K",
)
SUITS: tuple[str, ...] = ("C", "D", "H", "S")

RANK_VALUES: dict[str, int] = {rank: i for i, rank in enumerate(RANKS, start=1)}

JOKER_VALUE = 53
DECK_SIZE = 54
ALPHABET_SIZE = 26


class Joker(str, enum.Enum):
    """The two distinguishable jokers and the distance each one moves."""

    A = "JOKER_A"
    B = "JOKER_B"

    @property
    def steps(self) -> int:
        return 1 if self is Joker.A else 2


# ===================================================================== #
#  Card
# ===================================================================== #


@dataclass(frozen=True, slots=True)
class Card:
    """An immutable playing card identified by its deck-file code.

    Raises:
        DeckIntegrityError: If *code* is neither ``<rank><suit>`` nor a
            joker token.
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise DeckIntegrityError(f"Card code must be a string, got {self.code!r}")
        if self.code in (Joker.A.value, Joker.B.value):
            return
        rank, suit = self.code[:-1], self.code[-1:]
        if rank not in RANK_VALUES or suit not in SUITS:
            raise DeckIntegrityError(f"Unknown card code: {self.code!r}")

    @classmethod
    def joker(cls, which: Joker) -> Card:
        return cls(which.value)

    @property
    def is_joker(self) -> bool:
        return self.code in (Joker.A.value, Joker.B.value)

    @property
    def rank(self) -> Optional[str]:
        """Rank symbol, or ``None`` for a joker."""
        return None if self.is_joker else self.code[:-1]

    @property
    def suit(self) -> Optional[str]:
        """Suit letter, or ``None`` for a joker."""
        return None if self.is_joker else self.code[-1]

    @property
    def value(self) -> int:
        """Card value: A=1 ... K=13 regardless of suit, 53 for a joker."""
        if self.is_joker:
            return JOKER_VALUE
        return RANK_VALUES[self.code[:-1]]

    def __str__(self) -> str:
        return self.code


JOKER_A = Card.joker(Joker.A)
JOKER_B = Card.joker(Joker.B)


def standard_deck() -> list[Card]:
    """Return the ordered deck: clubs, diamonds, hearts, spades, each A..K,
    followed by JOKER_A and JOKER_B."""
    cards = [Card(rank + suit) for suit in SUITS for rank in RANKS]
    cards.extend([JOKER_A, JOKER_B])
    return cards


# ===================================================================== #
#  Results
# ===================================================================== #


class CipherMode(str, enum.Enum):
    """Direction of the letter arithmetic."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherResult(BaseModel):
    """Outcome of one encrypt or decrypt run.

    Attributes:
        mode: Encrypt or decrypt.
        input_text: Text as supplied by the caller.
        normalized_text: Uppercased letters actually processed.
        output_text: Resulting letters, ungrouped.
        keystream: Keystream values consumed, one per letter.
        rounds: Deck rounds executed to produce the keystream.
        skipped_rounds: Rounds that produced no keystream value.
        deck_source: Where the starting deck came from.
    """

    mode: CipherMode
    input_text: str
    normalized_text: str
    output_text: str
    keystream: list[int] = Field(default_factory=list)
    rounds: int = 0
    skipped_rounds: int = 0
    deck_source: str = "<memory>"

    @property
    def length(self) -> int:
        return len(self.output_text)

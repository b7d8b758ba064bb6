"""
Pontifex Core Module
=====================

Deck engine, cipher processor, data models and errors. The
file-backed facade lives in :mod:`pontifex.core.engine`.
"""

from pontifex.core.deck import DeckEngine, validate_deck
from pontifex.core.errors import (
    DeckFileError,
    DeckIntegrityError,
    MalformedInputError,
    PontifexError,
)
from pontifex.core.models import (
    Card,
    CipherMode,
    CipherResult,
    Joker,
    standard_deck,
)
from pontifex.core.processor import CipherProcessor, group_letters, normalize

__all__ = [
    "Card",
    "CipherMode",
    "CipherProcessor",
    "CipherResult",
    "DeckEngine",
    "DeckFileError",
    "DeckIntegrityError",
    "Joker",
    "MalformedInputError",
    "PontifexError",
    "group_letters",
    "normalize",
    "standard_deck",
    "validate_deck",
]

"""
Pontifex Engine
================

Facade used by the CLI. Loads decks from disk, builds a fresh
:class:`DeckEngine` for every run, drives the :class:`CipherProcessor`
and logs each step.

Loading the deck anew for each call matters: the deck advances while a
message is processed, so a decrypt must start from the same file state
the encrypt started from.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

from shared.config import PontifexConfig
from shared.logger import PontifexLogger

from pontifex.core.deck import DeckEngine
from pontifex.core.models import Card, CipherMode, CipherResult
from pontifex.core.processor import CipherProcessor
from pontifex.parsers.deck_parser import (
    load_deck_file,
    shuffled_deck,
    write_deck_file,
)


class PontifexEngine:
    """Runs encrypt / decrypt / generate requests.

    Usage::

        engine = PontifexEngine()
        engine.generate_deck(Path("deck.json"))
        result = engine.encrypt("ATTACK AT DAWN", Path("deck.json"))
        engine.decrypt(result.output_text, Path("deck.json")).output_text

    Attributes:
        config: Active configuration.
        logger: Logger bound to the ``engine`` component.
    """

    def __init__(
        self,
        config: Optional[PontifexConfig] = None,
        logger: Optional[PontifexLogger] = None,
    ) -> None:
        self.config = config or PontifexConfig()
        self.logger = logger or PontifexLogger.from_config(
            "engine", self.config.global_settings
        )

    # ------------------------------------------------------------------ #
    #  Decks
    # ------------------------------------------------------------------ #

    def load_deck(self, path: str | Path) -> DeckEngine:
        """Load and validate the deck at *path*."""
        cards = load_deck_file(path)
        self.logger.info("Loaded deck from %s (top card %s)", path, cards[0])
        return DeckEngine(cards)

    def generate_deck(
        self,
        path: str | Path,
        rng: Optional[random.Random] = None,
    ) -> list[Card]:
        """Shuffle a new deck and write it to *path*."""
        cards = shuffled_deck(rng)
        written = write_deck_file(path, cards)
        self.logger.info("Generated random deck saved to %s", written)
        return cards

    # ------------------------------------------------------------------ #
    #  Cipher
    # ------------------------------------------------------------------ #

    def run(self, text: str, mode: CipherMode, deck_path: str | Path) -> CipherResult:
        """Process *text* with a deck freshly loaded from *deck_path*."""
        with self.logger.operation(mode.value):
            deck = self.load_deck(deck_path)
            processor = CipherProcessor(
                deck,
                policy=self.config.cipher.non_alpha_policy,
                source=str(deck_path),
            )
            with self.logger.timed(f"{mode.value} {len(text)} chars"):
                result = processor.run(text, mode)
            self.logger.info(
                "%d letters, %d rounds (%d skipped)",
                result.length, result.rounds, result.skipped_rounds,
            )
        return result

    def encrypt(self, plaintext: str, deck_path: str | Path) -> CipherResult:
        return self.run(plaintext, CipherMode.ENCRYPT, deck_path)

    def decrypt(self, ciphertext: str, deck_path: str | Path) -> CipherResult:
        return self.run(ciphertext, CipherMode.DECRYPT, deck_path)

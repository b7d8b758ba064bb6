"""
Cipher Processor
=================

Letter layer of the Solitaire cipher. Normalises the message, draws one
keystream value per letter from a :class:`~pontifex.core.deck.DeckEngine`
and adds (encrypt) or subtracts (decrypt) it modulo 26, with letters
numbered A=1 ... Z=26.

The processor consumes its engine: after a run the deck has advanced by
as many rounds as the message needed, so decrypting requires a fresh
engine built from the same starting deck.
"""

from __future__ import annotations

import logging
import re

from pontifex.core.deck import DeckEngine
from pontifex.core.errors import MalformedInputError
from pontifex.core.models import ALPHABET_SIZE, CipherMode, CipherResult

logger = logging.getLogger("pontifex.processor")

_WHITESPACE = re.compile(r"\s+")
_NON_LETTER = re.compile(r"[^A-Za-z]")


def normalize(text: str, policy: str = "reject") -> str:
    """Strip whitespace from *text* and uppercase it.

    Only ASCII letters are accepted; the check runs before uppercasing so
    characters such as ``"ß"`` cannot fold into letters.

    Args:
        text: Raw message.
        policy: ``"reject"`` raises on characters outside A-Z,
            ``"drop"`` removes them.

    Raises:
        MalformedInputError: Under ``"reject"`` when non-letters remain.
        ValueError: For an unknown *policy*.
    """
    cleaned = _WHITESPACE.sub("", text)
    if policy == "drop":
        return _NON_LETTER.sub("", cleaned).upper()
    if policy != "reject":
        raise ValueError(f"Unknown non-letter policy: {policy!r}")

    invalid = [(m.start(), m.group()) for m in _NON_LETTER.finditer(cleaned)]
    if invalid:
        shown = ", ".join(f"{ch!r}@{pos}" for pos, ch in invalid[:10])
        if len(invalid) > 10:
            shown += f", ... (+{len(invalid) - 10} more)"
        raise MalformedInputError(
            f"Message may only contain letters A-Z and spaces; found {shown}",
            invalid,
        )
    return cleaned.upper()


def shift_letter(letter: str, key: int, mode: CipherMode) -> str:
    """Combine one letter with one keystream value."""
    value = ord(letter) - ord("A") + 1
    if mode is CipherMode.ENCRYPT:
        combined = (value + key) % ALPHABET_SIZE
    else:
        combined = (value - key + ALPHABET_SIZE) % ALPHABET_SIZE
    if combined == 0:
        combined = ALPHABET_SIZE
    return chr(ord("A") + combined - 1)


def group_letters(text: str, size: int = 5) -> str:
    """Split *text* into space-separated blocks of *size* letters."""
    if size <= 0:
        return text
    return " ".join(text[i:i + size] for i in range(0, len(text), size))


class CipherProcessor:
    """Encrypts and decrypts messages against one deck engine.

    Usage::

        processor = CipherProcessor(DeckEngine.standard())
        processor.encrypt("DO NOT USE PC")     # 'HAURXDVLSK'

    Args:
        deck: Engine supplying the keystream. It is advanced in place.
        policy: Handling of non-letter characters, see :func:`normalize`.
        source: Label for the deck's origin, carried into results.
    """

    def __init__(
        self,
        deck: DeckEngine,
        *,
        policy: str = "reject",
        source: str = "<memory>",
    ) -> None:
        self.deck = deck
        self.policy = policy
        self.source = source

    def process(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt *text* and return the output letters."""
        return self.run(text, mode).output_text

    def run(self, text: str, mode: CipherMode) -> CipherResult:
        """Like :meth:`process` but return the full :class:`CipherResult`."""
        letters = normalize(text, self.policy)
        rounds_before = self.deck.rounds
        skipped_before = self.deck.skipped_rounds

        keystream = self.deck.keystream(len(letters))
        output = "".join(
            shift_letter(letter, key, mode)
            for letter, key in zip(letters, keystream)
        )
        logger.debug("%s: %d letters", mode.value, len(letters))

        return CipherResult(
            mode=mode,
            input_text=text,
            normalized_text=letters,
            output_text=output,
            keystream=keystream,
            rounds=self.deck.rounds - rounds_before,
            skipped_rounds=self.deck.skipped_rounds - skipped_before,
            deck_source=self.source,
        )

    def encrypt(self, plaintext: str) -> str:
        return self.process(plaintext, CipherMode.ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        return self.process(ciphertext, CipherMode.DECRYPT)

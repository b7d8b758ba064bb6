"""
Pontifex Errors
================

Exception hierarchy for the Pontifex cipher. The deck engine and the
cipher processor raise these; only the CLI turns them into messages and
exit codes.
"""

from __future__ import annotations


class PontifexError(Exception):
    """Base class for every error raised by the Pontifex package."""


class DeckIntegrityError(PontifexError, ValueError):
    """The deck is not 54 distinct valid cards including both jokers."""


class MalformedInputError(PontifexError, ValueError):
    """The message contains characters outside A-Z after normalisation.

    Attributes:
        invalid: ``(position, character)`` pairs in the normalised text.
    """

    def __init__(self, message: str, invalid: list[tuple[int, str]] | None = None) -> None:
        super().__init__(message)
        self.invalid = invalid or []


class DeckFileError(PontifexError, OSError):
    """The deck file could not be read or is not valid JSON."""

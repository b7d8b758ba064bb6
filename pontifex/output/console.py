"""
Pontifex Console Output
========================

Rich-based renderers for cipher results, keystreams and deck orderings.
Uses the shared :class:`~shared.console.PontifexConsole` for consistent
styling.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import PontifexConsole
from pontifex.core.models import Card, CipherMode, CipherResult
from pontifex.core.processor import group_letters

_SUIT_SYMBOLS: dict[str, str] = {
    "C": "♣",
    "D": "♦",
    "H": "♥",
    "S": "♠",
}

_SUIT_STYLES: dict[str, str] = {
    "C": "pontifex.black_suit",
    "D": "pontifex.red_suit",
    "H": "pontifex.red_suit",
    "S": "pontifex.black_suit",
}


class PontifexConsoleOutput:
    """Console output formatters for Pontifex results.

    Usage::

        output = PontifexConsoleOutput(PontifexConsole())
        output.display_result(result, group_size=5)
        output.display_deck(engine.cards)
    """

    def __init__(self, console: Optional[PontifexConsole] = None) -> None:
        self.console = console or PontifexConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Results
    # ------------------------------------------------------------------ #

    def display_result(self, result: CipherResult, group_size: int = 0) -> None:
        """Show a summary panel and the per-letter keystream."""
        label = "Ciphertext" if result.mode is CipherMode.ENCRYPT else "Plaintext"

        summary = Text()
        summary.append("Mode: ", style="bold")
        summary.append(f"{result.mode.value}\n")
        summary.append("Deck: ", style="bold")
        summary.append(f"{result.deck_source}\n")
        summary.append("Letters: ", style="bold")
        summary.append(f"{result.length}\n")
        summary.append("Rounds: ", style="bold")
        summary.append(f"{result.rounds} ({result.skipped_rounds} skipped)\n")
        summary.append(f"{label}: ", style="bold")
        summary.append(
            group_letters(result.output_text, group_size),
            style="pontifex.highlight",
        )
        self._rich.print(Panel(summary, title=label, border_style="cyan"))

        if result.keystream:
            self.display_keystream(result.normalized_text, result.keystream)

    def display_keystream(self, letters: str, keystream: Sequence[int]) -> None:
        """Table pairing each input letter with its keystream value."""
        tbl = Table(
            title="Keystream",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Letter", justify="center")
        tbl.add_column("Key", justify="right")
        for idx, (letter, key) in enumerate(zip(letters, keystream), start=1):
            tbl.add_row(str(idx), letter, str(key))
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Decks
    # ------------------------------------------------------------------ #

    def display_deck(self, cards: Sequence[Card], per_row: int = 13) -> None:
        """Show the deck, top card first, *per_row* cards per line."""
        self.console.section(f"Deck ({len(cards)} cards)")
        line = Text()
        for idx, card in enumerate(cards):
            if idx and idx % per_row == 0:
                self._rich.print(line)
                line = Text()
            line.append_text(self._card_text(card))
            line.append(" ")
        if line.plain:
            self._rich.print(line)

    @staticmethod
    def _card_text(card: Card) -> Text:
        if card.is_joker:
            return Text(f"J{card.code[-1]}".rjust(4), style="pontifex.joker")
        symbol = _SUIT_SYMBOLS[card.suit]
        return Text(f"{card.rank}{symbol}".rjust(4), style=_SUIT_STYLES[card.suit])

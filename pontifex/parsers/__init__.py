"""
Pontifex Parsers
=================

Deck file input and output.
"""

from pontifex.parsers.deck_parser import (
    load_deck_file,
    parse_deck,
    shuffled_deck,
    write_deck_file,
)

__all__ = [
    "load_deck_file",
    "parse_deck",
    "shuffled_deck",
    "write_deck_file",
]

"""
Pontifex -- Solitaire Deck Cipher
==================================

Implementation of Bruce Schneier's Solitaire (Pontifex) cipher as
described in Neal Stephenson's *Cryptonomicon*: a shuffled 54-card deck
is the key, a sequence of deck manipulations produces the keystream and
letters are combined with it modulo 26.

Modules:
    - pontifex.core.deck: Deck engine (keystream generator)
    - pontifex.core.processor: Letter encryption / decryption
    - pontifex.core.engine: File-backed facade used by the CLI
    - pontifex.core.models: Card value type and result models
    - pontifex.parsers: Deck file loading, writing and shuffling
    - pontifex.output: Console and report output
    - pontifex.cli: Click-based command-line interface

The cipher offers no integrity or authentication and is not meant to
protect anything of value.
"""

__version__ = "1.0.0"
__tool_name__ = "pontifex"

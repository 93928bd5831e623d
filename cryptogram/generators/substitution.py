"""
Cryptogram Builder
==================

Applies a :class:`Derangement` to a phrase.

The phrase is lowercased first; the result is both the puzzle's
solution and the input to the substitution. Substitution is a single
``str.translate`` pass over a 26-entry table, so a replacement letter
is never itself matched again. Characters outside a-z pass through.
"""

from __future__ import annotations

from cryptogram.core.models import ALPHABET, Cryptogram, Derangement


class CryptogramBuilder:
    """Builds :class:`Cryptogram` records from a phrase and a key.

    Usage::

        builder = CryptogramBuilder()
        puzzle = builder.build("Hello, World!", key)
        print(puzzle.encoded)
    """

    def build(self, phrase: str, mapping: Derangement) -> Cryptogram:
        decoded = phrase.lower()
        encoded = self.substitute(decoded, mapping)
        return Cryptogram(
            phrase=phrase,
            decoded=decoded,
            encoded=encoded,
            alphabet=ALPHABET,
            derangement=mapping,
            attempts=mapping.attempts,
        )

    @staticmethod
    def substitute(text: str, mapping: Derangement) -> str:
        """Replace each lowercase a-z in *text*; everything else is kept."""
        return text.translate(mapping.encode_table())

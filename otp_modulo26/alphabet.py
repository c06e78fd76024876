"""
Alphabet — the 26-letter residue bijection
==========================================
Maps each symbol A..Z to a residue in {0, 1, ..., 25} and back.

The mapping is an explicit lookup table built from the ordered symbol
string, not ``ord(c) - 65`` arithmetic. Anything that is not a key of the
table (lowercase letters, digits, punctuation, empty or multi-character
strings) is rejected with ``InvalidSymbolError``.
"""

from typing import Iterable, List

from .errors import InvalidSymbolError


class Alphabet:
    """Ordered A-Z alphabet with symbol <-> residue lookups."""

    SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    MODULUS = 26

    def __init__(self):
        self._index = {symbol: residue for residue, symbol in enumerate(self.SYMBOLS)}

    def __len__(self) -> int:
        return self.MODULUS

    def __iter__(self):
        return iter(self.SYMBOLS)

    def to_residue(self, symbol: str) -> int:
        try:
            return self._index[symbol]
        except (KeyError, TypeError):
            raise InvalidSymbolError(symbol) from None

    def from_residue(self, residue: int) -> str:
        """Symbol for ``residue``, reduced modulo 26 first."""
        return self.SYMBOLS[residue % self.MODULUS]

    def residues(self, text: str) -> List[int]:
        """
        Residues for every symbol of ``text``.
        Raises InvalidSymbolError naming the first bad symbol and its position.
        """
        out = []
        for position, symbol in enumerate(text):
            if symbol not in self._index:
                raise InvalidSymbolError(symbol, position)
            out.append(self._index[symbol])
        return out

    def symbols(self, residues: Iterable[int]) -> str:
        return "".join(self.from_residue(r) for r in residues)

    def contains(self, text: str) -> bool:
        return all(symbol in self._index for symbol in text)


ALPHABET = Alphabet()

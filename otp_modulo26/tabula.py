"""
Tabula Recta
============
The Vigenère table: every key letter against every plaintext letter.

Row r (key symbol) and column c (plaintext symbol) meet at the symbol for
``(r + c) mod 26``. Informational only; the cipher never reads it.

The grid is 27 x 27. Row 0 holds the column headers, column 0 holds the
row headers, and ``table[0][0]`` is a blank corner. Addition is
commutative, so ``table[r][c] == table[c][r]`` everywhere.
"""

from typing import Tuple

from .alphabet import Alphabet, ALPHABET

Grid = Tuple[Tuple[str, ...], ...]

CORNER = " "


def build_shift_table(alphabet: Alphabet = ALPHABET) -> Grid:
    """Build the 27x27 tabula recta as nested tuples."""
    size = alphabet.MODULUS
    header = (CORNER,) + tuple(alphabet.from_residue(c) for c in range(size))
    rows = [header]
    for r in range(size):
        row = [alphabet.from_residue(r)]
        row.extend(alphabet.from_residue(r + c) for c in range(size))
        rows.append(tuple(row))
    return tuple(rows)


# Built once at import; tuples cannot be modified afterwards.
TABULA_RECTA = build_shift_table()


def render_shift_table(table: Grid = TABULA_RECTA) -> str:
    """
    Printable table: each cell followed by a space, one line per row.
    The header line starts with two spaces so letters line up under cells.
    """
    lines = []
    for row in table:
        lines.append("".join(f"{cell} " for cell in row))
    # the corner cell renders as the two leading spaces of the header
    return "\n".join(lines) + "\n"


def vigenere_table() -> str:
    return render_shift_table(TABULA_RECTA)


def tabula_recta() -> str:
    return vigenere_table()

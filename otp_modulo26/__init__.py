"""
otp_modulo26 — One-Time Pad, Modulo 26
======================================
The Vernam cipher over the letters A-Z, done with modular arithmetic.
For teaching: it shows why the one-time pad is unbreakable when used
correctly, and how little machinery that takes.

Modules:
    alphabet  — A-Z <-> {0..25} lookup bijection
    pad       — encrypt / decrypt engine with the key-length guard
    tabula    — Vigenère table (tabula recta), built once, immutable
    teletype  — normalize raw text, format output in 5-letter groups
    errors    — LengthError, InvalidSymbolError

License: Unlicense
"""

__version__ = "1.0.0"

from .alphabet import Alphabet, ALPHABET
from .errors   import OneTimePadError, LengthError, InvalidSymbolError
from .pad      import OneTimePad, encrypt, decrypt, check_key_length
from .tabula   import (
    TABULA_RECTA, build_shift_table, render_shift_table,
    vigenere_table, tabula_recta,
)
from .teletype import normalize, tty, key_used

__all__ = [
    "Alphabet",
    "ALPHABET",
    "OneTimePadError",
    "LengthError",
    "InvalidSymbolError",
    "OneTimePad",
    "encrypt",
    "decrypt",
    "check_key_length",
    "TABULA_RECTA",
    "build_shift_table",
    "render_shift_table",
    "vigenere_table",
    "tabula_recta",
    "normalize",
    "tty",
    "key_used",
]

"""
One-Time Pad, Modulo 26
=======================
The Vernam cipher over the letters A-Z.

Each plaintext letter is turned into its residue (A=0 ... Z=25), added to
the residue of the key letter at the same position, and reduced modulo 26:

    cipher[i] = (plain[i] + key[i]) mod 26
    plain[i]  = (cipher[i] - key[i] + 26) mod 26

The ``+ 26`` keeps the dividend non-negative. 26 is a multiple of the
modulus, so the remainder is unchanged.

Perfect secrecy holds only while the key is truly random, at least as long
as the message, and never used twice. The engine enforces the length rule
and nothing else: randomness and non-reuse are the caller's job.

Role in the stack: the cipher engine. Pure functions, no I/O.
"""

import logging
from typing import List

from .alphabet import Alphabet, ALPHABET
from .errors import LengthError

logger = logging.getLogger(__name__)


def check_key_length(key: str, text: str) -> None:
    """Raise LengthError unless ``key`` covers every symbol of ``text``."""
    if len(key) < len(text):
        logger.warning("Rejected key: %d symbols for a %d-symbol text",
                       len(key), len(text))
        raise LengthError(len(key), len(text))


class OneTimePad:
    """
    Modulo-26 one-time pad.

    Holds no key and no state besides the alphabet, so a single instance
    can be shared freely. Only the first ``len(text)`` key symbols are read;
    any excess key material is ignored by the call.
    """

    def __init__(self, alphabet: Alphabet = None):
        self._alpha = alphabet if alphabet is not None else ALPHABET

    @property
    def alphabet(self) -> Alphabet:
        return self._alpha

    def _pair(self, key: str, text: str):
        check_key_length(key, text)
        # validate both sides before producing anything
        text_res = self._alpha.residues(text)
        key_res  = self._alpha.residues(key[:len(text)])
        return key_res, text_res

    def encrypt(self, key: str, plaintext: str) -> str:
        """
        Encrypt ``plaintext`` with the matching prefix of ``key``.
        Raises LengthError if the key is too short, InvalidSymbolError on
        anything outside A-Z.
        """
        key_res, plain_res = self._pair(key, plaintext)
        m = self._alpha.MODULUS
        cipher: List[int] = [(p + k) % m for p, k in zip(plain_res, key_res)]
        logger.debug("Encrypted %d symbols (key length %d)", len(cipher), len(key))
        return self._alpha.symbols(cipher)

    def decrypt(self, key: str, ciphertext: str) -> str:
        """Decrypt ``ciphertext`` with the same key used to encrypt it."""
        key_res, cipher_res = self._pair(key, ciphertext)
        m = self._alpha.MODULUS
        plain: List[int] = [(c - k + m) % m for c, k in zip(cipher_res, key_res)]
        logger.debug("Decrypted %d symbols (key length %d)", len(plain), len(key))
        return self._alpha.symbols(plain)


_default = OneTimePad()


def encrypt(key: str, plaintext: str) -> str:
    return _default.encrypt(key, plaintext)


def decrypt(key: str, ciphertext: str) -> str:
    return _default.decrypt(key, ciphertext)

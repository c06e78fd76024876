"""
Errors
======
Every failure in the package is a ``ValueError`` subclass, so callers that
already guard cipher calls with ``except ValueError`` keep working.

The engine never returns a sentinel on failure. A call either produces the
whole transformed text or raises.
"""


class OneTimePadError(ValueError):
    """Base class for one-time pad failures."""


class LengthError(OneTimePadError):
    """
    The key is shorter than the text it is meant to cover.

    Perfect secrecy needs one fresh key symbol per message symbol, so the
    key is never padded or repeated to make up the difference.
    """

    def __init__(self, key_length: int, text_length: int):
        self.key_length  = key_length
        self.text_length = text_length
        super().__init__(
            f"Key length {key_length} is shorter than text length {text_length}; "
            "the key must be at least as long as the message."
        )


class InvalidSymbolError(OneTimePadError):
    """A symbol outside the A-Z alphabet was passed to the engine."""

    def __init__(self, symbol: str, position: int = None):
        self.symbol   = symbol
        self.position = position
        where = "" if position is None else f" at position {position}"
        super().__init__(f"Symbol {symbol!r}{where} is not in the A-Z alphabet.")

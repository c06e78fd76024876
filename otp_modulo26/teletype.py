"""
Teletype — text in, text out
============================
Helpers that sit around the cipher engine:

    normalize  raw text -> A-Z only (uppercase, everything else stripped)
    tty        A-Z text -> 5-letter groups, the way cipher text was sent
               over the wire ("HELLOWORLD" -> "HELLO WORLD ")
    key_used   the part of the key a message actually consumed

None of these change the symbols themselves, only their presentation.
"""

import re

GROUP_SIZE = 5
SEPARATOR  = " "

_NOT_A_TO_Z = re.compile(r"[^A-Z]")


def normalize(text: str) -> str:
    """Uppercase ``text`` and drop every character outside A-Z."""
    return _NOT_A_TO_Z.sub("", text.upper())


def tty(text: str, group: int = GROUP_SIZE, separator: str = SEPARATOR) -> str:
    """
    Break ``text`` into blocks of ``group`` characters, each block followed
    by ``separator``. The last block may be short: twelve letters come out
    as "AAAAA AAAAA AA ".
    """
    if not isinstance(group, int) or group < 1:
        raise ValueError("Group size must be a positive integer.")
    return "".join(text[i:i + group] + separator for i in range(0, len(text), group))


def key_used(key: str, text: str) -> str:
    return key[:len(text)]

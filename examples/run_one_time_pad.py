"""
otp_modulo26 — Live Demo: One-Time Pad, Modulo 26
==================================================
Run:  python examples/run_one_time_pad.py
      python examples/run_one_time_pad.py --plaintext msg.txt --key pad.txt

Reads a message and a key from text files, strips both down to A-Z,
encrypts, immediately decrypts to prove the round trip, writes the
5-letter-grouped cipher text to disk, then prints the Vigenère table and
a Plain / Key / Cipher summary.
"""

import sys, os
import argparse
import logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from otp_modulo26 import (
    OneTimePad, LengthError, normalize, tty, key_used, vigenere_table,
)

logger = logging.getLogger("run_one_time_pad")

HERE     = os.path.dirname(os.path.abspath(__file__))
TEXT_DIR = os.path.join(HERE, "text")

LENGTH_MESSAGE = (
    "For perfect encryption in the one time pad, the key length must be "
    "equal to, or greater than, the message length."
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="One-time pad (mod 26) demo")
    parser.add_argument("-p", "--plaintext",  default=os.path.join(TEXT_DIR, "plaintext.txt"),
                        help="Plain text message file")
    parser.add_argument("-k", "--key",        default=os.path.join(TEXT_DIR, "cipherkey.txt"),
                        help="One-time pad key file")
    parser.add_argument("-c", "--ciphertext", default=os.path.join(TEXT_DIR, "ciphertext.txt"),
                        help="Where to write the grouped cipher text")
    parser.add_argument("--no-table", action="store_true",
                        help="Do not print the Vigenère table")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser.parse_args(argv)


def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as fh:
        return normalize(fh.read())


def summary(plain: str, key: str, cipher: str) -> str:
    used = key_used(key, plain)
    return (
        f"Plain:  {tty(plain)} (message)\n"
        f"Key:    {tty(used)} (secret)\n"
        f"        {tty('-' * len(plain))}\n"
        f"Cipher: {tty(cipher)} (cipher)\n"
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    plain = read_text(args.plaintext)
    key   = read_text(args.key)
    logger.info("Message: %d letters, key: %d letters", len(plain), len(key))

    pad = OneTimePad()
    try:
        cipher  = pad.encrypt(key, plain)
        decoded = pad.decrypt(key, cipher)
    except LengthError:
        print(LENGTH_MESSAGE)
        return 1

    if decoded != plain:
        # cannot happen while the engine is correct
        logger.error("Round trip failed: decrypted text does not match the message")
        return 2

    with open(args.ciphertext, "w", encoding="utf-8") as fh:
        fh.write(tty(cipher))
    logger.info("Cipher text written to %s", args.ciphertext)

    if not args.no_table:
        print(vigenere_table())

    print(summary(plain, key, cipher), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())

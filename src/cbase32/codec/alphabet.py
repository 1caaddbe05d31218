"""Alphabet and lookup tables for Crockford-variant base32.

The alphabet is Crockford's with lowercase letters: digits, then a-z without
i, l, o and u. Decoding is strict, so there are no aliases (no uppercase, no
``o`` for ``0``, no ``i``/``l`` for ``1``).
"""

from __future__ import annotations

ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
ALPHABET_BYTES = ALPHABET.encode("ascii")

# Block ratio: 5 raw bytes (40 bits) <-> 8 symbols of 5 bits each
DECODED_BLOCK_SIZE = 5
ENCODED_BLOCK_SIZE = 8

# Marks byte values that are not in the alphabet
INVALID = 0xFF


def _build_decode_table(alphabet: bytes) -> bytes:
    table = bytearray([INVALID] * 256)
    for index, byte in enumerate(alphabet):
        table[byte] = index
    return bytes(table)


DECODE_TABLE = _build_decode_table(ALPHABET_BYTES)


def lookup(char: str) -> int:
    """Return the 5-bit index of ``char``, or INVALID if it is not in the alphabet.

    Args:
        char: A single character

    Returns:
        Index 0-31, or INVALID (0xFF)
    """
    code = ord(char)
    if code > 0xFF:
        return INVALID
    return DECODE_TABLE[code]

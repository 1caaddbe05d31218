"""Block codec for Crockford-variant base32.

This module provides the 5-byte <-> 8-symbol encoder and the strict decoder.
"""

from __future__ import annotations

from .alphabet import ALPHABET
from .decoder import decode
from .encoder import encode, encode_canonical, encode_into

__all__ = [
    "ALPHABET",
    "encode",
    "encode_into",
    "encode_canonical",
    "decode",
]

"""Base32 decoder.

Decoding is strict: only the exact lowercase alphabet is accepted. The input
is processed in groups of 8 characters; an incomplete final group is filled
with the zero symbol, and the output is truncated afterwards so the filler
never shows up in the result.
"""

from __future__ import annotations

import logging

from ..exceptions import InvalidBase32Error
from .alphabet import ALPHABET, DECODED_BLOCK_SIZE, ENCODED_BLOCK_SIZE, INVALID, lookup

log = logging.getLogger(__name__)


def _decode_block(chunk: str, base_position: int, original: str, out: bytearray) -> None:
    indexes = []
    for i, char in enumerate(chunk):
        index = lookup(char)
        if index == INVALID:
            position = base_position + i
            log.debug("Rejecting base32 input: %r at position %d", char, position)
            raise InvalidBase32Error(char, position, original)
        indexes.append(index)

    # Regroup 8 5-bit indexes into 5 bytes
    out.append(((indexes[0] << 3) | (indexes[1] >> 2)) & 0xFF)
    out.append(((indexes[1] << 6) | (indexes[2] << 1) | (indexes[3] >> 4)) & 0xFF)
    out.append(((indexes[3] << 4) | (indexes[4] >> 1)) & 0xFF)
    out.append(((indexes[4] << 7) | (indexes[5] << 2) | (indexes[6] >> 3)) & 0xFF)
    out.append(((indexes[6] << 5) | indexes[7]) & 0xFF)


def decode(text: str) -> bytes:
    """Decode a base32 string to bytes.

    The output length is ``len(text) * 5 // 8``. Decoding a padded string from
    ``encode`` therefore yields the original bytes followed by the zero bytes
    of the block padding; decoding ``encode_canonical`` output yields exactly
    the original bytes.

    Args:
        text: Base32 string

    Returns:
        Decoded bytes

    Raises:
        TypeError: If ``text`` is not a str
        InvalidBase32Error: At the first character not in the alphabet. No
            partial output is returned.

    Example:
        >>> decode("d1jprv3f41vpywkccg")
        b'hello world'
    """
    if not isinstance(text, str):
        raise TypeError(f"decode() expects str, got {type(text).__name__}")

    out_length = len(text) * DECODED_BLOCK_SIZE // ENCODED_BLOCK_SIZE
    out = bytearray()

    for start in range(0, len(text), ENCODED_BLOCK_SIZE):
        chunk = text[start : start + ENCODED_BLOCK_SIZE]
        if len(chunk) < ENCODED_BLOCK_SIZE:
            chunk = chunk.ljust(ENCODED_BLOCK_SIZE, ALPHABET[0])
        _decode_block(chunk, start, text, out)

    # Drop the bytes decoded from filler symbols
    del out[out_length:]
    return bytes(out)

"""Encoded size calculation utilities.

These functions compute output sizes in closed form, without encoding
anything. ``encoded_len`` is the exact number of symbols for a given number
of input bytes; ``buffer_len`` is the whole-block scratch size that
``encode_into`` writes to.
"""

from __future__ import annotations

from ..codec.alphabet import DECODED_BLOCK_SIZE, ENCODED_BLOCK_SIZE

# Symbols needed for the trailing 0-4 bytes of a partial block
_TAIL_SYMBOLS = (0, 2, 4, 5, 7)


def encoded_len(byte_count: int) -> int:
    """Calculate the exact number of base32 characters for ``byte_count`` bytes.

    Args:
        byte_count: Number of input bytes (must be >= 0)

    Returns:
        Number of characters in the canonical (unpadded) encoding

    Raises:
        ValueError: If byte_count is negative

    Example:
        >>> encoded_len(1)
        2
        >>> encoded_len(11)
        18
    """
    if byte_count < 0:
        raise ValueError(f"byte_count must be non-negative, got {byte_count}")

    blocks, tail = divmod(byte_count, DECODED_BLOCK_SIZE)
    return blocks * ENCODED_BLOCK_SIZE + _TAIL_SYMBOLS[tail]


def buffer_len(byte_count: int) -> int:
    """Calculate the buffer size ``encode_into`` needs for ``byte_count`` bytes.

    The result is always a multiple of 8 and never smaller than
    ``encoded_len(byte_count)``.

    Args:
        byte_count: Number of input bytes (must be >= 0)

    Returns:
        Buffer size in characters

    Raises:
        ValueError: If byte_count is negative

    Example:
        >>> buffer_len(6)
        16
    """
    if byte_count < 0:
        raise ValueError(f"byte_count must be non-negative, got {byte_count}")

    blocks = (byte_count + DECODED_BLOCK_SIZE - 1) // DECODED_BLOCK_SIZE
    return blocks * ENCODED_BLOCK_SIZE

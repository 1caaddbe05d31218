"""Base32 encoder.

Input is processed in blocks of 5 bytes (40 bits). Each block is read as a
big-endian integer, left-justified into a 64-bit word, and split into eight
5-bit fields from the most significant end. A final partial block is
zero-extended to 5 bytes before the same transform.
"""

from __future__ import annotations

from ..utils.sizing import buffer_len, encoded_len
from .alphabet import ALPHABET_BYTES, DECODED_BLOCK_SIZE, ENCODED_BLOCK_SIZE

# Bit offsets of the eight 5-bit fields within the 64-bit word
_SHIFTS = (59, 54, 49, 44, 39, 34, 29, 24)


def _to_bytes(data: bytes | bytearray | memoryview) -> bytes:
    # bytes(n) on an int would silently produce n zero bytes
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"encode() expects a bytes-like object, got {type(data).__name__}")
    return bytes(data)


def _encode_block(block: bytes, out: bytearray | memoryview, offset: int) -> None:
    bits = int.from_bytes(block, "big") << 24
    for i, shift in enumerate(_SHIFTS):
        out[offset + i] = ALPHABET_BYTES[(bits >> shift) & 0x1F]


def encode_into(out: bytearray | memoryview, data: bytes | bytearray | memoryview) -> None:
    """Write the base32 encoding of ``data`` into ``out``.

    ``out`` must be a writable buffer of exactly ``buffer_len(len(data))``
    bytes. Only the first ``encoded_len(len(data))`` bytes are the canonical
    encoding; the rest are padding symbols produced from zero bits.

    Args:
        out: Writable byte buffer (bytearray or writable memoryview)
        data: Bytes to encode

    Raises:
        TypeError: If ``data`` is not bytes, bytearray or memoryview
        ValueError: If ``out`` has the wrong length

    Example:
        >>> data = b"hello world"
        >>> out = bytearray(buffer_len(len(data)))
        >>> encode_into(out, data)
        >>> out[: encoded_len(len(data))].decode("ascii")
        'd1jprv3f41vpywkccg'
    """
    data = _to_bytes(data)
    expected = buffer_len(len(data))
    if len(out) != expected:
        raise ValueError(
            f"Output buffer must be exactly {expected} bytes for {len(data)} input bytes, "
            f"got {len(out)}"
        )

    num_blocks, remainder = divmod(len(data), DECODED_BLOCK_SIZE)

    # Full 5-byte blocks
    for i in range(num_blocks):
        start = i * DECODED_BLOCK_SIZE
        _encode_block(data[start : start + DECODED_BLOCK_SIZE], out, i * ENCODED_BLOCK_SIZE)

    # Zero-extended trailing block
    if remainder:
        tail = data[num_blocks * DECODED_BLOCK_SIZE :].ljust(DECODED_BLOCK_SIZE, b"\x00")
        _encode_block(tail, out, num_blocks * ENCODED_BLOCK_SIZE)


def encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes to base32, keeping the block padding.

    The result is ``buffer_len(len(data))`` characters long. The first
    ``encoded_len(len(data))`` characters are the canonical encoding; any
    characters after that are ``'0'`` symbols derived from zero padding, not a
    padding sentinel. Slice them off (or use ``encode_canonical``) when the
    exact encoding is wanted.

    Args:
        data: Bytes to encode

    Returns:
        Padded base32 string

    Example:
        >>> encode(b"foobar")
        'csqpyrk1e8000000'
    """
    data = _to_bytes(data)
    out = bytearray(buffer_len(len(data)))
    encode_into(out, data)
    return out.decode("ascii")


def encode_canonical(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes to base32 without block padding.

    Args:
        data: Bytes to encode

    Returns:
        Base32 string of exactly ``encoded_len(len(data))`` characters

    Example:
        >>> encode_canonical(b"foobar")
        'csqpyrk1e8'
    """
    data = _to_bytes(data)
    return encode(data)[: encoded_len(len(data))]

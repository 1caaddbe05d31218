"""cbase32: Crockford-variant Base32 Codec

A small, strict base32 codec using Crockford's alphabet in lowercase
(``0123456789abcdefghjkmnpqrstvwxyz``). Data is packed 5 bytes to 8 symbols.

Key Features:
- Closed-form length arithmetic (``encoded_len``, ``buffer_len``)
- Block encoder with an in-place variant for caller-supplied buffers
- Strict decoder that reports the first invalid character and its position
- Pydantic field type for base32-encoded bytes

Quick Start:
    >>> from cbase32 import decode, encode, encode_canonical, encoded_len
    >>>
    >>> data = b"hello world"
    >>> padded = encode(data)
    >>> padded[: encoded_len(len(data))]
    'd1jprv3f41vpywkccg'
    >>> encode_canonical(data)
    'd1jprv3f41vpywkccg'
    >>> decode("d1jprv3f41vpywkccg")
    b'hello world'

Padding:
    ``encode`` returns whole 8-symbol blocks. The characters past
    ``encoded_len`` are ``'0'`` symbols decoded from zero bits, so slice them off
    (or call ``encode_canonical``) when the exact encoding is wanted.
"""

from __future__ import annotations

from .codec import ALPHABET, decode, encode, encode_canonical, encode_into
from .exceptions import Cbase32Error, InvalidBase32Error
from .models import Base32Bytes
from .utils import buffer_len, encoded_len

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_into",
    "encode_canonical",
    "decode",
    "ALPHABET",
    # Sizing
    "encoded_len",
    "buffer_len",
    # Exceptions
    "Cbase32Error",
    "InvalidBase32Error",
    # Pydantic
    "Base32Bytes",
    # Version
    "__version__",
]

"""Pydantic field types backed by base32.

``Base32Bytes`` lets a model hold raw bytes while accepting and emitting the
canonical base32 text form at the edges (JSON input and JSON output).
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer
from pydantic_core import PydanticCustomError

from ..codec import decode, encode_canonical
from ..exceptions import InvalidBase32Error


def _validate_base32(value: Any) -> Any:
    # Raw bytes pass through to pydantic's own bytes validation
    if not isinstance(value, str):
        return value

    try:
        return decode(value)
    except InvalidBase32Error as exc:
        raise PydanticCustomError(
            "base32_invalid",
            "Invalid base32 character '{character}' at position {position}",
            {"character": exc.character, "position": exc.position},
        ) from exc


def _serialize_base32(value: bytes) -> str:
    return encode_canonical(value)


Base32Bytes = Annotated[
    bytes,
    BeforeValidator(_validate_base32),
    PlainSerializer(_serialize_base32, return_type=str, when_used="json"),
]
"""Bytes field that validates from and serializes to canonical base32.

Example:
    >>> from pydantic import BaseModel
    >>> class Token(BaseModel):
    ...     key: Base32Bytes
    >>> Token(key="csqpyrk1e8").key
    b'foobar'
    >>> Token(key=b"foobar").model_dump_json()
    '{"key":"csqpyrk1e8"}'
"""

"""Exception hierarchy for cbase32.

All exceptions raised for bad input data inherit from Cbase32Error. Contract
violations (a wrongly sized output buffer, a negative length, a non-str input
to the decoder) raise the built-in ValueError/TypeError instead.
"""

from __future__ import annotations

from typing import Any


class Cbase32Error(Exception):
    """Base exception for all cbase32 errors."""

    pass


class InvalidBase32Error(Cbase32Error):
    """Raised when decoding meets a character outside the alphabet.

    Only the first invalid character, scanning left to right, is reported.

    Attributes:
        character: The offending character (a full Unicode character, not a byte)
        position: Index of the character within the original input string
        string: The complete original input

    Example:
        >>> from cbase32 import decode
        >>> try:
        ...     decode("01234567ë")
        ... except InvalidBase32Error as exc:
        ...     exc.character, exc.position
        ('ë', 8)
    """

    def __init__(self, character: str, position: int, string: str) -> None:
        self._character = character
        self._position = position
        self._string = string
        super().__init__(f"invalid base32 character {character!r} at position {position}")

    @property
    def character(self) -> str:
        return self._character

    @property
    def position(self) -> int:
        return self._position

    @property
    def string(self) -> str:
        return self._string

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._character, self._position, self._string))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidBase32Error):
            return NotImplemented
        return (self._character, self._position, self._string) == (
            other._character,
            other._position,
            other._string,
        )

    def __hash__(self) -> int:
        return hash((self._character, self._position, self._string))

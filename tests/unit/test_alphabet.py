"""Unit tests for the alphabet and decode table."""

from __future__ import annotations

from cbase32.codec.alphabet import ALPHABET, ALPHABET_BYTES, DECODE_TABLE, INVALID, lookup


class TestAlphabet:
    """Test alphabet invariants."""

    def test_alphabet_is_bijective(self) -> None:
        """Test 32 distinct symbols."""
        assert len(ALPHABET) == 32
        assert len(set(ALPHABET)) == 32
        assert ALPHABET_BYTES == ALPHABET.encode("ascii")

    def test_ambiguous_letters_excluded(self) -> None:
        """Test i, l, o and u are not symbols."""
        for char in "ilou":
            assert char not in ALPHABET

    def test_lowercase_only(self) -> None:
        """Test symbols are digits and lowercase letters."""
        assert ALPHABET == ALPHABET.lower()
        assert ALPHABET.startswith("0123456789")


class TestDecodeTable:
    """Test the inverse alphabet."""

    def test_table_inverts_alphabet(self) -> None:
        """Test every symbol maps back to its index."""
        assert len(DECODE_TABLE) == 256
        for index, char in enumerate(ALPHABET):
            assert DECODE_TABLE[ord(char)] == index
            assert lookup(char) == index

    def test_everything_else_invalid(self) -> None:
        """Test all other byte values map to the sentinel."""
        valid = set(ALPHABET_BYTES)
        for byte in range(256):
            if byte not in valid:
                assert DECODE_TABLE[byte] == INVALID

    def test_lookup_rejects_non_latin1(self) -> None:
        """Test code points outside the table are invalid."""
        assert lookup("€") == INVALID
        assert lookup("\U0001f600") == INVALID

    def test_lookup_rejects_aliases(self) -> None:
        """Test no permissive Crockford aliases are accepted."""
        for char in "ABCZOIilou":
            assert lookup(char) == INVALID

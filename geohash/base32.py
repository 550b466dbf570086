"""Base32 encoding with a custom 32-symbol alphabet."""

from __future__ import annotations

_INVALID = 0xFF
_MASK64 = (1 << 64) - 1
_WIDTH = 12

GEOHASH_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"


def _as_bytes(s: str | bytes) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


class Encoding:
    """A base32 encoding defined by a 32-character alphabet."""

    __slots__ = ("alphabet", "_symbols", "_table")

    def __init__(self, alphabet: str) -> None:
        symbols = alphabet.encode("ascii")
        if len(symbols) != 32:
            raise ValueError(f"alphabet must have 32 characters, got {len(symbols)}")
        table = bytearray([_INVALID]) * 256
        for value, symbol in enumerate(symbols):
            table[symbol] = value
        self.alphabet = alphabet
        self._symbols = symbols
        self._table = bytes(table)

    def valid_byte(self, b: int) -> bool:
        """Report whether the byte value ``b`` belongs to the alphabet."""
        return self._table[b] != _INVALID

    def decode(self, s: str | bytes) -> int:
        """Decode ``s`` (at most 12 characters) into the bits of a 64-bit word."""
        x = 0
        for b in _as_bytes(s):
            x = ((x << 5) | self._table[b]) & _MASK64
        return x

    def encode_bytes(self, x: int) -> bytes:
        """Encode the low 60 bits of ``x`` as 12 alphabet bytes."""
        return bytes(
            self._symbols[(x >> (5 * shift)) & 0x1F]
            for shift in range(_WIDTH - 1, -1, -1)
        )

    def encode(self, x: int) -> str:
        """Encode the low 60 bits of ``x`` as a 12-character string."""
        return self.encode_bytes(x).decode("ascii")


BASE32 = Encoding(GEOHASH_ALPHABET)
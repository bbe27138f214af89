"""
Symbol tables for base64 alphabets.

The codec engine only talks to an alphabet through the small ``Alphabet``
protocol, so the same encoder and decoder serve any 64-symbol variant.
Only the RFC 4648 §5 URL-safe alphabet is provided.
"""

from __future__ import annotations

from typing import Protocol

from b64url.constants import ALPHABET_SIZE, PAD_SYMBOL, URL_SAFE_SYMBOLS

__all__ = [
    "URL_SAFE",
    "Alphabet",
    "TableAlphabet",
]

_INVALID = -1


class Alphabet(Protocol):
    """Lookup capability the codec engine needs from an alphabet.

    Symbols are handled as byte values (ints 0-255).
    """

    symbols: bytes
    """The 64 symbols, ordered by 6-bit value."""

    pad: int
    """The pad symbol, disjoint from ``symbols``."""

    def symbol_at(self, value: int) -> int:
        """Map a 6-bit value to its symbol.

        Args:
            value: Integer in range 0-63

        Returns:
            Symbol byte value

        Raises:
            ValueError: If value is outside 0-63
        """
        ...

    def value_of(self, symbol: int) -> int | None:
        """Map a symbol back to its 6-bit value, or None if not in the alphabet."""
        ...

    def is_pad(self, symbol: int) -> bool:
        """Tell whether ``symbol`` is the pad symbol."""
        ...


class TableAlphabet:
    """Alphabet backed by a 256-entry reverse lookup table.

    The tables are built once and never mutated, so one instance can be
    shared freely between threads.
    """

    __slots__ = ("_decode_table", "pad", "symbols")

    def __init__(self, symbols: bytes, pad: int = PAD_SYMBOL) -> None:
        """
        Build the lookup tables.

        Args:
            symbols: 64 distinct ASCII symbols, ordered by 6-bit value
            pad: Pad symbol byte value

        Raises:
            ValueError: If the symbols are not 64 distinct ASCII bytes
                or the pad symbol collides with one of them
        """
        if len(symbols) != ALPHABET_SIZE:
            raise ValueError(f"Alphabet needs {ALPHABET_SIZE} symbols, got {len(symbols)}")
        if len(set(symbols)) != ALPHABET_SIZE:
            raise ValueError("Alphabet symbols must be distinct")
        if max(symbols) > 0x7F or not 0 <= pad <= 0x7F:
            raise ValueError("Alphabet symbols must be ASCII")
        if pad in symbols:
            raise ValueError(f"Pad symbol {chr(pad)!r} collides with an alphabet symbol")

        table = [_INVALID] * 256
        for value, symbol in enumerate(symbols):
            table[symbol] = value

        self.symbols = bytes(symbols)
        self.pad = pad
        self._decode_table: tuple[int, ...] = tuple(table)

    def __repr__(self) -> str:
        return f"TableAlphabet(symbols={self.symbols!r}, pad={chr(self.pad)!r})"

    @property
    def decode_table(self) -> tuple[int, ...]:
        """Reverse table: symbol byte -> 6-bit value, -1 for non-symbols."""
        return self._decode_table

    def symbol_at(self, value: int) -> int:
        if not 0 <= value < ALPHABET_SIZE:
            raise ValueError(f"Not a 6-bit value: {value}")
        return self.symbols[value]

    def value_of(self, symbol: int) -> int | None:
        if not 0 <= symbol <= 0xFF:
            return None
        value = self._decode_table[symbol]
        return None if value == _INVALID else value

    def is_pad(self, symbol: int) -> bool:
        return symbol == self.pad


URL_SAFE: TableAlphabet = TableAlphabet(URL_SAFE_SYMBOLS)
"""RFC 4648 §5 base64url alphabet: A-Z a-z 0-9 - _ with pad '='."""

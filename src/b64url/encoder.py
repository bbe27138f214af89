"""
Base64url encoding (RFC 4648 §5).

Every 3 input bytes become 4 symbols, most significant bits first:

    byte:    |    0    |    1    |    2    |
    bit:     76543210 76543210 76543210
    symbol:  |  0   |  1   |  2   |  3   |

A trailing group of 1 or 2 bytes is zero-extended to 3; only the symbols
that carry input bits are emitted, followed by '=' when padding is wanted.

Encoding never fails for bytes-like input.
"""

from __future__ import annotations

from b64url.alphabet import URL_SAFE, Alphabet
from b64url.constants import (
    DECODED_BLOCK_SIZE,
    ENCODED_BLOCK_SIZE,
    PARTIAL_GROUP_SYMBOLS,
    SYMBOL_MASK,
)
from b64url.tagged import Base64Url, Encodable, Padding

__all__ = [
    "encode",
    "encode_unpadded",
    "encoded_length",
]

_SHIFTS = (18, 12, 6, 0)


def _as_bytes(data: Encodable) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")


def _encode(data: bytes, alphabet: Alphabet, pad: bool) -> bytes:
    """Pack ``data`` into 6-bit groups and map them to symbols."""
    symbol_at = alphabet.symbol_at
    out = bytearray()
    full = len(data) - len(data) % DECODED_BLOCK_SIZE

    for i in range(0, full, DECODED_BLOCK_SIZE):
        group = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out.append(symbol_at((group >> 18) & SYMBOL_MASK))
        out.append(symbol_at((group >> 12) & SYMBOL_MASK))
        out.append(symbol_at((group >> 6) & SYMBOL_MASK))
        out.append(symbol_at(group & SYMBOL_MASK))

    remainder = len(data) - full
    if remainder:
        # Zero-extend the partial group to a full 24 bits
        tail = data[full:] + b"\x00" * (DECODED_BLOCK_SIZE - remainder)
        group = int.from_bytes(tail, "big")
        count = PARTIAL_GROUP_SYMBOLS[remainder]
        for shift in _SHIFTS[:count]:
            out.append(symbol_at((group >> shift) & SYMBOL_MASK))
        if pad:
            out.extend(bytes([alphabet.pad]) * (ENCODED_BLOCK_SIZE - count))

    return bytes(out)


def encoded_length(n: int, *, padded: bool = True) -> int:
    """
    Calculate the encoded length of ``n`` input bytes.

    Args:
        n: Number of input bytes
        padded: Whether trailing '=' symbols are counted

    Returns:
        ``4 * ceil(n / 3)`` when padded, ``ceil(4n / 3)`` otherwise
    """
    if n < 0:
        raise ValueError(f"Length must be non-negative, got {n}")
    if padded:
        return -(-n // DECODED_BLOCK_SIZE) * ENCODED_BLOCK_SIZE
    return -(-ENCODED_BLOCK_SIZE * n // DECODED_BLOCK_SIZE)


def encode(data: Encodable, *, alphabet: Alphabet = URL_SAFE) -> Base64Url[bytes]:
    """
    Encode bytes to padded base64url.

    Args:
        data: Raw bytes to encode
        alphabet: Symbol table (URL-safe by default)

    Returns:
        ASCII bytes tagged ``Padding.PADDED``; length is a multiple of 4

    Raises:
        TypeError: If data is not bytes-like
    """
    return Base64Url(Padding.PADDED, _encode(_as_bytes(data), alphabet, pad=True))


def encode_unpadded(data: Encodable, *, alphabet: Alphabet = URL_SAFE) -> Base64Url[bytes]:
    """
    Encode bytes to base64url without padding.

    Padding is optional for base64url; this is the packing of ``encode``
    with the trailing '=' symbols left out.

    Args:
        data: Raw bytes to encode
        alphabet: Symbol table (URL-safe by default)

    Returns:
        ASCII bytes tagged ``Padding.UNPADDED``

    Raises:
        TypeError: If data is not bytes-like
    """
    return Base64Url(Padding.UNPADDED, _encode(_as_bytes(data), alphabet, pad=False))

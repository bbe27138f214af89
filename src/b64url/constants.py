"""
Constants for the RFC 4648 §5 base64url encoding.

Reference: https://www.rfc-editor.org/rfc/rfc4648#section-5
"""

from typing import Final

# =============================================================================
# Alphabet
# =============================================================================

URL_SAFE_SYMBOLS: Final[bytes] = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
"""The 64 base64url symbols, ordered by 6-bit value."""

PAD_SYMBOL: Final[int] = 0x3D  # "="

ALPHABET_SIZE: Final[int] = 64
SYMBOL_BITS: Final[int] = 6
SYMBOL_MASK: Final[int] = 0x3F

# =============================================================================
# Block geometry
# =============================================================================

DECODED_BLOCK_SIZE: Final[int] = 3  # bytes per full group
ENCODED_BLOCK_SIZE: Final[int] = 4  # symbols per full group
MAX_PAD_LENGTH: Final[int] = 2

# Symbols needed for a trailing group of N bytes (N = 0, 1, 2)
PARTIAL_GROUP_SYMBOLS: Final[tuple[int, ...]] = (0, 2, 3)

# Bytes recovered from a trailing group of N symbols (N = 0..3), None if impossible
PARTIAL_GROUP_BYTES: Final[tuple[int | None, ...]] = (0, None, 1, 2)

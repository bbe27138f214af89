"""
Lenient base64url decoding.

**Not RFC 4648 compliant.** ``decode_lenient`` never fails: it keeps only
alphabet symbols, stops at the first '=', and decodes whatever is left as
unpadded base64url. A dangling single symbol is dropped.
"""

from __future__ import annotations

from b64url._logging import get_logger
from b64url.alphabet import URL_SAFE, Alphabet
from b64url.constants import ENCODED_BLOCK_SIZE
from b64url.decoder import DecodeInput, unpack_values
from b64url.tagged import as_tagged

__all__ = ["decode_lenient"]

_logger = get_logger(__name__)


def decode_lenient(value: DecodeInput, *, alphabet: Alphabet = URL_SAFE) -> bytes:
    """
    Decode base64url, discarding anything that does not fit.

    Scans left to right. Symbols outside the alphabet (including non-ASCII
    characters of str input) are skipped; the first pad symbol ends the scan.
    The padding tag is ignored.

    Args:
        value: Tagged payload, or raw bytes/str
        alphabet: Symbol table (URL-safe by default)

    Returns:
        Best-effort decoded bytes (empty if nothing usable remains)
    """
    payload = as_tagged(value).value
    data = payload.encode("ascii", errors="ignore") if isinstance(payload, str) else bytes(payload)

    value_of = alphabet.value_of
    values: list[int] = []
    for symbol in data:
        if alphabet.is_pad(symbol):
            break
        symbol_value = value_of(symbol)
        if symbol_value is not None:
            values.append(symbol_value)

    discarded = len(data) - len(values)
    if discarded:
        _logger.debug("Lenient decode skipped symbols: count=%d", discarded)

    # A lone trailing symbol cannot form a byte
    if len(values) % ENCODED_BLOCK_SIZE == 1:
        del values[-1]

    # Non-strict unpacking of a valid length cannot fail
    return unpack_values(values).unwrap()

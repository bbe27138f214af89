"""
Base64url validators.

``is_valid_base64url`` checks shape only. ``is_base64url`` also requires that
the value decodes, canonically, so it is the stricter of the two:
every value it accepts is accepted by ``is_valid_base64url``.
"""

from __future__ import annotations

from b64url.alphabet import URL_SAFE, Alphabet
from b64url.constants import ENCODED_BLOCK_SIZE, MAX_PAD_LENGTH
from b64url.decoder import DecodeInput, decode, to_symbols
from b64url.result import Err
from b64url.tagged import as_tagged

__all__ = [
    "is_base64url",
    "is_valid_base64url",
]


def is_valid_base64url(value: DecodeInput, *, alphabet: Alphabet = URL_SAFE) -> bool:
    """
    Tell whether a value has the shape of base64url.

    Alphabet symbols followed by at most two '=', with a length that fits
    some padded or unpadded encoding. This does not promise that ``decode``
    succeeds: ``"PDw-Pg="`` has a valid shape but wrong padding.

    Args:
        value: Tagged payload, or raw bytes/str
        alphabet: Symbol table (URL-safe by default)

    Returns:
        True if the value is shaped like base64url
    """
    symbols = to_symbols(as_tagged(value).value)
    if isinstance(symbols, Err):
        return False
    data = symbols.value

    remainder = len(data) % ENCODED_BLOCK_SIZE
    if remainder == 1:
        return False
    data += bytes([alphabet.pad]) * (-len(data) % ENCODED_BLOCK_SIZE)

    body = data.rstrip(bytes([alphabet.pad]))
    if len(data) - len(body) > MAX_PAD_LENGTH:
        return False
    return all(alphabet.value_of(symbol) is not None for symbol in body)


def is_base64url(value: DecodeInput, *, alphabet: Alphabet = URL_SAFE) -> bool:
    """
    Tell whether a value is canonical, decodable base64url.

    Padding is optional. Non-zero trailing bits are rejected, so ``"PDw_Pj"``
    is not base64url even though it has the right shape.

    Args:
        value: Tagged payload, or raw bytes/str
        alphabet: Symbol table (URL-safe by default)

    Returns:
        True if ``decode(value, strict=True)`` succeeds
    """
    if not is_valid_base64url(value, alphabet=alphabet):
        return False
    return decode(value, alphabet=alphabet, strict=True).is_ok()

"""
str-valued base64url helpers.

Text is encoded as UTF-8 before base64url encoding, and encoded payloads are
returned as ASCII str. Decoding has two flavours:

- ``decode_text*``: decoded bytes are read as Latin-1, which never fails.
  This round-trips every value produced by ``encode_text`` only when the
  original text was ASCII; for anything else use the ``*_with`` forms.
- ``decode_text*_with``: decoded bytes go through a caller conversion such as
  ``utf8``; its failure is reported as ``ConversionError``.

Usage:
    from b64url.text import decode_text_with, encode_text, utf8

    token = encode_text("héllo").value           # 'aMOpbGxv'
    decode_text_with(utf8, token).unwrap()       # 'héllo'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from b64url.decoder import (
    DecodeInput,
    decode,
    decode_padded,
    decode_padded_with,
    decode_unpadded,
    decode_unpadded_with,
    decode_with,
)
from b64url.encoder import encode, encode_unpadded
from b64url.exceptions import ConversionError, DecodeError
from b64url.lenient import decode_lenient
from b64url.result import Result
from b64url.tagged import Base64Url
from b64url.validation import is_base64url, is_valid_base64url

__all__ = [
    "decode_text",
    "decode_text_lenient",
    "decode_text_padded",
    "decode_text_padded_with",
    "decode_text_unpadded",
    "decode_text_unpadded_with",
    "decode_text_with",
    "encode_text",
    "encode_text_unpadded",
    "is_base64url",
    "is_valid_base64url",
    "latin1",
    "utf8",
]

X = TypeVar("X")


def utf8(raw: bytes) -> str:
    """Strict UTF-8 conversion for the ``*_with`` decoders."""
    return raw.decode("utf-8")


def latin1(raw: bytes) -> str:
    """Latin-1 conversion; total, every byte maps to one character."""
    return raw.decode("latin-1")


def _ascii(raw: bytes) -> str:
    return raw.decode("ascii")


# =============================================================================
# ENCODING
# =============================================================================


def encode_text(text: str) -> Base64Url[str]:
    """
    Encode text as padded base64url.

    >>> encode_text("<<?>>").value
    'PDw_Pj4='
    """
    return encode(text.encode("utf-8")).map(_ascii)


def encode_text_unpadded(text: str) -> Base64Url[str]:
    """
    Encode text as base64url without padding.

    >>> encode_text_unpadded("<<?>>").value
    'PDw_Pj4'
    """
    return encode_unpadded(text.encode("utf-8")).map(_ascii)


# =============================================================================
# DECODING
# =============================================================================


def decode_text(value: DecodeInput) -> Result[str, DecodeError]:
    """
    Decode base64url, padded or not, reading the bytes as Latin-1.

    >>> decode_text("PDw_Pj4").unwrap()
    '<<?>>'
    """
    return decode(value).map(latin1)


def decode_text_unpadded(value: DecodeInput) -> Result[str, DecodeError]:
    """Decode unpadded base64url, reading the bytes as Latin-1."""
    return decode_unpadded(value).map(latin1)


def decode_text_padded(value: DecodeInput) -> Result[str, DecodeError]:
    """Decode padded base64url, reading the bytes as Latin-1."""
    return decode_padded(value).map(latin1)


def decode_text_with(
    convert: Callable[[bytes], X],
    value: DecodeInput,
) -> Result[X, DecodeError | ConversionError]:
    """Decode base64url (decoder chosen by padding tag), then convert the bytes."""
    return decode_with(convert, value)


def decode_text_unpadded_with(
    convert: Callable[[bytes], X],
    value: DecodeInput,
) -> Result[X, DecodeError | ConversionError]:
    return decode_unpadded_with(convert, value)


def decode_text_padded_with(
    convert: Callable[[bytes], X],
    value: DecodeInput,
) -> Result[X, DecodeError | ConversionError]:
    return decode_padded_with(convert, value)


def decode_text_lenient(value: DecodeInput) -> str:
    """
    Leniently decode base64url to Latin-1 text. Never fails.

    **Not RFC 4648 compliant**, see ``b64url.lenient``.

    >>> decode_text_lenient("PDw_%%%$}Pj4")
    '<<?>>'
    """
    return latin1(decode_lenient(value))

"""
Strict base64url decoding (RFC 4648 §5).

Three decoders share one block decoder and differ only in how they treat
padding:

- ``decode``: padding optional; missing '=' is restored before decoding
- ``decode_unpadded``: any '=' is an error
- ``decode_padded``: '=' required wherever the length calls for it

Decoders never raise on malformed input. They return ``Ok(bytes)`` or
``Err(DecodeError)``; the ``*_with`` variants additionally run a caller
conversion on the decoded bytes and report its failure as
``Err(ConversionError)``.

Trailing bits: the last symbol of a partial group carries 2 or 4 bits past
the final byte. RFC 4648 §3.5 lets decoders ignore them, which is the default.
With ``strict=True`` they must be zero (canonical encoding), otherwise the
result is ``NonCanonicalError``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar, Union

from b64url._logging import get_logger
from b64url.alphabet import URL_SAFE, Alphabet
from b64url.constants import (
    DECODED_BLOCK_SIZE,
    ENCODED_BLOCK_SIZE,
    MAX_PAD_LENGTH,
    PARTIAL_GROUP_BYTES,
    SYMBOL_BITS,
)
from b64url.exceptions import (
    ConversionError,
    DecodeError,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidPaddingError,
    NonCanonicalError,
    PaddingRequiredError,
)
from b64url.result import Err, Ok, Result
from b64url.tagged import Base64Url, Padding, RawInput, as_tagged

__all__ = [
    "DecodeInput",
    "decode",
    "decode_padded",
    "decode_padded_with",
    "decode_unpadded",
    "decode_unpadded_with",
    "decode_with",
    "to_symbols",
    "unpack_values",
]

_logger = get_logger(__name__)

X = TypeVar("X")

DecodeInput = Union[Base64Url[bytes], Base64Url[str], RawInput]


# =============================================================================
# BLOCK DECODING
# =============================================================================


def to_symbols(value: RawInput) -> Result[bytes, DecodeError]:
    """
    Get the raw symbol bytes of a payload.

    Args:
        value: bytes-like payload, or str that must be pure ASCII

    Returns:
        Ok(symbol bytes), or Err(InvalidCharacterError) at the first non-ASCII character
    """
    if isinstance(value, str):
        try:
            return Ok(value.encode("ascii"))
        except UnicodeEncodeError as e:
            return Err(InvalidCharacterError("Non-ASCII character in base64url input", e.start))
    return Ok(bytes(value))


def unpack_values(values: Sequence[int], *, strict: bool = False) -> Result[bytes, DecodeError]:
    """
    Reassemble bytes from 6-bit values.

    Every 4 values become 3 bytes. A trailing run of 2 or 3 values becomes
    1 or 2 bytes; a trailing run of 1 value cannot hold a byte.

    Args:
        values: 6-bit symbol values, pad symbols already removed
        strict: Require the unused low bits of the last value to be zero

    Returns:
        Ok(bytes), or Err(InvalidLengthError | NonCanonicalError)
    """
    out = bytearray()
    full = len(values) - len(values) % ENCODED_BLOCK_SIZE

    for i in range(0, full, ENCODED_BLOCK_SIZE):
        group = (values[i] << 18) | (values[i + 1] << 12) | (values[i + 2] << 6) | values[i + 3]
        out.extend(group.to_bytes(DECODED_BLOCK_SIZE, "big"))

    remainder = len(values) - full
    if remainder:
        byte_count = PARTIAL_GROUP_BYTES[remainder]
        if byte_count is None:
            return Err(InvalidLengthError(f"Invalid base64url length: {len(values)} symbols"))

        group = 0
        for value in values[full:]:
            group = (group << SYMBOL_BITS) | value
        group <<= SYMBOL_BITS * (ENCODED_BLOCK_SIZE - remainder)

        dropped_bits = 8 * (DECODED_BLOCK_SIZE - byte_count)
        if strict and group & ((1 << dropped_bits) - 1):
            return Err(NonCanonicalError("Non-canonical base64url encoding", len(values) - 1))
        out.extend((group >> dropped_bits).to_bytes(byte_count, "big"))

    return Ok(bytes(out))


def _decode_blocks(data: bytes, alphabet: Alphabet, strict: bool) -> Result[bytes, DecodeError]:
    """Decode symbols whose length is a multiple of 4, with an optional pad run."""
    value_of = alphabet.value_of
    values: list[int] = []
    pad_start = len(data)

    for offset, symbol in enumerate(data):
        value = value_of(symbol)
        if value is None:
            if alphabet.is_pad(symbol):
                pad_start = offset
                break
            return Err(InvalidCharacterError("Invalid base64url character", offset))
        values.append(value)

    # Pad symbols may only form a short run at the very end
    for offset in range(pad_start, len(data)):
        if not alphabet.is_pad(data[offset]):
            return Err(InvalidPaddingError("Base64url data after padding", offset))
    if len(data) - pad_start > MAX_PAD_LENGTH:
        return Err(InvalidPaddingError(f"Too many pad symbols: {len(data) - pad_start}", pad_start))

    return unpack_values(values, strict=strict)


def _restore_padding(data: bytes, alphabet: Alphabet) -> bytes:
    missing = -len(data) % ENCODED_BLOCK_SIZE
    return data + bytes([alphabet.pad]) * missing


def _rejected(decoder: str, error: DecodeError) -> Err[DecodeError]:
    _logger.debug(
        "Decode rejected: decoder=%s error_type=%s offset=%s",
        decoder,
        type(error).__name__,
        error.offset,
    )
    return Err(error)


# =============================================================================
# DECODERS
# =============================================================================


def decode(
    value: DecodeInput,
    *,
    alphabet: Alphabet = URL_SAFE,
    strict: bool = False,
) -> Result[bytes, DecodeError]:
    """
    Decode base64url, padded or not.

    Accepts any padding tag. Input whose length is not a multiple of 4 is
    treated as unpadded and the missing '=' symbols are restored first.

    Args:
        value: Tagged payload, or raw bytes/str
        alphabet: Symbol table (URL-safe by default)
        strict: Reject non-canonical trailing bits

    Returns:
        Ok(decoded bytes), or Err with:
        - InvalidLengthError: length is 1 mod 4
        - InvalidPaddingError: misplaced or excess '=' (e.g. ``"PDw-Pg="``)
        - InvalidCharacterError: symbol outside the alphabet
        - NonCanonicalError: non-zero trailing bits (strict only)
    """
    tagged = as_tagged(value)
    symbols = to_symbols(tagged.value)
    if isinstance(symbols, Err):
        return _rejected("decode", symbols.error)
    data = symbols.value

    if not data:
        return Ok(b"")

    remainder = len(data) % ENCODED_BLOCK_SIZE
    if remainder == 1:
        return _rejected("decode", InvalidLengthError(f"Invalid base64url length: {len(data)}"))
    if remainder:
        # Unpadded shape; a trailing '=' means the padding is wrong, not absent
        if alphabet.is_pad(data[-1]):
            return _rejected("decode", InvalidPaddingError("Base64url input has invalid padding", len(data) - 1))
        data = _restore_padding(data, alphabet)

    result = _decode_blocks(data, alphabet, strict)
    if isinstance(result, Err):
        return _rejected("decode", result.error)
    return result


def decode_unpadded(
    value: DecodeInput,
    *,
    alphabet: Alphabet = URL_SAFE,
    strict: bool = False,
) -> Result[bytes, DecodeError]:
    """
    Decode base64url that must not contain padding.

    Args:
        value: Payload tagged ``UNPADDED`` or ``UNSPECIFIED``, or raw bytes/str
        alphabet: Symbol table (URL-safe by default)
        strict: Reject non-canonical trailing bits

    Returns:
        Ok(decoded bytes), or Err with:
        - InvalidPaddingError: tagged ``PADDED``, or any '=' present
        - InvalidLengthError: length is 1 mod 4
        - InvalidCharacterError: symbol outside the alphabet
        - NonCanonicalError: non-zero trailing bits (strict only)
    """
    tagged = as_tagged(value)
    if tagged.padding is Padding.PADDED:
        return _rejected("decode_unpadded", InvalidPaddingError("Padded input given to unpadded decoder"))

    symbols = to_symbols(tagged.value)
    if isinstance(symbols, Err):
        return _rejected("decode_unpadded", symbols.error)
    data = symbols.value

    if not data:
        return Ok(b"")

    for offset, symbol in enumerate(data):
        if alphabet.is_pad(symbol):
            return _rejected("decode_unpadded", InvalidPaddingError("Unexpected padding in unpadded input", offset))

    if len(data) % ENCODED_BLOCK_SIZE == 1:
        return _rejected("decode_unpadded", InvalidLengthError(f"Invalid base64url length: {len(data)}"))

    result = _decode_blocks(_restore_padding(data, alphabet), alphabet, strict)
    if isinstance(result, Err):
        return _rejected("decode_unpadded", result.error)
    return result


def decode_padded(
    value: DecodeInput,
    *,
    alphabet: Alphabet = URL_SAFE,
    strict: bool = False,
) -> Result[bytes, DecodeError]:
    """
    Decode base64url that must carry explicit padding.

    Args:
        value: Payload tagged ``PADDED`` or ``UNSPECIFIED``, or raw bytes/str
        alphabet: Symbol table (URL-safe by default)
        strict: Reject non-canonical trailing bits

    Returns:
        Ok(decoded bytes), or Err with:
        - PaddingRequiredError: tagged ``UNPADDED``, or length is 2 or 3 mod 4
        - InvalidLengthError: length is 1 mod 4
        - InvalidPaddingError: misplaced or excess '='
        - InvalidCharacterError: symbol outside the alphabet
        - NonCanonicalError: non-zero trailing bits (strict only)
    """
    tagged = as_tagged(value)
    if tagged.padding is Padding.UNPADDED:
        return _rejected("decode_padded", PaddingRequiredError("Unpadded input given to padded decoder"))

    symbols = to_symbols(tagged.value)
    if isinstance(symbols, Err):
        return _rejected("decode_padded", symbols.error)
    data = symbols.value

    if not data:
        return Ok(b"")

    remainder = len(data) % ENCODED_BLOCK_SIZE
    if remainder == 1:
        return _rejected("decode_padded", InvalidLengthError(f"Invalid base64url length: {len(data)}"))
    if remainder:
        return _rejected("decode_padded", PaddingRequiredError("Base64url input requires padding"))

    result = _decode_blocks(data, alphabet, strict)
    if isinstance(result, Err):
        return _rejected("decode_padded", result.error)
    return result


# =============================================================================
# DECODE + CONVERT
# =============================================================================


def _converted(convert: Callable[[bytes], X], raw: bytes) -> Result[X, ConversionError]:
    try:
        return Ok(convert(raw))
    except Exception as e:
        _logger.debug("Conversion failed: error_type=%s", type(e).__name__)
        return Err(ConversionError(e))


def decode_with(
    convert: Callable[[bytes], X],
    value: DecodeInput,
    *,
    alphabet: Alphabet = URL_SAFE,
    strict: bool = False,
) -> Result[X, DecodeError | ConversionError]:
    """
    Decode, then convert the decoded bytes.

    The decoder is chosen by the padding tag: ``PADDED`` uses
    ``decode_padded``, ``UNPADDED`` uses ``decode_unpadded`` and
    ``UNSPECIFIED`` (including raw input) uses ``decode``.

    Args:
        convert: Conversion of the decoded bytes (e.g. UTF-8 decoding);
            any exception it raises is captured
        value: Tagged payload, or raw bytes/str
        alphabet: Symbol table (URL-safe by default)
        strict: Reject non-canonical trailing bits

    Returns:
        Ok(converted value), Err(DecodeError) if decoding failed,
        or Err(ConversionError) if ``convert`` raised
    """
    tagged = as_tagged(value)
    if tagged.padding is Padding.PADDED:
        decoded = decode_padded(tagged, alphabet=alphabet, strict=strict)
    elif tagged.padding is Padding.UNPADDED:
        decoded = decode_unpadded(tagged, alphabet=alphabet, strict=strict)
    else:
        decoded = decode(tagged, alphabet=alphabet, strict=strict)
    return decoded.and_then(lambda raw: _converted(convert, raw))


def decode_unpadded_with(
    convert: Callable[[bytes], X],
    value: DecodeInput,
    *,
    alphabet: Alphabet = URL_SAFE,
    strict: bool = False,
) -> Result[X, DecodeError | ConversionError]:
    """Like ``decode_with``, always using ``decode_unpadded``."""
    decoded = decode_unpadded(value, alphabet=alphabet, strict=strict)
    return decoded.and_then(lambda raw: _converted(convert, raw))


def decode_padded_with(
    convert: Callable[[bytes], X],
    value: DecodeInput,
    *,
    alphabet: Alphabet = URL_SAFE,
    strict: bool = False,
) -> Result[X, DecodeError | ConversionError]:
    """Like ``decode_with``, always using ``decode_padded``."""
    decoded = decode_padded(value, alphabet=alphabet, strict=strict)
    return decoded.and_then(lambda raw: _converted(convert, raw))

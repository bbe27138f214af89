"""
RFC 4648 §5 base64url codec.

Encodes and decodes the URL- and filename-safe base64 alphabet with explicit
padding policy: padded, unpadded, or either. Decoders return results instead
of raising, so malformed input is handled as data.

Usage:
    from b64url import Ok, Err, decode, encode, encode_unpadded

    token = encode_unpadded(b"<<?>>")       # Base64Url(UNPADDED, b'PDw_Pj4')
    match decode(token):
        case Ok(raw):
            ...
        case Err(error):
            ...

Usage (str in, str out):
    from b64url.text import decode_text_with, encode_text, utf8
"""

from b64url.alphabet import URL_SAFE, Alphabet, TableAlphabet
from b64url.decoder import (
    decode,
    decode_padded,
    decode_padded_with,
    decode_unpadded,
    decode_unpadded_with,
    decode_with,
)
from b64url.encoder import encode, encode_unpadded, encoded_length
from b64url.exceptions import (
    Base64Error,
    ConversionError,
    DecodeError,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidPaddingError,
    NonCanonicalError,
    PaddingRequiredError,
)
from b64url.lenient import decode_lenient
from b64url.result import Err, Ok, Result
from b64url.tagged import Base64Url, Padding
from b64url.validation import is_base64url, is_valid_base64url

__all__ = [
    # Alphabet
    "URL_SAFE",
    "Alphabet",
    "TableAlphabet",
    # Types
    "Base64Url",
    "Err",
    "Ok",
    "Padding",
    "Result",
    # Encoding
    "encode",
    "encode_unpadded",
    "encoded_length",
    # Decoding
    "decode",
    "decode_lenient",
    "decode_padded",
    "decode_padded_with",
    "decode_unpadded",
    "decode_unpadded_with",
    "decode_with",
    # Validation
    "is_base64url",
    "is_valid_base64url",
    # Exceptions
    "Base64Error",
    "ConversionError",
    "DecodeError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "InvalidPaddingError",
    "NonCanonicalError",
    "PaddingRequiredError",
]

__version__ = "0.1.0"

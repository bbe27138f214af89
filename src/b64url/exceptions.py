"""
Exception hierarchy for b64url.

All codec errors inherit from Base64Error for easy catching.

Decoders return these as values (``Err(error)``) rather than raising them;
``Result.unwrap()`` raises the carried error.
"""


class Base64Error(Exception):
    """Base exception for all base64url errors."""


class DecodeError(Base64Error):
    """Input is not a decodable base64url value.

    Attributes:
        offset: Index of the offending symbol in the input, when one exists.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        self.offset = offset
        super().__init__(message if offset is None else f"{message} at offset {offset}")


class InvalidLengthError(DecodeError):
    """Input length cannot belong to any base64url encoding.

    A length of 1 mod 4 never can: a single trailing symbol carries only
    6 bits, too few for a byte.
    """


class InvalidCharacterError(DecodeError):
    """Input contains a symbol outside the alphabet that is not the pad symbol."""


class InvalidPaddingError(DecodeError):
    """Pad symbols are misplaced, too many, or present where forbidden."""


class NonCanonicalError(InvalidPaddingError):
    """Trailing bits that fall into the padding are not zero.

    Only reported by strict decoding. Two such encodings decode to the
    same bytes, so only the all-zero form is canonical.
    """


class PaddingRequiredError(DecodeError):
    """Input needs explicit padding but none was supplied."""


class ConversionError(Base64Error):
    """Caller-supplied conversion of decoded bytes failed.

    The original exception is kept in ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Conversion of decoded bytes failed: {type(cause).__name__}: {cause}")
        self.__cause__ = cause

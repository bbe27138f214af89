"""Unit tests for the exception hierarchy."""

import pytest

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


class TestHierarchy:
    """All codec errors share one root."""

    @pytest.mark.parametrize(
        "error_type",
        [InvalidLengthError, InvalidCharacterError, InvalidPaddingError, NonCanonicalError, PaddingRequiredError],
    )
    def test_decode_errors(self, error_type: type[DecodeError]) -> None:
        assert issubclass(error_type, DecodeError)
        assert issubclass(error_type, Base64Error)

    def test_non_canonical_is_padding_error(self) -> None:
        assert issubclass(NonCanonicalError, InvalidPaddingError)

    def test_conversion_error_is_not_decode_error(self) -> None:
        assert issubclass(ConversionError, Base64Error)
        assert not issubclass(ConversionError, DecodeError)


class TestMessages:
    """Test error attributes and messages."""

    def test_offset_in_message(self) -> None:
        error = InvalidCharacterError("Invalid base64url character", 7)

        assert error.offset == 7
        assert str(error) == "Invalid base64url character at offset 7"

    def test_no_offset(self) -> None:
        error = InvalidLengthError("Invalid base64url length: 5")

        assert error.offset is None
        assert str(error) == "Invalid base64url length: 5"

    def test_conversion_error_keeps_cause(self) -> None:
        cause = ValueError("not text")
        error = ConversionError(cause)

        assert error.cause is cause
        assert error.__cause__ is cause
        assert "ValueError: not text" in str(error)

"""Unit tests for base64url encoding."""

import base64
from collections.abc import Callable

import pytest

from b64url.encoder import encode, encode_unpadded, encoded_length
from b64url.tagged import Padding
from tests.conftest import PAYLOAD_LENGTHS, SAMPLE, SAMPLE_PADDED, SAMPLE_UNPADDED


class TestEncode:
    """Test padded encoding."""

    def test_sample(self) -> None:
        """'<<?>>' encodes with the URL-safe '_' symbol."""
        result = encode(SAMPLE)

        assert result.value == SAMPLE_PADDED
        assert result.padding is Padding.PADDED

    def test_empty(self) -> None:
        """Empty input encodes to empty output."""
        assert encode(b"").value == b""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\xfb", b"-w=="),
            (b"\xff", b"_w=="),
            (b"\xfb\xff", b"-_8="),
            (b"\xfb\xff\xbf", b"-_-_"),
        ],
    )
    def test_url_symbols(self, data: bytes, expected: bytes) -> None:
        """Values 62 and 63 map to '-' and '_', never '+' or '/'."""
        assert encode(data).value == expected

    @pytest.mark.parametrize("length", PAYLOAD_LENGTHS)
    def test_matches_stdlib(self, length: int, payload_factory: Callable[[int], bytes]) -> None:
        """Output agrees with base64.urlsafe_b64encode."""
        data = payload_factory(length)
        assert encode(data).value == base64.urlsafe_b64encode(data)

    @pytest.mark.parametrize("length", PAYLOAD_LENGTHS)
    def test_length_law(self, length: int) -> None:
        """Padded length is 4 * ceil(n / 3)."""
        assert len(encode(b"\x00" * length).value) == 4 * -(-length // 3)

    def test_accepts_bytes_like(self) -> None:
        """bytearray and memoryview encode like bytes."""
        assert encode(bytearray(SAMPLE)).value == SAMPLE_PADDED
        assert encode(memoryview(SAMPLE)).value == SAMPLE_PADDED

    def test_rejects_str(self) -> None:
        """Text must be encoded to bytes first (see b64url.text)."""
        with pytest.raises(TypeError, match="bytes-like"):
            encode("<<?>>")  # type: ignore[arg-type]


class TestEncodeUnpadded:
    """Test unpadded encoding."""

    def test_sample(self) -> None:
        result = encode_unpadded(SAMPLE)

        assert result.value == SAMPLE_UNPADDED
        assert result.padding is Padding.UNPADDED

    def test_empty(self) -> None:
        assert encode_unpadded(b"").value == b""

    @pytest.mark.parametrize("length", PAYLOAD_LENGTHS)
    def test_no_padding_and_length_law(self, length: int, payload_factory: Callable[[int], bytes]) -> None:
        """No '=' and length is ceil(4n / 3)."""
        encoded = encode_unpadded(payload_factory(length)).value

        assert b"=" not in encoded
        assert len(encoded) == -(-4 * length // 3)

    @pytest.mark.parametrize("length", PAYLOAD_LENGTHS)
    def test_is_padded_form_stripped(self, length: int, payload_factory: Callable[[int], bytes]) -> None:
        """Unpadded output is the padded output without trailing '='."""
        data = payload_factory(length)
        assert encode_unpadded(data).value == encode(data).value.rstrip(b"=")


class TestEncodedLength:
    """Test encoded length calculation."""

    @pytest.mark.parametrize(
        ("n", "padded", "unpadded"),
        [(0, 0, 0), (1, 4, 2), (2, 4, 3), (3, 4, 4), (4, 8, 6), (5, 8, 7), (6, 8, 8)],
    )
    def test_lengths(self, n: int, padded: int, unpadded: int) -> None:
        assert encoded_length(n) == padded
        assert encoded_length(n, padded=False) == unpadded

    def test_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            encoded_length(-1)

"""Curated base64url decoding vectors.

Cases for padding policy, canonicity and the URL-safe symbols, grouped by
decoder. Stored as JSON next to this file.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from b64url import exceptions
from b64url.decoder import decode, decode_padded, decode_unpadded
from b64url.lenient import decode_lenient
from b64url.result import Err, Ok

STRICT_DECODERS = {
    "decode": decode,
    "decode_padded": decode_padded,
    "decode_unpadded": decode_unpadded,
}


def load_vectors() -> list[dict[str, Any]]:
    """Load base64url vectors, flattening group settings into each test."""
    path = Path(__file__).parent / "base64url_vectors.json"
    with path.open() as f:
        data: dict[str, Any] = json.load(f)
    return [
        {**test, "decoder": group["decoder"], "strict": group["strict"]}
        for group in data["testGroups"]
        for test in group["tests"]
    ]


def vector_id(test: dict[str, Any]) -> str:
    """Generate test ID from vector."""
    return f"tc{test['tcId']}-{test['decoder']}-{test['result']}"


@pytest.mark.vectors
class TestBase64UrlVectors:
    """Curated base64url vectors."""

    def test_vector_count(self) -> None:
        """Every vector in the file is collected."""
        path = Path(__file__).parent / "base64url_vectors.json"
        with path.open() as f:
            data: dict[str, Any] = json.load(f)
        assert len(load_vectors()) == data["numberOfTests"]

    @pytest.mark.parametrize("test", load_vectors(), ids=vector_id)
    def test_vector(self, test: dict[str, Any]) -> None:
        encoded: str = test["encoded"]

        if test["decoder"] == "decode_lenient":
            assert decode_lenient(encoded) == bytes.fromhex(test["decoded"])
            return

        result = STRICT_DECODERS[test["decoder"]](encoded, strict=test["strict"])

        if test["result"] == "valid":
            assert result == Ok(bytes.fromhex(test["decoded"])), test["comment"]
        else:
            expected_error = getattr(exceptions, test["error"])
            assert isinstance(result, Err), test["comment"]
            assert type(result.error) is expected_error, test["comment"]

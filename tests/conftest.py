"""Shared test fixtures for b64url tests."""

import logging
import secrets
from collections.abc import Callable

import pytest

# Enable b64url debug logging during tests
logging.getLogger("b64url").setLevel(logging.DEBUG)
logging.getLogger("b64url").addHandler(logging.StreamHandler())


# === Sample Values ===

# The 5 bytes 3C 3C 3F 3E 3E: both URL-specific symbols show up when encoded
SAMPLE = b"<<?>>"
SAMPLE_PADDED = b"PDw_Pj4="
SAMPLE_UNPADDED = b"PDw_Pj4"

# Lengths covering every remainder mod 3 plus a few multi-block sizes
PAYLOAD_LENGTHS = [0, 1, 2, 3, 4, 5, 6, 7, 31, 32, 33, 255, 256, 1024]


# === Payload Fixtures ===


@pytest.fixture
def payload_factory() -> Callable[[int], bytes]:
    """Factory for generating random payloads of specified length.

    Usage:
        def test_something(payload_factory):
            data = payload_factory(32)
    """

    def _make_payload(length: int) -> bytes:
        return secrets.token_bytes(length)

    return _make_payload


@pytest.fixture(scope="session")
def all_bytes() -> bytes:
    """Every byte value once, in order."""
    return bytes(range(256))


# === Log Capture ===


@pytest.fixture
def codec_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture b64url debug logs."""
    caplog.set_level(logging.DEBUG, logger="b64url")
    return caplog

"""
Padding-tagged base64url payloads.

An encoded value carries a ``Padding`` tag saying which shape it is known to
have. Encoders fix the tag; decoders check it against the operation before
looking at the payload, so a padded value can never be silently stripped by
an unpadded decoder.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from typing_extensions import TypeAlias

__all__ = [
    "Base64Url",
    "Encodable",
    "Padding",
    "RawInput",
    "as_tagged",
]

T = TypeVar("T", bytes, str)
U = TypeVar("U", bytes, str)

Encodable: TypeAlias = Union[bytes, bytearray, memoryview]
RawInput: TypeAlias = Union[bytes, bytearray, memoryview, str]

_PAYLOAD_TYPES = (bytes, bytearray, memoryview, str)


class Padding(Enum):
    """Padding state of an encoded payload."""

    PADDED = "padded"
    """Length is a multiple of 4, trailing '=' where needed."""

    UNPADDED = "unpadded"
    """No '=' at all."""

    UNSPECIFIED = "unspecified"
    """Either shape; determined from the payload when decoding."""


@dataclass(frozen=True)
class Base64Url(Generic[T]):
    """
    Base64url payload annotated with its padding state.

    The wrapper itself is validated on construction; whether ``value`` really
    has the claimed shape is only checked by the decoders.
    """

    padding: Padding
    value: T

    def __post_init__(self) -> None:
        if not isinstance(self.padding, Padding):
            raise TypeError(f"padding must be a Padding, got {type(self.padding).__name__}")
        if not isinstance(self.value, _PAYLOAD_TYPES):
            raise TypeError(f"value must be bytes-like or str, got {type(self.value).__name__}")

    @classmethod
    def padded(cls, value: T) -> Base64Url[T]:
        """Wrap a payload expected to carry explicit padding."""
        return cls(Padding.PADDED, value)

    @classmethod
    def unpadded(cls, value: T) -> Base64Url[T]:
        """Wrap a payload expected to carry no padding."""
        return cls(Padding.UNPADDED, value)

    @classmethod
    def unspecified(cls, value: T) -> Base64Url[T]:
        """Wrap a payload whose padding state is not known."""
        return cls(Padding.UNSPECIFIED, value)

    @classmethod
    def assume(cls, padding: Padding, value: T) -> Base64Url[T]:
        """Wrap a payload with an explicit padding state."""
        return cls(padding, value)

    def extract(self) -> T:
        """Return the payload, dropping the tag."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> Base64Url[U]:
        """Transform the payload, keeping the padding tag."""
        return Base64Url(self.padding, fn(self.value))

    def __len__(self) -> int:
        return len(self.value)


def as_tagged(value: Base64Url[bytes] | Base64Url[str] | RawInput) -> Base64Url[bytes] | Base64Url[str]:
    """
    Coerce decoder input to a tagged value.

    Raw bytes-like and str inputs carry no padding claim and become
    ``Padding.UNSPECIFIED``.

    Raises:
        TypeError: If value is neither tagged, bytes-like, nor str
    """
    if isinstance(value, Base64Url):
        return value
    return Base64Url(Padding.UNSPECIFIED, value)

"""
HMAC-SHA1 digest value and its representations.

Hex output is lowercase, matching the RFC 2202 test vectors.
"""

import base64
import binascii
import hmac
from typing import List

from .constants import DIGEST_SIZE


class Digest:
    """
    Immutable 20-byte HMAC-SHA1 digest.

    All conversions are total; only the ``from_*`` constructors can fail.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes):
        data = bytes(data)
        if len(data) != DIGEST_SIZE:
            raise ValueError(
                f"digest must be {DIGEST_SIZE} bytes, got {len(data)}"
            )
        self._data = data

    @classmethod
    def from_hex(cls, text: str) -> "Digest":
        """
        Parse a 40-character hex string (either case).

        Raises:
            ValueError: If text is not valid hex of the right length
        """
        if len(text) != 2 * DIGEST_SIZE:
            raise ValueError(
                f"hex digest must be {2 * DIGEST_SIZE} characters, got {len(text)}"
            )
        return cls(bytes.fromhex(text))

    @classmethod
    def from_base64(cls, text: str) -> "Digest":
        """
        Parse a standard, padded base64 string.

        Raises:
            ValueError: If text is not valid base64 of the right length
        """
        try:
            data = base64.b64decode(text, validate=True)
        except binascii.Error as e:
            raise ValueError(f"invalid base64 digest: {e}") from e
        return cls(data)

    def to_bytes(self) -> bytes:
        """Return the raw 20 digest bytes."""
        return self._data

    def to_byte_values(self) -> List[int]:
        """Return the digest as a list of 20 integers in [0, 255]."""
        return list(self._data)

    def to_hex(self) -> str:
        """Return the digest as 40 lowercase hex characters."""
        return self._data.hex()

    def to_base64(self) -> str:
        """Return the digest as padded base64 (28 characters)."""
        return base64.b64encode(self._data).decode("ascii")

    def __bytes__(self):
        return self._data

    def __len__(self):
        return DIGEST_SIZE

    def __eq__(self, other):
        if not isinstance(other, Digest):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    def __hash__(self):
        return hash(self._data)

    def __str__(self):
        return self.to_hex()

    def __repr__(self):
        return f"Digest('{self.to_hex()}')"

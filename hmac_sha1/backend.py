"""
SHA-1 hash backend.

The HMAC construction only needs a function from bytes to a 20-byte digest.
Anything with a ``sha1(data)`` method can be passed where a backend is
expected, which lets the padding and double-hash logic be exercised with a
stub hash in tests.
"""

import hashlib
from typing import Optional, Protocol


class SHA1Backend(Protocol):
    """Capability interface for the SHA-1 primitive."""

    def sha1(self, data: bytes) -> bytes:
        """Return the 20-byte SHA-1 digest of ``data``."""
        ...


class HashlibSHA1:
    """Default backend delegating to :func:`hashlib.sha1`."""

    def sha1(self, data: bytes) -> bytes:
        return hashlib.sha1(data).digest()

    def __repr__(self):
        return "HashlibSHA1()"


DEFAULT_BACKEND = HashlibSHA1()


def resolve_backend(backend: Optional[SHA1Backend] = None) -> SHA1Backend:
    """Return ``backend``, or the hashlib backend when it is None."""
    return DEFAULT_BACKEND if backend is None else backend

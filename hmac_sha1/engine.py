"""
HMAC-SHA1 computation (RFC 2104).

    HMAC(K, m) = H((K0 ^ opad) || H((K0 ^ ipad) || m))

where K0 is the key normalized to the block size.
"""

import hmac
from typing import Optional, Union

from .backend import SHA1Backend, resolve_backend
from .constants import BLOCK_SIZE, DIGEST_SIZE, IPAD, OPAD
from .representation import Digest
from .key import Key, KeyInput, as_bytes, normalize

# Byte-wise XOR tables for the two pads
_TRANS_36 = bytes((x ^ IPAD) for x in range(256))
_TRANS_5C = bytes((x ^ OPAD) for x in range(256))


class HMACEngine:
    """
    Computes HMAC-SHA1 digests over an injected SHA-1 backend.

    The engine holds no per-call state and can be shared freely.
    """

    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, backend: Optional[SHA1Backend] = None):
        """
        Initialize the engine.

        Args:
            backend: Object exposing ``sha1(bytes) -> bytes`` (default: hashlib)
        """
        self.backend = resolve_backend(backend)

    def compute(self, key: Key, message: bytes) -> Digest:
        """
        Compute the HMAC of a message under a normalized key.

        Args:
            key: Block-sized key from :func:`normalize`
            message: Message bytes of any length

        Returns:
            20-byte Digest
        """
        key_bytes = bytes(key)
        inner_pad = key_bytes.translate(_TRANS_36)
        outer_pad = key_bytes.translate(_TRANS_5C)

        inner_hash = self.backend.sha1(inner_pad + message)
        return Digest(self.backend.sha1(outer_pad + inner_hash))

    def digest(self, key: KeyInput, message: KeyInput) -> Digest:
        """
        Normalize the key, encode text inputs, and compute the HMAC.

        Args:
            key: Secret key as text (UTF-8) or bytes
            message: Message as text (UTF-8) or bytes

        Returns:
            20-byte Digest

        Raises:
            EncodingError: If a text key or message cannot be encoded
        """
        message_bytes = as_bytes(message, "message")
        normalized = normalize(key, self.backend)
        return self.compute(normalized, message_bytes)

    def verify(self, key: KeyInput, message: KeyInput,
               expected: Union[Digest, bytes, str]) -> bool:
        """
        Check a message against an expected digest in constant time.

        Args:
            key: Secret key as text (UTF-8) or bytes
            message: Message as text (UTF-8) or bytes
            expected: Digest, its 20 raw bytes, or its hex or base64 form

        Returns:
            True if the digest matches; False on mismatch or malformed input

        Raises:
            EncodingError: If a text key or message cannot be encoded
        """
        actual = self.digest(key, message)
        try:
            expected_digest = _coerce_digest(expected)
        except (ValueError, TypeError):
            return False

        return hmac.compare_digest(actual.to_bytes(), expected_digest.to_bytes())

    def __repr__(self):
        return f"HMACEngine(backend={self.backend!r})"


def _coerce_digest(value: Union[Digest, bytes, str]) -> Digest:
    """Interpret a Digest, raw bytes, or a hex/base64 string as a Digest."""
    if isinstance(value, Digest):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Digest(value)
    if isinstance(value, str):
        if len(value) == 2 * DIGEST_SIZE:
            return Digest.from_hex(value)
        return Digest.from_base64(value)
    raise TypeError(f"cannot interpret {type(value).__name__} as a digest")


_default_engine = HMACEngine()


def _engine_for(backend: Optional[SHA1Backend]) -> HMACEngine:
    return _default_engine if backend is None else HMACEngine(backend)


def digest(key: KeyInput, message: KeyInput,
           backend: Optional[SHA1Backend] = None) -> Digest:
    """
    Compute HMAC-SHA1 of a message.

    Example:
        >>> digest("key", "message").to_hex()
        '2088df74d5f2146b48146caf4965377e9d0be3a4'

    Args:
        key: Secret key as text (UTF-8) or bytes
        message: Message as text (UTF-8) or bytes
        backend: Optional SHA-1 backend (default: hashlib)

    Returns:
        20-byte Digest

    Raises:
        EncodingError: If a text key or message cannot be encoded
    """
    return _engine_for(backend).digest(key, message)


def verify(key: KeyInput, message: KeyInput,
           expected: Union[Digest, bytes, str],
           backend: Optional[SHA1Backend] = None) -> bool:
    """
    Verify an HMAC-SHA1 digest in constant time.

    See :meth:`HMACEngine.verify`.
    """
    return _engine_for(backend).verify(key, message, expected)

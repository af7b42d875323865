"""
HMAC-SHA1 (RFC 2104)

Computes HMAC-SHA1 digests and exposes them as raw bytes, byte values,
lowercase hex and base64.

Example usage:
    from hmac_sha1 import digest

    mac = digest("key", "message")
    mac.to_hex()     # '2088df74d5f2146b48146caf4965377e9d0be3a4'
    mac.to_base64()  # 'IIjfdNXyFGtIFGyvSWU3fp0L46Q='

SHA-1 is deprecated for collision resistance. HMAC-SHA1 remains usable for
existing protocols but should not be chosen for new designs.

Request signing for ``requests`` lives in :mod:`hmac_sha1.auth` and needs the
``http`` extra.
"""

from .backend import SHA1Backend, HashlibSHA1
from .representation import Digest
from .engine import HMACEngine, digest, verify
from .exceptions import (
    HMACSHA1Error,
    EncodingError,
    ConfigurationError
)
from .key import Key, normalize
from .constants import (
    BLOCK_SIZE,
    DIGEST_SIZE,
    HEADER_HMAC_HASH,
    HEADER_HMAC_TIMESTAMP,
    HEADER_HMAC_NONCE,
    DEFAULT_CONFIG,
    DEFAULT_KEY_INTERVAL
)

__version__ = "1.0.0"
__all__ = [
    "digest",
    "verify",
    "normalize",
    "Digest",
    "Key",
    "HMACEngine",
    "SHA1Backend",
    "HashlibSHA1",
    "HMACSHA1Error",
    "EncodingError",
    "ConfigurationError",
    "BLOCK_SIZE",
    "DIGEST_SIZE",
    "HEADER_HMAC_HASH",
    "HEADER_HMAC_TIMESTAMP",
    "HEADER_HMAC_NONCE",
    "DEFAULT_CONFIG",
    "DEFAULT_KEY_INTERVAL"
]

"""
HMAC-SHA1 request signing for ``requests``.

Signs the request body with a timestamp and nonce:

    HMAC-SHA1(timestamp + ":" + nonce + ":" + body)

and sends the lowercase hex digest, timestamp and nonce as headers.

Example usage:
    import requests
    from hmac_sha1.auth import HMACSHA1Auth

    session = requests.Session()
    session.auth = HMACSHA1Auth("your-secret-key")
    response = session.post("http://localhost:8080/api/items", json={"a": 1})
"""

import datetime
import uuid
from typing import Optional, Tuple, Union

import requests
from requests.auth import AuthBase
import structlog

from .constants import (
    HEADER_HMAC_HASH,
    HEADER_HMAC_TIMESTAMP,
    HEADER_HMAC_NONCE,
    DEFAULT_CONFIG,
    DEFAULT_KEY_INTERVAL,
)
from .engine import HMACEngine
from .exceptions import ConfigurationError, EncodingError
from .key import KeyInput

logger = structlog.get_logger(__name__)

Body = Union[bytes, str, None]


def _body_bytes(body: Body) -> bytes:
    """
    Normalize a prepared request body for signing.

    Seekable file bodies are read and rewound so ``requests`` can still
    stream them.

    Raises:
        TypeError: If the body is a stream that cannot be rewound
    """
    if body is None:
        return b''
    if isinstance(body, str):
        return body.encode('utf-8')
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)

    if hasattr(body, 'read') and hasattr(body, 'seek'):
        position = body.tell()
        data = body.read()
        body.seek(position)
        return data.encode('utf-8') if isinstance(data, str) else bytes(data)

    raise TypeError(
        f"cannot sign a streamed {type(body).__name__} body; "
        "pass bytes, text, or a seekable file"
    )


def _signing_message(timestamp: str, nonce: str, body: bytes) -> bytes:
    return f"{timestamp}:{nonce}:".encode('utf-8') + body


def sign(secret_key: KeyInput, body: Body,
         engine: Optional[HMACEngine] = None) -> Tuple[str, str, str]:
    """
    Sign a body with a fresh timestamp and nonce.

    Args:
        secret_key: HMAC secret key
        body: Request body
        engine: Optional engine (default: hashlib backend)

    Returns:
        Tuple of (hash, timestamp, nonce)

    Raises:
        TypeError: If the body is a stream that cannot be rewound
    """
    engine = engine or HMACEngine()

    # ISO 8601 timestamp in UTC
    timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
    nonce = str(uuid.uuid4())

    message = _signing_message(timestamp, nonce, _body_bytes(body))
    hash_value = engine.digest(secret_key, message).to_hex()
    return hash_value, timestamp, nonce


def _verify_timestamp(timestamp: str, key_interval: int) -> bool:
    """
    Verify timestamp is within allowed tolerance.

    Args:
        timestamp: ISO 8601 timestamp string
        key_interval: Tolerance in seconds

    Returns:
        True if timestamp is valid and within tolerance
    """
    if not isinstance(timestamp, str):
        return False

    try:
        ts = datetime.datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
    except (TypeError, ValueError):
        return False
    if ts.tzinfo is None:
        return False

    now = datetime.datetime.now(datetime.timezone.utc)
    diff = abs((now - ts).total_seconds())
    return diff <= key_interval


def verify_request(secret_key: KeyInput, body: Body, hash_value: str,
                   timestamp: str, nonce: str,
                   key_interval: int = DEFAULT_KEY_INTERVAL,
                   engine: Optional[HMACEngine] = None) -> bool:
    """
    Verify a signature produced by :func:`sign`.

    Args:
        secret_key: HMAC secret key
        body: Original request body
        hash_value: Hex-encoded signature
        timestamp: ISO 8601 timestamp that was signed
        nonce: Nonce that was signed
        key_interval: Timestamp tolerance in seconds
        engine: Optional engine (default: hashlib backend)

    Returns:
        True if the signature is valid and the timestamp within tolerance
    """
    engine = engine or HMACEngine()

    # Validate timestamp first (before checking signature)
    if not _verify_timestamp(timestamp, key_interval):
        logger.warning("Rejected signature", reason="timestamp", nonce=nonce)
        return False

    try:
        message = _signing_message(timestamp, nonce, _body_bytes(body))
    except (UnicodeEncodeError, TypeError):
        logger.warning("Rejected signature", reason="encoding", nonce=nonce)
        return False

    if not engine.verify(secret_key, message, hash_value):
        logger.warning("Rejected signature", reason="mismatch", nonce=nonce)
        return False
    return True


class HMACSHA1Auth(AuthBase):
    """
    ``requests`` authentication hook that adds HMAC-SHA1 headers.

    The hook only touches the prepared request; sending it is left to the
    caller's session.
    """

    def __init__(self, secret_key: KeyInput, engine: Optional[HMACEngine] = None,
                 **config):
        """
        Initialize the signer.

        Args:
            secret_key: HMAC secret key (must match server)
            engine: Optional engine (default: hashlib backend)
            **config: Configuration options (key_interval)

        Raises:
            ConfigurationError: If the configuration or secret key is invalid
        """
        self.secret_key = secret_key
        self.engine = engine or HMACEngine()

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

    def _validate_config(self):
        """Validate signer configuration."""
        if not self.secret_key:
            raise ConfigurationError("secret_key cannot be empty")

        if self.config['key_interval'] <= 0:
            raise ConfigurationError("key_interval must be positive")

        # Fail early on a text key that can never be encoded
        try:
            self.engine.digest(self.secret_key, b'')
        except EncodingError as e:
            raise ConfigurationError(f"secret_key is unusable: {e}") from e

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        hash_value, timestamp, nonce = sign(self.secret_key, request.body, self.engine)

        request.headers.update({
            HEADER_HMAC_HASH: hash_value,
            HEADER_HMAC_TIMESTAMP: timestamp,
            HEADER_HMAC_NONCE: nonce,
        })
        logger.debug("Signed request", method=request.method, nonce=nonce)
        return request

    def verify(self, body: Body, hash_value: str, timestamp: str, nonce: str) -> bool:
        """Verify a signature using this signer's key and tolerance."""
        return verify_request(
            self.secret_key, body, hash_value, timestamp, nonce,
            key_interval=self.config['key_interval'],
            engine=self.engine,
        )

    def __repr__(self):
        return f"HMACSHA1Auth(key_interval={self.config['key_interval']})"

"""
Key normalization for HMAC-SHA1.

RFC 2104 section 2: keys longer than the hash block size are hashed first,
then every key is right-padded with zero bytes to the block size.
"""

from typing import Optional, Union

from .backend import SHA1Backend, resolve_backend
from .constants import BLOCK_SIZE, TEXT_ENCODING
from .exceptions import EncodingError

BytesLike = Union[bytes, bytearray, memoryview]
KeyInput = Union[str, BytesLike]


def as_bytes(value: KeyInput, name: str = "value") -> bytes:
    """
    Convert a text or bytes-like input to bytes.

    Args:
        value: Text (encoded as UTF-8) or a bytes-like object
        name: Argument name used in error messages

    Returns:
        The input as immutable bytes

    Raises:
        EncodingError: If text cannot be encoded as UTF-8
        TypeError: If value is neither text nor bytes-like
    """
    if isinstance(value, str):
        try:
            return value.encode(TEXT_ENCODING)
        except UnicodeEncodeError as e:
            raise EncodingError(
                f"{name} is not encodable as {TEXT_ENCODING}: {e.reason}"
            ) from e
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"{name} must be str or bytes-like, not {type(value).__name__}"
    )


class Key:
    """
    A block-sized HMAC key.

    Instances always hold exactly ``BLOCK_SIZE`` bytes. Use :func:`normalize`
    to build one from a key of arbitrary length.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes):
        data = bytes(data)
        if len(data) != BLOCK_SIZE:
            raise ValueError(
                f"normalized key must be {BLOCK_SIZE} bytes, got {len(data)}"
            )
        self._data = data

    @classmethod
    def from_raw(cls, raw_key: KeyInput,
                 backend: Optional[SHA1Backend] = None) -> "Key":
        """Alias for :func:`normalize`."""
        return normalize(raw_key, backend)

    def __bytes__(self):
        return self._data

    def __len__(self):
        return BLOCK_SIZE

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        # Never expose key material
        return f"<Key {BLOCK_SIZE} bytes>"


def normalize(raw_key: KeyInput, backend: Optional[SHA1Backend] = None) -> Key:
    """
    Normalize a key of any length to the SHA-1 block size.

    Args:
        raw_key: Secret key as text (UTF-8) or bytes
        backend: SHA-1 backend used for over-long keys (default: hashlib)

    Returns:
        Key of exactly BLOCK_SIZE bytes

    Raises:
        EncodingError: If a text key cannot be encoded
    """
    data = as_bytes(raw_key, "key")
    if len(data) > BLOCK_SIZE:
        data = resolve_backend(backend).sha1(data)
    return Key(data.ljust(BLOCK_SIZE, b"\x00"))

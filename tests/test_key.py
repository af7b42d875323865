"""
Unit tests for key normalization.
"""

import hashlib
from unittest.mock import Mock

import pytest

from hmac_sha1 import BLOCK_SIZE, EncodingError, Key, normalize
from hmac_sha1.key import as_bytes


class TestNormalize:
    """Test normalize() padding and hashing."""

    def test_empty_key(self):
        """Empty key becomes a block of zero bytes."""
        assert bytes(normalize(b"")) == b"\x00" * BLOCK_SIZE

    def test_short_key_is_zero_padded(self):
        """Short keys are right-padded with zeros."""
        key = bytes(normalize(b"key"))

        assert len(key) == BLOCK_SIZE
        assert key[:3] == b"key"
        assert key[3:] == b"\x00" * (BLOCK_SIZE - 3)

    def test_block_sized_key_passes_through(self):
        """A key of exactly the block size is unchanged."""
        raw = bytes(range(BLOCK_SIZE))
        assert bytes(normalize(raw)) == raw

    def test_block_sized_key_is_not_hashed(self):
        """The backend is only used for keys longer than the block size."""
        backend = Mock()
        normalize(b"a" * BLOCK_SIZE, backend)

        backend.sha1.assert_not_called()

    def test_long_key_is_hashed_then_padded(self):
        """Keys over the block size are replaced by their SHA-1."""
        raw = b"x" * (BLOCK_SIZE + 1)
        expected = hashlib.sha1(raw).digest() + b"\x00" * (BLOCK_SIZE - 20)

        assert bytes(normalize(raw)) == expected

    def test_long_key_uses_backend(self):
        """The injected backend hashes over-long keys."""
        backend = Mock()
        backend.sha1.return_value = b"\x01" * 20
        raw = b"k" * 100

        key = normalize(raw, backend)

        backend.sha1.assert_called_once_with(raw)
        assert bytes(key) == b"\x01" * 20 + b"\x00" * (BLOCK_SIZE - 20)

    def test_text_key_is_utf8(self):
        """Text keys are encoded as UTF-8."""
        assert bytes(normalize("clé"))[:4] == "clé".encode("utf-8")

    def test_bytearray_and_memoryview(self):
        """Bytes-like keys are accepted."""
        assert normalize(bytearray(b"key")) == normalize(b"key")
        assert normalize(memoryview(b"key")) == normalize(b"key")

    def test_unencodable_text_key(self):
        """Lone surrogates cannot be encoded as UTF-8."""
        with pytest.raises(EncodingError):
            normalize("bad\udc80key")

    def test_invalid_type(self):
        """Non text, non bytes keys are rejected."""
        with pytest.raises(TypeError):
            normalize(12345)


class TestKey:
    """Test the Key value type."""

    def test_wrong_length_rejected(self):
        """Direct construction requires a block-sized buffer."""
        with pytest.raises(ValueError):
            Key(b"short")

    def test_from_raw(self):
        """Key.from_raw is equivalent to normalize."""
        assert Key.from_raw("key") == normalize("key")

    def test_len(self):
        """Key length is always the block size."""
        assert len(normalize("")) == BLOCK_SIZE

    def test_repr_hides_material(self):
        """repr does not leak key bytes."""
        assert "secret" not in repr(normalize("secret"))

    def test_hashable(self):
        """Equal keys hash equally."""
        assert len({normalize("a"), normalize(b"a")}) == 1


class TestAsBytes:
    """Test input coercion."""

    def test_error_names_argument(self):
        """Encoding errors mention the offending argument."""
        with pytest.raises(EncodingError, match="message"):
            as_bytes("\ud800", "message")

    def test_encoding_error_is_chained(self):
        """The original UnicodeEncodeError is kept as the cause."""
        with pytest.raises(EncodingError) as exc_info:
            as_bytes("\ud800")

        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

"""
Unit tests for digest representations.
"""

import base64

import pytest

from hmac_sha1 import DIGEST_SIZE, Digest, digest


class TestDigest:
    """Test Digest conversions."""

    @pytest.fixture
    def mac(self):
        """Digest of a known vector."""
        return digest("key", "message")

    def test_to_bytes(self, mac):
        """Raw bytes are exposed unchanged."""
        assert mac.to_bytes() == bytes.fromhex("2088df74d5f2146b48146caf4965377e9d0be3a4")
        assert bytes(mac) == mac.to_bytes()

    def test_to_byte_values(self, mac):
        """Byte values are ints in digest order."""
        values = mac.to_byte_values()

        assert len(values) == DIGEST_SIZE
        assert all(0 <= v <= 255 for v in values)
        assert values[:3] == [0x20, 0x88, 0xdf]
        assert bytes(values) == mac.to_bytes()

    def test_to_hex_lowercase(self, mac):
        """Hex output is 40 lowercase characters."""
        hex_value = mac.to_hex()

        assert len(hex_value) == 40
        assert hex_value == hex_value.lower()
        assert str(mac) == hex_value

    def test_to_base64(self, mac):
        """Base64 output is padded and 28 characters long."""
        b64 = mac.to_base64()

        assert b64 == "IIjfdNXyFGtIFGyvSWU3fp0L46Q="
        assert len(b64) == 28

    def test_hex_and_base64_agree(self, mac):
        """Decoding either text form yields the raw bytes."""
        assert bytes.fromhex(mac.to_hex()) == base64.b64decode(mac.to_base64())
        assert bytes.fromhex(mac.to_hex()) == mac.to_bytes()

    def test_from_hex(self, mac):
        """Hex parsing accepts either case."""
        assert Digest.from_hex(mac.to_hex()) == mac
        assert Digest.from_hex(mac.to_hex().upper()) == mac

    def test_from_base64(self, mac):
        """Base64 parsing round-trips."""
        assert Digest.from_base64(mac.to_base64()) == mac

    def test_from_hex_invalid(self):
        """Bad hex raises ValueError."""
        with pytest.raises(ValueError):
            Digest.from_hex("zz" * 20)
        with pytest.raises(ValueError):
            Digest.from_hex("ab" * 19)

    def test_from_hex_rejects_whitespace(self, mac):
        """Separated hex pairs are not a 40-character digest."""
        spaced = " ".join(mac.to_hex()[i:i + 2] for i in range(0, 40, 2))

        with pytest.raises(ValueError):
            Digest.from_hex(spaced)
        with pytest.raises(ValueError):
            Digest.from_hex(" " + mac.to_hex())

    def test_from_base64_invalid(self):
        """Bad base64 raises ValueError."""
        with pytest.raises(ValueError):
            Digest.from_base64("not base64!")
        with pytest.raises(ValueError):
            Digest.from_base64(base64.b64encode(b"\x00" * 19).decode())

    def test_wrong_length_rejected(self):
        """Digests are exactly 20 bytes."""
        with pytest.raises(ValueError):
            Digest(b"\x00" * 21)

    def test_equality_and_hash(self, mac):
        """Digests compare and hash by value."""
        same = Digest(mac.to_bytes())

        assert mac == same
        assert hash(mac) == hash(same)
        assert mac != digest("key", "other")
        assert mac != mac.to_bytes()

    def test_repr(self, mac):
        """repr shows the hex form."""
        assert repr(mac) == "Digest('2088df74d5f2146b48146caf4965377e9d0be3a4')"

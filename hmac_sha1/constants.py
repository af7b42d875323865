"""
Constants for the HMAC-SHA1 library.
SHA-1 sizes and pads follow RFC 2104 and FIPS 180-4.
"""

# SHA-1 parameters (not configurable)
BLOCK_SIZE = 64   # SHA-1 compression block, in bytes
DIGEST_SIZE = 20  # SHA-1 output, in bytes

# RFC 2104 padding bytes
IPAD = 0x36
OPAD = 0x5C

# Text inputs (keys, messages) are encoded with this codec
TEXT_ENCODING = "utf-8"

# HTTP Headers used by request signing
HEADER_HMAC_HASH = "X-HMAC-Hash"
HEADER_HMAC_TIMESTAMP = "X-HMAC-Timestamp"
HEADER_HMAC_NONCE = "X-HMAC-Nonce"

# Other constants
DEFAULT_KEY_INTERVAL = 5 * 60  # 5 minutes in seconds

# Default configuration values for request signing
DEFAULT_CONFIG = {
    'key_interval': DEFAULT_KEY_INTERVAL,  # timestamp tolerance in seconds
}

"""
Custom exceptions for the HMAC-SHA1 library.
"""


class HMACSHA1Error(Exception):
    """Base exception for HMAC-SHA1 errors."""
    pass


class EncodingError(HMACSHA1Error):
    """Raised when a text key or message cannot be encoded to bytes."""
    pass


class ConfigurationError(HMACSHA1Error):
    """Raised when request signing configuration is invalid."""
    pass

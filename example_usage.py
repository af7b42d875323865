#!/usr/bin/env python3
"""
Basic usage examples for the HMAC-SHA1 library.

This script computes a few digests, shows their representations, verifies
them, and signs a request without sending it.
"""

import logging
import sys

import requests
import structlog

from hmac_sha1 import HMACSHA1Error, digest, verify
from hmac_sha1.auth import HMACSHA1Auth


def main():
    """Run basic usage examples."""

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )

    secret_key = "python-client-demo-secret"

    print("=== HMAC-SHA1 Basic Usage Examples ===\n")

    try:
        # Example 1: Digest representations
        print("1. Computing a digest...")
        mac = digest("key", "The quick brown fox jumps over the lazy dog")
        print(f"   Hex:         {mac.to_hex()}")
        print(f"   Base64:      {mac.to_base64()}")
        print(f"   Byte values: {mac.to_byte_values()}")
        print()

        # Example 2: Verification
        print("2. Verifying a digest...")
        test_data = b"Hello, HMAC world!"
        signature = digest(secret_key, test_data).to_hex()
        print(f"   Data: {test_data}")
        print(f"   Signature: {signature}")
        is_valid = verify(secret_key, test_data, signature)
        print(f"   Verification: {'✓ Valid' if is_valid else '✗ Invalid'}")
        is_valid = verify(secret_key, b"tampered", signature)
        print(f"   Tampered data: {'✓ Valid' if is_valid else '✗ Invalid'}")
        print()

        # Example 3: Request signing (needs the 'http' extra)
        print("3. Signing a request...")
        auth = HMACSHA1Auth(secret_key)
        request = requests.Request(
            'POST', 'http://localhost:8080/api/items', json={"name": "demo"}
        ).prepare()
        auth(request)
        for name in ('X-HMAC-Hash', 'X-HMAC-Timestamp', 'X-HMAC-Nonce'):
            print(f"   {name}: {request.headers[name]}")
        print()

    except HMACSHA1Error as e:
        print(f"Error: {e}")
        return 1

    print("=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())

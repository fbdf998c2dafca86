"""
Common utilities and helper functions for the grant store.
"""

import hashlib
import secrets
from datetime import datetime, timezone
from typing import Optional

from ..util.encoding import base64_encode


def get_current_time() -> datetime:
    """Get the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def generate_secure_handle(length: int = 32) -> str:
    """
    Generate a cryptographically secure opaque handle.

    Args:
        length: Number of random bytes; the handle is twice as many hex characters

    Returns:
        Upper-case hexadecimal handle string
    """
    if length <= 0:
        raise ValueError("Handle length must be positive")
    return secrets.token_hex(length).upper()


def hash_string(data: str, algorithm: str = "sha256", output: str = "base64") -> str:
    """
    Hash a string using the specified algorithm.

    Args:
        data: String to hash
        algorithm: Hash algorithm (sha256, sha512)
        output: Output encoding of the digest (base64 or hex)

    Returns:
        Encoded digest string
    """
    if algorithm == "sha256":
        digest = hashlib.sha256(data.encode('utf-8')).digest()
    elif algorithm == "sha512":
        digest = hashlib.sha512(data.encode('utf-8')).digest()
    else:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")

    if output == "base64":
        return base64_encode(digest)
    elif output == "hex":
        return digest.hex()
    else:
        raise ValueError(f"Unsupported digest encoding: {output}")


def is_missing(value: Optional[str]) -> bool:
    """Check whether a string is None, empty or whitespace only."""
    return value is None or not str(value).strip()

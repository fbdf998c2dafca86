"""
Common package providing shared utilities for the grant store.
"""

from .utils import get_current_time, generate_secure_handle, hash_string, is_missing

__all__ = [
    "get_current_time",
    "generate_secure_handle",
    "hash_string",
    "is_missing",
]

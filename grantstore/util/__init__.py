"""
Utility package providing encoding and configuration helpers for the grant store.
"""

from .encoding import base64_encode, json_encode, json_decode, parse_datetime
from .config import (
    get_config_value, get_bool_config, get_int_config,
    normalize_config_key, load_config_file,
)

__all__ = [
    "base64_encode",
    "json_encode",
    "json_decode",
    "parse_datetime",
    "get_config_value",
    "get_bool_config",
    "get_int_config",
    "normalize_config_key",
    "load_config_file",
]

"""
Encoding and decoding utilities for the grant store.
Provides the encoding functions used for hashed keys and serialized payloads.
"""

import base64
import json
from datetime import datetime
from typing import Any, Optional, Union


def base64_encode(data: Union[str, bytes]) -> str:
    """Encode data to base64 string."""
    if isinstance(data, str):
        data = data.encode('utf-8')

    return base64.b64encode(data).decode('ascii')


def json_encode(data: Any) -> str:
    """
    Encode data to a compact JSON string.
    Datetime values are written in ISO 8601 format.
    """
    def json_serializer(obj):
        """Serializer for non-standard types."""
        if isinstance(obj, datetime):
            return obj.isoformat()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    return json.dumps(data, default=json_serializer, separators=(',', ':'), ensure_ascii=False)


def json_decode(json_str: str) -> Any:
    """
    Decode a JSON string.
    Raises ValueError when the input is not valid JSON.
    """
    if not isinstance(json_str, str):
        raise ValueError(f"Expected JSON string, got {type(json_str).__name__}")

    return json.loads(json_str)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 string, passing None and datetimes through."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)

"""
Serialization of grant payloads into the opaque persisted ``data`` string.
"""

from abc import ABC, abstractmethod
from typing import Any, Type, TypeVar

from ..util.encoding import json_decode, json_encode


T = TypeVar("T")


class PersistentGrantSerializer(ABC):
    """Converts grant payloads to and from their persisted string form."""

    @abstractmethod
    def serialize(self, value: Any) -> str:
        """Serialize a payload."""
        pass

    @abstractmethod
    def deserialize(self, data: str, item_type: Type[T]) -> T:
        """
        Deserialize a payload.

        Raises:
            Exception: Any error if ``data`` cannot be turned into ``item_type``
        """
        pass


class JsonGrantSerializer(PersistentGrantSerializer):
    """
    JSON serializer for payloads exposing ``to_dict`` and ``from_dict``.

    Plain JSON values (dicts, lists, strings, numbers) pass through unchanged.
    """

    def serialize(self, value: Any) -> str:
        if hasattr(value, "to_dict"):
            value = value.to_dict()
        return json_encode(value)

    def deserialize(self, data: str, item_type: Type[T]) -> T:
        decoded = json_decode(data)
        if hasattr(item_type, "from_dict"):
            return item_type.from_dict(decoded)
        if not isinstance(decoded, item_type):
            raise TypeError(f"Expected {item_type.__name__}, got {type(decoded).__name__}")
        return decoded

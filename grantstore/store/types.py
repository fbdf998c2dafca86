"""
Storage types and interfaces for persisted grants.
Defines the grant record, the bulk query filter and the backend contract.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from ..common.utils import is_missing
from ..util.encoding import parse_datetime


class StorageError(Exception):
    """Base class for storage-related errors."""

    def __init__(self, operation: str, key: str = "", message: str = "",
                 cause: Optional[Exception] = None):
        self.operation = operation
        self.key = key
        self.message = message
        self.cause = cause
        super().__init__(f"Storage error in {operation}: {message}")


class InvalidFilterError(StorageError):
    """Raised when a bulk query or removal filter is rejected by the backend."""
    pass


class ConstructionError(StorageError, ValueError):
    """Raised when a grant store is built without a usable grant type."""
    pass


@dataclass
class PersistedGrant:
    """A persisted grant record."""
    key: str
    type: str
    creation_time: datetime
    data: str
    client_id: Optional[str] = None
    subject_id: Optional[str] = None
    session_id: Optional[str] = None
    description: Optional[str] = None
    expiration: Optional[datetime] = None
    consumed_time: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """Check if the grant has expired at ``now``. Grants without expiration never expire."""
        return self.expiration is not None and now >= self.expiration

    def is_consumed(self) -> bool:
        """Check if the grant has been marked as consumed."""
        return self.consumed_time is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'key': self.key,
            'type': self.type,
            'client_id': self.client_id,
            'subject_id': self.subject_id,
            'session_id': self.session_id,
            'description': self.description,
            'creation_time': self.creation_time.isoformat(),
            'expiration': self.expiration.isoformat() if self.expiration else None,
            'consumed_time': self.consumed_time.isoformat() if self.consumed_time else None,
            'data': self.data,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PersistedGrant':
        """Create from dictionary representation."""
        return cls(
            key=data['key'],
            type=data['type'],
            client_id=data.get('client_id'),
            subject_id=data.get('subject_id'),
            session_id=data.get('session_id'),
            description=data.get('description'),
            creation_time=parse_datetime(data['creation_time']),
            expiration=parse_datetime(data.get('expiration')),
            consumed_time=parse_datetime(data.get('consumed_time')),
            data=data['data'],
        )


@dataclass
class PersistedGrantFilter:
    """
    Conjunctive filter over grant metadata.

    Blank string predicates are ignored. ``client_ids`` and ``types`` match
    when the record's value is one of the listed values.
    """
    subject_id: Optional[str] = None
    session_id: Optional[str] = None
    client_id: Optional[str] = None
    client_ids: Optional[Sequence[str]] = None
    type: Optional[str] = None
    types: Optional[Sequence[str]] = None

    def has_predicate(self) -> bool:
        """Check whether at least one predicate is set."""
        return (
            not is_missing(self.subject_id)
            or not is_missing(self.session_id)
            or not is_missing(self.client_id)
            or self.client_ids is not None
            or not is_missing(self.type)
            or self.types is not None
        )

    def validate(self, require_predicate: bool = False) -> None:
        """
        Validate the filter.

        Args:
            require_predicate: Reject filters that would match every record

        Raises:
            InvalidFilterError: If the filter is malformed or unbounded when not allowed
        """
        for name in ('subject_id', 'session_id', 'client_id', 'type'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidFilterError("validate", name, f"{name} must be a string")

        for name in ('client_ids', 'types'):
            values = getattr(self, name)
            if values is None:
                continue
            if isinstance(values, str) or not all(isinstance(v, str) for v in values):
                raise InvalidFilterError("validate", name, f"{name} must be a sequence of strings")

        if require_predicate and not self.has_predicate():
            raise InvalidFilterError("validate", "", "No filter values set")

    def matches(self, grant: PersistedGrant) -> bool:
        """Check whether a grant satisfies every predicate of the filter."""
        if not is_missing(self.client_id) and grant.client_id != self.client_id:
            return False
        if self.client_ids is not None and grant.client_id not in self.client_ids:
            return False
        if not is_missing(self.session_id) and grant.session_id != self.session_id:
            return False
        if not is_missing(self.subject_id) and grant.subject_id != self.subject_id:
            return False
        if not is_missing(self.type) and grant.type != self.type:
            return False
        if self.types is not None and grant.type not in self.types:
            return False
        return True


class PersistedGrantStore(ABC):
    """
    Abstract base class for grant storage backends.

    Implementations must be safe for concurrent use without external locking.
    """

    @abstractmethod
    async def store(self, grant: PersistedGrant) -> None:
        """
        Store a grant, replacing any grant with the same key.

        Args:
            grant: The grant record to store

        Raises:
            StorageError: If storage operation fails
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[PersistedGrant]:
        """
        Retrieve a grant by key.

        Args:
            key: The grant key to look up

        Returns:
            The grant, or None if no grant is stored under ``key``
        """
        pass

    @abstractmethod
    async def get_all(self, filter: PersistedGrantFilter) -> List[PersistedGrant]:
        """
        Return all grants matching the filter. An empty filter matches every grant.

        Args:
            filter: The filter to apply

        Returns:
            List of matching grants, in no particular order

        Raises:
            InvalidFilterError: If the filter is rejected before querying
        """
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """
        Remove a grant by key. Removing an absent key is a no-op.

        Args:
            key: The grant key to remove
        """
        pass

    @abstractmethod
    async def remove_all(self, filter: PersistedGrantFilter) -> None:
        """
        Remove every grant matching the filter.

        Args:
            filter: The filter to apply

        Raises:
            InvalidFilterError: If the filter is rejected before removal
        """
        pass

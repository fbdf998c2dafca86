"""
In-memory persisted grant store.
Provides a simple memory-based storage backend for development and testing.
"""

import dataclasses
import logging
import threading
from typing import Dict, List, Optional

from .types import PersistedGrant, PersistedGrantFilter, PersistedGrantStore


logger = logging.getLogger(__name__)


class InMemoryPersistedGrantStore(PersistedGrantStore):
    """
    In-memory persisted grant store implementation.

    This implementation stores all grants in memory and is suitable for:
    - Development and testing
    - Single-instance deployments
    - Scenarios where grant persistence is not required

    Grants are copied on the way in and out, so a record only changes
    through another call to ``store``.

    Every operation runs to completion under the lock without awaiting,
    so a cancelled call either has not started or has fully applied.

    Note: All data is lost when the process terminates.
    """

    def __init__(self, require_filter_predicate: bool = False):
        """
        Initialize memory grant store.

        Args:
            require_filter_predicate: Reject bulk filters without any predicate
        """
        # Grant storage: hashed key -> PersistedGrant
        self._grants: Dict[str, PersistedGrant] = {}
        self._lock = threading.RLock()
        self._require_filter_predicate = require_filter_predicate

    async def store(self, grant: PersistedGrant) -> None:
        """Store a grant, replacing any grant with the same key."""
        with self._lock:
            self._grants[grant.key] = dataclasses.replace(grant)
        logger.debug(f"Stored {grant.type} grant for client {grant.client_id}")

    async def get(self, key: str) -> Optional[PersistedGrant]:
        """Retrieve a grant by key."""
        with self._lock:
            grant = self._grants.get(key)
        return dataclasses.replace(grant) if grant is not None else None

    async def get_all(self, filter: PersistedGrantFilter) -> List[PersistedGrant]:
        """Return all grants matching the filter."""
        filter.validate(self._require_filter_predicate)
        return self._filter(filter)

    async def remove(self, key: str) -> None:
        """Remove a grant by key."""
        with self._lock:
            self._grants.pop(key, None)

    async def remove_all(self, filter: PersistedGrantFilter) -> None:
        """Remove every grant matching the filter."""
        filter.validate(self._require_filter_predicate)

        removed = 0
        for grant in self._filter(filter):
            with self._lock:
                # Another caller may have removed it since the scan
                if self._grants.pop(grant.key, None) is not None:
                    removed += 1

        logger.info(f"Removed {removed} grants matching filter")

    def _filter(self, filter: PersistedGrantFilter) -> List[PersistedGrant]:
        with self._lock:
            snapshot = list(self._grants.values())
        return [dataclasses.replace(grant) for grant in snapshot if filter.matches(grant)]

    # Memory-specific methods
    def count(self) -> int:
        """Get the current number of stored grants."""
        with self._lock:
            return len(self._grants)

    def clear(self) -> None:
        """Clear all stored grants. Useful for testing."""
        with self._lock:
            self._grants.clear()

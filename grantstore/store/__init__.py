"""
Package store provides the persisted grant contract and its backends.

This package includes:
- The persisted grant record and bulk query filter
- The storage contract every backend implements
- Memory-based storage for development/testing
- Storage factory and backend registry
"""

from .types import (
    # Core storage types
    PersistedGrant,
    PersistedGrantFilter,
    PersistedGrantStore,

    # Errors
    StorageError,
    InvalidFilterError,
    ConstructionError,
)

from .memory import (
    # Memory storage implementation
    InMemoryPersistedGrantStore
)

from .factory import (
    # Storage factory
    StorageFactory,
    create_persisted_grant_store,
)

__all__ = [
    # Core types
    'PersistedGrant',
    'PersistedGrantFilter',
    'PersistedGrantStore',
    'StorageError',
    'InvalidFilterError',
    'ConstructionError',

    # Implementations
    'InMemoryPersistedGrantStore',

    # Factory
    'StorageFactory',
    'create_persisted_grant_store',
]

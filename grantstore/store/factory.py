"""
Factory for creating persisted grant store implementations.
Provides a centralized way to create and configure storage backends.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from ..core.config import StoreConfig
from .memory import InMemoryPersistedGrantStore
from .types import PersistedGrantStore


logger = logging.getLogger(__name__)


# Registry of available storage implementations
_STORAGE_IMPLEMENTATIONS: Dict[str, Type[PersistedGrantStore]] = {
    'memory': InMemoryPersistedGrantStore,
}


class StorageFactory:
    """Factory for creating storage implementations."""

    @staticmethod
    def create_store(store_type: str, config: Optional[Dict[str, Any]] = None) -> PersistedGrantStore:
        """
        Create a persisted grant store instance.

        Args:
            store_type: Type of storage ('memory' or a registered name)
            config: Keyword arguments for the storage backend

        Returns:
            PersistedGrantStore instance

        Raises:
            ValueError: If store_type is not supported
        """
        if config is None:
            config = {}

        implementation = _STORAGE_IMPLEMENTATIONS.get(store_type.lower())
        if not implementation:
            raise ValueError(f"Unsupported storage type: {store_type}")

        logger.info(f"Creating {store_type} persisted grant store")
        return implementation(**config)

    @staticmethod
    def register_implementation(name: str, implementation: Type[PersistedGrantStore]) -> None:
        """
        Register a new storage implementation.

        Args:
            name: Name to register the implementation under
            implementation: PersistedGrantStore implementation class
        """
        _STORAGE_IMPLEMENTATIONS[name.lower()] = implementation

    @staticmethod
    def get_available_types() -> List[str]:
        """Get list of available storage types."""
        return list(_STORAGE_IMPLEMENTATIONS.keys())


def create_persisted_grant_store(config: Optional[StoreConfig] = None) -> PersistedGrantStore:
    """
    Create a persisted grant store from configuration.

    Args:
        config: Store configuration, defaults to the in-memory backend

    Returns:
        PersistedGrantStore instance
    """
    if config is None:
        config = StoreConfig()
    config.validate()

    return StorageFactory.create_store(
        config.backend,
        {'require_filter_predicate': config.require_filter_predicate},
    )

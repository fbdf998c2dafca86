"""
Typed grant storage on top of a persisted grant store.

A ``DefaultGrantStore`` owns everything a grant kind needs besides raw
persistence: hashing caller handles into storage keys, serializing the
payload, and filling in the lifecycle fields of the persisted record.
Concrete grant stores hold one configured instance of it.
"""

import logging
from datetime import datetime, timedelta
from typing import Generic, Optional, Type, TypeVar

from ..common.utils import hash_string, is_missing
from ..store.types import ConstructionError, PersistedGrant, PersistedGrantFilter, PersistedGrantStore
from .handles import DefaultHandleGenerationService, HandleGenerationService
from .serialization import JsonGrantSerializer, PersistentGrantSerializer


T = TypeVar("T")

KEY_SEPARATOR = ":"


class DefaultGrantStore(Generic[T]):
    """
    Generic grant store for one grant type.

    Args:
        grant_type: Type tag written to and checked on every record
        item_type: Payload class used to deserialize records
        store: Backend that persists the records
        serializer: Payload serializer, JSON by default
        handle_generation_service: Handle source, random hex by default
        logger: Logger to use instead of the module logger

    Raises:
        ConstructionError: If ``grant_type`` is missing or blank
    """

    def __init__(self,
                 grant_type: str,
                 item_type: Type[T],
                 store: PersistedGrantStore,
                 serializer: Optional[PersistentGrantSerializer] = None,
                 handle_generation_service: Optional[HandleGenerationService] = None,
                 logger: Optional[logging.Logger] = None):
        if is_missing(grant_type):
            raise ConstructionError("__init__", "", "grant_type is required")
        if store is None:
            raise ConstructionError("__init__", grant_type, "store is required")

        self.grant_type = grant_type
        self.item_type = item_type
        self.store = store
        self.serializer = serializer or JsonGrantSerializer()
        self.handle_generation_service = handle_generation_service or DefaultHandleGenerationService()
        self.logger = logger or logging.getLogger(__name__)

    def get_hashed_key(self, handle: str) -> str:
        """Derive the storage key for a handle."""
        return hash_string(handle + KEY_SEPARATOR + self.grant_type)

    async def get_item(self, handle: str) -> Optional[T]:
        """
        Get the payload stored under a handle.

        Returns None when there is no record, when the record belongs to a
        different grant type, or when its payload can no longer be deserialized.
        """
        hashed_key = self.get_hashed_key(handle)

        grant = await self.store.get(hashed_key)
        if grant is not None and grant.type == self.grant_type:
            try:
                return self.serializer.deserialize(grant.data, self.item_type)
            except Exception:
                self.logger.error(
                    f"Failed to deserialize {self.grant_type} grant from store.", exc_info=True
                )
        else:
            self.logger.debug(f"{self.grant_type} grant with value: {handle} not found in store.")

        return None

    async def create_item(self,
                          item: T,
                          client_id: Optional[str],
                          subject_id: Optional[str],
                          session_id: Optional[str],
                          description: Optional[str],
                          created: datetime,
                          lifetime: int) -> str:
        """
        Store a payload under a freshly generated handle.

        Args:
            lifetime: Seconds from ``created`` until the grant expires

        Returns:
            The handle, the only identifier the caller should keep
        """
        handle = await self.handle_generation_service.generate()
        await self.store_item(
            handle, item, client_id, subject_id, session_id, description,
            created, created + timedelta(seconds=lifetime),
        )
        return handle

    async def store_item(self,
                         handle: str,
                         item: T,
                         client_id: Optional[str],
                         subject_id: Optional[str],
                         session_id: Optional[str],
                         description: Optional[str],
                         created: datetime,
                         expiration: Optional[datetime],
                         consumed_time: Optional[datetime] = None) -> None:
        """
        Store a payload under a caller supplied handle, replacing any previous one.

        Re-storing with ``consumed_time`` set marks a one-time grant as used.
        """
        grant = PersistedGrant(
            key=self.get_hashed_key(handle),
            type=self.grant_type,
            client_id=client_id,
            subject_id=subject_id,
            session_id=session_id,
            description=description,
            creation_time=created,
            expiration=expiration,
            consumed_time=consumed_time,
            data=self.serializer.serialize(item),
        )

        await self.store.store(grant)

    async def remove_item(self, handle: str) -> None:
        """Remove the payload stored under a handle, if any."""
        await self.store.remove(self.get_hashed_key(handle))

    async def remove_all(self, subject_id: str, client_id: str) -> None:
        """Remove every grant of this type for a subject and client."""
        await self.store.remove_all(PersistedGrantFilter(
            subject_id=subject_id,
            client_id=client_id,
            type=self.grant_type,
        ))

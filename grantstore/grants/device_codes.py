"""
Device authorization storage.

The device code issued to the device is the handle; it is generated by the
device authorization endpoint rather than by this store.
"""

from typing import Optional

from ..store.types import PersistedGrantStore
from .constants import PersistedGrantTypes
from .default import DefaultGrantStore
from .handles import HandleGenerationService
from .models import DeviceCode
from .serialization import PersistentGrantSerializer


class DeviceCodeStore:
    """Stores pending and authorized device authorization requests."""

    def __init__(self,
                 store: PersistedGrantStore,
                 serializer: Optional[PersistentGrantSerializer] = None,
                 handle_generation_service: Optional[HandleGenerationService] = None):
        self._grants: DefaultGrantStore[DeviceCode] = DefaultGrantStore(
            PersistedGrantTypes.DEVICE_CODE,
            DeviceCode,
            store,
            serializer,
            handle_generation_service,
        )

    async def store_device_authorization(self, device_code: str, data: DeviceCode) -> None:
        """Store or update the state of a device authorization request."""
        await self._grants.store_item(
            device_code,
            data,
            data.client_id,
            data.subject_id,
            data.session_id,
            data.description,
            data.creation_time,
            data.expiration,
        )

    async def find_by_device_code(self, device_code: str) -> Optional[DeviceCode]:
        return await self._grants.get_item(device_code)

    async def remove_by_device_code(self, device_code: str) -> None:
        await self._grants.remove_item(device_code)

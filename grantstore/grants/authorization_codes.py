"""
Authorization code storage.
"""

from typing import Optional

from ..store.types import PersistedGrantStore
from .constants import PersistedGrantTypes
from .default import DefaultGrantStore
from .handles import HandleGenerationService
from .models import AuthorizationCode
from .serialization import PersistentGrantSerializer


class AuthorizationCodeStore:
    """Stores authorization codes between the authorize and token endpoints."""

    def __init__(self,
                 store: PersistedGrantStore,
                 serializer: Optional[PersistentGrantSerializer] = None,
                 handle_generation_service: Optional[HandleGenerationService] = None):
        self._grants: DefaultGrantStore[AuthorizationCode] = DefaultGrantStore(
            PersistedGrantTypes.AUTHORIZATION_CODE,
            AuthorizationCode,
            store,
            serializer,
            handle_generation_service,
        )

    async def store_authorization_code(self, code: AuthorizationCode) -> str:
        """
        Store an authorization code.

        Returns:
            The code value to send to the client
        """
        return await self._grants.create_item(
            code,
            code.client_id,
            code.subject_id,
            code.session_id,
            code.description,
            code.creation_time,
            code.lifetime,
        )

    async def get_authorization_code(self, code: str) -> Optional[AuthorizationCode]:
        return await self._grants.get_item(code)

    async def remove_authorization_code(self, code: str) -> None:
        await self._grants.remove_item(code)

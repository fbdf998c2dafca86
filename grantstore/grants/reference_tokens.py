"""
Reference token storage.
"""

from typing import Optional

from ..store.types import PersistedGrantStore
from .constants import PersistedGrantTypes
from .default import DefaultGrantStore
from .handles import HandleGenerationService
from .models import Token
from .serialization import PersistentGrantSerializer


class ReferenceTokenStore:
    """Stores access tokens server side and hands out opaque handles for them."""

    def __init__(self,
                 store: PersistedGrantStore,
                 serializer: Optional[PersistentGrantSerializer] = None,
                 handle_generation_service: Optional[HandleGenerationService] = None):
        self._grants: DefaultGrantStore[Token] = DefaultGrantStore(
            PersistedGrantTypes.REFERENCE_TOKEN,
            Token,
            store,
            serializer,
            handle_generation_service,
        )

    async def store_reference_token(self, token: Token) -> str:
        """
        Store a reference token.

        Returns:
            The handle to give to the client
        """
        return await self._grants.create_item(
            token,
            token.client_id,
            token.subject_id,
            token.session_id,
            token.description,
            token.creation_time,
            token.lifetime,
        )

    async def get_reference_token(self, handle: str) -> Optional[Token]:
        """Get the reference token for a handle, or None."""
        return await self._grants.get_item(handle)

    async def remove_reference_token(self, handle: str) -> None:
        """Remove the reference token for a handle."""
        await self._grants.remove_item(handle)

    async def remove_reference_tokens(self, subject_id: str, client_id: str) -> None:
        """Remove all reference tokens of a subject for a client."""
        await self._grants.remove_all(subject_id, client_id)

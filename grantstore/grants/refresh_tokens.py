"""
Refresh token storage.
"""

from typing import Optional

from ..store.types import PersistedGrantStore
from .constants import PersistedGrantTypes
from .default import DefaultGrantStore
from .handles import HandleGenerationService
from .models import RefreshToken
from .serialization import PersistentGrantSerializer


class RefreshTokenStore:
    """Stores refresh tokens under opaque handles."""

    def __init__(self,
                 store: PersistedGrantStore,
                 serializer: Optional[PersistentGrantSerializer] = None,
                 handle_generation_service: Optional[HandleGenerationService] = None):
        self._grants: DefaultGrantStore[RefreshToken] = DefaultGrantStore(
            PersistedGrantTypes.REFRESH_TOKEN,
            RefreshToken,
            store,
            serializer,
            handle_generation_service,
        )

    async def store_refresh_token(self, refresh_token: RefreshToken) -> str:
        """
        Store a new refresh token.

        Returns:
            The handle to give to the client
        """
        return await self._grants.create_item(
            refresh_token,
            refresh_token.client_id,
            refresh_token.subject_id,
            refresh_token.session_id,
            refresh_token.description,
            refresh_token.creation_time,
            refresh_token.lifetime,
        )

    async def update_refresh_token(self, handle: str, refresh_token: RefreshToken) -> None:
        """
        Replace the refresh token stored under an existing handle.

        Used on sliding expiration and to record ``consumed_time`` for
        one-time-use refresh tokens.
        """
        await self._grants.store_item(
            handle,
            refresh_token,
            refresh_token.client_id,
            refresh_token.subject_id,
            refresh_token.session_id,
            refresh_token.description,
            refresh_token.creation_time,
            refresh_token.expiration,
            refresh_token.consumed_time,
        )

    async def get_refresh_token(self, handle: str) -> Optional[RefreshToken]:
        """Get the refresh token for a handle, or None."""
        return await self._grants.get_item(handle)

    async def remove_refresh_token(self, handle: str) -> None:
        """Remove the refresh token for a handle."""
        await self._grants.remove_item(handle)

    async def remove_refresh_tokens(self, subject_id: str, client_id: str) -> None:
        """Remove all refresh tokens of a subject for a client."""
        await self._grants.remove_all(subject_id, client_id)

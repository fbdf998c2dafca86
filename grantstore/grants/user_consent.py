"""
User consent storage.

Consent has no generated handle: it is looked up by the subject and client
it was given for.
"""

from typing import Optional

from ..store.types import PersistedGrantStore
from .constants import PersistedGrantTypes
from .default import DefaultGrantStore
from .handles import HandleGenerationService
from .models import Consent
from .serialization import PersistentGrantSerializer


def get_consent_key(subject_id: str, client_id: str) -> str:
    return client_id + "|" + subject_id


class UserConsentStore:
    """Stores one consent per subject and client."""

    def __init__(self,
                 store: PersistedGrantStore,
                 serializer: Optional[PersistentGrantSerializer] = None,
                 handle_generation_service: Optional[HandleGenerationService] = None):
        self._grants: DefaultGrantStore[Consent] = DefaultGrantStore(
            PersistedGrantTypes.USER_CONSENT,
            Consent,
            store,
            serializer,
            handle_generation_service,
        )

    async def store_user_consent(self, consent: Consent) -> None:
        """Store a consent, replacing any earlier consent of the same subject for the client."""
        await self._grants.store_item(
            get_consent_key(consent.subject_id, consent.client_id),
            consent,
            consent.client_id,
            consent.subject_id,
            None,
            None,
            consent.creation_time,
            consent.expiration,
        )

    async def get_user_consent(self, subject_id: str, client_id: str) -> Optional[Consent]:
        return await self._grants.get_item(get_consent_key(subject_id, client_id))

    async def remove_user_consent(self, subject_id: str, client_id: str) -> None:
        await self._grants.remove_item(get_consent_key(subject_id, client_id))

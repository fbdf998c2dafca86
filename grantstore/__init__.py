"""
grantstore Python Package

Opaque-handle grant persistence for OAuth 2.0 / OpenID Connect authorization servers
"""

__version__ = "0.1.0"

from .core.config import StoreConfig
from .store import (
    PersistedGrant,
    PersistedGrantFilter,
    PersistedGrantStore,
    InMemoryPersistedGrantStore,
    StorageError,
    InvalidFilterError,
    ConstructionError,
    create_persisted_grant_store,
)
from .grants import (
    DefaultGrantStore,
    ReferenceTokenStore,
    RefreshTokenStore,
    AuthorizationCodeStore,
    UserConsentStore,
    DeviceCodeStore,
    Token,
    RefreshToken,
    AuthorizationCode,
    Consent,
    DeviceCode,
    Claim,
)

__all__ = [
    "StoreConfig",
    "PersistedGrant",
    "PersistedGrantFilter",
    "PersistedGrantStore",
    "InMemoryPersistedGrantStore",
    "StorageError",
    "InvalidFilterError",
    "ConstructionError",
    "create_persisted_grant_store",
    "DefaultGrantStore",
    "ReferenceTokenStore",
    "RefreshTokenStore",
    "AuthorizationCodeStore",
    "UserConsentStore",
    "DeviceCodeStore",
    "Token",
    "RefreshToken",
    "AuthorizationCode",
    "Consent",
    "DeviceCode",
    "Claim",
]

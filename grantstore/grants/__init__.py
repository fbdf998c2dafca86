"""
Grant stores for the artifacts issued by an authorization server.

This package provides the generic typed grant store and the concrete
stores built on it for reference tokens, refresh tokens, authorization
codes, user consent and device codes.
"""

from .constants import PersistedGrantTypes, TokenTypes, AccessTokenType, ClaimTypes

from .models import (
    Claim,
    Token,
    RefreshToken,
    AuthorizationCode,
    Consent,
    DeviceCode,
)

from .handles import HandleGenerationService, DefaultHandleGenerationService, create_handle_generation_service
from .serialization import PersistentGrantSerializer, JsonGrantSerializer
from .default import DefaultGrantStore

from .reference_tokens import ReferenceTokenStore
from .refresh_tokens import RefreshTokenStore
from .authorization_codes import AuthorizationCodeStore
from .user_consent import UserConsentStore
from .device_codes import DeviceCodeStore

__all__ = [
    # Constants
    "PersistedGrantTypes",
    "TokenTypes",
    "AccessTokenType",
    "ClaimTypes",

    # Payload models
    "Claim",
    "Token",
    "RefreshToken",
    "AuthorizationCode",
    "Consent",
    "DeviceCode",

    # Collaborators
    "HandleGenerationService",
    "DefaultHandleGenerationService",
    "create_handle_generation_service",
    "PersistentGrantSerializer",
    "JsonGrantSerializer",

    # Stores
    "DefaultGrantStore",
    "ReferenceTokenStore",
    "RefreshTokenStore",
    "AuthorizationCodeStore",
    "UserConsentStore",
    "DeviceCodeStore",
]

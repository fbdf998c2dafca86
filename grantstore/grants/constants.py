"""
Grant type tags used to discriminate records sharing one persisted grant store.
"""


class PersistedGrantTypes:
    """Persisted grant type constants."""

    AUTHORIZATION_CODE = "authorization_code"
    REFERENCE_TOKEN = "reference_token"
    REFRESH_TOKEN = "refresh_token"
    USER_CONSENT = "user_consent"
    DEVICE_CODE = "device_code"


class TokenTypes:
    """Token type constants."""

    ACCESS_TOKEN = "access_token"


class AccessTokenType:
    """Access token format constants."""

    JWT = "jwt"
    REFERENCE = "reference"


class ClaimTypes:
    """Claim type constants used to derive grant metadata from tokens."""

    SUBJECT = "sub"
    SESSION_ID = "sid"
    SCOPE = "scope"

"""
Grant payload models.

These are the typed values that grant stores serialize into the opaque
``data`` field of a persisted grant. Every model round-trips through
``to_dict`` / ``from_dict`` so the JSON serializer can handle it.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from ..common.utils import get_current_time
from ..util.encoding import parse_datetime
from .constants import AccessTokenType, ClaimTypes, TokenTypes


def _serialize_dates(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert datetime values of a flat dictionary to ISO format."""
    for key, value in data.items():
        if isinstance(value, datetime):
            data[key] = value.isoformat()
    return data


@dataclass
class Claim:
    """A single claim carried by a token."""
    type: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'value': self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Claim':
        return cls(type=data['type'], value=data['value'])


@dataclass
class Token:
    """
    An access token.

    When issued as a reference token, the whole token is kept server side
    and the client only receives the handle.
    """
    client_id: str
    creation_time: datetime = field(default_factory=get_current_time)
    lifetime: int = 3600
    type: str = TokenTypes.ACCESS_TOKEN
    access_token_type: str = AccessTokenType.REFERENCE
    issuer: str = ""
    audiences: List[str] = field(default_factory=list)
    claims: List[Claim] = field(default_factory=list)
    description: Optional[str] = None
    version: int = 4

    def _claim_value(self, claim_type: str) -> Optional[str]:
        for claim in self.claims:
            if claim.type == claim_type:
                return claim.value
        return None

    @property
    def subject_id(self) -> Optional[str]:
        """Subject identifier from the ``sub`` claim."""
        return self._claim_value(ClaimTypes.SUBJECT)

    @property
    def session_id(self) -> Optional[str]:
        """Session identifier from the ``sid`` claim."""
        return self._claim_value(ClaimTypes.SESSION_ID)

    @property
    def scopes(self) -> List[str]:
        """Scopes from the ``scope`` claims."""
        return [claim.value for claim in self.claims if claim.type == ClaimTypes.SCOPE]

    @property
    def expiration(self) -> datetime:
        return self.creation_time + timedelta(seconds=self.lifetime)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert token to dictionary.

        Returns:
            Dictionary representation
        """
        data = asdict(self)
        data['creation_time'] = self.creation_time.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Token':
        """
        Create Token from dictionary.

        Args:
            data: Dictionary data

        Returns:
            Token instance
        """
        data = dict(data)
        data['creation_time'] = parse_datetime(data['creation_time'])
        data['claims'] = [Claim.from_dict(c) for c in data.get('claims', [])]
        return cls(**data)


@dataclass
class RefreshToken:
    """A refresh token together with the access token it was issued with."""
    access_token: Token
    creation_time: datetime = field(default_factory=get_current_time)
    lifetime: int = 2592000
    consumed_time: Optional[datetime] = None
    description: Optional[str] = None
    version: int = 4

    @property
    def client_id(self) -> str:
        return self.access_token.client_id

    @property
    def subject_id(self) -> Optional[str]:
        return self.access_token.subject_id

    @property
    def session_id(self) -> Optional[str]:
        return self.access_token.session_id

    @property
    def expiration(self) -> datetime:
        return self.creation_time + timedelta(seconds=self.lifetime)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'access_token': self.access_token.to_dict(),
            'creation_time': self.creation_time.isoformat(),
            'lifetime': self.lifetime,
            'consumed_time': self.consumed_time.isoformat() if self.consumed_time else None,
            'description': self.description,
            'version': self.version,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RefreshToken':
        return cls(
            access_token=Token.from_dict(data['access_token']),
            creation_time=parse_datetime(data['creation_time']),
            lifetime=data['lifetime'],
            consumed_time=parse_datetime(data.get('consumed_time')),
            description=data.get('description'),
            version=data.get('version', 4),
        )


@dataclass
class AuthorizationCode:
    """An authorization code issued by the authorize endpoint."""
    client_id: str
    subject_id: str
    redirect_uri: str
    creation_time: datetime = field(default_factory=get_current_time)
    lifetime: int = 300
    session_id: Optional[str] = None
    description: Optional[str] = None
    is_open_id: bool = False
    requested_scopes: List[str] = field(default_factory=list)
    nonce: Optional[str] = None
    state_hash: Optional[str] = None
    code_challenge: Optional[str] = None
    code_challenge_method: Optional[str] = None
    was_consent_shown: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return _serialize_dates(asdict(self))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuthorizationCode':
        data = dict(data)
        data['creation_time'] = parse_datetime(data['creation_time'])
        return cls(**data)


@dataclass
class Consent:
    """A user's consent for a client to access a set of scopes."""
    subject_id: str
    client_id: str
    scopes: List[str] = field(default_factory=list)
    creation_time: datetime = field(default_factory=get_current_time)
    expiration: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return _serialize_dates(asdict(self))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Consent':
        data = dict(data)
        data['creation_time'] = parse_datetime(data['creation_time'])
        data['expiration'] = parse_datetime(data.get('expiration'))
        return cls(**data)


@dataclass
class DeviceCode:
    """The state of a device authorization request."""
    client_id: str
    creation_time: datetime = field(default_factory=get_current_time)
    lifetime: int = 300
    description: Optional[str] = None
    is_open_id: bool = False
    is_authorized: bool = False
    requested_scopes: List[str] = field(default_factory=list)
    authorized_scopes: List[str] = field(default_factory=list)
    subject_id: Optional[str] = None
    session_id: Optional[str] = None

    @property
    def expiration(self) -> datetime:
        return self.creation_time + timedelta(seconds=self.lifetime)

    def to_dict(self) -> Dict[str, Any]:
        return _serialize_dates(asdict(self))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeviceCode':
        data = dict(data)
        data['creation_time'] = parse_datetime(data['creation_time'])
        return cls(**data)

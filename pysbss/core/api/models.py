"""
Authentication data models.

Wire shapes exchanged with the CRM plus the client-held session state.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class AuthRequest:
    """
    Form-encoded login request.
    
    The ``authorize`` wire field carries the plain login until a challenge
    signature is applied, and the signature while one is applied. The
    password is used only for signing and never leaves the process.
    
    Example:
        >>> auth = AuthRequest.create('user1', 'password1')
        >>> auth.to_form()['authorize']
        'user1'
    """
    login: str
    password: str = field(default='', repr=False)
    remember: bool = False
    async_mode: bool = True
    signature: Optional[str] = field(default=None, repr=False)
    
    @classmethod
    def create(cls, login: str, password: str) -> 'AuthRequest':
        """Create request for login and password with default flags."""
        return cls(login=login, password=password)
    
    @property
    def signed(self) -> bool:
        """True while a challenge signature is applied."""
        return self.signature is not None
    
    @property
    def authorize(self) -> str:
        """Value sent as the ``authorize`` form field."""
        if self.signed:
            return self.signature
        return self.login
    
    def apply_signature(self, signature: str) -> None:
        """Send ``signature`` instead of the plain login."""
        self.signature = signature
    
    def clear_signature(self) -> None:
        """Return to the unsigned shape."""
        self.signature = None
    
    def to_form(self) -> Dict[str, str]:
        """Form fields in wire order; the password is excluded."""
        return {
            'async': '1' if self.async_mode else '0',
            'authorize': self.authorize,
            'login': self.login,
            'remember': '1' if self.remember else '0',
        }


@dataclass
class AuthResponse:
    """
    Default authentication response of the CRM server.
    
    Attributes:
        success: Current round's credentials were accepted
        authorized: Server-side authorization flag
        login: Login echoed by the server (absent before authorization)
        challenge: Nonce to sign, 0 when not issued
        cname: Session name
    """
    success: bool = False
    authorized: bool = False
    login: Optional[str] = None
    challenge: int = 0
    cname: str = ''
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuthResponse':
        """
        Build response from decoded JSON.
        
        Absent or null fields take their defaults; values of the wrong
        JSON type are rejected rather than coerced.
        
        Raises:
            TypeError: If data is not a JSON object or a field has the wrong type
            ValueError: If challenge is not an integer
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected JSON object, got {type(data).__name__}")
        
        return cls(
            success=_field(data, 'success', bool, False),
            authorized=_field(data, 'authorized', bool, False),
            login=_field(data, 'login', str, None),
            challenge=_challenge(data.get('challenge')),
            cname=_field(data, 'cname', str, ''),
        )


def _field(data: Dict[str, Any], name: str, kind: type, default: Any) -> Any:
    value = data.get(name)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise TypeError(f"Field {name!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _challenge(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Challenge must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class ApiKeyData:
    """
    Login and key used instead of the challenge handshake.
    
    Sent as the ``X-Sbss-Auth`` header and a cookie on every request.
    """
    login: str
    cookie_name: str
    cookie_value: str = field(repr=False)
    
    def headers(self) -> Dict[str, str]:
        return {'X-Sbss-Auth': self.login}
    
    def cookies(self) -> Dict[str, str]:
        return {self.cookie_name: self.cookie_value}


class AuthSession:
    """
    Authorization state of one client.
    
    ``authorized`` moves from False to True once and is never reset, so
    every later login on the same client is a no-op.
    """
    
    def __init__(self):
        self._authorized = False
    
    @property
    def authorized(self) -> bool:
        return self._authorized
    
    def mark_authorized(self) -> None:
        self._authorized = True
    
    def __repr__(self) -> str:
        return f"AuthSession(authorized={self._authorized})"

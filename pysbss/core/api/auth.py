"""
Authentication service.

Implements the CRM challenge-response login:

1. POST the credentials with ``authorize`` set to the plain login.
2. If the server answers ``success``, the connection is already authorized.
3. Otherwise sign the returned challenge and POST again.
4. A second ``success: false`` means the credentials were rejected.
"""
from typing import Optional

from ..crypto import ChallengeSigner
from ..exceptions import AuthenticationRejectedError, InvalidArgumentError
from ..logging import get_logger
from .models import AuthRequest, AuthResponse, AuthSession
from .request import FormEncoder


class BaseAuthService:
    """State transitions shared by the sync and async services."""
    
    def __init__(self, session: AuthSession, signer: Optional[ChallengeSigner] = None):
        self._session = session
        self._signer = signer or ChallengeSigner()
        self._logger = get_logger('pysbss.auth')
    
    @property
    def authorized(self) -> bool:
        return self._session.authorized
    
    @staticmethod
    def _validate(auth: Optional[AuthRequest]) -> None:
        if auth is None:
            raise InvalidArgumentError("Authentication data required (login/password)")
    
    def _accept(self, auth: AuthRequest) -> None:
        self._logger.info(f"Authorized as {auth.login}")
        self._session.mark_authorized()
    
    def _sign(self, auth: AuthRequest, result: AuthResponse) -> None:
        self._logger.debug(f"Signing challenge for {auth.login}")
        auth.apply_signature(
            self._signer.sign(auth.login, auth.password, result.challenge)
        )
    
    def _reject(self, auth: AuthRequest) -> AuthenticationRejectedError:
        self._logger.warning(f"Credentials rejected for {auth.login}")
        return AuthenticationRejectedError("Not authorized", login=auth.login)


class AuthService(BaseAuthService):
    """
    Synchronous authentication service.
    
    Performs zero, one or two round trips per login. Not thread-safe:
    concurrent logins on one client must be synchronized by the caller.
    """
    
    def __init__(self, client, signer: Optional[ChallengeSigner] = None):
        """
        Initialize auth service.
        
        Args:
            client: APIClient used for the round trips
            signer: Challenge signer
        """
        super().__init__(client.auth_session, signer)
        self._client = client
    
    def login(self, url: str, auth: AuthRequest) -> None:
        """
        Login to the CRM.
        
        Args:
            url: Login endpoint
            auth: Credentials; their ``authorize`` field is restored on return
            
        Raises:
            InvalidArgumentError: If auth is missing or url is malformed
            TransportError: If a round trip fails
            DecodeError: If a response is not JSON
            AuthenticationRejectedError: If the signed credentials are rejected
        """
        self._validate(auth)
        
        if self.authorized:
            self._logger.debug("Session already authorized, skipping login")
            return
        
        result = self._round_trip(url, auth)
        if result.success:
            self._accept(auth)
            return
        
        self._sign(auth, result)
        try:
            result = self._round_trip(url, auth)
        finally:
            auth.clear_signature()
        
        if not result.success:
            raise self._reject(auth)
        
        self._accept(auth)
    
    def _round_trip(self, url: str, auth: AuthRequest) -> AuthResponse:
        response = self._client.request('POST', url, FormEncoder.encode(auth))
        return self._client.decoder.decode_response(response, AuthResponse.from_dict)

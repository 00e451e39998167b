"""
Async authentication service.

Same handshake as AuthService, awaited over the asyncio transport.
"""
from typing import Optional

from ..crypto import ChallengeSigner
from .auth import BaseAuthService
from .models import AuthRequest, AuthResponse
from .request import FormEncoder


class AsyncAuthService(BaseAuthService):
    """
    Asynchronous authentication service.
    
    Round trips of one login are awaited sequentially. Concurrent logins
    on one client must be synchronized by the caller.
    """
    
    def __init__(self, client, signer: Optional[ChallengeSigner] = None):
        """
        Initialize auth service.
        
        Args:
            client: AsyncAPIClient used for the round trips
            signer: Challenge signer
        """
        super().__init__(client.auth_session, signer)
        self._client = client
    
    async def login(self, url: str, auth: AuthRequest) -> None:
        """
        Login to the CRM.
        
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
        
        result = await self._round_trip(url, auth)
        if result.success:
            self._accept(auth)
            return
        
        self._sign(auth, result)
        try:
            result = await self._round_trip(url, auth)
        finally:
            auth.clear_signature()
        
        if not result.success:
            raise self._reject(auth)
        
        self._accept(auth)
    
    async def _round_trip(self, url: str, auth: AuthRequest) -> AuthResponse:
        body = await self._client.request('POST', url, FormEncoder.encode(auth))
        return self._client.decoder.decode_bytes(body, AuthResponse.from_dict)

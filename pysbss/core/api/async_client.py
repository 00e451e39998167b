"""
Async SBSS API client.

Asynchronous counterpart of APIClient built on aiohttp.
"""
import asyncio
from typing import Any, Mapping, Optional, Union

import aiohttp

from ..exceptions import InvalidArgumentError, TransportError
from ..logging import get_logger
from .async_auth import AsyncAuthService
from .config import APIConfig
from .models import ApiKeyData, AuthRequest, AuthSession
from .request import FormEncoder, RequestBuilder, ResponseDecoder
from .session import SessionFactory


class AsyncAPIClient:
    """
    Asynchronous SBSS API client.
    
    Features:
    - Persistent cookie jar per client
    - User agent, XMLHttpRequest and API key headers on every request
    - Challenge-response login through AsyncAuthService
    
    Concurrent logins on one client are not synchronized internally.
    
    Example:
        >>> async with AsyncAPIClient() as client:
        ...     await client.login(url, AuthRequest.create('user1', 'password1'))
    """
    
    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize async API client.
        
        Args:
            config: API configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._decoder = ResponseDecoder(self._config.max_prefix_bytes)
        self._api_key: Optional[ApiKeyData] = None
        self._auth_session = AuthSession()
        self._auth = AsyncAuthService(self)
        self._closed = False
        
        self._logger = get_logger('pysbss.api', self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    @property
    def decoder(self) -> ResponseDecoder:
        return self._decoder
    
    @property
    def auth_session(self) -> AuthSession:
        return self._auth_session
    
    @property
    def authorized(self) -> bool:
        return self._auth_session.authorized
    
    @property
    def api_key(self) -> Optional[ApiKeyData]:
        return self._api_key
    
    def set_api_key(self, login: str, cookie_name: str, key: str) -> ApiKeyData:
        """Authenticate every request with a login header and key cookie."""
        self._api_key = ApiKeyData(login=login, cookie_name=cookie_name, cookie_value=key)
        return self._api_key
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._session = await SessionFactory.create_async_session(self._config)
        return self._session
    
    async def close(self):
        """Close client and release resources."""
        self._closed = True
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
    
    async def request(
        self,
        method: str,
        url: str,
        data: Union[bytes, str, Mapping[str, Any], AuthRequest, None] = None
    ) -> bytes:
        """
        Send a request and return the raw response body.
        
        Raises:
            InvalidArgumentError: If url is malformed
            TransportError: If the request fails
        """
        if self._closed:
            raise InvalidArgumentError("Client is closed")
        
        session = await self._ensure_session()
        method = method.upper()
        builder = RequestBuilder(self._config, self._api_key)
        headers = builder.build_headers(method)
        
        cookie_header = builder.build_cookie_header()
        if cookie_header:
            headers['Cookie'] = cookie_header
        
        if data is not None and not isinstance(data, (bytes, str)):
            data = FormEncoder.encode(data)
        
        self._logger.debug(f"{method} {url}")
        
        try:
            async with session.request(
                method,
                url,
                data=data,
                headers=headers,
                ssl=self._config.verify_ssl
            ) as response:
                body = await response.read()
                self._logger.debug(f"Response status {response.status}")
                return body
        except aiohttp.InvalidURL as e:
            raise InvalidArgumentError(f"Invalid URL {url!r}: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._logger.error(f"Network error: {e}")
            raise TransportError(f"Network error: {e}") from e
    
    async def login(self, url: str, auth: AuthRequest) -> None:
        """Run the challenge-response login (no-op once authorized)."""
        await self._auth.login(url, auth)

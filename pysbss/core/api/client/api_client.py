"""SBSS API client using composition."""
from typing import Any, Callable, Mapping, Optional, Union

import requests

from ...exceptions import InvalidArgumentError
from ...logging import get_logger
from ..auth import AuthService
from ..config import APIConfig
from ..models import ApiKeyData, AuthRequest, AuthSession
from ..request import FormEncoder, RequestBuilder, RequestHandler, ResponseDecoder
from ..session import SessionFactory


Body = Union[bytes, str, Mapping[str, Any], AuthRequest, None]


class APIClient:
    """
    Synchronous SBSS API client.
    
    Keeps a cookie jar across calls, tags requests with the configured
    user agent and, when set, the API key header and cookie. The
    authorization state lives as long as the client.
    
    Not thread-safe: ``login`` mutates the authorization state without
    locking, so share a client between threads only under a lock.
    
    Example:
        >>> with APIClient() as client:
        ...     client.login(url, AuthRequest.create('user1', 'password1'))
    """
    
    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize API client.
        
        Args:
            config: API configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._session = SessionFactory.create_sync_session(self._config)
        self._handler = RequestHandler(self._session, self._config)
        self._decoder = ResponseDecoder(self._config.max_prefix_bytes)
        self._api_key: Optional[ApiKeyData] = None
        self._auth_session = AuthSession()
        self._auth = AuthService(self)
        self.closed = False
        
        self._logger = get_logger('pysbss.api', self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    @property
    def user_agent(self) -> str:
        return self._config.user_agent
    
    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        """Cookie jar shared by all requests of this client."""
        return self._session.cookies
    
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
        """
        Authenticate every request with a login header and key cookie.
        
        Alternative to ``login``; the challenge handshake is not needed.
        """
        self._api_key = ApiKeyData(login=login, cookie_name=cookie_name, cookie_value=key)
        self._logger.debug(f"API key set for {login}")
        return self._api_key
    
    def new_request(self, method: str, url: str, data: Body = None) -> requests.PreparedRequest:
        """
        Build a request with the client headers and cookies.
        
        Mappings and AuthRequest bodies are form-encoded.
        
        Raises:
            InvalidArgumentError: If url is malformed
        """
        method = method.upper()
        builder = RequestBuilder(self._config, self._api_key)
        
        if data is not None and not isinstance(data, (bytes, str)):
            data = FormEncoder.encode(data)
        
        request = requests.Request(
            method,
            url,
            headers=builder.build_headers(method),
            cookies=builder.build_cookies(),
            data=data,
        )
        
        try:
            return self._session.prepare_request(request)
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise InvalidArgumentError(f"Invalid URL {url!r}: {e}") from e
    
    def request(self, method: str, url: str, data: Body = None) -> requests.Response:
        """
        Send a request and return the streamed response.
        
        The caller owns the response; ``decode`` closes it.
        
        Raises:
            InvalidArgumentError: If url is malformed
            TransportError: If the request fails
        """
        if self.closed:
            raise InvalidArgumentError("Client is closed")
        return self._handler.execute(self.new_request(method, url, data))
    
    def decode(self, response: requests.Response, into: Optional[Callable[[Any], Any]] = None) -> Any:
        """Decode a possibly wrapped JSON response body."""
        return self._decoder.decode_response(response, into)
    
    def login(self, url: str, auth: AuthRequest) -> None:
        """Run the challenge-response login (no-op once authorized)."""
        self._auth.login(url, auth)
    
    def close(self):
        """Close client and release resources."""
        self.closed = True
        self._session.close()
    
    def __enter__(self) -> 'APIClient':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

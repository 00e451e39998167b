"""Request handler sending prepared requests through a requests session."""
import requests

from ...exceptions import TransportError
from ...logging import get_logger
from ..config import APIConfig


class RequestHandler:
    """
    Sends requests and maps transport failures to TransportError.
    
    Responses are streamed so that the body can be consumed
    incrementally by the ResponseDecoder.
    """
    
    def __init__(self, session: requests.Session, config: APIConfig):
        """Initializes request handler."""
        self.session = session
        self.config = config
        self.logger = get_logger('pysbss.api')
    
    def execute(self, prepared: requests.PreparedRequest) -> requests.Response:
        """Sends prepared request and returns the streamed response."""
        settings = self.session.merge_environment_settings(
            prepared.url, {}, True, self.config.verify_ssl, None
        )
        self.logger.debug(f"{prepared.method} {prepared.url}")
        
        try:
            response = self.session.send(
                prepared,
                timeout=self.config.timeout,
                **settings
            )
        except requests.RequestException as e:
            self.logger.error(f"Network error: {e}")
            raise TransportError(f"Network error: {e}") from e
        
        self.logger.debug(f"Response status {response.status_code}")
        return response

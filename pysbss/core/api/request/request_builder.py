"""Request builder for CRM requests."""
from typing import Dict, Optional

from ..config import APIConfig
from ..models import ApiKeyData


FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


class RequestBuilder:
    """
    Builds headers and cookies for CRM requests.
    
    Every request is marked as XMLHttpRequest. POST bodies are always
    form-encoded. When an API key is configured its login header and
    cookie are attached regardless of the authorization state.
    """
    
    def __init__(self, config: APIConfig, api_key: Optional[ApiKeyData] = None):
        """Initializes request builder."""
        self.config = config
        self.api_key = api_key
    
    def build_headers(self, method: str) -> Dict[str, str]:
        """Builds request headers."""
        headers = self.config.get_session_headers()
        headers['X-Requested-With'] = 'XMLHttpRequest'
        
        if self.api_key:
            headers.update(self.api_key.headers())
        
        if method.upper() == 'POST':
            headers['Content-Type'] = FORM_CONTENT_TYPE
        
        return headers
    
    def build_cookies(self) -> Dict[str, str]:
        """Builds per-request cookies."""
        if self.api_key:
            return self.api_key.cookies()
        return {}
    
    def build_cookie_header(self) -> Optional[str]:
        """Cookie header value for transports without per-request cookies."""
        cookies = self.build_cookies()
        if not cookies:
            return None
        return '; '.join(f"{name}={value}" for name, value in cookies.items())

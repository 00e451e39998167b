"""
API configuration module.

Holds the knobs of the SBSS client. Nothing here is read from files or
the environment; callers build an APIConfig in code.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


DEFAULT_USER_AGENT = 'Sbss-Client'


@dataclass
class APIConfig:
    """
    Complete API configuration.
    
    Attributes:
        user_agent: Value of the User-Agent header
        timeout: Passed verbatim to the transport (None waits forever)
        verify_ssl: Verify server certificates
        extra_headers: Headers added to every request
        max_prefix_bytes: Upper bound of junk bytes skipped before the JSON body
        log_level: Level of the client logger while logging is unconfigured
    """
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Optional[float] = None
    verify_ssl: bool = True
    extra_headers: Dict[str, str] = field(default_factory=dict)
    max_prefix_bytes: int = 64 * 1024
    log_level: int = logging.INFO
    
    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()
    
    def get_session_headers(self) -> Dict[str, str]:
        """Headers shared by every request of a session."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }
    
    def get_aiohttp_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        import aiohttp
        return {
            'headers': self.get_session_headers(),
            'timeout': aiohttp.ClientTimeout(total=self.timeout),
        }

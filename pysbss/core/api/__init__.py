"""SBSS API module."""
from .config import APIConfig
from .models import AuthRequest, AuthResponse, ApiKeyData, AuthSession
from .auth import AuthService
from .async_auth import AsyncAuthService
from .async_client import AsyncAPIClient
from .client import APIClient
from .request import FormEncoder, RequestBuilder, RequestHandler, ResponseDecoder

__all__ = [
    # Sync client
    'APIClient',
    'AuthService',
    
    # Async client
    'AsyncAPIClient',
    'AsyncAuthService',
    
    # Models
    'AuthRequest',
    'AuthResponse',
    'ApiKeyData',
    'AuthSession',
    
    # Requests
    'FormEncoder',
    'RequestBuilder',
    'RequestHandler',
    'ResponseDecoder',
    
    # Configuration
    'APIConfig',
]

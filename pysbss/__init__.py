"""
pysbss - Python client for the SBSS CRM authentication protocol.

Usage:
    >>> from pysbss import APIClient, AuthRequest
    >>>
    >>> with APIClient() as client:
    ...     client.login("https://crm.example.com/index.php",
    ...                  AuthRequest.create("user1", "password1"))
"""
import logging

from .core.api import (
    APIClient,
    AsyncAPIClient,
    AuthService,
    AsyncAuthService,
    APIConfig,
    AuthRequest,
    AuthResponse,
    ApiKeyData,
    AuthSession,
    ResponseDecoder,
)
from .core.crypto import sign
from .core.exceptions import (
    SbssException,
    InvalidArgumentError,
    TransportError,
    DecodeError,
    AuthenticationRejectedError,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for pysbss modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'pysbss',
        'pysbss.api',
        'pysbss.auth',
        'pysbss.decoder',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'APIClient',
    'AsyncAPIClient',
    'AuthService',
    'AsyncAuthService',
    'APIConfig',
    'AuthRequest',
    'AuthResponse',
    'ApiKeyData',
    'AuthSession',
    'ResponseDecoder',
    'sign',
    'SbssException',
    'InvalidArgumentError',
    'TransportError',
    'DecodeError',
    'AuthenticationRejectedError',
    'setup_logging',
]

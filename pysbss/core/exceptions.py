"""
Custom exceptions for SBSS client operations.

Only AuthenticationRejectedError is a business-level failure; the
others describe infrastructure problems and may be retried by the caller.
"""
from typing import Optional


class SbssException(Exception):
    """Base exception for all SBSS client errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: HTTP status or other numeric code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class InvalidArgumentError(SbssException):
    """Raised when a required argument is missing or malformed."""
    pass


class TransportError(SbssException):
    """Raised when the HTTP transport fails; the original error is chained."""
    pass


class DecodeError(SbssException):
    """Raised when a response body does not yield a valid JSON value."""
    pass


class AuthenticationRejectedError(SbssException):
    """Raised when the server denies the signed credential."""
    
    def __init__(
        self,
        message: str,
        login: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            login: Login that was rejected
            error_code: Numeric error code (if available)
        """
        self.login = login
        super().__init__(message, error_code)

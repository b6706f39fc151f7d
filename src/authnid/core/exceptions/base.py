"""Base exceptions for authnid.

All exceptions raised by the library inherit from AuthnIdError and carry an
error code plus a details mapping so callers can report them uniformly.
"""

from typing import Any, Dict, Optional


class AuthnIdError(Exception):
    """Base exception for all authnid errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: AuthnIdError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The authnid exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }

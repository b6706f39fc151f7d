"""Core module for authnid.

Only exports the exception hierarchy; entities live under features/.
"""

from .exceptions import *

__all__ = [
    "AuthnIdError",
    "create_error_response",
    "ConfigurationError",
    "DerivationError",
    "DigestError",
]

"""Exception hierarchy for authnid."""

from .base import (
    AuthnIdError,
    create_error_response,
)

from .derivation import (
    ConfigurationError,
    DerivationError,
    DigestError,
)

__all__ = [
    "AuthnIdError",
    "create_error_response",
    "ConfigurationError",
    "DerivationError",
    "DigestError",
]

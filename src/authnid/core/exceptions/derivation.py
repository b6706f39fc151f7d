"""Exceptions raised while building or running the authn ID derivation."""

from .base import AuthnIdError


# Configuration Errors
class ConfigurationError(AuthnIdError):
    """Raised when the connector configuration is invalid."""
    pass


# Derivation Errors
class DerivationError(AuthnIdError):
    """Base class for errors inside a single derivation."""
    pass


class DigestError(DerivationError):
    """Raised when the digest algorithm or the input encoding is unusable."""
    pass

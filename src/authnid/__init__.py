"""authnid - pseudonymous authentication identifier derivation.

Computes a stable authn ID for a principal from attributes resolved by an
upstream attribute-resolution pipeline.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import AuthnIdSettings, get_settings

from .core.exceptions import (
    AuthnIdError,
    ConfigurationError,
    DerivationError,
    DigestError,
    create_error_response,
)

from .features.derivation import (
    AttributeValue,
    EmptyAttributeValue,
    ResolvedAttribute,
    StringAttributeValue,
    DEFAULT_MINIMUM_INPUT_LENGTH,
    DerivationConfig,
    build_configuration,
    AttributeLookup,
    DerivationObserver,
    NullDerivationObserver,
    AuthnIdDataConnector,
    create_authn_id_connector,
    compute_authn_id,
    LoggingDerivationObserver,
)


def create_connector_from_settings(settings: AuthnIdSettings = None) -> AuthnIdDataConnector:
    """Create a connector configured from environment settings."""
    settings = settings or get_settings()
    return create_authn_id_connector(settings.to_config(), connector_id=settings.connector_id)


__all__ = [
    "__version__",
    "setup_logging",
    "AuthnIdSettings",
    "get_settings",
    "create_connector_from_settings",

    # Exceptions
    "AuthnIdError",
    "ConfigurationError",
    "DerivationError",
    "DigestError",
    "create_error_response",

    # Entities
    "AttributeValue",
    "EmptyAttributeValue",
    "ResolvedAttribute",
    "StringAttributeValue",
    "DEFAULT_MINIMUM_INPUT_LENGTH",
    "DerivationConfig",
    "build_configuration",
    "AttributeLookup",
    "DerivationObserver",
    "NullDerivationObserver",

    # Services
    "AuthnIdDataConnector",
    "create_authn_id_connector",
    "compute_authn_id",
    "LoggingDerivationObserver",
]

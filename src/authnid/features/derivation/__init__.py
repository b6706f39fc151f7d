"""Authn ID derivation feature.

Feature-First layout:
- entities/: attribute value objects, configuration and protocols
- services/: bypass evaluation, input collection, digest and the connector
- adapters/: observer implementations
"""

from .entities import (
    AttributeValue,
    EmptyAttributeValue,
    ResolvedAttribute,
    StringAttributeValue,
    DEFAULT_MINIMUM_INPUT_LENGTH,
    DerivationConfig,
    build_configuration,
    parse_attribute_names,
    parse_bypass_rules,
    AttributeLookup,
    DerivationObserver,
    NullDerivationObserver,
)
from .services import (
    AuthnIdDataConnector,
    BypassEvaluator,
    InputCollector,
    collect_single_value,
    compute_authn_id,
    create_authn_id_connector,
    salt_input,
    source_exists_in_another,
)
from .adapters import LoggingDerivationObserver

__all__ = [
    # Entities
    "AttributeValue",
    "EmptyAttributeValue",
    "ResolvedAttribute",
    "StringAttributeValue",
    "DEFAULT_MINIMUM_INPUT_LENGTH",
    "DerivationConfig",
    "build_configuration",
    "parse_attribute_names",
    "parse_bypass_rules",

    # Protocols
    "AttributeLookup",
    "DerivationObserver",
    "NullDerivationObserver",

    # Services
    "AuthnIdDataConnector",
    "BypassEvaluator",
    "InputCollector",
    "collect_single_value",
    "compute_authn_id",
    "create_authn_id_connector",
    "salt_input",
    "source_exists_in_another",

    # Adapters
    "LoggingDerivationObserver",
]

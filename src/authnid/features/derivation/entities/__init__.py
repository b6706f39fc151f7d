"""Derivation entities: attribute value objects, configuration and protocols."""

from .attributes import (
    AttributeValue,
    EmptyAttributeValue,
    ResolvedAttribute,
    StringAttributeValue,
    string_values,
)
from .config import (
    DEFAULT_MINIMUM_INPUT_LENGTH,
    DerivationConfig,
    build_configuration,
    parse_attribute_names,
    parse_bypass_rules,
    parse_minimum_length,
)
from .protocols import AttributeLookup, DerivationObserver, NullDerivationObserver

__all__ = [
    "AttributeValue",
    "EmptyAttributeValue",
    "ResolvedAttribute",
    "StringAttributeValue",
    "string_values",
    "DEFAULT_MINIMUM_INPUT_LENGTH",
    "DerivationConfig",
    "build_configuration",
    "parse_attribute_names",
    "parse_bypass_rules",
    "parse_minimum_length",
    "AttributeLookup",
    "DerivationObserver",
    "NullDerivationObserver",
]

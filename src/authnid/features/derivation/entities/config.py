"""Derivation configuration entity and the text-surface parsers that build it."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ....core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_INPUT_LENGTH = 10

# Keys of the configuration text surface, as used by the resolver element
SRC_ATTRIBUTE_NAMES = "srcAttributeNames"
DEST_ATTRIBUTE_NAME = "destAttributeName"
PREFIX_SALT = "prefixSalt"
POSTFIX_SALT = "postfixSalt"
MIN_INPUT_LENGTH = "minInputLength"
SKIP_CALCULATION = "skipCalculation"
SKIP_CALCULATION_SRC = "skipCalculationSrc"


def trim_or_none(value: Optional[str]) -> Optional[str]:
    """Trim a string, returning None when nothing is left."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_attribute_names(text: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated attribute name list, dropping empty entries."""
    if text is None:
        return ()
    return tuple(name.strip() for name in text.split(",") if name.strip())


def parse_minimum_length(text: Optional[str]) -> int:
    """Parse the minimum input length, falling back to the default when unset."""
    text = trim_or_none(text)
    if text is None:
        return DEFAULT_MINIMUM_INPUT_LENGTH
    try:
        return int(text)
    except ValueError as e:
        raise ConfigurationError(
            f"minInputLength must be a decimal integer, got '{text}'",
            details={"field": MIN_INPUT_LENGTH},
        ) from e


def parse_bypass_rules(text: Optional[str]) -> Dict[str, Tuple[str, ...]]:
    """Parse ``name=value,name=value`` rule text into name -> candidate values.

    Pairs without both a name and a value are dropped with a warning. Any
    further ``=`` separated tokens are concatenated onto the value. Repeated
    names accumulate their values in order.
    """
    rules: Dict[str, List[str]] = {}
    if trim_or_none(text) is None:
        return {}

    for pair in text.split(","):
        pair = pair.strip()
        if not pair:
            continue
        logger.debug(f"Parsing the skipCalculation token {pair}")
        tokens = [token for token in pair.split("=") if token]
        if len(tokens) < 2:
            logger.warning(f"Could not parse skipCalculation token {pair}")
            continue
        attribute_name = tokens[0]
        attribute_value = "".join(tokens[1:])
        if attribute_name in rules:
            logger.debug(f"Adding the value {attribute_value} to the existing entry {attribute_name}")
        else:
            logger.debug(f"Creating a new entry {attribute_name} with value {attribute_value}")
        rules.setdefault(attribute_name, []).append(attribute_value)

    return {name: tuple(values) for name, values in rules.items()}


@dataclass(frozen=True)
class DerivationConfig:
    """Immutable configuration of the authn ID derivation."""

    source_attribute_names: Tuple[str, ...]
    destination_attribute_name: str
    prefix_salt: str = ""
    postfix_salt: str = ""
    minimum_input_length: int = DEFAULT_MINIMUM_INPUT_LENGTH
    bypass_rules: Mapping[str, Tuple[str, ...]] = field(default_factory=dict, hash=False)
    bypass_source_attribute_name: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.source_attribute_names, str):
            raise ConfigurationError(
                "source_attribute_names must be a sequence of names, not a string",
                details={"field": SRC_ATTRIBUTE_NAMES},
            )
        names = tuple(self.source_attribute_names or ())
        if not names or not all(names):
            raise ConfigurationError(
                "The srcAttributeNames configuration cannot be empty!",
                details={"field": SRC_ATTRIBUTE_NAMES},
            )

        if not self.destination_attribute_name:
            raise ConfigurationError(
                "The destAttributeName configuration may not be empty!",
                details={"field": DEST_ATTRIBUTE_NAME},
            )

        if isinstance(self.minimum_input_length, bool) or not isinstance(self.minimum_input_length, int):
            raise ConfigurationError(
                "minimum_input_length must be an integer",
                details={"field": MIN_INPUT_LENGTH},
            )
        if self.minimum_input_length < 1:
            raise ConfigurationError(
                f"minimum_input_length must be positive, got {self.minimum_input_length}",
                details={"field": MIN_INPUT_LENGTH},
            )

        rules = {
            name: _as_values(values)
            for name, values in (self.bypass_rules or {}).items()
        }

        # Set normalized values using object.__setattr__ since dataclass is frozen
        object.__setattr__(self, "source_attribute_names", names)
        object.__setattr__(self, "prefix_salt", self.prefix_salt or "")
        object.__setattr__(self, "postfix_salt", self.postfix_salt or "")
        object.__setattr__(self, "bypass_rules", MappingProxyType(rules))
        object.__setattr__(
            self, "bypass_source_attribute_name", self.bypass_source_attribute_name or None
        )

    @property
    def effective_bypass_source(self) -> str:
        """Attribute whose raw value is published when a bypass rule matches."""
        return self.bypass_source_attribute_name or self.source_attribute_names[0]

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Optional[str]]) -> "DerivationConfig":
        """Build a configuration from the connector's text surface.

        Args:
            attributes: Mapping keyed by ``srcAttributeNames``,
                ``destAttributeName``, ``prefixSalt``, ``postfixSalt``,
                ``minInputLength``, ``skipCalculation`` and
                ``skipCalculationSrc``. Missing keys take their defaults.
                Values are trimmed and blank values count as unset.

        Raises:
            ConfigurationError: A required value is missing or malformed.
        """
        return build_configuration(
            source_attribute_names=attributes.get(SRC_ATTRIBUTE_NAMES),
            destination_attribute_name=trim_or_none(attributes.get(DEST_ATTRIBUTE_NAME)),
            prefix_salt=trim_or_none(attributes.get(PREFIX_SALT)),
            postfix_salt=trim_or_none(attributes.get(POSTFIX_SALT)),
            minimum_input_length=attributes.get(MIN_INPUT_LENGTH),
            bypass_rules=attributes.get(SKIP_CALCULATION),
            bypass_source_attribute_name=trim_or_none(attributes.get(SKIP_CALCULATION_SRC)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_attribute_names": list(self.source_attribute_names),
            "destination_attribute_name": self.destination_attribute_name,
            "prefix_salt": self.prefix_salt,
            "postfix_salt": self.postfix_salt,
            "minimum_input_length": self.minimum_input_length,
            "bypass_rules": {name: list(values) for name, values in self.bypass_rules.items()},
            "bypass_source_attribute_name": self.bypass_source_attribute_name,
        }


def build_configuration(
    source_attribute_names: Optional[Any],
    destination_attribute_name: Optional[str],
    prefix_salt: Optional[str] = None,
    postfix_salt: Optional[str] = None,
    minimum_input_length: Optional[Any] = None,
    bypass_rules: Optional[Any] = None,
    bypass_source_attribute_name: Optional[str] = None,
) -> DerivationConfig:
    """Build a validated DerivationConfig from text or already-typed values.

    Source names may be comma-separated text or a sequence, the minimum
    length may be decimal text or an int, and bypass rules may be rule text
    or a mapping of name to candidate values.

    Salts and names are used exactly as given; trimming of blank text is
    left to from_attributes.
    """
    if source_attribute_names is None or isinstance(source_attribute_names, str):
        logger.debug(f"Converting string {source_attribute_names} to the array")
        names = parse_attribute_names(source_attribute_names)
    else:
        names = tuple(source_attribute_names)

    if minimum_input_length is None or isinstance(minimum_input_length, str):
        min_length = parse_minimum_length(minimum_input_length)
    else:
        min_length = minimum_input_length

    if bypass_rules is None or isinstance(bypass_rules, str):
        rules = parse_bypass_rules(bypass_rules)
    else:
        rules = {name: _as_values(values) for name, values in bypass_rules.items()}

    return DerivationConfig(
        source_attribute_names=names,
        destination_attribute_name=destination_attribute_name or "",
        prefix_salt=prefix_salt or "",
        postfix_salt=postfix_salt or "",
        minimum_input_length=min_length,
        bypass_rules=rules,
        bypass_source_attribute_name=bypass_source_attribute_name,
    )


def _as_values(values: Any) -> Tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    return tuple(values)


__all__ = [
    "DEFAULT_MINIMUM_INPUT_LENGTH",
    "DerivationConfig",
    "build_configuration",
    "parse_attribute_names",
    "parse_bypass_rules",
    "parse_minimum_length",
    "trim_or_none",
]

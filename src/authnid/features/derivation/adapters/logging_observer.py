"""Derivation observer backed by the standard logging module."""

import logging
from typing import Optional

from ..entities.protocols import AttributeLookup

logger = logging.getLogger(__name__)


class LoggingDerivationObserver:
    """Reports derivation decision points to a logger.

    Attribute values and salts are only ever written at DEBUG level.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def derivation_started(self, principal: Optional[str], attributes: AttributeLookup) -> None:
        self.log.debug(f"Calculating authnID for {principal}")
        if self.log.isEnabledFor(logging.DEBUG):
            for name, attribute in attributes.items():
                raw = attribute.raw_values if attribute is not None else None
                self.log.debug(f"Attribute key {name}, value {raw}")

    def value_missing(self, attribute_name: str, value_count: int) -> None:
        if value_count == 0:
            self.log.warning(f"Could not find a value for attribute {attribute_name} from the context")
        else:
            self.log.debug(
                f"No single value found for the attribute {attribute_name}, the set size was {value_count}"
            )

    def bypass_triggered(self, rule_attribute_name: str, source_attribute_name: str) -> None:
        self.log.debug(
            f"skipCalculation configuration matched on {rule_attribute_name}, "
            f"using {source_attribute_name} as is"
        )

    def bypass_unavailable(self, source_attribute_name: str) -> None:
        self.log.debug(
            f"skipCalculation source {source_attribute_name} has no single value, calculating instead"
        )

    def input_too_short(self, length: int, minimum_length: int) -> None:
        self.log.error(
            f"The input for the authn ID calculation is too simple (length = {length}, "
            f"minimum = {minimum_length}), cannot continue"
        )

    def digest_failed(self, error: Exception) -> None:
        self.log.error(f"Authn ID calculation failed: {error}")

    def published(self, destination_attribute_name: str, bypassed: bool) -> None:
        if bypassed:
            self.log.info(f"Authn ID calculation skipped, source value included in the attribute {destination_attribute_name}")
        else:
            self.log.info(f"Authn ID successfully calculated and included in the attribute {destination_attribute_name}")

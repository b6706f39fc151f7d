"""Protocols for the derivation feature."""

from typing import Mapping, Optional, Protocol, runtime_checkable

from .attributes import ResolvedAttribute


# Attribute name -> resolved attribute, as handed over by the resolution pipeline.
# A None entry means the definition resolved to nothing.
AttributeLookup = Mapping[str, Optional[ResolvedAttribute]]


@runtime_checkable
class DerivationObserver(Protocol):
    """Observability hook invoked at the decision points of a derivation."""

    def derivation_started(self, principal: Optional[str], attributes: AttributeLookup) -> None:
        """A derivation was requested for the principal."""
        ...

    def value_missing(self, attribute_name: str, value_count: int) -> None:
        """No single usable string value was found for the attribute."""
        ...

    def bypass_triggered(self, rule_attribute_name: str, source_attribute_name: str) -> None:
        """A bypass rule matched; the raw source value is about to be used."""
        ...

    def bypass_unavailable(self, source_attribute_name: str) -> None:
        """A bypass rule matched but its source attribute had no usable value."""
        ...

    def input_too_short(self, length: int, minimum_length: int) -> None:
        """The pre-salt input is below the configured minimum length."""
        ...

    def digest_failed(self, error: Exception) -> None:
        """The digest primitive or the input encoding failed."""
        ...

    def published(self, destination_attribute_name: str, bypassed: bool) -> None:
        """A value was published under the destination attribute."""
        ...


class NullDerivationObserver:
    """Observer that ignores every event."""

    def derivation_started(self, principal, attributes) -> None:
        pass

    def value_missing(self, attribute_name, value_count) -> None:
        pass

    def bypass_triggered(self, rule_attribute_name, source_attribute_name) -> None:
        pass

    def bypass_unavailable(self, source_attribute_name) -> None:
        pass

    def input_too_short(self, length, minimum_length) -> None:
        pass

    def digest_failed(self, error) -> None:
        pass

    def published(self, destination_attribute_name, bypassed) -> None:
        pass

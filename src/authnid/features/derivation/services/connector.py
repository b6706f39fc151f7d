"""Authn ID data connector.

Derives a stable, pseudonymous authentication identifier for a principal
from the attributes resolved upstream:

1. Evaluate the bypass rules; on a match publish the raw value of the bypass
   source attribute, if it has a single usable value.
2. Concatenate the source attribute values in configuration order.
3. Refuse inputs shorter than the configured minimum length.
4. Salt the input, hash it with SHA-256 and publish the Base64 digest.

A call returns either an empty mapping or a mapping holding exactly one
single-valued attribute keyed by the destination name. Data problems never
raise.
"""

from typing import Dict, Optional

from ....core.exceptions import DigestError
from ..adapters.logging_observer import LoggingDerivationObserver
from ..entities.attributes import ResolvedAttribute, StringAttributeValue
from ..entities.config import DerivationConfig
from ..entities.protocols import AttributeLookup, DerivationObserver
from .bypass_evaluator import BypassEvaluator
from .digest import compute_authn_id, salt_input
from .input_collector import InputCollector

DEFAULT_CONNECTOR_ID = "authnid"


class AuthnIdDataConnector:
    """Computes the authn ID attribute from an immutable configuration."""

    def __init__(
        self,
        config: DerivationConfig,
        observer: Optional[DerivationObserver] = None,
        connector_id: str = DEFAULT_CONNECTOR_ID,
    ):
        """Initialize the connector.

        Args:
            config: Validated derivation configuration
            observer: Hook notified at the decision points, logging by default
            connector_id: Identifier of this connector in the resolver
        """
        self._config = config
        self.id = connector_id
        self.observer = observer or LoggingDerivationObserver()
        self._bypass = BypassEvaluator(config.bypass_rules)
        self._collector = InputCollector(self.observer)

    @property
    def config(self) -> DerivationConfig:
        return self._config

    def resolve(
        self,
        attributes: AttributeLookup,
        principal: Optional[str] = None,
    ) -> Dict[str, ResolvedAttribute]:
        """Resolve the authn ID attribute for one request.

        Args:
            attributes: Resolved attributes keyed by attribute name
            principal: Principal identifier, used for logging only

        Returns:
            ``{}`` or ``{destination_attribute_name: ResolvedAttribute}``
        """
        self.observer.derivation_started(principal, attributes)

        bypass_value = self._resolve_bypass(attributes)
        if bypass_value is not None:
            self.observer.published(self._config.destination_attribute_name, bypassed=True)
            return self.build_response(bypass_value)

        authn_id = self.derive(attributes)
        if authn_id is None:
            return {}

        self.observer.published(self._config.destination_attribute_name, bypassed=False)
        return self.build_response(authn_id)

    def derive(self, attributes: AttributeLookup) -> Optional[str]:
        """Run the digest path, returning the authn ID or None."""
        pre_salt_input = self._collector.collect_input(attributes, self._config.source_attribute_names)
        if len(pre_salt_input) < self._config.minimum_input_length:
            self.observer.input_too_short(len(pre_salt_input), self._config.minimum_input_length)
            return None

        salted = salt_input(pre_salt_input, self._config.prefix_salt, self._config.postfix_salt)
        try:
            return compute_authn_id(salted)
        except DigestError as e:
            self.observer.digest_failed(e)
            return None

    def build_response(self, value: str) -> Dict[str, ResolvedAttribute]:
        """Wrap a value as the single destination attribute."""
        name = self._config.destination_attribute_name
        return {name: ResolvedAttribute(name=name, values=(StringAttributeValue(value),))}

    def _resolve_bypass(self, attributes: AttributeLookup) -> Optional[str]:
        rule_attribute = self._bypass.matching_rule(attributes)
        if rule_attribute is None:
            return None

        source = self._config.effective_bypass_source
        self.observer.bypass_triggered(rule_attribute, source)
        value = self._collector.collect_value(attributes, source)
        if value is None:
            self.observer.bypass_unavailable(source)
        return value


def create_authn_id_connector(
    config: DerivationConfig,
    observer: Optional[DerivationObserver] = None,
    connector_id: str = DEFAULT_CONNECTOR_ID,
) -> AuthnIdDataConnector:
    """Factory function for dependency injection."""
    return AuthnIdDataConnector(config=config, observer=observer, connector_id=connector_id)

"""Collection of single attribute values and the concatenated derivation input."""

from typing import Optional, Sequence

from ..entities.attributes import AttributeValue
from ..entities.protocols import AttributeLookup, DerivationObserver, NullDerivationObserver


def collect_single_value(values: Sequence[AttributeValue]) -> Optional[str]:
    """Return the value of a single-valued string attribute.

    Zero values, more than one value, or a lone non-string value all yield
    None. That is missing data, not an error.
    """
    if len(values) != 1:
        return None
    value = values[0].value
    return value if isinstance(value, str) else None


class InputCollector:
    """Collects the derivation input from the resolved attributes."""

    def __init__(self, observer: Optional[DerivationObserver] = None):
        self.observer = observer or NullDerivationObserver()

    def collect_value(self, attributes: AttributeLookup, attribute_name: str) -> Optional[str]:
        """Collect the single string value of the named attribute, or None."""
        attribute = attributes.get(attribute_name)
        if attribute is None:
            self.observer.value_missing(attribute_name, 0)
            return None

        value = collect_single_value(attribute.values)
        if value is None:
            self.observer.value_missing(attribute_name, len(attribute.values))
        return value

    def collect_input(self, attributes: AttributeLookup, attribute_names: Sequence[str]) -> str:
        """Concatenate the source values in configuration order, without separators."""
        return "".join(
            value
            for value in (self.collect_value(attributes, name) for name in attribute_names)
            if value is not None
        )

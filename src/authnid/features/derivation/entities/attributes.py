"""Attribute value objects exchanged with the attribute-resolution pipeline."""

from dataclasses import dataclass
from typing import Any, Iterable, Tuple


@dataclass(frozen=True)
class AttributeValue:
    """A single typed value held by a resolved attribute."""

    value: Any

    @property
    def display_value(self) -> str:
        """Human readable form used in debug logging."""
        return str(self.value)


@dataclass(frozen=True)
class StringAttributeValue(AttributeValue):
    """String-typed attribute value."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"StringAttributeValue requires str, got {type(self.value).__name__}")


@dataclass(frozen=True)
class EmptyAttributeValue(AttributeValue):
    """Null or empty value. Never usable as input and never matches."""

    value: Any = None

    @property
    def display_value(self) -> str:
        return ""


@dataclass(frozen=True)
class ResolvedAttribute:
    """An attribute resolved upstream, with its ordered values."""

    name: str
    values: Tuple[AttributeValue, ...] = ()

    def __post_init__(self):
        if not self.name:
            raise ValueError("name is required")
        # Raw scalars are wrapped and stored as a tuple to keep the object immutable
        object.__setattr__(self, "values", tuple(_wrap(value) for value in self.values))

    @classmethod
    def of(cls, name: str, *raw_values: Any) -> "ResolvedAttribute":
        """Build an attribute from raw scalars.

        Strings become StringAttributeValue, None becomes EmptyAttributeValue
        and anything else is wrapped in a plain AttributeValue.
        """
        return cls(name=name, values=raw_values)

    @property
    def raw_values(self) -> Tuple[Any, ...]:
        return tuple(value.value for value in self.values)


def _wrap(value: Any) -> AttributeValue:
    if isinstance(value, AttributeValue):
        return value
    if value is None:
        return EmptyAttributeValue()
    if isinstance(value, str):
        return StringAttributeValue(value)
    return AttributeValue(value)


def string_values(values: Iterable[AttributeValue]) -> Tuple[str, ...]:
    """Return the string-typed scalars among the given values, in order."""
    return tuple(value.value for value in values if isinstance(value.value, str))

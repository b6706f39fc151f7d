"""Evaluation of the skip-calculation (bypass) rules."""

import logging
from typing import Mapping, Optional, Sequence, Tuple

from ..entities.attributes import AttributeValue, string_values
from ..entities.protocols import AttributeLookup

logger = logging.getLogger(__name__)


def source_exists_in_another(candidates: Sequence[str], target_values: Sequence[AttributeValue]) -> bool:
    """Check whether any candidate equals any string-typed target value.

    Every value of a multi-valued target is considered. Non-string values
    never match.
    """
    targets = string_values(target_values)
    logger.debug(f"Comparing {list(candidates)} to {list(targets)}")
    return any(candidate in targets for candidate in candidates)


class BypassEvaluator:
    """Short-circuiting any-match search over the configured bypass rules."""

    def __init__(self, rules: Mapping[str, Tuple[str, ...]]):
        self.rules = rules

    def matching_rule(self, attributes: AttributeLookup) -> Optional[str]:
        """Return the attribute name of the first matching rule, or None."""
        if not self.rules:
            logger.debug("No skipCalculation attribute defined")
            return None

        for attribute_name, candidates in self.rules.items():
            attribute = attributes.get(attribute_name)
            if attribute is None:
                logger.debug(f"Attribute {attribute_name} was not found in the context")
                continue
            if source_exists_in_another(candidates, attribute.values):
                return attribute_name
        return None

    def is_triggered(self, attributes: AttributeLookup) -> bool:
        return self.matching_rule(attributes) is not None

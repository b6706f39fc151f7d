"""Pytest configuration and fixtures for authnid tests."""

import pytest
from unittest.mock import MagicMock

from authnid import (
    AuthnIdDataConnector,
    DerivationConfig,
    DerivationObserver,
    ResolvedAttribute,
)


SRC_ATTRIBUTE_NAME = "testingSrc"
SRC_ATTRIBUTE_NAMES = ["testingSrc1", "testingSrc2", "testingSrc3"]
SRC_ATTRIBUTE_VALUES = ["testingInputSource", "testingInputSource2", "testingInputSource3"]
DEST_ATTRIBUTE_NAME = "testingDest"


def attributes_of(**values):
    """Build a resolved attribute lookup from keyword raw values.

    A tuple value becomes a multi-valued attribute.
    """
    lookup = {}
    for name, value in values.items():
        raw = value if isinstance(value, tuple) else (value,)
        lookup[name] = ResolvedAttribute.of(name, *raw)
    return lookup


@pytest.fixture
def minimum_config():
    """Single source attribute, defaults everywhere else."""
    return DerivationConfig.from_attributes({
        "srcAttributeNames": SRC_ATTRIBUTE_NAME,
        "destAttributeName": DEST_ATTRIBUTE_NAME,
    })


@pytest.fixture
def three_sources_config():
    """Three source attributes concatenated in order."""
    return DerivationConfig.from_attributes({
        "srcAttributeNames": ",".join(SRC_ATTRIBUTE_NAMES),
        "destAttributeName": DEST_ATTRIBUTE_NAME,
    })


@pytest.fixture
def salted_config():
    """Single source attribute with prefix and postfix salts."""
    return DerivationConfig.from_attributes({
        "srcAttributeNames": SRC_ATTRIBUTE_NAME,
        "destAttributeName": DEST_ATTRIBUTE_NAME,
        "prefixSalt": "testPre",
        "postfixSalt": "testPost",
    })


@pytest.fixture
def full_config():
    """Every configuration parameter set."""
    return DerivationConfig.from_attributes({
        "srcAttributeNames": SRC_ATTRIBUTE_NAME,
        "destAttributeName": DEST_ATTRIBUTE_NAME,
        "prefixSalt": "testPre",
        "postfixSalt": "testPost",
        "minInputLength": "15",
        "skipCalculation": "testingSkipping=skipValue1,testingSkipping=skipValue2",
        "skipCalculationSrc": SRC_ATTRIBUTE_NAME,
    })


@pytest.fixture
def skip_config():
    """Bypass rules on idpId without an explicit bypass source."""
    return DerivationConfig.from_attributes({
        "srcAttributeNames": SRC_ATTRIBUTE_NAME,
        "destAttributeName": DEST_ATTRIBUTE_NAME,
        "skipCalculation": "idpId=skipId,idpId=skipId2",
    })


@pytest.fixture
def mock_observer():
    """Observer mock that records decision-point calls."""
    return MagicMock(spec=DerivationObserver)


@pytest.fixture
def connector_factory(mock_observer):
    """Build connectors wired to the mock observer."""
    def _create(config):
        return AuthnIdDataConnector(config, observer=mock_observer)
    return _create


@pytest.fixture
def make_attributes():
    """Factory for resolved attribute lookups."""
    return attributes_of

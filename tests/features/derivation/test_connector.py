"""
Tests for the authn ID data connector.

Covers the reference digests, the minimum length guard, bypass precedence
and the observer decision points.
"""

import logging

import pytest

from authnid import (
    AuthnIdDataConnector,
    DerivationConfig,
    ResolvedAttribute,
    StringAttributeValue,
    create_authn_id_connector,
)
from authnid.features.derivation.services import connector as connector_module


SRC = "testingSrc"
DEST = "testingDest"
VALUES = ["testingInputSource", "testingInputSource2", "testingInputSource3"]


class TestReferenceDigests:
    """Digests must stay stable across releases."""

    def test_minimum(self, minimum_config, make_attributes):
        connector = AuthnIdDataConnector(minimum_config)
        result = connector.resolve(make_attributes(testingSrc=VALUES[0]), principal="jdoe")

        assert connector.id == "authnid"
        assert connector.config.minimum_input_length == 10
        assert connector.config.prefix_salt == ""
        assert connector.config.postfix_salt == ""
        assert connector.config.bypass_source_attribute_name is None
        assert list(result) == [DEST]
        assert result[DEST].values[0].value == "9MRUli6t2hQIhLKlVK/n2IAwVzZpCreaZ6dAyE7CHL8="

    def test_three_sources(self, three_sources_config, make_attributes):
        connector = AuthnIdDataConnector(three_sources_config)
        attributes = make_attributes(
            testingSrc1=VALUES[0], testingSrc2=VALUES[1], testingSrc3=VALUES[2]
        )

        result = connector.resolve(attributes)

        assert len(result) == 1
        assert result[DEST].values[0].value == "w/AW7WOwjcS/8ibBkbD91eVhb7Kh73tRZhHS+u6AVkM="

    def test_minimum_salted(self, salted_config, make_attributes):
        connector = AuthnIdDataConnector(salted_config)

        result = connector.resolve(make_attributes(testingSrc=VALUES[0]))

        assert connector.config.prefix_salt == "testPre"
        assert connector.config.postfix_salt == "testPost"
        assert result[DEST].values[0].value == "/koIA2Xy/utNm9/f6c4HPnGb2bZ/0nRKOTd2BAQfFL8="


class TestResultShape:
    """Published results hold exactly one single-valued attribute."""

    def test_published_attribute(self, minimum_config, make_attributes):
        result = AuthnIdDataConnector(minimum_config).resolve(make_attributes(testingSrc=VALUES[0]))

        attribute = result[DEST]
        assert isinstance(attribute, ResolvedAttribute)
        assert attribute.name == DEST
        assert len(attribute.values) == 1
        assert isinstance(attribute.values[0], StringAttributeValue)

    def test_deterministic(self, three_sources_config, make_attributes):
        connector = AuthnIdDataConnector(three_sources_config)
        attributes = make_attributes(
            testingSrc1=VALUES[0], testingSrc2=VALUES[1], testingSrc3=VALUES[2]
        )

        assert connector.resolve(attributes) == connector.resolve(attributes)
        assert AuthnIdDataConnector(three_sources_config).resolve(attributes) == connector.resolve(attributes)

    def test_order_sensitive(self, make_attributes):
        forward = DerivationConfig(("a", "b"), DEST)
        backward = DerivationConfig(("b", "a"), DEST)
        attributes = make_attributes(a="firstValue1", b="secondValue2")

        forward_id = AuthnIdDataConnector(forward).resolve(attributes)[DEST].values[0].value
        backward_id = AuthnIdDataConnector(backward).resolve(attributes)[DEST].values[0].value

        assert forward_id != backward_id

    def test_missing_source_contributes_nothing(self, make_attributes):
        config = DerivationConfig(("testingSrc", "absent"), DEST)
        single = DerivationConfig(("testingSrc",), DEST)
        attributes = make_attributes(testingSrc=VALUES[0])

        assert AuthnIdDataConnector(config).resolve(attributes) == AuthnIdDataConnector(single).resolve(attributes)

    def test_multi_valued_source_is_skipped(self, make_attributes):
        config = DerivationConfig(("testingSrc", "multi"), DEST)
        single = DerivationConfig(("testingSrc",), DEST)
        attributes = make_attributes(testingSrc=VALUES[0], multi=("one", "two"))

        assert AuthnIdDataConnector(config).resolve(attributes) == AuthnIdDataConnector(single).resolve(attributes)

    def test_raw_values_list(self):
        config = DerivationConfig((SRC,), DEST)
        attributes = {SRC: ResolvedAttribute(SRC, [VALUES[0]])}

        result = AuthnIdDataConnector(config).resolve(attributes)

        assert result[DEST].values[0].value == "9MRUli6t2hQIhLKlVK/n2IAwVzZpCreaZ6dAyE7CHL8="

    def test_none_definition_is_missing(self):
        config = DerivationConfig(("testingSrc", "unresolved"), DEST)
        attributes = {"testingSrc": ResolvedAttribute.of(SRC, VALUES[0]), "unresolved": None}

        result = AuthnIdDataConnector(config).resolve(attributes)

        assert result[DEST].values[0].value == "9MRUli6t2hQIhLKlVK/n2IAwVzZpCreaZ6dAyE7CHL8="


class TestMinimumLengthGuard:
    """The guard measures the pre-salt input."""

    def test_too_short(self, full_config, make_attributes):
        config = DerivationConfig(
            source_attribute_names=full_config.source_attribute_names,
            destination_attribute_name=DEST,
            prefix_salt=full_config.prefix_salt,
            postfix_salt=full_config.postfix_salt,
            minimum_input_length=len(VALUES[0]) + 1,
        )

        assert AuthnIdDataConnector(config).resolve(make_attributes(testingSrc=VALUES[0])) == {}

    def test_exact_length_passes(self, make_attributes):
        config = DerivationConfig((SRC,), DEST, minimum_input_length=len(VALUES[0]))

        assert DEST in AuthnIdDataConnector(config).resolve(make_attributes(testingSrc=VALUES[0]))

    def test_salt_does_not_count(self, make_attributes):
        config = DerivationConfig(
            (SRC,), DEST, prefix_salt="a-long-prefix-salt", postfix_salt="a-long-postfix-salt"
        )

        assert AuthnIdDataConnector(config).resolve(make_attributes(testingSrc="short")) == {}

    def test_no_sources_resolved(self, minimum_config):
        assert AuthnIdDataConnector(minimum_config).resolve({}) == {}

    def test_guard_logs_error(self, minimum_config, make_attributes, caplog):
        with caplog.at_level(logging.ERROR):
            result = AuthnIdDataConnector(minimum_config).resolve(make_attributes(testingSrc="short"))

        assert result == {}
        assert any(
            record.levelno == logging.ERROR and "too simple" in record.getMessage()
            for record in caplog.records
        )


class TestBypass:
    """Skip-calculation rules publish the raw source value."""

    def test_full(self, full_config, make_attributes):
        connector = AuthnIdDataConnector(full_config)
        attributes = make_attributes(testingSrc=VALUES[0], testingSkipping="skipValue1")

        result = connector.resolve(attributes)

        assert connector.config.bypass_source_attribute_name == SRC
        assert connector.config.minimum_input_length == 15
        assert result[DEST].values[0].value == VALUES[0]

    def test_skip(self, skip_config, make_attributes):
        result = AuthnIdDataConnector(skip_config).resolve(
            make_attributes(testingSrc=VALUES[0], idpId="skipId")
        )

        assert result[DEST].values[0].value == VALUES[0]

    def test_skip_second_value(self, skip_config, make_attributes):
        result = AuthnIdDataConnector(skip_config).resolve(
            make_attributes(testingSrc=VALUES[0], idpId="skipId2")
        )

        assert result[DEST].values[0].value == VALUES[0]

    def test_no_match_hashes(self, skip_config, make_attributes):
        result = AuthnIdDataConnector(skip_config).resolve(
            make_attributes(testingSrc=VALUES[0], idpId="otherIdp")
        )

        assert result[DEST].values[0].value == "9MRUli6t2hQIhLKlVK/n2IAwVzZpCreaZ6dAyE7CHL8="

    def test_bypass_ignores_minimum_length(self, skip_config, make_attributes):
        result = AuthnIdDataConnector(skip_config).resolve(
            make_attributes(testingSrc="short", idpId="skipId")
        )

        assert result[DEST].values[0].value == "short"

    def test_bypass_source_overrides_first_source(self, make_attributes):
        config = DerivationConfig(
            ("testingSrc",), DEST,
            bypass_rules={"idpId": ("skipId",)},
            bypass_source_attribute_name="legacyId",
        )
        attributes = make_attributes(testingSrc=VALUES[0], idpId="skipId", legacyId="legacy-value")

        assert AuthnIdDataConnector(config).resolve(attributes)[DEST].values[0].value == "legacy-value"

    def test_multi_valued_rule_attribute_matches(self, skip_config, make_attributes):
        attributes = make_attributes(testingSrc=VALUES[0], idpId=("another", "skipId"))

        assert AuthnIdDataConnector(skip_config).resolve(attributes)[DEST].values[0].value == VALUES[0]

    def test_unusable_bypass_source_falls_through(self, make_attributes):
        config = DerivationConfig(
            (SRC,), DEST,
            bypass_rules={"idpId": ("skipId",)},
            bypass_source_attribute_name="legacyId",
        )
        attributes = make_attributes(testingSrc=VALUES[0], idpId="skipId", legacyId=("a", "b"))

        result = AuthnIdDataConnector(config).resolve(attributes)

        assert result[DEST].values[0].value == "9MRUli6t2hQIhLKlVK/n2IAwVzZpCreaZ6dAyE7CHL8="

    def test_digest_not_computed_on_bypass(self, skip_config, make_attributes, mocker):
        spy = mocker.spy(connector_module, "compute_authn_id")

        AuthnIdDataConnector(skip_config).resolve(make_attributes(testingSrc=VALUES[0], idpId="skipId"))

        spy.assert_not_called()


class TestDigestFailure:
    """Digest failures degrade to an empty result."""

    def test_unencodable_input(self, caplog):
        config = DerivationConfig((SRC,), DEST)
        attributes = {SRC: ResolvedAttribute.of(SRC, "broken-input-\ud800")}

        with caplog.at_level(logging.ERROR):
            result = AuthnIdDataConnector(config).resolve(attributes)

        assert result == {}
        assert any("calculation failed" in record.getMessage() for record in caplog.records)


class TestObserver:
    """Decision points reach the observer hook."""

    def test_published(self, connector_factory, mock_observer, minimum_config, make_attributes):
        connector_factory(minimum_config).resolve(make_attributes(testingSrc=VALUES[0]), principal="jdoe")

        mock_observer.derivation_started.assert_called_once()
        assert mock_observer.derivation_started.call_args.args[0] == "jdoe"
        mock_observer.published.assert_called_once_with(DEST, bypassed=False)
        mock_observer.input_too_short.assert_not_called()

    def test_input_too_short(self, connector_factory, mock_observer, minimum_config, make_attributes):
        connector_factory(minimum_config).resolve(make_attributes(testingSrc="short"))

        mock_observer.input_too_short.assert_called_once_with(5, 10)
        mock_observer.published.assert_not_called()

    def test_bypass_triggered(self, connector_factory, mock_observer, skip_config, make_attributes):
        connector_factory(skip_config).resolve(make_attributes(testingSrc=VALUES[0], idpId="skipId"))

        mock_observer.bypass_triggered.assert_called_once_with("idpId", SRC)
        mock_observer.published.assert_called_once_with(DEST, bypassed=True)

    def test_bypass_unavailable(self, connector_factory, mock_observer, skip_config, make_attributes):
        result = connector_factory(skip_config).resolve(make_attributes(idpId="skipId"))

        assert result == {}
        mock_observer.bypass_unavailable.assert_called_once_with(SRC)
        mock_observer.input_too_short.assert_called_once_with(0, 10)

    def test_digest_failed(self, connector_factory, mock_observer, minimum_config):
        attributes = {SRC: ResolvedAttribute.of(SRC, "broken-input-\ud800")}

        connector_factory(minimum_config).resolve(attributes)

        mock_observer.digest_failed.assert_called_once()


class TestFactory:

    def test_create_connector(self, minimum_config):
        connector = create_authn_id_connector(minimum_config, connector_id="calculateAuthnId")

        assert isinstance(connector, AuthnIdDataConnector)
        assert connector.id == "calculateAuthnId"
        assert connector.config is minimum_config

    def test_config_is_read_only(self, minimum_config):
        connector = AuthnIdDataConnector(minimum_config)

        with pytest.raises(AttributeError):
            connector.config = minimum_config

"""Tests for translating connector and destination configs between API and domain models."""

import dataclasses
import json

import pytest
from hypothesis import given, strategies as st

from artie_client.clients import connector_client, destination_client
from artie_client.clients.conntypes import ConnectorType
from artie_client.models import (
    Connector,
    Destination,
    MySQLConfig,
    PostgresConfig,
    SnowflakeConfig,
    SnowflakeSharedConfig,
    connector_from_api_model,
    destination_from_api_model,
)
from artie_client.models.connector import CONNECTOR_CONFIG_VARIANTS
from artie_client.models.destination import DESTINATION_CONFIG_VARIANTS
from artie_client.shared.errors import TranslationError


DATABASE_KEYS = {"host", "snapshotHost", "port", "username", "password"}

CONNECTOR_KEYS = {
    ConnectorType.BIGQUERY: {"projectID", "location", "credentialsData"},
    ConnectorType.DYNAMODB: {"streamsArn", "awsAccessKeyID", "awsSecretAccessKey"},
    ConnectorType.MONGODB: {"host", "username", "password"},
    ConnectorType.MYSQL: DATABASE_KEYS,
    ConnectorType.MSSQL: DATABASE_KEYS,
    ConnectorType.ORACLE: DATABASE_KEYS,
    ConnectorType.POSTGRESQL: DATABASE_KEYS,
    ConnectorType.REDSHIFT: {"endpoint", "username", "password"},
    ConnectorType.S3: {"awsAccessKeyID", "awsSecretAccessKey", "awsRegion"},
    ConnectorType.SNOWFLAKE: {
        "accountIdentifier", "accountURL", "virtualDWH", "username", "password", "privateKey",
    },
}

DESTINATION_KEYS = {
    ConnectorType.BIGQUERY: {"projectID", "location", "credentialsData"},
    ConnectorType.MSSQL: {"host", "port", "username", "password"},
    ConnectorType.REDSHIFT: {"endpoint", "username", "password"},
    ConnectorType.S3: {"awsAccessKeyID", "awsSecretAccessKey", "awsRegion"},
    ConnectorType.SNOWFLAKE: {"accountURL", "virtualDWH", "username", "password", "privateKey"},
}


def variant_strategy(variant, non_empty=False):
    """Build instances of a config variant with every field generated."""
    text = st.text(min_size=1) if non_empty else st.text()
    ints = st.integers(min_value=1, max_value=65535) if non_empty else st.integers(0, 65535)
    return st.builds(
        variant,
        **{f.name: ints if f.type is int else text for f in dataclasses.fields(variant)},
    )


def over_json(data):
    return json.loads(json.dumps(data))


connector_configs = st.sampled_from(list(CONNECTOR_CONFIG_VARIANTS.values())).flatmap(variant_strategy)
destination_configs = st.sampled_from(list(DESTINATION_CONFIG_VARIANTS.values())).flatmap(variant_strategy)


class TestConnectorTranslation:
    """Test suite for connector config translation."""

    def test_every_connector_type_has_a_variant(self):
        assert set(CONNECTOR_CONFIG_VARIANTS) == set(ConnectorType)

    @given(config=connector_configs)
    def test_config_round_trips_through_wire(self, config):
        wire = over_json(config.to_api_model().to_dict())
        restored = type(config).from_api_model(connector_client.ConnectorConfig.from_dict(wire))
        assert restored == config

    @given(config=connector_configs, uuid=st.uuids().map(str), label=st.text())
    def test_connector_round_trips_through_wire(self, config, uuid, label):
        connector = Connector(type=config.connector_type.value, config=config, label=label, uuid=uuid)

        wire = over_json(connector.to_api_model().to_dict())
        restored = connector_from_api_model(connector_client.Connector.from_dict(wire))

        assert restored == connector

    @pytest.mark.parametrize("variant", list(CONNECTOR_CONFIG_VARIANTS.values()))
    @given(data=st.data())
    def test_only_own_fields_are_populated(self, variant, data):
        config = data.draw(variant_strategy(variant, non_empty=True))

        populated = set(config.to_api_model().to_dict())

        assert populated == CONNECTOR_KEYS[variant.connector_type]

    def test_unknown_type_is_rejected(self):
        connector = Connector(type="cassandra", config=None)
        with pytest.raises(TranslationError, match="invalid connector type"):
            connector.to_api_base_model()

    def test_mismatched_config_is_rejected(self):
        config = MySQLConfig(host="h", port=3306, username="u", password="p")
        connector = Connector(type="postgresql", config=config)
        with pytest.raises(TranslationError):
            connector.to_api_base_model()

    def test_missing_config_is_rejected(self):
        with pytest.raises(TranslationError):
            Connector(type="postgresql", config=None).to_api_base_model()

    def test_base_model_does_not_need_uuid(self):
        config = PostgresConfig(host="h", port=5432, username="u", password="p")
        base = Connector(type="postgresql", config=config).to_api_base_model()
        assert base.type == ConnectorType.POSTGRESQL
        assert base.config.host == "h"

    def test_full_model_requires_valid_uuid(self):
        config = PostgresConfig(host="h", port=5432, username="u", password="p")
        with pytest.raises(TranslationError):
            Connector(type="postgresql", config=config, uuid="not-a-uuid").to_api_model()

    def test_malformed_ssh_tunnel_uuid(self):
        config = PostgresConfig(host="h", port=5432, username="u", password="p")
        connector = Connector(type="postgresql", config=config, ssh_tunnel_uuid="nope")
        with pytest.raises(TranslationError):
            connector.to_api_base_model()

    def test_from_api_ignores_other_types_fields(self):
        api_model = connector_client.Connector(
            type=ConnectorType.SNOWFLAKE,
            config=connector_client.ConnectorConfig(
                snowflake_account_url="https://acme.snowflakecomputing.com",
                username="artie",
                host="stale-host",
                gcp_project_id="stale-project",
            ),
        )

        connector = connector_from_api_model(api_model)

        assert connector.config == SnowflakeConfig(
            account_identifier="",
            account_url="https://acme.snowflakecomputing.com",
            virtual_dwh="",
            username="artie",
        )


class TestDestinationTranslation:
    """Test suite for destination config translation."""

    def test_every_destination_type_has_a_variant(self):
        assert set(DESTINATION_CONFIG_VARIANTS) == set(DESTINATION_KEYS)

    @given(config=destination_configs, uuid=st.uuids().map(str))
    def test_destination_round_trips_through_wire(self, config, uuid):
        destination = Destination(type=config.connector_type.value, config=config, uuid=uuid)

        wire = over_json(destination.to_api_model().to_dict())
        restored = destination_from_api_model(destination_client.Destination.from_dict(wire))

        assert restored == destination

    @pytest.mark.parametrize("variant", list(DESTINATION_CONFIG_VARIANTS.values()))
    @given(data=st.data())
    def test_only_own_fields_are_populated(self, variant, data):
        config = data.draw(variant_strategy(variant, non_empty=True))

        populated = set(config.to_api_model().to_dict())

        assert populated == DESTINATION_KEYS[variant.connector_type]

    def test_source_only_type_is_rejected(self):
        destination = Destination(type="mongodb", config=None)
        with pytest.raises(TranslationError, match="invalid destination type"):
            destination.to_api_base_model()

    def test_mismatched_config_is_rejected(self):
        config = SnowflakeSharedConfig(account_url="u", virtual_dwh="w", username="n")
        with pytest.raises(TranslationError):
            Destination(type="bigquery", config=config).to_api_base_model()

"""Tests for the per-resource API clients."""

from uuid import UUID

import pytest

from artie_client.clients import (
    BaseConnector,
    BaseDestination,
    BasePipeline,
    BasePrivateLinkConnection,
    BaseSourceReader,
    BaseSSHTunnel,
    Connector,
    ConnectorConfig,
    ConnectorType,
    DestinationSharedConfig,
    Pipeline,
    SourceReaderTable,
    SSHTunnel,
    Table,
)
from artie_client.shared.errors import HttpError, NotFoundError, TranslationError, ValidationError
from conftest import ENDPOINT, make_response


CONNECTOR_UUID = "11111111-1111-1111-1111-111111111111"
PIPELINE_UUID = "22222222-2222-2222-2222-222222222222"
SOURCE_READER_UUID = "33333333-3333-3333-3333-333333333333"
DESTINATION_UUID = "44444444-4444-4444-4444-444444444444"


@pytest.fixture
def postgres_connector():
    """Provide a PostgreSQL connector create payload."""
    return BaseConnector(
        type=ConnectorType.POSTGRESQL,
        label="prod",
        data_plane_name="aws-us-east-1",
        config=ConnectorConfig(host="db.internal", port=5432, username="artie", password="secret"),
    )


@pytest.fixture
def pipeline_response():
    """Provide a pipeline as returned by the API."""
    return {
        "uuid": PIPELINE_UUID,
        "name": "orders",
        "status": "running",
        "sourceReaderUUID": SOURCE_READER_UUID,
        "destinationUUID": DESTINATION_UUID,
        "specificDestCfg": {"dataset": "analytics"},
        "tables": [{"uuid": CONNECTOR_UUID, "name": "orders", "schema": "public"}],
    }


class TestConnectorClient:
    """Test suite for the connectors resource."""

    def test_get(self, client, mock_request):
        mock_request.return_value = make_response(200, {
            "uuid": CONNECTOR_UUID,
            "type": "postgresql",
            "label": "prod",
            "sharedConfig": {"host": "db.internal", "port": 5432},
        })

        connector = client.connectors().get(CONNECTOR_UUID)

        assert mock_request.call_args.args == ("GET", f"{ENDPOINT}/connectors/{CONNECTOR_UUID}")
        assert connector.uuid == UUID(CONNECTOR_UUID)
        assert connector.type == ConnectorType.POSTGRESQL
        assert connector.config.host == "db.internal"
        assert connector.config.port == 5432
        assert connector.config.password == ""

    def test_get_not_found(self, client, mock_request):
        mock_request.return_value = make_response(404, {"error": "no such connector"})
        with pytest.raises(NotFoundError):
            client.connectors().get(CONNECTOR_UUID)

    def test_get_unknown_type(self, client, mock_request):
        mock_request.return_value = make_response(200, {"uuid": CONNECTOR_UUID, "type": "cassandra"})
        with pytest.raises(TranslationError):
            client.connectors().get(CONNECTOR_UUID)

    def test_create_omits_server_fields_and_empty_config(self, client, mock_request, sent_json, postgres_connector):
        mock_request.return_value = make_response(200, {"uuid": CONNECTOR_UUID, "type": "postgresql"})

        created = client.connectors().create(postgres_connector)

        body = sent_json()
        assert "uuid" not in body
        assert body["type"] == "postgresql"
        assert body["sshTunnelUUID"] is None
        assert body["sharedConfig"] == {
            "host": "db.internal",
            "port": 5432,
            "username": "artie",
            "password": "secret",
        }
        assert created.uuid == UUID(CONNECTOR_UUID)

    def test_create_ignores_uuid_on_full_entity(self, client, mock_request, sent_json):
        mock_request.return_value = make_response(200, {"uuid": CONNECTOR_UUID, "type": "mysql"})
        connector = Connector(type=ConnectorType.MYSQL, uuid=UUID(CONNECTOR_UUID))

        client.connectors().create(connector)

        assert "uuid" not in sent_json()

    def test_update_posts_to_entity_path(self, client, mock_request, sent_json):
        mock_request.return_value = make_response(200, {"uuid": CONNECTOR_UUID, "type": "mysql"})
        connector = Connector(type=ConnectorType.MYSQL, label="new", uuid=UUID(CONNECTOR_UUID))

        client.connectors().update(connector)

        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/connectors/{CONNECTOR_UUID}")
        assert sent_json()["uuid"] == CONNECTOR_UUID
        assert sent_json()["label"] == "new"

    def test_delete(self, client, mock_request):
        client.connectors().delete(CONNECTOR_UUID)
        assert mock_request.call_args.args == ("DELETE", f"{ENDPOINT}/connectors/{CONNECTOR_UUID}")

    def test_test_connection_success(self, client, mock_request, sent_json, postgres_connector):
        mock_request.return_value = make_response(200, {"error": ""})

        client.connectors().test_connection(postgres_connector)

        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/connectors/ping")
        assert "label" not in sent_json()

    def test_test_connection_logical_failure(self, client, mock_request, postgres_connector):
        mock_request.return_value = make_response(200, {"error": "auth failed"})

        with pytest.raises(ValidationError) as exc_info:
            client.connectors().test_connection(postgres_connector)

        assert exc_info.value.reason == "auth failed"
        assert str(exc_info.value) == "failed to connect to connector: auth failed"

    def test_test_connection_http_failure_is_not_validation_error(self, client, mock_request, postgres_connector):
        mock_request.return_value = make_response(400, {"error": "bad request"})

        with pytest.raises(HttpError):
            client.connectors().test_connection(postgres_connector)


class TestDestinationClient:
    """Test suite for the destinations resource."""

    def test_create(self, client, mock_request, sent_json):
        mock_request.return_value = make_response(200, {"uuid": DESTINATION_UUID, "type": "snowflake"})
        destination = BaseDestination(
            type=ConnectorType.SNOWFLAKE,
            label="warehouse",
            config=DestinationSharedConfig(
                snowflake_account_url="https://acme.snowflakecomputing.com",
                snowflake_virtual_dwh="compute_wh",
                username="artie",
            ),
        )

        created = client.destinations().create(destination)

        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/destinations")
        assert sent_json()["sharedConfig"] == {
            "accountURL": "https://acme.snowflakecomputing.com",
            "virtualDWH": "compute_wh",
            "username": "artie",
        }
        assert created.type == ConnectorType.SNOWFLAKE

    def test_get_rejects_source_only_type(self, client, mock_request):
        mock_request.return_value = make_response(200, {"uuid": DESTINATION_UUID, "type": "mongodb"})
        with pytest.raises(TranslationError):
            client.destinations().get(DESTINATION_UUID)

    def test_test_connection_logical_failure(self, client, mock_request):
        mock_request.return_value = make_response(200, {"error": "auth failed"})
        destination = BaseDestination(type=ConnectorType.BIGQUERY)

        with pytest.raises(ValidationError, match="failed to connect to destination"):
            client.destinations().test_connection(destination)

        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/destinations/ping")


class TestSourceReaderClient:
    """Test suite for the source-readers resource."""

    def test_create_sends_tables_config_map(self, client, mock_request, sent_json):
        mock_request.return_value = make_response(200, {
            "uuid": SOURCE_READER_UUID,
            "connectorUUID": CONNECTOR_UUID,
            "name": "reader",
            "tablesConfig": {"public.orders": {"name": "orders", "schema": "public"}},
        })
        reader = BaseSourceReader(
            name="reader",
            connector_uuid=UUID(CONNECTOR_UUID),
            tables={"public.orders": SourceReaderTable(name="orders", schema="public", columns_to_exclude=["ssn"])},
        )

        created = client.source_readers().create(reader)

        body = sent_json()
        assert body["connectorUUID"] == CONNECTOR_UUID
        assert body["tablesConfig"]["public.orders"]["excludeColumns"] == ["ssn"]
        assert "childPartitionSchemaName" not in body["tablesConfig"]["public.orders"]
        assert list(created.tables) == ["public.orders"]

    def test_validate_failure(self, client, mock_request):
        mock_request.return_value = make_response(200, {"error": "publication missing"})
        reader = BaseSourceReader(name="reader", connector_uuid=UUID(CONNECTOR_UUID))

        with pytest.raises(ValidationError, match="source reader validation failed: publication missing"):
            client.source_readers().validate(reader)

        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/source-readers/validate")


class TestPipelineClient:
    """Test suite for the pipelines resource."""

    def test_create_wraps_body(self, client, mock_request, sent_json, pipeline_response):
        mock_request.return_value = make_response(200, pipeline_response)
        pipeline = BasePipeline(name="orders", tables=[Table(name="orders", schema="public")])

        created = client.pipelines().create(pipeline)

        body = sent_json()
        assert list(body) == ["pipeline"]
        assert body["pipeline"]["name"] == "orders"
        assert "uuid" not in body["pipeline"]
        assert created.uuid == UUID(PIPELINE_UUID)

    def test_update_sends_update_only_envelope(self, client, mock_request, sent_json, pipeline_response):
        mock_request.return_value = make_response(200, pipeline_response)
        pipeline = Pipeline(name="orders", uuid=UUID(PIPELINE_UUID))

        client.pipelines().update(pipeline)

        body = sent_json()
        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/pipelines/{PIPELINE_UUID}")
        assert body["updatePipelineOnly"] is True
        assert body["pipeline"]["uuid"] == PIPELINE_UUID

    def test_get_accepts_wrapped_response(self, client, mock_request, pipeline_response):
        mock_request.return_value = make_response(200, {"pipeline": pipeline_response})

        pipeline = client.pipelines().get(PIPELINE_UUID)

        assert pipeline.name == "orders"
        assert pipeline.status == "running"
        assert pipeline.destination_config.dataset == "analytics"
        assert pipeline.tables[0].advanced_settings is None

    def test_start_pipeline(self, client, mock_request):
        client.pipelines().start_pipeline(PIPELINE_UUID)

        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/pipelines/{PIPELINE_UUID}/start")
        assert mock_request.call_args.kwargs["data"] is None

    def test_validate_source_body(self, client, mock_request, sent_json):
        pipeline = BasePipeline(
            name="orders",
            data_plane_name="aws-us-east-1",
            source_reader_uuid=UUID(SOURCE_READER_UUID),
            tables=[Table(name="orders")],
        )

        client.pipelines().validate_source(pipeline)

        body = sent_json()
        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/pipelines/validate-unsaved-source")
        assert body["validateTables"] is True
        assert body["sourceReaderUUID"] == SOURCE_READER_UUID
        assert body["dataPlaneName"] == "aws-us-east-1"

    def test_validate_destination_failure(self, client, mock_request, sent_json):
        mock_request.return_value = make_response(200, {"error": "dataset not found"})
        pipeline = BasePipeline(name="orders", destination_uuid=UUID(DESTINATION_UUID))

        with pytest.raises(ValidationError, match="destination validation failed"):
            client.pipelines().validate_destination(pipeline)

        body = sent_json()
        assert body["destinationUUID"] == DESTINATION_UUID
        assert "specificCfg" in body

    def test_delete(self, client, mock_request):
        client.pipelines().delete(PIPELINE_UUID)
        assert mock_request.call_args.args == ("DELETE", f"{ENDPOINT}/pipelines/{PIPELINE_UUID}")


class TestSSHTunnelClient:
    """Test suite for the ssh-tunnels resource."""

    def test_create_and_update(self, client, mock_request, sent_json):
        response = {"uuid": CONNECTOR_UUID, "name": "bastion", "host": "1.2.3.4", "port": 22,
                    "username": "artie", "publicKey": "ssh-ed25519 AAAA"}
        mock_request.return_value = make_response(200, response)

        created = client.ssh_tunnels().create(BaseSSHTunnel(name="bastion", host="1.2.3.4", port=22, username="artie"))
        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/ssh-tunnels")
        assert "uuid" not in sent_json()
        assert created.public_key == "ssh-ed25519 AAAA"

        client.ssh_tunnels().update(SSHTunnel(name="bastion", host="1.2.3.5", port=22, username="artie",
                                              uuid=UUID(CONNECTOR_UUID)))
        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/ssh-tunnels/{CONNECTOR_UUID}")
        assert sent_json()["host"] == "1.2.3.5"


class TestPrivateLinkClient:
    """Test suite for the privatelink-connections resource."""

    def test_create_omits_empty_account_id(self, client, mock_request, sent_json):
        mock_request.return_value = make_response(200, {
            "uuid": CONNECTOR_UUID,
            "name": "vpc",
            "status": "pending",
            "dnsEntry": "vpce-123.amazonaws.com",
        })
        connection = BasePrivateLinkConnection(name="vpc", vpc_service_name="com.amazonaws.vpce.svc",
                                               region="us-east-1", availability_zone_ids=["use1-az1"])

        created = client.private_links().create(connection)

        body = sent_json()
        assert mock_request.call_args.args == ("POST", f"{ENDPOINT}/privatelink-connections")
        assert "awsAccountID" not in body
        assert "status" not in body
        assert body["availabilityZoneIds"] == ["use1-az1"]
        assert created.status == "pending"
        assert created.dns_entry == "vpce-123.amazonaws.com"

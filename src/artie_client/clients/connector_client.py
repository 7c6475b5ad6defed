"""Connector API models and client."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from uuid import UUID

from artie_client.clients.base_client import ResourceClient
from artie_client.clients.conntypes import ConnectorType
from artie_client.clients.wire import format_uuid, omit_empty, parse_optional_uuid


logger = logging.getLogger(__name__)


@dataclass
class ConnectorConfig:
    """Union of the configuration fields of every connector type.

    Only the fields relevant to the connector's type are populated; the rest
    stay at their zero value and are left out of the JSON payload.
    """
    host: str = ""
    snapshot_host: str = ""
    port: int = 0
    endpoint: str = ""
    user: str = ""
    username: str = ""
    password: str = ""

    # BigQuery
    gcp_project_id: str = ""
    gcp_location: str = ""
    gcp_credentials_data: str = ""

    # Snowflake
    snowflake_account_identifier: str = ""
    snowflake_account_url: str = ""
    snowflake_virtual_dwh: str = ""
    snowflake_private_key: str = ""

    # AWS (S3, DynamoDB)
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = ""
    dynamo_stream_arn: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return omit_empty({
            "host": self.host,
            "snapshotHost": self.snapshot_host,
            "port": self.port,
            "endpoint": self.endpoint,
            "user": self.user,
            "username": self.username,
            "password": self.password,
            "projectID": self.gcp_project_id,
            "location": self.gcp_location,
            "credentialsData": self.gcp_credentials_data,
            "accountIdentifier": self.snowflake_account_identifier,
            "accountURL": self.snowflake_account_url,
            "virtualDWH": self.snowflake_virtual_dwh,
            "privateKey": self.snowflake_private_key,
            "awsAccessKeyID": self.aws_access_key_id,
            "awsSecretAccessKey": self.aws_secret_access_key,
            "awsRegion": self.aws_region,
            "streamsArn": self.dynamo_stream_arn,
        })

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ConnectorConfig":
        data = data or {}
        return cls(
            host=data.get("host") or "",
            snapshot_host=data.get("snapshotHost") or "",
            port=int(data.get("port") or 0),
            endpoint=data.get("endpoint") or "",
            user=data.get("user") or "",
            username=data.get("username") or "",
            password=data.get("password") or "",
            gcp_project_id=data.get("projectID") or "",
            gcp_location=data.get("location") or "",
            gcp_credentials_data=data.get("credentialsData") or "",
            snowflake_account_identifier=data.get("accountIdentifier") or "",
            snowflake_account_url=data.get("accountURL") or "",
            snowflake_virtual_dwh=data.get("virtualDWH") or "",
            snowflake_private_key=data.get("privateKey") or "",
            aws_access_key_id=data.get("awsAccessKeyID") or "",
            aws_secret_access_key=data.get("awsSecretAccessKey") or "",
            aws_region=data.get("awsRegion") or "",
            dynamo_stream_arn=data.get("streamsArn") or "",
        )


@dataclass
class BaseConnector:
    """Connector fields accepted on create."""
    type: ConnectorType
    label: str = ""
    data_plane_name: str = ""
    ssh_tunnel_uuid: Optional[UUID] = None
    config: ConnectorConfig = field(default_factory=ConnectorConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "label": self.label,
            "dataPlaneName": self.data_plane_name,
            "sshTunnelUUID": format_uuid(self.ssh_tunnel_uuid),
            "sharedConfig": self.config.to_dict(),
        }

    def ping_body(self) -> Dict[str, Any]:
        body = BaseConnector.to_dict(self)
        del body["label"]
        return body


@dataclass
class Connector(BaseConnector):
    """A saved connector."""
    uuid: Optional[UUID] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["uuid"] = format_uuid(self.uuid)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Connector":
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            type=ConnectorType.from_string(data["type"]),
            label=data.get("label") or "",
            data_plane_name=data.get("dataPlaneName") or "",
            ssh_tunnel_uuid=parse_optional_uuid(data.get("sshTunnelUUID")),
            config=ConnectorConfig.from_dict(data.get("sharedConfig")),
        )


class ConnectorClient(ResourceClient):
    """Client for the ``connectors`` resource."""

    @property
    def base_path(self) -> str:
        return "connectors"

    def get(self, connector_uuid: str) -> Connector:
        return self.client.execute("GET", self._path(connector_uuid), decode=Connector.from_dict)

    def create(self, connector: BaseConnector) -> Connector:
        logger.info(f"Creating {connector.type.value} connector")
        return self.client.execute("POST", self.base_path, BaseConnector.to_dict(connector), Connector.from_dict)

    def update(self, connector: Connector) -> Connector:
        logger.info(f"Updating connector {connector.uuid}")
        return self.client.execute("POST", self._path(connector.uuid), connector, Connector.from_dict)

    def delete(self, connector_uuid: str) -> None:
        self._delete(connector_uuid)

    def test_connection(self, connector: BaseConnector) -> None:
        """
        Ask the API to connect using a candidate connector configuration.

        Raises:
            ValidationError: If the API could not connect
        """
        self._validate(self._path("ping"), connector.ping_body(), "failed to connect to connector")

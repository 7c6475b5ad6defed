"""Destination API models and client."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from uuid import UUID

from artie_client.clients.base_client import ResourceClient
from artie_client.clients.conntypes import ConnectorType, destination_type_from_string
from artie_client.clients.wire import format_uuid, omit_empty, parse_optional_uuid


logger = logging.getLogger(__name__)


@dataclass
class DestinationSharedConfig:
    """Union of the configuration fields of every destination type."""
    host: str = ""
    port: int = 0
    endpoint: str = ""
    username: str = ""
    password: str = ""
    gcp_project_id: str = ""
    gcp_location: str = ""
    gcp_credentials_data: str = ""
    snowflake_account_url: str = ""
    snowflake_virtual_dwh: str = ""
    snowflake_private_key: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return omit_empty({
            "host": self.host,
            "port": self.port,
            "endpoint": self.endpoint,
            "username": self.username,
            "password": self.password,
            "projectID": self.gcp_project_id,
            "location": self.gcp_location,
            "credentialsData": self.gcp_credentials_data,
            "accountURL": self.snowflake_account_url,
            "virtualDWH": self.snowflake_virtual_dwh,
            "privateKey": self.snowflake_private_key,
            "awsAccessKeyID": self.aws_access_key_id,
            "awsSecretAccessKey": self.aws_secret_access_key,
            "awsRegion": self.aws_region,
        })

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DestinationSharedConfig":
        data = data or {}
        return cls(
            host=data.get("host") or "",
            port=int(data.get("port") or 0),
            endpoint=data.get("endpoint") or "",
            username=data.get("username") or "",
            password=data.get("password") or "",
            gcp_project_id=data.get("projectID") or "",
            gcp_location=data.get("location") or "",
            gcp_credentials_data=data.get("credentialsData") or "",
            snowflake_account_url=data.get("accountURL") or "",
            snowflake_virtual_dwh=data.get("virtualDWH") or "",
            snowflake_private_key=data.get("privateKey") or "",
            aws_access_key_id=data.get("awsAccessKeyID") or "",
            aws_secret_access_key=data.get("awsSecretAccessKey") or "",
            aws_region=data.get("awsRegion") or "",
        )


@dataclass
class BaseDestination:
    """Destination fields accepted on create."""
    type: ConnectorType
    label: str = ""
    data_plane_name: str = ""
    ssh_tunnel_uuid: Optional[UUID] = None
    config: DestinationSharedConfig = field(default_factory=DestinationSharedConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "label": self.label,
            "dataPlaneName": self.data_plane_name,
            "sshTunnelUUID": format_uuid(self.ssh_tunnel_uuid),
            "sharedConfig": self.config.to_dict(),
        }

    def ping_body(self) -> Dict[str, Any]:
        body = BaseDestination.to_dict(self)
        del body["label"]
        return body


@dataclass
class Destination(BaseDestination):
    """A saved destination."""
    uuid: Optional[UUID] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["uuid"] = format_uuid(self.uuid)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Destination":
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            type=destination_type_from_string(data["type"]),
            label=data.get("label") or "",
            data_plane_name=data.get("dataPlaneName") or "",
            ssh_tunnel_uuid=parse_optional_uuid(data.get("sshTunnelUUID")),
            config=DestinationSharedConfig.from_dict(data.get("sharedConfig")),
        )


class DestinationClient(ResourceClient):
    """Client for the ``destinations`` resource."""

    @property
    def base_path(self) -> str:
        return "destinations"

    def get(self, destination_uuid: str) -> Destination:
        return self.client.execute("GET", self._path(destination_uuid), decode=Destination.from_dict)

    def create(self, destination: BaseDestination) -> Destination:
        logger.info(f"Creating {destination.type.value} destination")
        return self.client.execute(
            "POST", self.base_path, BaseDestination.to_dict(destination), Destination.from_dict
        )

    def update(self, destination: Destination) -> Destination:
        logger.info(f"Updating destination {destination.uuid}")
        return self.client.execute("POST", self._path(destination.uuid), destination, Destination.from_dict)

    def delete(self, destination_uuid: str) -> None:
        self._delete(destination_uuid)

    def test_connection(self, destination: BaseDestination) -> None:
        """
        Ask the API to connect using a candidate destination configuration.

        Raises:
            ValidationError: If the API could not connect
        """
        self._validate(self._path("ping"), destination.ping_body(), "failed to connect to destination")

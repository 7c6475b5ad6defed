"""Domain model for SSH tunnels."""

from dataclasses import dataclass
from typing import Optional

from artie_client.clients import ssh_tunnel_client as api
from artie_client.models.util import parse_uuid, uuid_to_string


@dataclass
class SSHTunnel:
    name: str
    host: str
    port: int
    username: str
    public_key: str = ""
    uuid: Optional[str] = None

    def to_api_base_model(self) -> api.BaseSSHTunnel:
        return api.BaseSSHTunnel(
            name=self.name,
            host=self.host,
            port=self.port,
            username=self.username,
            public_key=self.public_key,
        )

    def to_api_model(self) -> api.SSHTunnel:
        return api.SSHTunnel(
            uuid=parse_uuid(self.uuid),
            name=self.name,
            host=self.host,
            port=self.port,
            username=self.username,
            public_key=self.public_key,
        )


def ssh_tunnel_from_api_model(api_model: api.SSHTunnel) -> SSHTunnel:
    return SSHTunnel(
        uuid=uuid_to_string(api_model.uuid),
        name=api_model.name,
        host=api_model.host,
        port=api_model.port,
        username=api_model.username,
        public_key=api_model.public_key,
    )

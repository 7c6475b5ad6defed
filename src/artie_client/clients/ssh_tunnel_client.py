"""SSH tunnel API models and client."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID

from artie_client.clients.base_client import ResourceClient
from artie_client.clients.wire import format_uuid, parse_optional_uuid


logger = logging.getLogger(__name__)


@dataclass
class BaseSSHTunnel:
    name: str
    host: str
    port: int
    username: str
    public_key: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "host": self.host,
            "port": self.port,
            "username": self.username,
            "publicKey": self.public_key,
        }


@dataclass
class SSHTunnel(BaseSSHTunnel):
    uuid: Optional[UUID] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["uuid"] = format_uuid(self.uuid)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SSHTunnel":
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            name=data.get("name") or "",
            host=data.get("host") or "",
            port=int(data.get("port") or 0),
            username=data.get("username") or "",
            public_key=data.get("publicKey") or "",
        )


class SSHTunnelClient(ResourceClient):
    """Client for the ``ssh-tunnels`` resource."""

    @property
    def base_path(self) -> str:
        return "ssh-tunnels"

    def get(self, ssh_tunnel_uuid: str) -> SSHTunnel:
        return self.client.execute("GET", self._path(ssh_tunnel_uuid), decode=SSHTunnel.from_dict)

    def create(self, ssh_tunnel: BaseSSHTunnel) -> SSHTunnel:
        logger.info(f"Creating SSH tunnel {ssh_tunnel.name}")
        return self.client.execute(
            "POST", self.base_path, BaseSSHTunnel.to_dict(ssh_tunnel), SSHTunnel.from_dict
        )

    def update(self, ssh_tunnel: SSHTunnel) -> SSHTunnel:
        logger.info(f"Updating SSH tunnel {ssh_tunnel.uuid}")
        return self.client.execute("POST", self._path(ssh_tunnel.uuid), ssh_tunnel, SSHTunnel.from_dict)

    def delete(self, ssh_tunnel_uuid: str) -> None:
        self._delete(ssh_tunnel_uuid)

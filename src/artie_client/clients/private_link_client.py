"""Private link connection API models and client."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID

from artie_client.clients.base_client import ResourceClient
from artie_client.clients.wire import format_uuid, parse_optional_uuid


logger = logging.getLogger(__name__)


@dataclass
class BasePrivateLinkConnection:
    """Private link fields accepted on create."""
    name: str
    vpc_service_name: str = ""
    aws_account_id: str = ""
    region: str = ""
    vpc_endpoint_id: str = ""
    availability_zone_ids: List[str] = field(default_factory=list)
    data_plane_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "vpcServiceName": self.vpc_service_name,
            "region": self.region,
            "vpcEndpointId": self.vpc_endpoint_id,
            "availabilityZoneIds": list(self.availability_zone_ids),
            "dataPlaneName": self.data_plane_name,
        }
        if self.aws_account_id:
            data["awsAccountID"] = self.aws_account_id
        return data


@dataclass
class PrivateLinkConnection(BasePrivateLinkConnection):
    """A saved private link connection.

    ``status`` and ``dns_entry`` are computed by the API and ignored when sent.
    """
    uuid: Optional[UUID] = None
    status: str = ""
    dns_entry: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["uuid"] = format_uuid(self.uuid)
        if self.status:
            data["status"] = self.status
        if self.dns_entry:
            data["dnsEntry"] = self.dns_entry
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrivateLinkConnection":
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            name=data.get("name") or "",
            vpc_service_name=data.get("vpcServiceName") or "",
            aws_account_id=data.get("awsAccountID") or "",
            region=data.get("region") or "",
            vpc_endpoint_id=data.get("vpcEndpointId") or "",
            availability_zone_ids=list(data.get("availabilityZoneIds") or []),
            data_plane_name=data.get("dataPlaneName") or "",
            status=data.get("status") or "",
            dns_entry=data.get("dnsEntry") or "",
        )


class PrivateLinkClient(ResourceClient):
    """Client for the ``privatelink-connections`` resource."""

    @property
    def base_path(self) -> str:
        return "privatelink-connections"

    def get(self, private_link_uuid: str) -> PrivateLinkConnection:
        return self.client.execute(
            "GET", self._path(private_link_uuid), decode=PrivateLinkConnection.from_dict
        )

    def create(self, connection: BasePrivateLinkConnection) -> PrivateLinkConnection:
        logger.info(f"Creating private link connection {connection.name}")
        return self.client.execute(
            "POST",
            self.base_path,
            BasePrivateLinkConnection.to_dict(connection),
            PrivateLinkConnection.from_dict,
        )

    def update(self, connection: PrivateLinkConnection) -> PrivateLinkConnection:
        logger.info(f"Updating private link connection {connection.uuid}")
        return self.client.execute(
            "POST", self._path(connection.uuid), connection, PrivateLinkConnection.from_dict
        )

    def delete(self, private_link_uuid: str) -> None:
        self._delete(private_link_uuid)

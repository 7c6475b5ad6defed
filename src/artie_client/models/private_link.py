"""Domain model for private link connections."""

from dataclasses import dataclass, field
from typing import List, Optional

from artie_client.clients import private_link_client as api
from artie_client.models.util import parse_uuid, uuid_to_string


@dataclass
class PrivateLink:
    """A private link connection.

    ``status`` and ``dns_entry`` are assigned by the API and never sent.
    """

    name: str
    vpc_service_name: str = ""
    aws_account_id: str = ""
    region: str = ""
    vpc_endpoint_id: str = ""
    az_ids: List[str] = field(default_factory=list)
    data_plane_name: str = ""
    uuid: Optional[str] = None
    status: str = ""
    dns_entry: str = ""

    def to_api_base_model(self) -> api.BasePrivateLinkConnection:
        return api.BasePrivateLinkConnection(
            name=self.name,
            vpc_service_name=self.vpc_service_name,
            aws_account_id=self.aws_account_id,
            region=self.region,
            vpc_endpoint_id=self.vpc_endpoint_id,
            availability_zone_ids=list(self.az_ids),
            data_plane_name=self.data_plane_name,
        )

    def to_api_model(self) -> api.PrivateLinkConnection:
        base = self.to_api_base_model()
        return api.PrivateLinkConnection(
            uuid=parse_uuid(self.uuid),
            name=base.name,
            vpc_service_name=base.vpc_service_name,
            aws_account_id=base.aws_account_id,
            region=base.region,
            vpc_endpoint_id=base.vpc_endpoint_id,
            availability_zone_ids=base.availability_zone_ids,
            data_plane_name=base.data_plane_name,
        )


def private_link_from_api_model(api_model: api.PrivateLinkConnection) -> PrivateLink:
    return PrivateLink(
        uuid=uuid_to_string(api_model.uuid),
        name=api_model.name,
        vpc_service_name=api_model.vpc_service_name,
        aws_account_id=api_model.aws_account_id,
        region=api_model.region,
        vpc_endpoint_id=api_model.vpc_endpoint_id,
        az_ids=list(api_model.availability_zone_ids),
        data_plane_name=api_model.data_plane_name,
        status=api_model.status,
        dns_entry=api_model.dns_entry,
    )

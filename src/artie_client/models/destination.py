"""Domain model for destinations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Type

from artie_client.clients import destination_client as api
from artie_client.clients.conntypes import ConnectorType, destination_type_from_string
from artie_client.models.util import parse_optional_uuid, parse_uuid, uuid_to_string
from artie_client.shared.errors import TranslationError


class DestinationConfigVariant(ABC):
    """Configuration for exactly one destination type."""

    connector_type: ClassVar[ConnectorType]

    @abstractmethod
    def to_api_model(self) -> api.DestinationSharedConfig:
        pass

    @classmethod
    @abstractmethod
    def from_api_model(cls, config: api.DestinationSharedConfig) -> "DestinationConfigVariant":
        pass


@dataclass
class BigQuerySharedConfig(DestinationConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.BIGQUERY

    project_id: str
    location: str
    credentials_data: str

    def to_api_model(self) -> api.DestinationSharedConfig:
        return api.DestinationSharedConfig(
            gcp_project_id=self.project_id,
            gcp_location=self.location,
            gcp_credentials_data=self.credentials_data,
        )

    @classmethod
    def from_api_model(cls, config: api.DestinationSharedConfig) -> "BigQuerySharedConfig":
        return cls(
            project_id=config.gcp_project_id,
            location=config.gcp_location,
            credentials_data=config.gcp_credentials_data,
        )


@dataclass
class MSSQLSharedConfig(DestinationConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.MSSQL

    host: str
    port: int
    username: str
    password: str

    def to_api_model(self) -> api.DestinationSharedConfig:
        return api.DestinationSharedConfig(
            host=self.host, port=self.port, username=self.username, password=self.password
        )

    @classmethod
    def from_api_model(cls, config: api.DestinationSharedConfig) -> "MSSQLSharedConfig":
        return cls(host=config.host, port=config.port, username=config.username, password=config.password)


@dataclass
class RedshiftSharedConfig(DestinationConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.REDSHIFT

    endpoint: str
    username: str
    password: str

    def to_api_model(self) -> api.DestinationSharedConfig:
        return api.DestinationSharedConfig(
            endpoint=self.endpoint, username=self.username, password=self.password
        )

    @classmethod
    def from_api_model(cls, config: api.DestinationSharedConfig) -> "RedshiftSharedConfig":
        return cls(endpoint=config.endpoint, username=config.username, password=config.password)


@dataclass
class S3SharedConfig(DestinationConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.S3

    access_key_id: str
    secret_access_key: str
    region: str

    def to_api_model(self) -> api.DestinationSharedConfig:
        return api.DestinationSharedConfig(
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            aws_region=self.region,
        )

    @classmethod
    def from_api_model(cls, config: api.DestinationSharedConfig) -> "S3SharedConfig":
        return cls(
            access_key_id=config.aws_access_key_id,
            secret_access_key=config.aws_secret_access_key,
            region=config.aws_region,
        )


@dataclass
class SnowflakeSharedConfig(DestinationConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.SNOWFLAKE

    account_url: str
    virtual_dwh: str
    username: str
    password: str = ""
    private_key: str = ""

    def to_api_model(self) -> api.DestinationSharedConfig:
        return api.DestinationSharedConfig(
            snowflake_account_url=self.account_url,
            snowflake_virtual_dwh=self.virtual_dwh,
            snowflake_private_key=self.private_key,
            username=self.username,
            password=self.password,
        )

    @classmethod
    def from_api_model(cls, config: api.DestinationSharedConfig) -> "SnowflakeSharedConfig":
        return cls(
            account_url=config.snowflake_account_url,
            virtual_dwh=config.snowflake_virtual_dwh,
            username=config.username,
            password=config.password,
            private_key=config.snowflake_private_key,
        )


DESTINATION_CONFIG_VARIANTS: Dict[ConnectorType, Type[DestinationConfigVariant]] = {
    variant.connector_type: variant
    for variant in (
        BigQuerySharedConfig,
        MSSQLSharedConfig,
        RedshiftSharedConfig,
        S3SharedConfig,
        SnowflakeSharedConfig,
    )
}


@dataclass
class Destination:
    """A destination with its configuration narrowed to its type."""

    type: str
    config: Optional[DestinationConfigVariant]
    label: str = ""
    data_plane_name: str = ""
    uuid: Optional[str] = None
    ssh_tunnel_uuid: Optional[str] = None

    def to_api_base_model(self) -> api.BaseDestination:
        """
        Convert to the create payload.

        Raises:
            TranslationError: If the type is not a destination type, or the
                config does not belong to that type
        """
        destination_type = destination_type_from_string(self.type)
        variant = DESTINATION_CONFIG_VARIANTS[destination_type]
        if not isinstance(self.config, variant):
            raise TranslationError(
                f"{destination_type.value} destination requires a {variant.__name__}, "
                f"got {type(self.config).__name__}"
            )

        return api.BaseDestination(
            type=destination_type,
            label=self.label,
            data_plane_name=self.data_plane_name,
            ssh_tunnel_uuid=parse_optional_uuid(self.ssh_tunnel_uuid),
            config=self.config.to_api_model(),
        )

    def to_api_model(self) -> api.Destination:
        base = self.to_api_base_model()
        return api.Destination(
            uuid=parse_uuid(self.uuid),
            type=base.type,
            label=base.label,
            data_plane_name=base.data_plane_name,
            ssh_tunnel_uuid=base.ssh_tunnel_uuid,
            config=base.config,
        )


def destination_from_api_model(api_model: api.Destination) -> Destination:
    variant = DESTINATION_CONFIG_VARIANTS.get(api_model.type)
    if variant is None:
        raise TranslationError(f"invalid destination type: {api_model.type}")

    return Destination(
        uuid=uuid_to_string(api_model.uuid),
        type=api_model.type.value,
        label=api_model.label,
        data_plane_name=api_model.data_plane_name,
        ssh_tunnel_uuid=uuid_to_string(api_model.ssh_tunnel_uuid),
        config=variant.from_api_model(api_model.config),
    )

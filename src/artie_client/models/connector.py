"""Domain model for connectors and their type-specific configuration.

The API stores every connector's settings in one flat ``sharedConfig`` object
that holds the union of all types' fields. Here each connector type has its
own small config class instead, and the connector's ``type`` selects which
one is valid.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Type

from artie_client.clients import connector_client as api
from artie_client.clients.conntypes import ConnectorType
from artie_client.models.util import parse_optional_uuid, parse_uuid, uuid_to_string
from artie_client.shared.errors import TranslationError


class ConnectorConfigVariant(ABC):
    """Configuration for exactly one connector type."""

    connector_type: ClassVar[ConnectorType]

    @abstractmethod
    def to_api_model(self) -> api.ConnectorConfig:
        """Build a shared config with only this type's fields populated."""
        pass

    @classmethod
    @abstractmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "ConnectorConfigVariant":
        """Copy this type's fields out of a shared config."""
        pass


@dataclass
class BigQueryConfig(ConnectorConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.BIGQUERY

    project_id: str
    location: str
    credentials_data: str

    def to_api_model(self) -> api.ConnectorConfig:
        return api.ConnectorConfig(
            gcp_project_id=self.project_id,
            gcp_location=self.location,
            gcp_credentials_data=self.credentials_data,
        )

    @classmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "BigQueryConfig":
        return cls(
            project_id=config.gcp_project_id,
            location=config.gcp_location,
            credentials_data=config.gcp_credentials_data,
        )


@dataclass
class DynamoDBConfig(ConnectorConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.DYNAMODB

    stream_arn: str
    access_key_id: str
    secret_access_key: str

    def to_api_model(self) -> api.ConnectorConfig:
        return api.ConnectorConfig(
            dynamo_stream_arn=self.stream_arn,
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
        )

    @classmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "DynamoDBConfig":
        return cls(
            stream_arn=config.dynamo_stream_arn,
            access_key_id=config.aws_access_key_id,
            secret_access_key=config.aws_secret_access_key,
        )


@dataclass
class MongoDBConfig(ConnectorConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.MONGODB

    host: str
    username: str
    password: str

    def to_api_model(self) -> api.ConnectorConfig:
        return api.ConnectorConfig(host=self.host, username=self.username, password=self.password)

    @classmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "MongoDBConfig":
        return cls(host=config.host, username=config.username, password=config.password)


@dataclass
class _DatabaseConfig(ConnectorConfigVariant):
    """Fields shared by the relational database sources."""

    host: str
    port: int
    username: str
    password: str
    snapshot_host: str = ""

    def to_api_model(self) -> api.ConnectorConfig:
        return api.ConnectorConfig(
            host=self.host,
            snapshot_host=self.snapshot_host,
            port=self.port,
            username=self.username,
            password=self.password,
        )

    @classmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "_DatabaseConfig":
        return cls(
            host=config.host,
            snapshot_host=config.snapshot_host,
            port=config.port,
            username=config.username,
            password=config.password,
        )


@dataclass
class MySQLConfig(_DatabaseConfig):
    connector_type: ClassVar[ConnectorType] = ConnectorType.MYSQL


@dataclass
class MSSQLConfig(_DatabaseConfig):
    connector_type: ClassVar[ConnectorType] = ConnectorType.MSSQL


@dataclass
class OracleConfig(_DatabaseConfig):
    connector_type: ClassVar[ConnectorType] = ConnectorType.ORACLE


@dataclass
class PostgresConfig(_DatabaseConfig):
    connector_type: ClassVar[ConnectorType] = ConnectorType.POSTGRESQL


@dataclass
class RedshiftConfig(ConnectorConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.REDSHIFT

    endpoint: str
    username: str
    password: str

    def to_api_model(self) -> api.ConnectorConfig:
        return api.ConnectorConfig(endpoint=self.endpoint, username=self.username, password=self.password)

    @classmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "RedshiftConfig":
        return cls(endpoint=config.endpoint, username=config.username, password=config.password)


@dataclass
class S3Config(ConnectorConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.S3

    access_key_id: str
    secret_access_key: str
    region: str

    def to_api_model(self) -> api.ConnectorConfig:
        return api.ConnectorConfig(
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            aws_region=self.region,
        )

    @classmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "S3Config":
        return cls(
            access_key_id=config.aws_access_key_id,
            secret_access_key=config.aws_secret_access_key,
            region=config.aws_region,
        )


@dataclass
class SnowflakeConfig(ConnectorConfigVariant):
    connector_type: ClassVar[ConnectorType] = ConnectorType.SNOWFLAKE

    account_identifier: str
    account_url: str
    virtual_dwh: str
    username: str
    password: str = ""
    private_key: str = ""

    def to_api_model(self) -> api.ConnectorConfig:
        return api.ConnectorConfig(
            snowflake_account_identifier=self.account_identifier,
            snowflake_account_url=self.account_url,
            snowflake_virtual_dwh=self.virtual_dwh,
            snowflake_private_key=self.private_key,
            username=self.username,
            password=self.password,
        )

    @classmethod
    def from_api_model(cls, config: api.ConnectorConfig) -> "SnowflakeConfig":
        return cls(
            account_identifier=config.snowflake_account_identifier,
            account_url=config.snowflake_account_url,
            virtual_dwh=config.snowflake_virtual_dwh,
            username=config.username,
            password=config.password,
            private_key=config.snowflake_private_key,
        )


CONNECTOR_CONFIG_VARIANTS: Dict[ConnectorType, Type[ConnectorConfigVariant]] = {
    variant.connector_type: variant
    for variant in (
        BigQueryConfig,
        DynamoDBConfig,
        MongoDBConfig,
        MySQLConfig,
        MSSQLConfig,
        OracleConfig,
        PostgresConfig,
        RedshiftConfig,
        S3Config,
        SnowflakeConfig,
    )
}


@dataclass
class Connector:
    """A connector with its configuration narrowed to its type."""

    type: str
    config: Optional[ConnectorConfigVariant]
    label: str = ""
    data_plane_name: str = ""
    uuid: Optional[str] = None
    ssh_tunnel_uuid: Optional[str] = None

    def to_api_base_model(self) -> api.BaseConnector:
        """
        Convert to the create payload.

        Raises:
            TranslationError: If the type is unknown, or the config does not
                belong to that type
        """
        connector_type = ConnectorType.from_string(self.type)
        variant = CONNECTOR_CONFIG_VARIANTS[connector_type]
        if not isinstance(self.config, variant):
            raise TranslationError(
                f"{connector_type.value} connector requires a {variant.__name__}, "
                f"got {type(self.config).__name__}"
            )

        return api.BaseConnector(
            type=connector_type,
            label=self.label,
            data_plane_name=self.data_plane_name,
            ssh_tunnel_uuid=parse_optional_uuid(self.ssh_tunnel_uuid),
            config=self.config.to_api_model(),
        )

    def to_api_model(self) -> api.Connector:
        base = self.to_api_base_model()
        return api.Connector(
            uuid=parse_uuid(self.uuid),
            type=base.type,
            label=base.label,
            data_plane_name=base.data_plane_name,
            ssh_tunnel_uuid=base.ssh_tunnel_uuid,
            config=base.config,
        )


def connector_from_api_model(api_model: api.Connector) -> Connector:
    variant = CONNECTOR_CONFIG_VARIANTS.get(api_model.type)
    if variant is None:
        raise TranslationError(f"invalid connector type: {api_model.type}")

    return Connector(
        uuid=uuid_to_string(api_model.uuid),
        type=api_model.type.value,
        label=api_model.label,
        data_plane_name=api_model.data_plane_name,
        ssh_tunnel_uuid=uuid_to_string(api_model.ssh_tunnel_uuid),
        config=variant.from_api_model(api_model.config),
    )

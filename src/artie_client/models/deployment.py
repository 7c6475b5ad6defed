"""Domain model for legacy deployments."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from artie_client.clients import deployment_client as api
from artie_client.clients.conntypes import ConnectorType
from artie_client.models.pipeline import PipelineDestinationConfig
from artie_client.models.pipeline_table import MergePredicate
from artie_client.models.util import list_or_empty, parse_optional_uuid, parse_uuid, uuid_to_string
from artie_client.shared.errors import TranslationError


@dataclass
class SourceDatabaseConfig:
    """Connection settings for MySQL, Microsoft SQL Server and PostgreSQL sources."""

    host: str
    port: int
    user: str
    password: str
    database: str

    def to_api_model(self) -> api.DeploymentSourceConfig:
        return api.DeploymentSourceConfig(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database,
        )

    @classmethod
    def from_api_model(cls, config: api.DeploymentSourceConfig) -> "SourceDatabaseConfig":
        return cls(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
        )


@dataclass
class OracleSourceConfig:
    host: str
    port: int
    user: str
    password: str
    service: str
    container: str = ""

    def to_api_model(self) -> api.DeploymentSourceConfig:
        return api.DeploymentSourceConfig(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.service,
            container=self.container,
        )

    @classmethod
    def from_api_model(cls, config: api.DeploymentSourceConfig) -> "OracleSourceConfig":
        return cls(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            service=config.database,
            container=config.container,
        )


SourceConfigVariant = Union[SourceDatabaseConfig, OracleSourceConfig]

_SOURCE_CONFIG_VARIANTS = {
    ConnectorType.MYSQL: SourceDatabaseConfig,
    ConnectorType.MSSQL: SourceDatabaseConfig,
    ConnectorType.POSTGRESQL: SourceDatabaseConfig,
    ConnectorType.ORACLE: OracleSourceConfig,
}


@dataclass
class DeploymentTable:
    name: str
    schema: str = ""
    uuid: Optional[str] = None
    enable_history_mode: bool = False
    individual_deployment: bool = False
    is_partitioned: bool = False
    alias: Optional[str] = None
    columns_to_exclude: Optional[List[str]] = None
    columns_to_hash: Optional[List[str]] = None
    skip_deletes: Optional[bool] = None
    merge_predicates: Optional[List[MergePredicate]] = None

    @property
    def key(self) -> str:
        if self.schema:
            return f"{self.schema}.{self.name}"
        return self.name

    def to_api_model(self) -> api.DeploymentTable:
        merge_predicates = None
        if self.merge_predicates is not None:
            merge_predicates = [predicate.to_api_model() for predicate in self.merge_predicates]

        return api.DeploymentTable(
            uuid=parse_uuid(self.uuid) if self.uuid else None,
            name=self.name,
            schema=self.schema,
            enable_history_mode=self.enable_history_mode,
            individual_deployment=self.individual_deployment,
            is_partitioned=self.is_partitioned,
            alias=self.alias,
            exclude_columns=self.columns_to_exclude,
            columns_to_hash=self.columns_to_hash,
            skip_deletes=self.skip_deletes,
            merge_predicates=merge_predicates,
        )

    @classmethod
    def from_api_model(cls, api_model: api.DeploymentTable) -> "DeploymentTable":
        return cls(
            uuid=uuid_to_string(api_model.uuid),
            name=api_model.name,
            schema=api_model.schema,
            enable_history_mode=api_model.enable_history_mode,
            individual_deployment=api_model.individual_deployment,
            is_partitioned=api_model.is_partitioned,
            alias=api_model.alias,
            columns_to_exclude=list_or_empty(api_model.exclude_columns),
            columns_to_hash=list_or_empty(api_model.columns_to_hash),
            skip_deletes=api_model.skip_deletes,
            merge_predicates=[
                MergePredicate.from_api_model(predicate)
                for predicate in list_or_empty(api_model.merge_predicates)
            ],
        )


@dataclass
class DeploymentSource:
    type: str
    config: Optional[SourceConfigVariant]
    tables: Dict[str, DeploymentTable] = field(default_factory=dict)

    def to_api_model(self) -> api.DeploymentSource:
        """
        Raises:
            TranslationError: If the type is not a supported deployment source,
                or the config does not belong to that type
        """
        source_type = ConnectorType.from_string(self.type)
        variant = _SOURCE_CONFIG_VARIANTS.get(source_type)
        if variant is None:
            raise TranslationError(f"unhandled source type: {self.type}")
        if not isinstance(self.config, variant):
            raise TranslationError(
                f"{source_type.value} source requires a {variant.__name__}, "
                f"got {type(self.config).__name__}"
            )

        return api.DeploymentSource(
            type=source_type,
            config=self.config.to_api_model(),
            tables=[table.to_api_model() for table in self.tables.values()],
        )

    @classmethod
    def from_api_model(cls, api_model: api.DeploymentSource) -> "DeploymentSource":
        variant = _SOURCE_CONFIG_VARIANTS.get(api_model.type)
        if variant is None:
            raise TranslationError(f"invalid source type: {api_model.type.value}")

        tables = {}
        for api_table in api_model.tables:
            table = DeploymentTable.from_api_model(api_table)
            tables[table.key] = table

        return cls(
            type=api_model.type.value,
            config=variant.from_api_model(api_model.config),
            tables=tables,
        )


@dataclass
class Deployment:
    """A legacy deployment.

    Superseded by pipelines. A deployment is created in two steps: register
    the source type with ``DeploymentClient.create`` and then send the full
    deployment with ``DeploymentClient.update``.
    """

    source: DeploymentSource
    name: str = ""
    uuid: Optional[str] = None
    status: str = ""
    destination_uuid: Optional[str] = None
    destination_config: Optional[PipelineDestinationConfig] = None
    ssh_tunnel_uuid: Optional[str] = None
    snowflake_eco_schedule_uuid: Optional[str] = None
    data_plane_name: str = ""

    drop_deleted_columns: Optional[bool] = None
    soft_delete_rows: Optional[bool] = None
    include_artie_updated_at_column: Optional[bool] = None
    include_database_updated_at_column: Optional[bool] = None
    one_topic_per_schema: Optional[bool] = None
    postgres_publication_name_override: Optional[str] = None
    postgres_replication_slot_override: Optional[str] = None

    def to_api_base_model(self) -> api.Deployment:
        """Convert without a UUID, for validating a deployment that is not saved yet."""
        destination_config = self.destination_config or PipelineDestinationConfig()
        return api.Deployment(
            name=self.name,
            status=self.status,
            source=self.source.to_api_model(),
            destination_uuid=parse_optional_uuid(self.destination_uuid),
            destination_config=destination_config.to_api_model(),
            ssh_tunnel_uuid=parse_optional_uuid(self.ssh_tunnel_uuid),
            snowflake_eco_schedule_uuid=parse_optional_uuid(self.snowflake_eco_schedule_uuid),
            data_plane_name=self.data_plane_name,
            drop_deleted_columns=self.drop_deleted_columns,
            enable_soft_delete=self.soft_delete_rows,
            include_artie_updated_at_column=self.include_artie_updated_at_column,
            include_database_updated_at_column=self.include_database_updated_at_column,
            one_topic_per_schema=self.one_topic_per_schema,
            publication_name_override=self.postgres_publication_name_override,
            replication_slot_override=self.postgres_replication_slot_override,
        )

    def to_api_model(self) -> api.Deployment:
        deployment = self.to_api_base_model()
        deployment.uuid = parse_uuid(self.uuid)
        return deployment


def deployment_from_api_model(api_model: api.Deployment) -> Deployment:
    return Deployment(
        uuid=uuid_to_string(api_model.uuid),
        name=api_model.name,
        status=api_model.status,
        source=DeploymentSource.from_api_model(api_model.source),
        destination_uuid=uuid_to_string(api_model.destination_uuid),
        destination_config=PipelineDestinationConfig.from_api_model(api_model.destination_config),
        ssh_tunnel_uuid=uuid_to_string(api_model.ssh_tunnel_uuid),
        snowflake_eco_schedule_uuid=uuid_to_string(api_model.snowflake_eco_schedule_uuid),
        data_plane_name=api_model.data_plane_name,
        drop_deleted_columns=api_model.drop_deleted_columns,
        soft_delete_rows=api_model.enable_soft_delete,
        include_artie_updated_at_column=api_model.include_artie_updated_at_column,
        include_database_updated_at_column=api_model.include_database_updated_at_column,
        one_topic_per_schema=api_model.one_topic_per_schema,
        postgres_publication_name_override=api_model.publication_name_override,
        postgres_replication_slot_override=api_model.replication_slot_override,
    )

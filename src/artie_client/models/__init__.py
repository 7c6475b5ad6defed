"""Domain model for Artie resources and its translation to and from API models."""

from artie_client.models.connector import (
    BigQueryConfig,
    Connector,
    ConnectorConfigVariant,
    DynamoDBConfig,
    MongoDBConfig,
    MSSQLConfig,
    MySQLConfig,
    OracleConfig,
    PostgresConfig,
    RedshiftConfig,
    S3Config,
    SnowflakeConfig,
    connector_from_api_model,
)
from artie_client.models.deployment import (
    Deployment,
    DeploymentSource,
    DeploymentTable,
    OracleSourceConfig,
    SourceDatabaseConfig,
    deployment_from_api_model,
)
from artie_client.models.destination import (
    BigQuerySharedConfig,
    Destination,
    DestinationConfigVariant,
    MSSQLSharedConfig,
    RedshiftSharedConfig,
    S3SharedConfig,
    SnowflakeSharedConfig,
    destination_from_api_model,
)
from artie_client.models.pipeline import (
    FlushConfig,
    Pipeline,
    PipelineDestinationConfig,
    StaticColumn,
    pipeline_from_api_model,
)
from artie_client.models.pipeline_table import (
    MergePredicate,
    SoftPartitioning,
    Table,
    tables_from_api_model,
)
from artie_client.models.private_link import PrivateLink, private_link_from_api_model
from artie_client.models.source_reader import (
    SourceReader,
    SourceReaderTable,
    source_reader_from_api_model,
)
from artie_client.models.ssh_tunnel import SSHTunnel, ssh_tunnel_from_api_model

__all__ = [
    "BigQueryConfig",
    "Connector",
    "ConnectorConfigVariant",
    "DynamoDBConfig",
    "MongoDBConfig",
    "MSSQLConfig",
    "MySQLConfig",
    "OracleConfig",
    "PostgresConfig",
    "RedshiftConfig",
    "S3Config",
    "SnowflakeConfig",
    "connector_from_api_model",
    "Deployment",
    "DeploymentSource",
    "DeploymentTable",
    "OracleSourceConfig",
    "SourceDatabaseConfig",
    "deployment_from_api_model",
    "BigQuerySharedConfig",
    "Destination",
    "DestinationConfigVariant",
    "MSSQLSharedConfig",
    "RedshiftSharedConfig",
    "S3SharedConfig",
    "SnowflakeSharedConfig",
    "destination_from_api_model",
    "FlushConfig",
    "Pipeline",
    "PipelineDestinationConfig",
    "StaticColumn",
    "pipeline_from_api_model",
    "MergePredicate",
    "SoftPartitioning",
    "Table",
    "tables_from_api_model",
    "PrivateLink",
    "private_link_from_api_model",
    "SourceReader",
    "SourceReaderTable",
    "source_reader_from_api_model",
    "SSHTunnel",
    "ssh_tunnel_from_api_model",
]

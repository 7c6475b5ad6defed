"""API clients and wire models for the Artie API."""

from artie_client.clients.api_client import ArtieClient
from artie_client.clients.base_client import ResourceClient, ValidationResult
from artie_client.clients.connector_client import (
    BaseConnector,
    Connector,
    ConnectorClient,
    ConnectorConfig,
)
from artie_client.clients.conntypes import (
    ALL_CONNECTOR_TYPES,
    ALL_DESTINATION_TYPES,
    ALL_SOURCE_TYPES,
    ConnectorType,
)
from artie_client.clients.deployment_client import (
    Deployment,
    DeploymentClient,
    DeploymentSource,
    DeploymentSourceConfig,
    DeploymentTable,
    DynamoDBSourceConfig,
)
from artie_client.clients.destination_client import (
    BaseDestination,
    Destination,
    DestinationClient,
    DestinationSharedConfig,
)
from artie_client.clients.pipeline_client import (
    AdvancedSettings,
    AdvancedTableSettings,
    BasePipeline,
    DestinationConfig,
    MergePredicate,
    Pipeline,
    PipelineClient,
    SoftPartitioning,
    StaticColumn,
    Table,
)
from artie_client.clients.private_link_client import (
    BasePrivateLinkConnection,
    PrivateLinkClient,
    PrivateLinkConnection,
)
from artie_client.clients.source_reader_client import (
    BaseSourceReader,
    SourceReader,
    SourceReaderClient,
    SourceReaderSettings,
    SourceReaderTable,
)
from artie_client.clients.ssh_tunnel_client import BaseSSHTunnel, SSHTunnel, SSHTunnelClient

__all__ = [
    "ArtieClient",
    "ResourceClient",
    "ValidationResult",
    "BaseConnector",
    "Connector",
    "ConnectorClient",
    "ConnectorConfig",
    "ALL_CONNECTOR_TYPES",
    "ALL_DESTINATION_TYPES",
    "ALL_SOURCE_TYPES",
    "ConnectorType",
    "Deployment",
    "DeploymentClient",
    "DeploymentSource",
    "DeploymentSourceConfig",
    "DeploymentTable",
    "DynamoDBSourceConfig",
    "BaseDestination",
    "Destination",
    "DestinationClient",
    "DestinationSharedConfig",
    "AdvancedSettings",
    "AdvancedTableSettings",
    "BasePipeline",
    "DestinationConfig",
    "MergePredicate",
    "Pipeline",
    "PipelineClient",
    "SoftPartitioning",
    "StaticColumn",
    "Table",
    "BasePrivateLinkConnection",
    "PrivateLinkClient",
    "PrivateLinkConnection",
    "BaseSourceReader",
    "SourceReader",
    "SourceReaderClient",
    "SourceReaderSettings",
    "SourceReaderTable",
    "BaseSSHTunnel",
    "SSHTunnel",
    "SSHTunnelClient",
]

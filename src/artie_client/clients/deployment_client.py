"""Legacy deployment API models and client.

Deployments predate pipelines. Creating one is a two-step process: ``create``
only registers the source type, and the caller must follow up with ``update``
to fill in the rest of the deployment.

The API nests advanced settings under an ``advancedSettings`` object on read
but accepts them at the top level on write; the models here always hold the
flattened form.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID

from artie_client.clients.base_client import ResourceClient
from artie_client.clients.conntypes import ConnectorType
from artie_client.clients.pipeline_client import DestinationConfig, MergePredicate
from artie_client.clients.wire import format_uuid, parse_optional_uuid


logger = logging.getLogger(__name__)


@dataclass
class DynamoDBSourceConfig:
    streams_arn: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    snapshot_enabled: bool = False
    snapshot_bucket: str = ""
    snapshot_folder: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "streamsArn": self.streams_arn,
            "awsAccessKeyId": self.aws_access_key_id,
            "awsSecretAccessKey": self.aws_secret_access_key,
            "snapshotConfig": {
                "enabled": self.snapshot_enabled,
                "bucket": self.snapshot_bucket,
                "optionalFolder": self.snapshot_folder,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DynamoDBSourceConfig":
        snapshot = data.get("snapshotConfig") or {}
        return cls(
            streams_arn=data.get("streamsArn") or "",
            aws_access_key_id=data.get("awsAccessKeyId") or "",
            aws_secret_access_key=data.get("awsSecretAccessKey") or "",
            snapshot_enabled=bool(snapshot.get("enabled", False)),
            snapshot_bucket=snapshot.get("bucket") or "",
            snapshot_folder=snapshot.get("optionalFolder") or "",
        )


@dataclass
class DeploymentSourceConfig:
    host: str = ""
    snapshot_host: str = ""
    port: int = 0
    user: str = ""
    password: str = ""
    database: str = ""
    container: str = ""
    dynamodb: Optional[DynamoDBSourceConfig] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "host": self.host,
            "snapshotHost": self.snapshot_host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "database": self.database,
        }
        if self.container:
            data["containerName"] = self.container
        if self.dynamodb is not None:
            data["dynamodb"] = self.dynamodb.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DeploymentSourceConfig":
        data = data or {}
        dynamodb = data.get("dynamodb")
        return cls(
            host=data.get("host") or "",
            snapshot_host=data.get("snapshotHost") or "",
            port=int(data.get("port") or 0),
            user=data.get("user") or "",
            password=data.get("password") or "",
            database=data.get("database") or "",
            container=data.get("containerName") or "",
            dynamodb=DynamoDBSourceConfig.from_dict(dynamodb) if dynamodb else None,
        )


@dataclass
class DeploymentTable:
    name: str
    schema: str = ""
    uuid: Optional[UUID] = None
    enable_history_mode: bool = False
    individual_deployment: bool = False
    is_partitioned: bool = False
    alias: Optional[str] = None
    exclude_columns: Optional[List[str]] = None
    columns_to_hash: Optional[List[str]] = None
    skip_deletes: Optional[bool] = None
    merge_predicates: Optional[List[MergePredicate]] = None

    def to_dict(self) -> Dict[str, Any]:
        merge_predicates = None
        if self.merge_predicates is not None:
            merge_predicates = [predicate.to_dict() for predicate in self.merge_predicates]

        return {
            "uuid": format_uuid(self.uuid),
            "name": self.name,
            "schema": self.schema,
            "enableHistoryMode": self.enable_history_mode,
            "individualDeployment": self.individual_deployment,
            "isPartitioned": self.is_partitioned,
            "alias": self.alias,
            "excludeColumns": self.exclude_columns,
            "columnsToHash": self.columns_to_hash,
            "skipDelete": self.skip_deletes,
            "mergePredicates": merge_predicates,
            "advancedSettings": {
                "alias": self.alias or "",
                "excludeColumns": self.exclude_columns,
                "columnsToHash": self.columns_to_hash,
                "skipDelete": bool(self.skip_deletes),
                "mergePredicates": merge_predicates,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeploymentTable":
        settings = data.get("advancedSettings") or {}
        # Empty lists are left out of responses; restore them so they compare
        # equal to an explicitly empty configuration.
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            name=data["name"],
            schema=data.get("schema") or "",
            enable_history_mode=bool(data.get("enableHistoryMode", False)),
            individual_deployment=bool(data.get("individualDeployment", False)),
            is_partitioned=bool(data.get("isPartitioned", False)),
            alias=settings.get("alias") or "",
            exclude_columns=list(settings.get("excludeColumns") or []),
            columns_to_hash=list(settings.get("columnsToHash") or []),
            skip_deletes=bool(settings.get("skipDelete", False)),
            merge_predicates=[MergePredicate.from_dict(p) for p in settings.get("mergePredicates") or []],
        )


@dataclass
class DeploymentSource:
    type: ConnectorType
    config: DeploymentSourceConfig = field(default_factory=DeploymentSourceConfig)
    tables: List[DeploymentTable] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "config": self.config.to_dict(),
            "tables": [table.to_dict() for table in self.tables],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeploymentSource":
        return cls(
            type=ConnectorType.from_string(data["type"]),
            config=DeploymentSourceConfig.from_dict(data.get("config")),
            tables=[DeploymentTable.from_dict(table) for table in data.get("tables") or []],
        )


_ADVANCED_SETTINGS = {
    "drop_deleted_columns": ("dropDeletedColumns", False),
    "enable_soft_delete": ("enableSoftDelete", False),
    "include_artie_updated_at_column": ("includeArtieUpdatedAtColumn", False),
    "include_database_updated_at_column": ("includeDatabaseUpdatedAtColumn", False),
    "one_topic_per_schema": ("oneTopicPerSchema", False),
    "publication_name_override": ("publicationNameOverride", ""),
    "replication_slot_override": ("replicationSlotOverride", ""),
}


@dataclass
class Deployment:
    """A legacy deployment with its advanced settings flattened."""
    source: DeploymentSource
    name: str = ""
    uuid: Optional[UUID] = None
    status: str = ""
    destination_uuid: Optional[UUID] = None
    destination_config: DestinationConfig = field(default_factory=DestinationConfig)
    ssh_tunnel_uuid: Optional[UUID] = None
    snowflake_eco_schedule_uuid: Optional[UUID] = None
    data_plane_name: str = ""

    drop_deleted_columns: Optional[bool] = None
    enable_soft_delete: Optional[bool] = None
    include_artie_updated_at_column: Optional[bool] = None
    include_database_updated_at_column: Optional[bool] = None
    one_topic_per_schema: Optional[bool] = None
    publication_name_override: Optional[str] = None
    replication_slot_override: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "uuid": format_uuid(self.uuid),
            "status": self.status,
            "name": self.name,
            "source": self.source.to_dict(),
            "destinationUUID": format_uuid(self.destination_uuid),
            "specificDestCfg": self.destination_config.to_dict(),
            "sshTunnelUUID": format_uuid(self.ssh_tunnel_uuid),
            "snowflakeEcoScheduleUUID": format_uuid(self.snowflake_eco_schedule_uuid),
            "dataPlaneName": self.data_plane_name,
        }
        for attr, (key, _) in _ADVANCED_SETTINGS.items():
            data[key] = getattr(self, attr)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deployment":
        deployment = cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            status=data.get("status") or "",
            name=data.get("name") or "",
            source=DeploymentSource.from_dict(data["source"]),
            destination_uuid=parse_optional_uuid(data.get("destinationUUID")),
            destination_config=DestinationConfig.from_dict(data.get("specificDestCfg")),
            ssh_tunnel_uuid=parse_optional_uuid(data.get("sshTunnelUUID")),
            snowflake_eco_schedule_uuid=parse_optional_uuid(data.get("snowflakeEcoScheduleUUID")),
            data_plane_name=data.get("dataPlaneName") or "",
        )

        settings = data.get("advancedSettings")
        if settings is not None:
            for attr, (key, default) in _ADVANCED_SETTINGS.items():
                value = settings.get(key)
                setattr(deployment, attr, default if value is None else value)
        return deployment


def _unwrap_deploy(data: Dict[str, Any]) -> Deployment:
    return Deployment.from_dict(data["deploy"])


def _decode_list(data: Dict[str, Any]) -> List[Deployment]:
    return [Deployment.from_dict(item) for item in data.get("items") or []]


class DeploymentClient(ResourceClient):
    """Client for the legacy ``deployments`` resource."""

    @property
    def base_path(self) -> str:
        return "deployments"

    def list(self) -> List[Deployment]:
        return self.client.execute("GET", self.base_path, decode=_decode_list) or []

    def get(self, deployment_uuid: str) -> Deployment:
        return self.client.execute("GET", self._path(deployment_uuid), decode=_unwrap_deploy)

    def create(self, source_type: ConnectorType) -> Deployment:
        """
        Register a new deployment for a source type.

        The returned deployment is a stub; populate it with ``update``.

        Args:
            source_type: Type of the deployment's source

        Returns:
            The stub deployment, including its server-assigned UUID
        """
        logger.info(f"Creating {source_type.value} deployment")
        return self.client.execute(
            "POST", self.base_path, {"source": source_type.value}, Deployment.from_dict
        )

    def update(self, deployment: Deployment) -> Deployment:
        logger.info(f"Updating deployment {deployment.uuid}")
        body = {"deploy": deployment.to_dict(), "updateDeployOnly": True}
        return self.client.execute("POST", self._path(deployment.uuid), body, _unwrap_deploy)

    def delete(self, deployment_uuid: str) -> None:
        self._delete(deployment_uuid)

    def validate_source(self, deployment: Deployment) -> None:
        body = {
            "source": deployment.source.to_dict(),
            "sshTunnelUUID": format_uuid(deployment.ssh_tunnel_uuid),
            "validateTables": True,
        }
        self._validate(self._path("validate-source"), body, "source validation failed")

    def validate_destination(self, deployment: Deployment) -> None:
        body = {
            "destinationUUID": format_uuid(deployment.destination_uuid),
            "specificCfg": deployment.destination_config.to_dict(),
            "tables": [table.to_dict() for table in deployment.source.tables],
            "sourceType": deployment.source.type.value,
        }
        self._validate(self._path("validate-destination"), body, "destination validation failed")

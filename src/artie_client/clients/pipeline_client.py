"""Pipeline API models and client.

Optional settings are carried as ``None`` when unset and left out of the
payload entirely, so the server keeps its own defaults for them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID

from artie_client.clients.base_client import ResourceClient
from artie_client.clients.wire import format_uuid, omit_none, optional_list, parse_optional_uuid


logger = logging.getLogger(__name__)


@dataclass
class MergePredicate:
    partition_field: str
    partition_type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {"partitionField": self.partition_field}
        if self.partition_type:
            data["partitionType"] = self.partition_type
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MergePredicate":
        return cls(
            partition_field=data.get("partitionField") or "",
            partition_type=data.get("partitionType") or "",
        )


@dataclass
class SoftPartitioning:
    enabled: bool = False
    partition_frequency: str = ""
    partition_column: str = ""
    max_partitions: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "partitionFrequency": self.partition_frequency,
            "partitionColumn": self.partition_column,
            "maxPartitions": self.max_partitions,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SoftPartitioning":
        return cls(
            enabled=bool(data.get("enabled", False)),
            partition_frequency=data.get("partitionFrequency") or "",
            partition_column=data.get("partitionColumn") or "",
            max_partitions=int(data.get("maxPartitions") or 0),
        )


@dataclass
class AdvancedTableSettings:
    alias: Optional[str] = None
    exclude_columns: Optional[List[str]] = None
    include_columns: Optional[List[str]] = None
    columns_to_hash: Optional[List[str]] = None
    skip_deletes: Optional[bool] = None
    unify_across_schemas: Optional[bool] = None
    unify_across_databases: Optional[bool] = None
    merge_predicates: Optional[List[MergePredicate]] = None
    soft_partitioning: Optional[SoftPartitioning] = None
    should_backfill_history_table: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        merge_predicates = None
        if self.merge_predicates is not None:
            merge_predicates = [predicate.to_dict() for predicate in self.merge_predicates]

        return omit_none({
            "alias": self.alias,
            "excludeColumns": optional_list(self.exclude_columns),
            "includeColumns": optional_list(self.include_columns),
            "columnsToHash": optional_list(self.columns_to_hash),
            "skipDelete": self.skip_deletes,
            "unifyAcrossSchemas": self.unify_across_schemas,
            "unifyAcrossDatabases": self.unify_across_databases,
            "mergePredicates": merge_predicates,
            "softPartitioning": self.soft_partitioning.to_dict() if self.soft_partitioning else None,
            "shouldBackfillHistoryTable": self.should_backfill_history_table,
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdvancedTableSettings":
        merge_predicates = data.get("mergePredicates")
        soft_partitioning = data.get("softPartitioning")
        return cls(
            alias=data.get("alias"),
            exclude_columns=optional_list(data.get("excludeColumns")),
            include_columns=optional_list(data.get("includeColumns")),
            columns_to_hash=optional_list(data.get("columnsToHash")),
            skip_deletes=data.get("skipDelete"),
            unify_across_schemas=data.get("unifyAcrossSchemas"),
            unify_across_databases=data.get("unifyAcrossDatabases"),
            merge_predicates=(
                [MergePredicate.from_dict(p) for p in merge_predicates]
                if merge_predicates is not None else None
            ),
            soft_partitioning=SoftPartitioning.from_dict(soft_partitioning) if soft_partitioning else None,
            should_backfill_history_table=data.get("shouldBackfillHistoryTable"),
        )


@dataclass
class Table:
    """A table replicated by a pipeline."""
    name: str
    schema: str = ""
    uuid: Optional[UUID] = None
    enable_history_mode: bool = False
    is_partitioned: bool = False
    advanced_settings: Optional[AdvancedTableSettings] = None

    @property
    def key(self) -> str:
        """Identifier used for the table in keyed collections."""
        if self.schema:
            return f"{self.schema}.{self.name}"
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "uuid": format_uuid(self.uuid),
            "name": self.name,
            "schema": self.schema,
            "enableHistoryMode": self.enable_history_mode,
            "isPartitioned": self.is_partitioned,
        }
        if self.advanced_settings is not None:
            data["advancedSettings"] = self.advanced_settings.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Table":
        advanced_settings = data.get("advancedSettings")
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            name=data["name"],
            schema=data.get("schema") or "",
            enable_history_mode=bool(data.get("enableHistoryMode", False)),
            is_partitioned=bool(data.get("isPartitioned", False)),
            advanced_settings=(
                AdvancedTableSettings.from_dict(advanced_settings)
                if advanced_settings is not None else None
            ),
        )


@dataclass
class StaticColumn:
    column: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"column": self.column, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StaticColumn":
        return cls(column=data.get("column") or "", value=data.get("value") or "")


@dataclass
class AdvancedSettings:
    drop_deleted_columns: Optional[bool] = None
    enable_soft_delete: Optional[bool] = None
    include_artie_updated_at_column: Optional[bool] = None
    include_database_updated_at_column: Optional[bool] = None
    include_artie_operation_column: Optional[bool] = None
    include_full_source_table_name_column: Optional[bool] = None
    include_full_source_table_name_column_as_primary_key: Optional[bool] = None
    default_source_schema: Optional[str] = None
    split_events_by_type: Optional[bool] = None
    include_source_metadata_column: Optional[bool] = None
    auto_replicate_new_tables: Optional[bool] = None
    append_only: Optional[bool] = None
    static_columns: Optional[List[StaticColumn]] = None
    flush_interval_seconds: Optional[int] = None
    buffer_rows: Optional[int] = None
    flush_size_kb: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        static_columns = None
        if self.static_columns is not None:
            static_columns = [column.to_dict() for column in self.static_columns]

        return omit_none({
            "dropDeletedColumns": self.drop_deleted_columns,
            "enableSoftDelete": self.enable_soft_delete,
            "includeArtieUpdatedAtColumn": self.include_artie_updated_at_column,
            "includeDatabaseUpdatedAtColumn": self.include_database_updated_at_column,
            "includeArtieOperationColumn": self.include_artie_operation_column,
            "includeFullSourceTableNameColumn": self.include_full_source_table_name_column,
            "includeFullSourceTableNameColumnAsPrimaryKey":
                self.include_full_source_table_name_column_as_primary_key,
            "defaultSourceSchema": self.default_source_schema,
            "splitEventsByType": self.split_events_by_type,
            "includeSourceMetadataColumn": self.include_source_metadata_column,
            "autoReplicateNewTables": self.auto_replicate_new_tables,
            "appendOnly": self.append_only,
            "staticColumns": static_columns,
            "flushIntervalSeconds": self.flush_interval_seconds,
            "bufferRows": self.buffer_rows,
            "flushSizeKb": self.flush_size_kb,
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdvancedSettings":
        static_columns = data.get("staticColumns")
        return cls(
            drop_deleted_columns=data.get("dropDeletedColumns"),
            enable_soft_delete=data.get("enableSoftDelete"),
            include_artie_updated_at_column=data.get("includeArtieUpdatedAtColumn"),
            include_database_updated_at_column=data.get("includeDatabaseUpdatedAtColumn"),
            include_artie_operation_column=data.get("includeArtieOperationColumn"),
            include_full_source_table_name_column=data.get("includeFullSourceTableNameColumn"),
            include_full_source_table_name_column_as_primary_key=data.get(
                "includeFullSourceTableNameColumnAsPrimaryKey"
            ),
            default_source_schema=data.get("defaultSourceSchema"),
            split_events_by_type=data.get("splitEventsByType"),
            include_source_metadata_column=data.get("includeSourceMetadataColumn"),
            auto_replicate_new_tables=data.get("autoReplicateNewTables"),
            append_only=data.get("appendOnly"),
            static_columns=(
                [StaticColumn.from_dict(c) for c in static_columns]
                if static_columns is not None else None
            ),
            flush_interval_seconds=data.get("flushIntervalSeconds"),
            buffer_rows=data.get("bufferRows"),
            flush_size_kb=data.get("flushSizeKb"),
        )


@dataclass
class DestinationConfig:
    """Destination-specific naming rules (``specificDestCfg``)."""
    dataset: str = ""
    database: str = ""
    schema: str = ""
    use_same_schema_as_source: bool = False
    schema_name_prefix: str = ""
    bucket: str = ""
    table_name_separator: str = ""
    folder: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dataset": self.dataset,
            "database": self.database,
            "schema": self.schema,
            "useSameSchemaAsSource": self.use_same_schema_as_source,
            "schemaNamePrefix": self.schema_name_prefix,
            "bucketName": self.bucket,
            "tableNameSeparator": self.table_name_separator,
            "folderName": self.folder,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DestinationConfig":
        data = data or {}
        return cls(
            dataset=data.get("dataset") or "",
            database=data.get("database") or "",
            schema=data.get("schema") or "",
            use_same_schema_as_source=bool(data.get("useSameSchemaAsSource", False)),
            schema_name_prefix=data.get("schemaNamePrefix") or "",
            bucket=data.get("bucketName") or "",
            table_name_separator=data.get("tableNameSeparator") or "",
            folder=data.get("folderName") or "",
        )


@dataclass
class BasePipeline:
    """Pipeline fields accepted on create."""
    name: str
    data_plane_name: str = ""
    source_reader_uuid: Optional[UUID] = None
    destination_uuid: Optional[UUID] = None
    snowflake_eco_schedule_uuid: Optional[UUID] = None
    tables: List[Table] = field(default_factory=list)
    destination_config: DestinationConfig = field(default_factory=DestinationConfig)
    advanced_settings: Optional[AdvancedSettings] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dataPlaneName": self.data_plane_name,
            "sourceReaderUUID": format_uuid(self.source_reader_uuid),
            "tables": [table.to_dict() for table in self.tables],
            "destinationUUID": format_uuid(self.destination_uuid),
            "specificDestCfg": self.destination_config.to_dict(),
            "snowflakeEcoScheduleUUID": format_uuid(self.snowflake_eco_schedule_uuid),
            "advancedSettings": self.advanced_settings.to_dict() if self.advanced_settings else None,
        }


@dataclass
class Pipeline(BasePipeline):
    """A saved pipeline."""
    uuid: Optional[UUID] = None
    status: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["uuid"] = format_uuid(self.uuid)
        data["status"] = self.status
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pipeline":
        # Some endpoints wrap the entity as {"pipeline": {...}}.
        if isinstance(data.get("pipeline"), dict):
            data = data["pipeline"]

        advanced_settings = data.get("advancedSettings")
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            status=data.get("status") or "",
            name=data.get("name") or "",
            data_plane_name=data.get("dataPlaneName") or "",
            source_reader_uuid=parse_optional_uuid(data.get("sourceReaderUUID")),
            destination_uuid=parse_optional_uuid(data.get("destinationUUID")),
            snowflake_eco_schedule_uuid=parse_optional_uuid(data.get("snowflakeEcoScheduleUUID")),
            tables=[Table.from_dict(table) for table in data.get("tables") or []],
            destination_config=DestinationConfig.from_dict(data.get("specificDestCfg")),
            advanced_settings=(
                AdvancedSettings.from_dict(advanced_settings)
                if advanced_settings is not None else None
            ),
        )


class PipelineClient(ResourceClient):
    """Client for the ``pipelines`` resource."""

    @property
    def base_path(self) -> str:
        return "pipelines"

    def get(self, pipeline_uuid: str) -> Pipeline:
        return self.client.execute("GET", self._path(pipeline_uuid), decode=Pipeline.from_dict)

    def create(self, pipeline: BasePipeline) -> Pipeline:
        logger.info(f"Creating pipeline {pipeline.name}")
        body = {"pipeline": BasePipeline.to_dict(pipeline)}
        return self.client.execute("POST", self.base_path, body, Pipeline.from_dict)

    def update(self, pipeline: Pipeline) -> Pipeline:
        """
        Update a pipeline's configuration without redeploying it.

        Args:
            pipeline: Full pipeline, including its UUID

        Returns:
            The pipeline as stored by the API
        """
        logger.info(f"Updating pipeline {pipeline.uuid}")
        body = {"pipeline": pipeline.to_dict(), "updatePipelineOnly": True}
        return self.client.execute("POST", self._path(pipeline.uuid), body, Pipeline.from_dict)

    def delete(self, pipeline_uuid: str) -> None:
        self._delete(pipeline_uuid)

    def start_pipeline(self, pipeline_uuid: str) -> None:
        logger.info(f"Starting pipeline {pipeline_uuid}")
        self.client.execute("POST", self._path(pipeline_uuid, "start"))

    def validate_source(self, pipeline: BasePipeline) -> None:
        """
        Validate the pipeline's source reader and tables before saving.

        Raises:
            ValidationError: If the API rejected the source configuration
        """
        body = {
            "sourceReaderUUID": format_uuid(pipeline.source_reader_uuid),
            "validateTables": True,
            "tables": [table.to_dict() for table in pipeline.tables],
            "dataPlaneName": pipeline.data_plane_name,
        }
        self._validate(self._path("validate-unsaved-source"), body, "source validation failed")

    def validate_destination(self, pipeline: BasePipeline) -> None:
        """
        Validate the pipeline's destination settings before saving.

        Raises:
            ValidationError: If the API rejected the destination configuration
        """
        body = {
            "destinationUUID": format_uuid(pipeline.destination_uuid),
            "sourceReaderUUID": format_uuid(pipeline.source_reader_uuid),
            "specificCfg": pipeline.destination_config.to_dict(),
            "tables": [table.to_dict() for table in pipeline.tables],
            "advancedSettings": pipeline.advanced_settings.to_dict() if pipeline.advanced_settings else None,
        }
        self._validate(self._path("validate-unsaved-destination"), body, "destination validation failed")

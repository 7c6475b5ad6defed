"""Domain model for pipelines."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from artie_client.clients import pipeline_client as api
from artie_client.models.pipeline_table import Table, tables_from_api_model, tables_to_api_model
from artie_client.models.util import parse_optional_uuid, parse_uuid, uuid_to_string


@dataclass
class PipelineDestinationConfig:
    dataset: str = ""
    database: str = ""
    schema: str = ""
    use_same_schema_as_source: bool = False
    schema_name_prefix: str = ""
    bucket: str = ""
    table_name_separator: str = ""
    folder: str = ""

    def to_api_model(self) -> api.DestinationConfig:
        return api.DestinationConfig(
            dataset=self.dataset,
            database=self.database,
            schema=self.schema,
            use_same_schema_as_source=self.use_same_schema_as_source,
            schema_name_prefix=self.schema_name_prefix,
            bucket=self.bucket,
            table_name_separator=self.table_name_separator,
            folder=self.folder,
        )

    @classmethod
    def from_api_model(cls, api_model: api.DestinationConfig) -> "PipelineDestinationConfig":
        return cls(
            dataset=api_model.dataset,
            database=api_model.database,
            schema=api_model.schema,
            use_same_schema_as_source=api_model.use_same_schema_as_source,
            schema_name_prefix=api_model.schema_name_prefix,
            bucket=api_model.bucket,
            table_name_separator=api_model.table_name_separator,
            folder=api_model.folder,
        )


@dataclass
class FlushConfig:
    """Thresholds after which buffered rows are flushed to the destination."""

    flush_interval_seconds: Optional[int] = None
    buffer_rows: Optional[int] = None
    flush_size_kb: Optional[int] = None


@dataclass
class StaticColumn:
    column: str
    value: str


@dataclass
class Pipeline:
    """A pipeline with its advanced settings flattened onto the top level.

    Settings left as ``None`` are not sent, so the API keeps its defaults.
    """

    name: str
    uuid: Optional[str] = None
    source_reader_uuid: Optional[str] = None
    destination_uuid: Optional[str] = None
    snowflake_eco_schedule_uuid: Optional[str] = None
    data_plane_name: str = ""
    destination_config: Optional[PipelineDestinationConfig] = None
    tables: Dict[str, Table] = field(default_factory=dict)

    flush_config: Optional[FlushConfig] = None
    drop_deleted_columns: Optional[bool] = None
    soft_delete_rows: Optional[bool] = None
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

    def _advanced_settings(self) -> api.AdvancedSettings:
        static_columns = None
        if self.static_columns is not None:
            static_columns = [
                api.StaticColumn(column=c.column, value=c.value) for c in self.static_columns
            ]

        settings = api.AdvancedSettings(
            drop_deleted_columns=self.drop_deleted_columns,
            enable_soft_delete=self.soft_delete_rows,
            include_artie_updated_at_column=self.include_artie_updated_at_column,
            include_database_updated_at_column=self.include_database_updated_at_column,
            include_artie_operation_column=self.include_artie_operation_column,
            include_full_source_table_name_column=self.include_full_source_table_name_column,
            include_full_source_table_name_column_as_primary_key=(
                self.include_full_source_table_name_column_as_primary_key
            ),
            default_source_schema=self.default_source_schema,
            split_events_by_type=self.split_events_by_type,
            include_source_metadata_column=self.include_source_metadata_column,
            auto_replicate_new_tables=self.auto_replicate_new_tables,
            append_only=self.append_only,
            static_columns=static_columns,
        )
        if self.flush_config is not None:
            settings.flush_interval_seconds = self.flush_config.flush_interval_seconds
            settings.buffer_rows = self.flush_config.buffer_rows
            settings.flush_size_kb = self.flush_config.flush_size_kb
        return settings

    def to_api_base_model(self) -> api.BasePipeline:
        """
        Convert to the create payload.

        Raises:
            TranslationError: If any referenced UUID is malformed
        """
        destination_config = self.destination_config or PipelineDestinationConfig()
        return api.BasePipeline(
            name=self.name,
            data_plane_name=self.data_plane_name,
            source_reader_uuid=parse_optional_uuid(self.source_reader_uuid),
            destination_uuid=parse_optional_uuid(self.destination_uuid),
            snowflake_eco_schedule_uuid=parse_optional_uuid(self.snowflake_eco_schedule_uuid),
            tables=tables_to_api_model(self.tables),
            destination_config=destination_config.to_api_model(),
            advanced_settings=self._advanced_settings(),
        )

    def to_api_model(self) -> api.Pipeline:
        base = self.to_api_base_model()
        return api.Pipeline(
            uuid=parse_uuid(self.uuid),
            name=base.name,
            data_plane_name=base.data_plane_name,
            source_reader_uuid=base.source_reader_uuid,
            destination_uuid=base.destination_uuid,
            snowflake_eco_schedule_uuid=base.snowflake_eco_schedule_uuid,
            tables=base.tables,
            destination_config=base.destination_config,
            advanced_settings=base.advanced_settings,
        )


def pipeline_from_api_model(api_model: api.Pipeline) -> Pipeline:
    pipeline = Pipeline(
        uuid=uuid_to_string(api_model.uuid),
        name=api_model.name,
        source_reader_uuid=uuid_to_string(api_model.source_reader_uuid),
        destination_uuid=uuid_to_string(api_model.destination_uuid),
        snowflake_eco_schedule_uuid=uuid_to_string(api_model.snowflake_eco_schedule_uuid),
        data_plane_name=api_model.data_plane_name,
        destination_config=PipelineDestinationConfig.from_api_model(api_model.destination_config),
        tables=tables_from_api_model(api_model.tables),
        # Defaults to off even when the API leaves it out.
        auto_replicate_new_tables=False,
        static_columns=[],
    )

    settings = api_model.advanced_settings
    if settings is None:
        return pipeline

    pipeline.drop_deleted_columns = settings.drop_deleted_columns
    pipeline.soft_delete_rows = settings.enable_soft_delete
    pipeline.include_artie_updated_at_column = settings.include_artie_updated_at_column
    pipeline.include_database_updated_at_column = settings.include_database_updated_at_column
    pipeline.include_artie_operation_column = settings.include_artie_operation_column
    pipeline.include_full_source_table_name_column = settings.include_full_source_table_name_column
    pipeline.include_full_source_table_name_column_as_primary_key = (
        settings.include_full_source_table_name_column_as_primary_key
    )
    pipeline.default_source_schema = settings.default_source_schema
    pipeline.split_events_by_type = settings.split_events_by_type
    pipeline.include_source_metadata_column = settings.include_source_metadata_column
    pipeline.append_only = settings.append_only
    if settings.auto_replicate_new_tables is not None:
        pipeline.auto_replicate_new_tables = settings.auto_replicate_new_tables

    if any(value is not None for value in (
        settings.flush_interval_seconds, settings.buffer_rows, settings.flush_size_kb
    )):
        pipeline.flush_config = FlushConfig(
            flush_interval_seconds=settings.flush_interval_seconds,
            buffer_rows=settings.buffer_rows,
            flush_size_kb=settings.flush_size_kb,
        )

    if settings.static_columns:
        pipeline.static_columns = [
            StaticColumn(column=c.column, value=c.value) for c in settings.static_columns
        ]
    return pipeline

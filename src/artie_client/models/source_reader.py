"""Domain model for source readers."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from artie_client.clients import source_reader_client as api
from artie_client.models.util import list_or_empty, parse_uuid, uuid_to_string


@dataclass
class SourceReaderTable:
    name: str
    schema: str = ""
    columns_to_exclude: List[str] = field(default_factory=list)
    columns_to_include: List[str] = field(default_factory=list)
    child_partition_schema_name: str = ""

    def to_api_model(self) -> api.SourceReaderTable:
        return api.SourceReaderTable(
            name=self.name,
            schema=self.schema,
            columns_to_exclude=list(self.columns_to_exclude),
            columns_to_include=list(self.columns_to_include),
            child_partition_schema_name=self.child_partition_schema_name,
        )

    @classmethod
    def from_api_model(cls, api_model: api.SourceReaderTable) -> "SourceReaderTable":
        return cls(
            name=api_model.name,
            schema=api_model.schema,
            columns_to_exclude=list_or_empty(api_model.columns_to_exclude),
            columns_to_include=list_or_empty(api_model.columns_to_include),
            child_partition_schema_name=api_model.child_partition_schema_name,
        )


@dataclass
class SourceReader:
    """A source reader with its settings flattened onto the top level."""

    name: str
    connector_uuid: str
    uuid: Optional[str] = None
    data_plane_name: str = ""
    is_shared: bool = False
    database_name: str = ""
    oracle_container_name: str = ""
    one_topic_per_schema: bool = False
    postgres_publication_name_override: str = ""
    postgres_replication_slot_override: str = ""
    tables: Dict[str, SourceReaderTable] = field(default_factory=dict)

    def to_api_base_model(self) -> api.BaseSourceReader:
        return api.BaseSourceReader(
            name=self.name,
            connector_uuid=parse_uuid(self.connector_uuid),
            data_plane_name=self.data_plane_name,
            is_shared=self.is_shared,
            database_name=self.database_name,
            container_name=self.oracle_container_name,
            settings=api.SourceReaderSettings(
                one_topic_per_schema=self.one_topic_per_schema,
                postgres_publication_name_override=self.postgres_publication_name_override,
                postgres_replication_slot_override=self.postgres_replication_slot_override,
            ),
            tables={key: table.to_api_model() for key, table in self.tables.items()},
        )

    def to_api_model(self) -> api.SourceReader:
        base = self.to_api_base_model()
        return api.SourceReader(
            uuid=parse_uuid(self.uuid),
            name=base.name,
            connector_uuid=base.connector_uuid,
            data_plane_name=base.data_plane_name,
            is_shared=base.is_shared,
            database_name=base.database_name,
            container_name=base.container_name,
            settings=base.settings,
            tables=base.tables,
        )


def source_reader_from_api_model(api_model: api.SourceReader) -> SourceReader:
    return SourceReader(
        uuid=uuid_to_string(api_model.uuid),
        name=api_model.name,
        connector_uuid=str(api_model.connector_uuid),
        data_plane_name=api_model.data_plane_name,
        is_shared=api_model.is_shared,
        database_name=api_model.database_name,
        oracle_container_name=api_model.container_name,
        one_topic_per_schema=api_model.settings.one_topic_per_schema,
        postgres_publication_name_override=api_model.settings.postgres_publication_name_override,
        postgres_replication_slot_override=api_model.settings.postgres_replication_slot_override,
        tables={
            key: SourceReaderTable.from_api_model(table)
            for key, table in api_model.tables.items()
        },
    )

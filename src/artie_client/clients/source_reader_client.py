"""Source reader API models and client."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID

from artie_client.clients.base_client import ResourceClient
from artie_client.clients.wire import format_uuid, parse_optional_uuid


logger = logging.getLogger(__name__)


@dataclass
class SourceReaderSettings:
    one_topic_per_schema: bool = False
    postgres_publication_name_override: str = ""
    postgres_replication_slot_override: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "oneTopicPerSchema": self.one_topic_per_schema,
            "publicationNameOverride": self.postgres_publication_name_override,
            "replicationSlotOverride": self.postgres_replication_slot_override,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SourceReaderSettings":
        data = data or {}
        return cls(
            one_topic_per_schema=bool(data.get("oneTopicPerSchema", False)),
            postgres_publication_name_override=data.get("publicationNameOverride") or "",
            postgres_replication_slot_override=data.get("replicationSlotOverride") or "",
        )


@dataclass
class SourceReaderTable:
    """Per-table read configuration."""
    name: str
    schema: str = ""
    is_partitioned: bool = False
    columns_to_exclude: Optional[List[str]] = None
    columns_to_include: Optional[List[str]] = None
    child_partition_schema_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "schema": self.schema,
            "isPartitioned": self.is_partitioned,
            "excludeColumns": self.columns_to_exclude,
            "includeColumns": self.columns_to_include,
        }
        if self.child_partition_schema_name:
            data["childPartitionSchemaName"] = self.child_partition_schema_name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SourceReaderTable":
        return cls(
            name=data["name"],
            schema=data.get("schema") or "",
            is_partitioned=bool(data.get("isPartitioned", False)),
            columns_to_exclude=data.get("excludeColumns"),
            columns_to_include=data.get("includeColumns"),
            child_partition_schema_name=data.get("childPartitionSchemaName") or "",
        )


@dataclass
class BaseSourceReader:
    """Source reader fields accepted on create."""
    name: str
    connector_uuid: UUID
    data_plane_name: str = ""
    is_shared: bool = False
    database_name: str = ""
    container_name: str = ""
    settings: SourceReaderSettings = field(default_factory=SourceReaderSettings)
    tables: Dict[str, SourceReaderTable] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dataPlaneName": self.data_plane_name,
            "connectorUUID": format_uuid(self.connector_uuid),
            "isShared": self.is_shared,
            "database": self.database_name,
            "containerName": self.container_name,
            "settings": self.settings.to_dict(),
            "tablesConfig": {key: table.to_dict() for key, table in self.tables.items()},
        }


@dataclass
class SourceReader(BaseSourceReader):
    """A saved source reader."""
    uuid: Optional[UUID] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["uuid"] = format_uuid(self.uuid)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SourceReader":
        tables = data.get("tablesConfig") or {}
        return cls(
            uuid=parse_optional_uuid(data.get("uuid")),
            name=data.get("name") or "",
            connector_uuid=UUID(data["connectorUUID"]),
            data_plane_name=data.get("dataPlaneName") or "",
            is_shared=bool(data.get("isShared", False)),
            database_name=data.get("database") or "",
            container_name=data.get("containerName") or "",
            settings=SourceReaderSettings.from_dict(data.get("settings")),
            tables={key: SourceReaderTable.from_dict(table) for key, table in tables.items()},
        )


class SourceReaderClient(ResourceClient):
    """Client for the ``source-readers`` resource."""

    @property
    def base_path(self) -> str:
        return "source-readers"

    def get(self, source_reader_uuid: str) -> SourceReader:
        return self.client.execute("GET", self._path(source_reader_uuid), decode=SourceReader.from_dict)

    def create(self, source_reader: BaseSourceReader) -> SourceReader:
        logger.info(f"Creating source reader {source_reader.name}")
        return self.client.execute(
            "POST", self.base_path, BaseSourceReader.to_dict(source_reader), SourceReader.from_dict
        )

    def update(self, source_reader: SourceReader) -> SourceReader:
        logger.info(f"Updating source reader {source_reader.uuid}")
        return self.client.execute(
            "POST", self._path(source_reader.uuid), source_reader, SourceReader.from_dict
        )

    def delete(self, source_reader_uuid: str) -> None:
        self._delete(source_reader_uuid)

    def validate(self, source_reader: BaseSourceReader) -> None:
        """
        Validate a candidate source reader against its connector.

        Raises:
            ValidationError: If the API rejected the configuration
        """
        self._validate(
            self._path("validate"),
            BaseSourceReader.to_dict(source_reader),
            "source reader validation failed",
        )
